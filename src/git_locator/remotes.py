from typing import Optional, Sequence

from git import Remote
from git.repo import Repo

from .config import ParserConfig
from .errors import InvalidInputError
from .git_url import git_url_parse
from .models import GitUrl


def parse_remote(
    remote: Remote, refs: Sequence[str] = (), config: Optional[ParserConfig] = None
) -> GitUrl:
    return git_url_parse(remote.url, refs, config=config)


def parse_repository_remotes(
    path: str = ".", name: Optional[str] = None, config: Optional[ParserConfig] = None
) -> dict[str, GitUrl]:
    """Parse the remotes of the repository containing `path`.

    Returns `{remote_name: GitUrl}` in configuration order, or only `name`
    when given. The refs passed along are the repository's local branches.
    """
    repo = Repo(path, search_parent_directories=True)
    refs = [head.name for head in repo.heads]

    remotes = list(repo.remotes)
    if name is not None:
        remotes = [remote for remote in remotes if remote.name == name]
        if not remotes:
            raise InvalidInputError(f"No remote named {name!r} in {path}.", name)

    return {remote.name: parse_remote(remote, refs, config) for remote in remotes}

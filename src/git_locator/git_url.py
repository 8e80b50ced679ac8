import re
from dataclasses import replace
from logging import getLogger
from typing import Optional, Sequence
from urllib.parse import unquote

from .config import ParserConfig
from .errors import InvalidInputError
from .git_provider import build_git_provider
from .git_up import git_up
from .models import GitUrl, stringify

logger = getLogger(__name__)

SHORTHAND_REPO_RE = re.compile(r"^([a-z\d-]{1,39})/([-.\w]{1,100})$", re.IGNORECASE | re.ASCII)
BITBUCKET_SERVER_PATH_RE = re.compile(r"(projects|users)/(.*?)/repos/(.*?)((/.*$)|$)")
BITBUCKET_SERVER_PREFIX = "scm/"
BITBUCKET_SERVER_SOURCE = "bitbucket-server"


def git_url_parse(
    url: str, refs: Sequence[str] = (), config: Optional[ParserConfig] = None
) -> GitUrl:
    """Parse a Git remote into owner, name, ref and file path fields.

    `owner/repo` shorthand is read as a GitHub repository. `refs` lists
    known ref names; it is validated but does not affect the result yet.
    """
    if not isinstance(url, str):
        raise InvalidInputError("The url must be a string.", url)
    if not isinstance(refs, (list, tuple)):
        raise InvalidInputError("The refs must be a list of strings.", url)
    if not all(isinstance(ref, str) for ref in refs):
        raise InvalidInputError("The refs should contain only strings.", url)

    if SHORTHAND_REPO_RE.match(url):
        url = f"https://github.com/{url}"

    git_url = git_up(url, config=config)

    source_parts = git_url.resource.split(".")
    source = ".".join(source_parts[1:]) if len(source_parts) > 2 else git_url.resource

    name = unquote(git_url.pathname or git_url.href)
    name = re.sub(r"(^/)|(/$)", "", name)
    name = re.sub(r"\.git$", "", name)

    git_url = replace(
        git_url,
        source=source,
        git_suffix=git_url.pathname.endswith(".git"),
        name=name,
        owner=unquote(git_url.user),
    )
    git_url = build_git_provider(git_url).resolve(git_url)

    if not git_url.full_name:
        full_name = "/".join(part for part in (git_url.owner, git_url.name) if part)
        git_url = replace(git_url, full_name=full_name)

    if git_url.owner.startswith(BITBUCKET_SERVER_PREFIX):
        owner = git_url.owner[len(BITBUCKET_SERVER_PREFIX) :]
        logger.debug("Reclassifying %s as Bitbucket Server", git_url.href)
        git_url = replace(
            git_url,
            source=BITBUCKET_SERVER_SOURCE,
            owner=owner,
            organization=owner,
            full_name=f"{owner}/{git_url.name}",
        )

    matched = BITBUCKET_SERVER_PATH_RE.search(git_url.pathname)
    if matched:
        owner, name = matched.group(2), matched.group(3)
        git_url = replace(
            git_url,
            organization=owner,
            owner=owner,
            name=name,
            full_name=f"{owner}/{name}",
        )

    return git_url


git_url_parse.stringify = stringify  # type: ignore[attr-defined]

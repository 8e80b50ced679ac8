from dataclasses import dataclass, fields
from typing import Optional

from .parse_path import ParsedPath


@dataclass(frozen=True)
class GitUrl(ParsedPath):
    """A parsed Git remote.

    Resolver fields default to empty strings; `organization` and `commit`
    are None when the remote does not carry them.
    """

    protocol: str = ""
    token: str = ""
    source: str = ""
    owner: str = ""
    name: str = ""
    full_name: str = ""
    organization: Optional[str] = None
    ref: str = ""
    filepath: str = ""
    filepathtype: str = ""
    git_suffix: bool = False
    commit: Optional[str] = None

    @classmethod
    def from_parsed(cls, parsed: ParsedPath, **changes) -> "GitUrl":
        values = {field.name: getattr(parsed, field.name) for field in fields(ParsedPath)}
        values.update(changes)
        return cls(**values)

    def to_string(self, type: Optional[str] = None) -> str:
        return stringify(self, type)

    def __str__(self) -> str:
        return self.to_string()


def stringify(url: GitUrl, type: Optional[str] = None) -> str:
    # `type` is reserved for alternative renderings; all of them are the same today.
    return f"{url.protocol}://{url.resource}/{url.owner}/{url.name}"

from logging import NullHandler, getLogger

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import (
    ConflictingOptionsError,
    GitLocatorError,
    InvalidInputError,
    ParseFailureError,
)
from .git_up import git_up
from .git_url import git_url_parse
from .models import GitUrl, stringify
from .normalize import NormalizeOptions, normalize_url
from .parse_path import ParsedPath, parse_path
from .parse_url import parse_url
from .protocols import protocols
from .ssh import is_ssh

version = "0.1.0"

getLogger(__name__).addHandler(NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "ConflictingOptionsError",
    "GitLocatorError",
    "GitUrl",
    "InvalidInputError",
    "NormalizeOptions",
    "ParseFailureError",
    "ParsedPath",
    "ParserConfig",
    "git_up",
    "git_url_parse",
    "is_ssh",
    "normalize_url",
    "parse_path",
    "parse_url",
    "protocols",
    "stringify",
]

import re
from dataclasses import dataclass, fields
from logging import getLogger
from typing import Any, Mapping, Optional, Union
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from url_normalize import url_normalize

from .errors import ConflictingOptionsError, InvalidInputError

logger = getLogger(__name__)

QueryFilter = Union[str, re.Pattern[str]]

_WWW_RE = re.compile(r"^www\.(?!www\.)[a-z\-\d]{1,63}\.[a-z.\-\d]{2,63}$")
_TEXT_FRAGMENT_RE = re.compile(r"#?:~:text.*?$", re.IGNORECASE)
# Repeated slashes, except the ones right after a scheme embedded in the path.
_DUPLICATE_SLASHES_RE = re.compile(r"(?<![a-z\d+\-.]:)/{2,}", re.IGNORECASE)
_CAMEL_CASE_RE = re.compile(r"(?<!^)(?=[A-Z])")
# camelCase names that do not split on every capital.
_OPTION_ALIASES = {"stripWWW": "strip_www"}
_DIRECTORY_INDEX_RE = re.compile(r"^index\.[a-z]+$")


@dataclass(frozen=True)
class NormalizeOptions:
    default_protocol: str = "http"
    force_http: bool = False
    force_https: bool = False
    strip_authentication: bool = True
    strip_hash: bool = False
    strip_text_fragment: bool = True
    strip_www: bool = True
    remove_query_parameters: Union[bool, tuple[QueryFilter, ...]] = (
        re.compile(r"^utm_\w+", re.IGNORECASE),
    )
    keep_query_parameters: tuple[QueryFilter, ...] = ()
    remove_directory_index: Union[bool, tuple[QueryFilter, ...]] = False
    remove_trailing_slash: bool = True
    remove_single_slash: bool = True
    remove_explicit_port: bool = False
    sort_query_parameters: bool = True
    strip_protocol: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "NormalizeOptions":
        """Build options from snake_case or camelCase (`stripHash`) keys."""
        known = {option.name for option in fields(cls)}
        values = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key) or _CAMEL_CASE_RE.sub("_", key).lower()
            if name not in known:
                raise InvalidInputError(f"Unknown normalize option {key!r}.")
            if isinstance(value, list):
                value = tuple(value)
            values[name] = value
        return cls(**values)


DEFAULT_NORMALIZE_OPTIONS = NormalizeOptions()


def normalize_url(url: str, options: Optional[NormalizeOptions] = None) -> str:
    """Normalize an HTTP(S) or file URL.

    Not meant for SCP-style SSH remotes, whose output is undefined.
    """
    if options is None:
        options = DEFAULT_NORMALIZE_OPTIONS

    if options.force_http and options.force_https:
        raise ConflictingOptionsError(
            "The force_http and force_https options cannot be used together.", url
        )

    default_scheme = options.default_protocol.rstrip(":")
    normalized = url_normalize(url.strip(), default_scheme=default_scheme)
    if not normalized:
        raise InvalidInputError(f"Failed to normalize {url!r}.", url)

    parts = urlsplit(normalized)

    scheme = parts.scheme
    if options.force_http and scheme == "https":
        scheme = "http"
    if options.force_https and scheme == "http":
        scheme = "https"

    fragment = parts.fragment
    if options.strip_hash:
        fragment = ""
    elif options.strip_text_fragment:
        fragment = _TEXT_FRAGMENT_RE.sub("", fragment)

    path = _remove_directory_index(
        _DUPLICATE_SLASHES_RE.sub("/", parts.path), options.remove_directory_index
    )
    if path == "/":
        if options.remove_single_slash and not fragment:
            path = ""
    elif options.remove_trailing_slash and path.endswith("/"):
        path = path[:-1]

    result = urlunsplit(
        (scheme, _netloc(parts, options), path, _query(parts.query, options), fragment)
    )

    if options.strip_protocol:
        result = re.sub(r"^(?:https?:)?//", "", result)

    logger.debug("Normalized %r to %r", url, result)
    return result


def _netloc(parts: SplitResult, options: NormalizeOptions) -> str:
    hostname = parts.hostname or ""
    if options.strip_www and _WWW_RE.match(hostname):
        hostname = hostname[len("www.") :]

    netloc = f"[{hostname}]" if ":" in hostname else hostname
    if parts.port is not None and not options.remove_explicit_port:
        netloc = f"{netloc}:{parts.port}"

    if not options.strip_authentication and parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"
    return netloc


def _query(query: str, options: NormalizeOptions) -> str:
    pairs = parse_qsl(query, keep_blank_values=True)

    remove = options.remove_query_parameters
    if remove is True:
        pairs = [
            (key, value)
            for key, value in pairs
            if _matches(key, options.keep_query_parameters)
        ]
    elif remove:
        pairs = [
            (key, value)
            for key, value in pairs
            if not _matches(key, remove) or _matches(key, options.keep_query_parameters)
        ]

    if options.sort_query_parameters:
        pairs.sort(key=lambda pair: pair[0])
    return urlencode(pairs)


def _matches(name: str, filters) -> bool:
    return any(
        pattern.search(name) if isinstance(pattern, re.Pattern) else pattern == name
        for pattern in filters
    )


def _remove_directory_index(path: str, filters: Union[bool, tuple[QueryFilter, ...]]) -> str:
    if filters is True:
        filters = (_DIRECTORY_INDEX_RE,)
    if not filters:
        return path

    head, _, last = path.rpartition("/")
    return f"{head}/" if _matches(last, filters) else path

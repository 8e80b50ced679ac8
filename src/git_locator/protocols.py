import re
from typing import Optional, Union
from urllib.parse import ParseResult, SplitResult, urlsplit

SPECIAL_SCHEMES = {"http", "https", "ws", "wss", "ftp"}

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")
_PROTOCOL_SEPARATOR_RE = re.compile(r"[:+]")

SplitUrl = Union[SplitResult, ParseResult]


def strict_split(value: str) -> Optional[SplitResult]:
    """Split `value` as an absolute URL, or return None when it is not one.

    An absolute URL needs a scheme; the web schemes also need a host, and
    the authority must carry a numeric port and well-formed IPv6 literal.
    """
    try:
        parts = urlsplit(value.strip())
        # Raises ValueError for a non-numeric or out of range port.
        parts.port
    except ValueError:
        return None

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return None
    if parts.scheme in SPECIAL_SCHEMES and not parts.hostname:
        return None
    return parts


def protocols(
    input: Union[str, SplitUrl], selector: Union[bool, int, None] = None
) -> Union[list[str], Optional[str]]:
    """Return the scheme tokens of `input` (`git+ssh` gives `["git", "ssh"]`).

    With `selector=True` the first token is returned, with an integer the
    token at that index (None when out of range).
    """
    scheme = ""
    if isinstance(input, str):
        parts = strict_split(input)
        if parts is not None:
            scheme = parts.scheme
    elif isinstance(input, (SplitResult, ParseResult)):
        scheme = input.scheme

    splits = [token for token in _PROTOCOL_SEPARATOR_RE.split(scheme) if token]

    if selector is True:
        selector = 0
    if isinstance(selector, int) and not isinstance(selector, bool):
        return splits[selector] if 0 <= selector < len(splits) else None
    return splits

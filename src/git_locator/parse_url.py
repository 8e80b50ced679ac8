import re
from dataclasses import replace
from logging import getLogger
from typing import Any, Mapping, Optional, Union

from .config import ParserConfig, resolve_config
from .errors import InvalidInputError, ParseFailureError
from .normalize import NormalizeOptions, normalize_url
from .parse_path import ParsedPath, parse_path

logger = getLogger(__name__)

NormalizeOption = Union[bool, NormalizeOptions, Mapping[str, Any]]

# `user@host:path` (or `https://host/path`) remotes that are not valid URLs.
GIT_REPOSITORY_RE = re.compile(
    r"^(?:([a-zA-Z_][a-zA-Z0-9_-]{0,31})@|https?://)"
    r"([\w.\-@]+)[/:]"
    r"(([~.\w\-/,\s]|%[0-9A-Fa-f]{2})+?(?:\.git|/)?)$",
    re.ASCII,
)


def parse_url(
    url: str,
    normalize: NormalizeOption = False,
    config: Optional[ParserConfig] = None,
) -> ParsedPath:
    """Parse a URL or an SCP-style remote such as `git@host:owner/repo.git`.

    Raises InvalidInputError for non-string, blank or oversized input and
    ParseFailureError when the input is neither form. SSH remotes must not
    be normalized.
    """
    config = resolve_config(config)

    if not isinstance(url, str) or not url.strip():
        raise InvalidInputError("Invalid URL.", url)

    if len(url) > config.max_input_length:
        raise InvalidInputError(
            "Input exceeds maximum length. If needed, raise "
            f"ParserConfig.max_input_length (currently {config.max_input_length}).",
            url,
        )

    if normalize:
        url = normalize_url(url, _normalize_options(normalize))

    parsed = parse_path(url)
    if not parsed.parse_failed:
        return parsed

    matched = GIT_REPOSITORY_RE.match(parsed.href)
    if not matched:
        raise ParseFailureError("URL parsing failed.", url)

    logger.debug("Recovered SCP-style remote from %r", url)
    return replace(
        parsed,
        protocols=["ssh"],
        protocol="ssh",
        resource=matched.group(2),
        host=matched.group(2),
        user=matched.group(1) or "",
        pathname=f"/{matched.group(3)}",
        parse_failed=False,
    )


def _normalize_options(normalize: NormalizeOption) -> NormalizeOptions:
    if isinstance(normalize, NormalizeOptions):
        return normalize
    if isinstance(normalize, Mapping):
        return NormalizeOptions.from_mapping(normalize)
    return NormalizeOptions(strip_hash=False)

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import SplitResult, parse_qsl, urlunsplit

from .protocols import SPECIAL_SCHEMES, protocols, strict_split

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


@dataclass(frozen=True)
class ParsedPath:
    protocols: list[str] = field(default_factory=list)
    protocol: Optional[str] = None
    port: Optional[str] = None
    resource: str = ""
    host: str = ""
    user: str = ""
    password: str = ""
    pathname: str = ""
    hash: str = ""
    search: str = ""
    href: str = ""
    query: dict[str, str] = field(default_factory=dict)
    parse_failed: bool = False


def parse_path(path: str) -> ParsedPath:
    """Split `path` into URL components.

    Never raises: anything that is not an absolute URL (local paths,
    SCP-style remotes, garbage) comes back with `parse_failed=True` and
    sentinel values, for higher level parsers to reinterpret.
    """
    parts = strict_split(path)

    if parts is None:
        return ParsedPath(
            protocols=["file"],
            protocol="file",
            port="",
            href=path,
            parse_failed=True,
        )

    hostname = parts.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = ""
    if parts.port is not None and DEFAULT_PORTS.get(parts.scheme) != parts.port:
        port = str(parts.port)
    pathname = parts.path
    if not pathname and parts.scheme in SPECIAL_SCHEMES:
        pathname = "/"

    scheme_tokens = protocols(parts)
    return ParsedPath(
        protocols=scheme_tokens,
        protocol=scheme_tokens[0] if scheme_tokens else None,
        port=port,
        resource=hostname,
        host=f"{hostname}:{port}" if port else hostname,
        user=parts.username or "",
        password=parts.password or "",
        pathname=pathname,
        hash=parts.fragment,
        search=parts.query,
        href=urlunsplit(
            parts._replace(netloc=_netloc(parts, hostname, port), path=pathname)
        ),
        query=dict(parse_qsl(parts.query, keep_blank_values=True)),
    )


def _netloc(parts: SplitResult, hostname: str, port: str) -> str:
    netloc = f"{hostname}:{port}" if port else hostname
    if parts.username is not None:
        userinfo = parts.username
        if parts.password:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"
    return netloc

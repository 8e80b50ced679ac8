from typing import Optional

from .config import ParserConfig
from .models import GitUrl
from .parse_url import parse_url
from .ssh import is_ssh

OAUTH_BASIC_PASSWORD = "x-oauth-basic"
TOKEN_AUTH_USER = "x-token-auth"


def git_up(input: str, config: Optional[ParserConfig] = None) -> GitUrl:
    """Parse `input` and derive its access token and transport protocol."""
    parsed = parse_url(input, config=config)

    token = ""
    if parsed.password == OAUTH_BASIC_PASSWORD:
        token = parsed.user
    elif parsed.user == TOKEN_AUTH_USER:
        token = parsed.password

    protocols = parsed.protocols
    if is_ssh(protocols) or (not protocols and is_ssh(input)):
        protocol = "ssh"
    elif protocols:
        protocol = protocols[0]
    else:
        protocol = "file"
        protocols = ["file"]

    href = parsed.href[:-1] if parsed.href.endswith("/") else parsed.href

    return GitUrl.from_parsed(
        parsed, protocols=protocols, protocol=protocol, token=token, href=href
    )

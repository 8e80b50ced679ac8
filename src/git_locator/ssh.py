import re
from typing import Sequence, Union

from .protocols import protocols

SSH_PROTOCOLS = ("ssh", "rsync")

# `host.tld:port/`, which marks a URL-style port rather than an SCP-style path.
_URL_PORT_RE = re.compile(r"\.([a-zA-Z\d]+):(\d+)/?")


def is_ssh(input: Union[str, Sequence[str]]) -> bool:
    """Tell whether `input` (a URL or its protocol tokens) is an SSH remote.

    Strings without an SSH scheme are checked for the SCP-style
    `user@host:path` shape.
    """
    if isinstance(input, str):
        if is_ssh(protocols(input)):
            return True

        scheme_end = input.find("://")
        remainder = input[scheme_end + 3 :] if scheme_end >= 0 else input

        if _URL_PORT_RE.search(remainder):
            return False
        at, colon = remainder.find("@"), remainder.find(":")
        return 0 <= at < colon

    if isinstance(input, (list, tuple)):
        return any(protocol in SSH_PROTOCOLS for protocol in input)

    return False

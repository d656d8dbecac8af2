"""URI structure shared by all scheme handlers.

Scheme handlers receive a URI whose path and query are still percent-encoded
and mutate it in place.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from urllib.parse import quote

from .logging import SmsUriError

# RFC 3986, appendix B
URI_RE = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?$",
    re.DOTALL,
)
AUTHORITY_RE = re.compile(r"^(?:(?P<userinfo>[^@]*)@)?(?P<host>[^:]*)(?::(?P<port>[^:]*))?$")

# Path characters written out as-is; letters, digits and "_.-~" are always kept
PATH_SAFE = "+&=/:@!$'()*,;"
_ESCAPE_RE = re.compile(r"(%[0-9A-Fa-f]{2})")


class URIParseError(SmsUriError):
    """Raised when text cannot be split into URI components."""


@dataclass
class URI:
    """Parsed URI components.

    path is always a string (possibly empty); every other component is None
    when absent.
    """

    scheme: str | None = None
    userinfo: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    def to_string(self) -> str:
        """Reassemble the URI.

        The path is percent-encoded so that decoded text (such as an sms body
        containing "#" or "?") cannot spill into the query or fragment.
        Existing %XX escapes are kept. Query and fragment are written as-is.
        """
        result = ""
        if self.scheme is not None:
            result += f"{self.scheme}:"
        if self.host is not None:
            authority = self.host
            if self.userinfo is not None:
                authority = f"{self.userinfo}@{authority}"
            if self.port is not None:
                authority += f":{self.port}"
            result += f"//{authority}"
        result += _encode_path(self.path)
        if self.query is not None:
            result += f"?{self.query}"
        if self.fragment is not None:
            result += f"#{self.fragment}"
        return result

    def to_dict(self) -> dict:
        """Build a dictionary for JSON output."""
        return asdict(self)

    def __str__(self) -> str:
        return self.to_string()


def _encode_path(path: str) -> str:
    """Percent-encode a path, leaving valid %XX escapes untouched."""
    parts = _ESCAPE_RE.split(path)
    return "".join(
        part if i % 2 else quote(part, safe=PATH_SAFE) for i, part in enumerate(parts)
    )


def parse_uri(text: str) -> URI:
    """Split a raw URI string into its components.

    Leading and trailing whitespace is ignored. The scheme is lowercased;
    nothing else is decoded.

    Raises:
        URIParseError: If the authority is malformed or the port is not numeric
    """
    # Every group is optional, so any text matches
    match = URI_RE.match(text.strip())

    uri = URI(
        scheme=match["scheme"].lower() if match["scheme"] else None,
        path=match["path"],
        query=match["query"],
        fragment=match["fragment"],
    )

    authority = match["authority"]
    if authority is not None:
        parts = AUTHORITY_RE.match(authority)
        if parts is None:
            raise URIParseError(f"Invalid authority in URI: {authority!r}")
        uri.userinfo = parts["userinfo"]
        uri.host = parts["host"]
        port = parts["port"]
        if port:
            if not port.isascii() or not port.isdigit():
                raise URIParseError(f"Invalid port in URI: {port!r}")
            uri.port = int(port)

    return uri

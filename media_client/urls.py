from __future__ import annotations

import re
import string
from urllib.parse import SplitResult, urlsplit, urlunsplit

JSON_SUFFIX = ".json"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# RFC 3986 reg-name and IP-literal characters, plus port separator and escapes
_HOST_CHARS = frozenset(string.ascii_letters + string.digits + "-._~!$&'()*+,;=[]:%")


def _check_escapes(component: str, name: str) -> None:
    if _BAD_ESCAPE.search(component):
        raise ValueError(f"invalid URL escape in {name}: {component!r}")


def parse_document_uri(doc_uri: str) -> SplitResult:
    """
    Strictly parse a document URI.

    urlsplit() silently strips or accepts ASCII control characters, broken
    percent-escapes and odd host characters, so those are rejected here. The
    query is left raw. Raises ValueError on any parse failure.
    """
    for ch in doc_uri:
        if ord(ch) < 0x20 or ord(ch) == 0x7F:
            raise ValueError(f"invalid control character in URL: {ch!r}")
    parts = urlsplit(doc_uri)

    host = parts.netloc.rpartition("@")[2]
    for ch in host:
        if ch.isascii() and ch not in _HOST_CHARS:
            raise ValueError(f"invalid character {ch!r} in host name")
    _check_escapes(host, "host")
    _check_escapes(parts.path, "path")
    _check_escapes(parts.fragment, "fragment")

    # raises ValueError on a malformed port
    _ = parts.port
    return parts


def rewrite_uri(parts: SplitResult, host: str, suffix: str = JSON_SUFFIX) -> str:
    """Point parsed URI parts at host over https with suffix appended to the path."""
    userinfo, at, _ = parts.netloc.rpartition("@")
    return urlunsplit(parts._replace(
        scheme="https",
        netloc=f"{userinfo}{at}{host}",
        path=parts.path + suffix,
    ))


def rendition_url(doc_uri: str, host: str, suffix: str = JSON_SUFFIX) -> str:
    """
    Map a public document URI to its JSON rendition on the media API host.

    "http://tt.se/media/text/abc?x=1" with host "media.example" becomes
    "https://media.example/media/text/abc.json?x=1".
    """
    return rewrite_uri(parse_document_uri(doc_uri), host, suffix)

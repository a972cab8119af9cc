"""HLS manifest rewriting.

Every relative URI line of a playlist is turned into a same-origin relay
URL carrying the absolute upstream URL as its ``url`` parameter, so the
player fetches variant playlists and ``.ts`` segments through the relay
as well.  Tag/comment lines, blank lines and already-absolute URLs are
passed through byte for byte.
"""

from __future__ import annotations

import re
from enum import Enum
from urllib.parse import quote, urljoin, urlparse

MANIFEST_CONTENT_TYPE = "application/vnd.apple.mpegurl"

# Only CR, LF and CRLF end a playlist line.
_LINE_BREAK = re.compile(r"(\r\n|\n|\r)")


class LineKind(Enum):
    BLANK = "blank"
    DIRECTIVE = "directive"
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


def classify_line(line: str) -> LineKind:
    """Classify one playlist line (terminator already removed)."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith("#"):
        return LineKind.DIRECTIVE
    if stripped.startswith(("http://", "https://")):
        return LineKind.ABSOLUTE
    return LineKind.RELATIVE


def manifest_base_url(fetched_url: str) -> str:
    """Directory of the fetched playlist, used to resolve relative lines.

    >>> manifest_base_url("https://cdn.example/live/a/index.m3u8?token=x/y")
    'https://cdn.example/live/a/'
    """
    parsed = urlparse(fetched_url)
    path = parsed.path
    last_slash = path.rfind("/")
    base_path = path[: last_slash + 1] if last_slash >= 0 else "/"
    return f"{parsed.scheme}://{parsed.netloc}{base_path}"


def proxy_url(proxy_path: str, absolute_url: str) -> str:
    """``<proxy_path>?url=<absolute_url>`` with the URL as one opaque value."""
    return f"{proxy_path}?url={quote(absolute_url, safe='')}"


def rewrite_manifest(content: str, fetched_url: str, proxy_path: str) -> str:
    """Rewrite relative URI lines of *content* into relay URLs.

    Line order and terminators are preserved.  A relative line with its
    own query string (``seg1.ts?t=abc``) is resolved and then encoded as
    a whole, never parsed further.
    """
    base = manifest_base_url(fetched_url)
    out: list[str] = []
    parts = _LINE_BREAK.split(content)
    for i in range(0, len(parts), 2):
        line = parts[i]
        terminator = parts[i + 1] if i + 1 < len(parts) else ""
        if classify_line(line) is LineKind.RELATIVE:
            line = proxy_url(proxy_path, urljoin(base, line.strip()))
        out.append(line + terminator)
    return "".join(out)


def is_manifest(content_type: str | None, url: str) -> bool:
    """True when the response is an HLS playlist rather than a media segment."""
    if content_type and "mpegurl" in content_type.lower():
        return True
    return urlparse(url).path.lower().endswith(".m3u8")

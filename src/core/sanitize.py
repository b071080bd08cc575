"""Output sanitization for untrusted text.

Use before echoing user input into rendered HTML or into an href/src
attribute. `strip_html` is a best-effort second layer, not an HTML parser:
always pair it with `encode_html` (which is what `sanitize_input` does).
"""

from __future__ import annotations

import re
from typing import Any

HTML_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
    "`": "&#96;",
}

ALLOWED_URL_SCHEMES: frozenset[str] = frozenset({"http", "https", "mailto", "tel"})

_HTML_SPECIAL_CHARS = re.compile(r"[&<>\"'`/]")
_HTML_TAG = re.compile(r"<[^>]*>")

# Schemes parsed with an authority; `\` separates like `/` and leading slashes are optional.
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_TAB_OR_NEWLINE = re.compile(r"[\t\n\r]")
_SCHEME = re.compile(r"([a-z][a-z0-9+.\-]*):(.*)", re.DOTALL)
_AUTHORITY_END = re.compile(r"[/\\?#]")
_FORBIDDEN_HOST_CHARS = re.compile(r"[\x00-\x20\x7f#%/:<>?@\[\\\]^|\"'`{}]")
_FORBIDDEN_USERINFO_CHARS = re.compile(r"[\x00-\x20\x7f<>\[\\\]^|\"'`{}]")
_IPV6_LITERAL = re.compile(r"\[[0-9a-f:.]+\]")
_PORT = re.compile(r"[0-9]*")


def encode_html(text: Any) -> str:
    """Replace HTML-significant characters with entities; non-strings give ''."""

    if not isinstance(text, str):
        return ""
    return _HTML_SPECIAL_CHARS.sub(lambda match: HTML_ENTITIES[match.group(0)], text)


def strip_html(text: Any) -> str:
    """Remove every `<...>` tag, keeping the text content."""

    if not isinstance(text, str):
        return ""
    return _HTML_TAG.sub("", text)


def _has_valid_host(rest: str) -> bool:
    """True when the text after `scheme:` starts with a usable host[:port]."""

    authority = _AUTHORITY_END.split(rest.lstrip("/\\"), maxsplit=1)[0]
    userinfo, at, host_port = authority.rpartition("@")
    if at and _FORBIDDEN_USERINFO_CHARS.search(userinfo):
        return False

    if host_port.startswith("["):
        host, bracket, port = host_port.partition("]")
        if not bracket or not _IPV6_LITERAL.fullmatch(host + bracket):
            return False
        if port and not port.startswith(":"):
            return False
        port = port[1:]
    else:
        host, _, port = host_port.partition(":")
        if not host or _FORBIDDEN_HOST_CHARS.search(host):
            return False

    if not _PORT.fullmatch(port):
        return False
    return not port or int(port) <= 65535


def _absolute_scheme(candidate: str) -> str | None:
    """Scheme of `candidate` if it parses as an absolute URL, else None.

    Web schemes also need a valid host, so `https://exa mple.com` or
    `http:` alone are not absolute URLs.
    """

    match = _SCHEME.fullmatch(_TAB_OR_NEWLINE.sub("", candidate))
    if match is None:
        return None
    scheme, rest = match.groups()
    if scheme in _SPECIAL_SCHEMES and not _has_valid_host(rest):
        return None
    return scheme


def sanitize_url(url: Any) -> str:
    """Allow-list a URL for href/src attributes.

    Absolute URLs pass only with an http, https, mailto or tel scheme.
    Relative references pass only when they start with `/` or `#`.
    Everything else becomes ''. The returned value keeps its original case.
    """

    if not isinstance(url, str):
        return ""

    original = url.strip()
    inspected = original.lower()

    scheme = _absolute_scheme(inspected)
    if scheme is not None:
        return original if scheme in ALLOWED_URL_SCHEMES else ""

    if inspected.startswith(("/", "#")):
        return original
    return ""


def sanitize_input(text: Any) -> str:
    """Strip tags, then encode entities on what is left."""

    return encode_html(strip_html(text))

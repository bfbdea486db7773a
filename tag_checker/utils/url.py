"""
URL helpers for tag checks: protocol qualification, bare-domain
normalisation and input validation.
"""

from __future__ import annotations

import re
from urllib import parse

from tag_checker.utils.errors import InvalidUrlError

_SCHEME_RE = re.compile(r"^[a-zA-Z]+://")
_PATH_START_RE = re.compile(r"[/?#]")
_HOST_RE = re.compile(r"^(?:[\w-]+(?:\.[\w-]+)*\.?|[0-9a-f.]*:[0-9a-f:.]*)$")

DEFAULT_SCHEME = "https://"
FETCHABLE_SCHEMES = frozenset({"http", "https"})


def ensure_protocol(raw: str) -> str:
    """Prefix ``https://`` unless *raw* already starts with ``letters://``.

    The input is otherwise left untouched (no trimming, no case change)
    so the fetch target is exactly what the caller typed.
    """
    if _SCHEME_RE.match(raw):
        return raw
    return DEFAULT_SCHEME + raw


def normalize_domain(raw: str) -> str:
    """Reduce *raw* to a bare, lowercase domain for known-site lookups.

    Strips scheme, path, query, fragment, userinfo, port and a leading
    ``www.``.  Pure string manipulation; never raises.

    Args:
        raw: User input such as ``"HTTPS://www.Example.com/pricing?x=1"``.

    Returns:
        The bare domain, e.g. ``"example.com"``.
    """
    domain = _SCHEME_RE.sub("", raw.strip(), count=1)
    domain = _PATH_START_RE.split(domain, maxsplit=1)[0]
    domain = domain.rsplit("@", 1)[-1]
    if domain.startswith("["):
        domain = domain.split("]", 1)[0] + "]"
    else:
        domain = domain.split(":", 1)[0]
    return domain.lower().removeprefix("www.")


def validate_url(raw: str) -> str:
    """Return the protocol-qualified form of *raw* or raise.

    Raises:
        InvalidUrlError: If the input is empty, has no usable host, uses a
            scheme other than http(s), or carries an unparseable port.
    """
    if not raw or not raw.strip():
        raise InvalidUrlError(raw, "URL is required")

    qualified = ensure_protocol(raw)
    try:
        parts = parse.urlsplit(qualified)
        parts.port  # noqa: B018 - raises ValueError for a bad port
    except ValueError as exc:
        raise InvalidUrlError(raw) from exc

    if parts.scheme.lower() not in FETCHABLE_SCHEMES:
        raise InvalidUrlError(raw, "Unsupported URL scheme")

    host = parts.hostname
    if not host or not _HOST_RE.match(host):
        raise InvalidUrlError(raw)

    return qualified


def is_valid_url(raw: str) -> bool:
    """Boolean check for form input; surrounding whitespace is ignored."""
    try:
        validate_url(raw.strip())
    except InvalidUrlError:
        return False
    return True

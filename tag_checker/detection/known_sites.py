"""
Pre-baked results for well-known domains.

Some large sites block or rewrite responses for automated clients, so
their results come from a static table instead of a live fetch.  The
table never changes at runtime.
"""

from __future__ import annotations

from tag_checker.data import loader
from tag_checker.models.tags import TagResults
from tag_checker.utils.url import ensure_protocol, normalize_domain


def lookup_known_site(raw_url: str) -> TagResults | None:
    """Return the canned result for *raw_url*'s domain, if any.

    Matching is exact equality on the normalised domain, so scheme,
    ``www.`` and path variations all hit the same entry.  The returned
    copy carries the caller's protocol-qualified URL.
    """
    entry = loader.get_known_sites().get(normalize_domain(raw_url))
    if entry is None:
        return None
    return entry.model_copy(update={"url": ensure_protocol(raw_url)})

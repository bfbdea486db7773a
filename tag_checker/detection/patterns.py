"""
Signature patterns for the supported tracking vendors.

Each vendor has an ordered tuple of detection rules (the first rule that
matches decides ``found`` and ``location``) and an ordered tuple of ID
extractors (the first one that captures supplies ``id``).  Extractor
patterns always capture the identifier in group 1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tag_checker.models.tags import IdType, TagLocation


@dataclass(frozen=True)
class DetectionRule:
    """A signature that marks the vendor as present at *location*."""

    pattern: re.Pattern[str]
    location: TagLocation = "document"


@dataclass(frozen=True)
class IdExtractor:
    """A pattern whose first group is the vendor identifier."""

    pattern: re.Pattern[str]
    id_type: IdType | None = None


@dataclass(frozen=True)
class VendorSignature:
    """Rules and extractors for one vendor, keyed by its result field."""

    field: str
    rules: tuple[DetectionRule, ...]
    extractors: tuple[IdExtractor, ...]


_GTAG_CONFIG = r"""gtag\(\s*['"]config['"]\s*,\s*['"]"""

# ============================================================================
# Google Tag Manager
# ============================================================================

GTM = VendorSignature(
    field="gtm",
    rules=(
        # Primary snippet: a <script> that loads or injects gtm.js.  The
        # scans stop at the next script tag so unclosed tags stay linear.
        DetectionRule(
            re.compile(
                r"<script\b[^<>]*?googletagmanager\.com/gtm\.js"
                r"|<script\b[^<>]*>(?:(?!</?script\b).)*?googletagmanager\.com/gtm\.js",
                re.I | re.S,
            ),
            "head",
        ),
        # Fallback iframe for visitors without JavaScript.
        DetectionRule(
            re.compile(r"<noscript\b[^<>]*>(?:(?!</?noscript\b).)*?googletagmanager\.com/ns\.html", re.I | re.S),
            "body",
        ),
        DetectionRule(re.compile(r"googletagmanager\.com/(?:gtm\.js|ns\.html)", re.I)),
        DetectionRule(re.compile(r"""['"]gtm\.start['"]""")),
        DetectionRule(re.compile(r"\bdataLayer\s*=\s*(?:window\.dataLayer\s*\|\|\s*)?\[")),
    ),
    extractors=(
        IdExtractor(re.compile(r"\b(GTM-[A-Z0-9]+)\b")),
    ),
)

# ============================================================================
# Google Analytics 4
# ============================================================================

GA4 = VendorSignature(
    field="ga4",
    rules=(
        DetectionRule(re.compile(_GTAG_CONFIG + r"G-[A-Z0-9]+['\"]", re.I)),
        DetectionRule(re.compile(r"googletagmanager\.com/gtag/js\?id=G-[A-Z0-9]+", re.I)),
        DetectionRule(re.compile(r"googletagmanager\.com[^\"'\s<>]*?[?&](?:amp;)?id=G-[A-Z0-9]+", re.I)),
        DetectionRule(re.compile(r"google-analytics\.com/analytics\.js", re.I)),
        DetectionRule(re.compile(r"google-analytics\.com/g/collect", re.I)),
    ),
    extractors=(
        IdExtractor(re.compile(_GTAG_CONFIG + r"(G-[A-Z0-9]+)['\"]")),
        IdExtractor(re.compile(r"[?&](?:amp;)?id=(G-[A-Z0-9]+)")),
        IdExtractor(re.compile(r"\b(G-[A-Z0-9]+)\b")),
        # analytics.js pages carry a Universal Analytics property instead.
        IdExtractor(re.compile(r"\b(UA-\d{4,10}-\d{1,4})\b"), "universal_analytics"),
    ),
)

# ============================================================================
# Google Ads conversion tracking
# ============================================================================

GOOGLE_ADS = VendorSignature(
    field="google_ads",
    rules=(
        DetectionRule(re.compile(_GTAG_CONFIG + r"AW-\d+['\"]", re.I)),
        DetectionRule(re.compile(r"googleadservices\.com/pagead/conversion", re.I)),
        DetectionRule(re.compile(r"/AW-\d+")),
        DetectionRule(re.compile(r"googletagmanager\.com/gtag/js\?id=AW-\d+", re.I)),
    ),
    extractors=(
        IdExtractor(re.compile(r"\b(AW-\d+)\b")),
    ),
)

# ============================================================================
# Meta Pixel
# ============================================================================

META_PIXEL = VendorSignature(
    field="meta_pixel",
    rules=(
        DetectionRule(re.compile(r"connect\.facebook\.net/[\w-]+/fbevents\.js", re.I)),
        DetectionRule(re.compile(r"""fbq\(\s*['"]init['"]\s*,\s*['"]?\d+""")),
        DetectionRule(re.compile(r"facebook\.com/tr/?\?id=", re.I)),
    ),
    extractors=(
        IdExtractor(re.compile(r"""fbq\(\s*['"]init['"]\s*,\s*['"]?(\d+)""")),
        IdExtractor(re.compile(r"facebook\.com/tr/?\?id=(\d+)", re.I)),
        IdExtractor(re.compile(r"""\bpixel[_-]?id['"]?\s*[:=]\s*['"]?(\d+)""", re.I)),
    ),
)

SIGNATURES: tuple[VendorSignature, ...] = (GTM, GA4, GOOGLE_ADS, META_PIXEL)

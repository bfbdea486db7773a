"""Detect marketing tracking tags (GTM, GA4, Google Ads, Meta Pixel) on web pages."""

from __future__ import annotations

from tag_checker.detection.detector import TagDetector, check_url
from tag_checker.models.tags import TagDetectionResult, TagResults
from tag_checker.utils.errors import FetchError, InvalidUrlError, TagCheckerError

__version__ = "1.0.0"

__all__ = [
    "FetchError",
    "InvalidUrlError",
    "TagCheckerError",
    "TagDetectionResult",
    "TagDetector",
    "TagResults",
    "check_url",
]

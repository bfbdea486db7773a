"""
Run the vendor signatures against fetched markup.

Pure functions over the HTML text: the same input always produces the
same :class:`TagResults`.
"""

from __future__ import annotations

from tag_checker.detection.patterns import SIGNATURES, VendorSignature
from tag_checker.models.tags import TagDetectionResult, TagResults


def match_vendor(html: str, signature: VendorSignature) -> TagDetectionResult:
    """Evaluate one vendor: first matching rule wins, then first capturing extractor."""
    location = next((rule.location for rule in signature.rules if rule.pattern.search(html)), None)
    if location is None:
        return TagDetectionResult()

    for extractor in signature.extractors:
        match = extractor.pattern.search(html)
        if match:
            return TagDetectionResult(
                found=True,
                location=location,
                id=match.group(1),
                id_type=extractor.id_type,
            )
    return TagDetectionResult(found=True, location=location)


def detect_tags(html: str, url: str) -> TagResults:
    """Scan *html* for every supported vendor.

    Args:
        html: Raw response body of the page.
        url: The protocol-qualified URL the body was fetched from.

    Returns:
        A result with one entry per vendor and no error.
    """
    detections = {signature.field: match_vendor(html, signature) for signature in SIGNATURES}
    return TagResults(url=url, **detections)

"""Pydantic models for per-vendor detection results."""

from __future__ import annotations

from typing import Any, Literal

import pydantic

from tag_checker.utils.serialization import snake_to_camel

TagLocation = Literal["head", "body", "document"]

IdType = Literal["universal_analytics"]

VENDORS: tuple[str, ...] = ("gtm", "ga4", "google_ads", "meta_pixel")


class _CamelModel(pydantic.BaseModel):
    """Frozen model serialised with camelCase keys."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TagDetectionResult(_CamelModel):
    """Detection outcome for one tracking vendor.

    Attributes:
        found: Whether any of the vendor's signatures matched.
        location: Where the snippet was found. ``"head"``/``"body"`` are
            only used for Google Tag Manager's two structural snippets.
        id: Vendor identifier in its canonical format.
        id_type: Set to ``"universal_analytics"`` when the GA4 slot
            carries a legacy ``UA-`` property instead of a ``G-`` ID.
    """

    found: bool = False
    location: TagLocation | None = None
    id: str | None = None
    id_type: IdType | None = None


class TagResults(_CamelModel):
    """Result of checking one URL for all supported vendors."""

    url: str
    gtm: TagDetectionResult = pydantic.Field(default_factory=TagDetectionResult)
    ga4: TagDetectionResult = pydantic.Field(default_factory=TagDetectionResult)
    google_ads: TagDetectionResult = pydantic.Field(default_factory=TagDetectionResult)
    meta_pixel: TagDetectionResult = pydantic.Field(default_factory=TagDetectionResult)
    error: str | None = None

    @pydantic.model_validator(mode="after")
    def check_error_carries_no_detections(self) -> TagResults:
        if self.error is not None:
            if not self.error:
                raise ValueError("error must be a non-empty message")
            for vendor in VENDORS:
                if getattr(self, vendor) != TagDetectionResult():
                    raise ValueError(f"{vendor} must be empty when error is set")
        return self

    @classmethod
    def failed(cls, url: str, message: str) -> TagResults:
        """Build the all-negative result for a failed analysis."""
        return cls(url=url, error=message)

    @property
    def any_found(self) -> bool:
        return any(getattr(self, vendor).found for vendor in VENDORS)

    def to_json_dict(self) -> dict[str, Any]:
        """Wire shape: camelCase keys, unset optional fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

"""camelCase alias helper shared by the Pydantic model configs."""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert ``"meta_pixel"`` to ``"metaPixel"``."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)

"""
Loader for the static reference data shipped with the package.

The JSON files live alongside this module.  Each table is parsed and
validated once, then served as a read-only mapping.
"""

from __future__ import annotations

import functools
import json
import pathlib
import types
from collections.abc import Mapping
from typing import Any

from tag_checker.models.tags import TagResults
from tag_checker.utils import url

_DATA_DIR = pathlib.Path(__file__).resolve().parent

KNOWN_SITES_FILE = "known-sites.json"


def _load_json(relative_path: str) -> Any:
    """Load and parse a JSON file relative to the data directory.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    full_path = _DATA_DIR / relative_path
    if not full_path.exists():
        raise FileNotFoundError(f"Data file not found: {relative_path}")
    with open(full_path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {relative_path}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc


@functools.cache
def get_known_sites() -> Mapping[str, TagResults]:
    """Known-site table keyed by normalised domain (loaded once)."""
    raw: dict[str, dict[str, Any]] = _load_json(KNOWN_SITES_FILE)
    table = {
        url.normalize_domain(domain): TagResults.model_validate({"url": f"https://{domain}", **entry})
        for domain, entry in raw.items()
    }
    return types.MappingProxyType(table)

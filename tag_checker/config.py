"""
Runtime configuration for the tag detector.

Uses ``pydantic_settings.BaseSettings`` so every value can be overridden
from the environment (or a ``.env`` file loaded by the CLI) with type
coercion and range checks.
"""

from __future__ import annotations

import pydantic
import pydantic_settings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class DetectorSettings(pydantic_settings.BaseSettings):
    """Fetch and lookup settings for :class:`TagDetector`.

    Attributes:
        fetch_timeout: Hard ceiling in seconds for the whole page fetch.
        max_redirects: Redirects followed before the fetch is abandoned.
        user_agent: Browser user agent sent with the request.
        use_known_sites: Consult the static known-site table before
            fetching.
    """

    model_config = pydantic_settings.SettingsConfigDict(populate_by_name=True)

    fetch_timeout: float = pydantic.Field(
        default=10.0, gt=0, le=15, validation_alias="TAG_CHECKER_FETCH_TIMEOUT"
    )
    max_redirects: int = pydantic.Field(
        default=5, ge=0, le=5, validation_alias="TAG_CHECKER_MAX_REDIRECTS"
    )
    user_agent: str = pydantic.Field(
        default=DEFAULT_USER_AGENT, min_length=1, validation_alias="TAG_CHECKER_USER_AGENT"
    )
    use_known_sites: bool = pydantic.Field(
        default=True, validation_alias="TAG_CHECKER_USE_KNOWN_SITES"
    )

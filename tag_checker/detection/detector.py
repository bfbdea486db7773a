"""
Tag detector: the single entry point callers use to check a URL.

Flow per request::

    normalise -> known-site hit? -> canned result
              -> fetch -> failure -> error result
                       -> success -> per-vendor match -> result

Invalid input raises :class:`InvalidUrlError` so the caller can answer
with a client error.  Remote failures never raise; they come back as a
result with ``error`` set and every vendor marked not found.
"""

from __future__ import annotations

import asyncio
import functools

import aiohttp

from tag_checker.config import DetectorSettings
from tag_checker.detection import known_sites, matcher
from tag_checker.detection.fetcher import HtmlFetcher, fetch_html
from tag_checker.models.tags import TagResults
from tag_checker.utils import url as url_utils
from tag_checker.utils.errors import FetchError, InvalidUrlError, get_error_message
from tag_checker.utils.logger import create_logger

log = create_logger("Tag-Detector")

FETCH_ERROR_PREFIX = "Failed to fetch website"


class TagDetector:
    """Checks pages for GTM, GA4, Google Ads and Meta Pixel tags.

    Holds no per-request state, so one instance can serve concurrent
    checks.

    Args:
        settings: Fetch and lookup settings; read from the environment
            when omitted.
        fetcher: Replacement for the live aiohttp fetch.  Any
            ``async (url) -> html`` callable; it should raise
            :class:`FetchError` (or an aiohttp/timeout error) on failure.
    """

    def __init__(
        self,
        settings: DetectorSettings | None = None,
        fetcher: HtmlFetcher | None = None,
    ) -> None:
        self.settings = settings or DetectorSettings()
        self._fetch = fetcher or functools.partial(fetch_html, settings=self.settings)

    async def check(self, raw_url: str) -> TagResults:
        """Check *raw_url* for tracking tags.

        Raises:
            InvalidUrlError: If *raw_url* is not a usable http(s) URL.
        """
        target = url_utils.validate_url(raw_url)

        if self.settings.use_known_sites:
            canned = known_sites.lookup_known_site(raw_url)
            if canned is not None:
                log.info("Known site, skipping fetch", {"url": target})
                return canned

        log.start_timer(target)
        try:
            html = await self._fetch(target)
        except aiohttp.InvalidURL as exc:
            raise InvalidUrlError(raw_url) from exc
        except (FetchError, aiohttp.ClientError, asyncio.TimeoutError) as exc:
            log.warn("Could not analyse page", {"url": target, "error": get_error_message(exc)})
            return TagResults.failed(target, f"{FETCH_ERROR_PREFIX}: {get_error_message(exc)}")
        finally:
            log.end_timer(target, "Fetch finished")

        results = matcher.detect_tags(html, target)
        log.success(
            "Tag check complete",
            {
                "url": target,
                "anyFound": results.any_found,
                "gtm": results.gtm.found,
                "ga4": results.ga4.found,
                "googleAds": results.google_ads.found,
                "metaPixel": results.meta_pixel.found,
            },
        )
        return results


async def check_url(raw_url: str, settings: DetectorSettings | None = None) -> TagResults:
    """Check *raw_url* with a default :class:`TagDetector`."""
    return await TagDetector(settings).check(raw_url)

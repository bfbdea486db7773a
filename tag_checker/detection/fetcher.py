"""
Live page fetching over aiohttp.

A single GET with a browser user agent, a total timeout and a redirect
cap.  Every transport-level failure is raised as :class:`FetchError`; a
URL that aiohttp cannot interpret is raised as :class:`InvalidUrlError`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import aiohttp

from tag_checker.config import DetectorSettings
from tag_checker.utils.errors import FetchError, InvalidUrlError, get_error_message
from tag_checker.utils.logger import create_logger

log = create_logger("Fetcher")

HtmlFetcher = Callable[[str], Awaitable[str]]
"""Any ``async (url) -> html`` callable can stand in for the live fetch."""

_ACCEPT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


async def fetch_html(url: str, settings: DetectorSettings | None = None) -> str:
    """Fetch *url* and return the decoded response body.

    Raises:
        InvalidUrlError: If aiohttp rejects the URL itself.
        FetchError: On timeout, connection/DNS/TLS failure, too many
            redirects, or a non-2xx final status.
    """
    settings = settings or DetectorSettings()
    headers = {"User-Agent": settings.user_agent, **_ACCEPT_HEADERS}
    timeout = aiohttp.ClientTimeout(total=settings.fetch_timeout)

    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            # aiohttp raises once the redirect count reaches max_redirects,
            # and reads 0 as "no limit".
            async with session.get(
                url,
                headers=headers,
                allow_redirects=settings.max_redirects > 0,
                max_redirects=settings.max_redirects + 1,
            ) as response:
                if not 200 <= response.status < 300:
                    raise FetchError(url, f"HTTP {response.status} {response.reason or ''}".strip())
                html = await response.text(errors="replace")
    except aiohttp.InvalidURL as exc:
        raise InvalidUrlError(url) from exc
    except aiohttp.TooManyRedirects as exc:
        raise FetchError(url, f"Exceeded {settings.max_redirects} redirects") from exc
    except asyncio.TimeoutError as exc:
        raise FetchError(url, f"Timed out after {settings.fetch_timeout:g}s") from exc
    except aiohttp.ClientError as exc:
        raise FetchError(url, get_error_message(exc)) from exc
    except LookupError as exc:
        # Unknown charset declared by the server.
        raise FetchError(url, f"Could not decode response: {exc}") from exc

    log.debug("Fetched page", {"url": url, "status": response.status, "bytes": len(html)})
    return html

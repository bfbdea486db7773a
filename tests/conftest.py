"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

# ── HTML Fixtures ───────────────────────────────────────────────

GTM_HEAD_SNIPPET = """<!DOCTYPE html>
<html><head>
<!-- Google Tag Manager -->
<script>(function(w,d,s,l,i){w[l]=w[l]||[];w[l].push({'gtm.start':
new Date().getTime(),event:'gtm.js'});var f=d.getElementsByTagName(s)[0],
j=d.createElement(s),dl=l!='dataLayer'?'&l='+l:'';j.async=true;j.src=
'https://www.googletagmanager.com/gtm.js?id='+i+dl;f.parentNode.insertBefore(j,f);
})(window,document,'script','dataLayer','GTM-ABC123');</script>
<!-- End Google Tag Manager -->
</head><body><h1>Shop</h1></body></html>
"""

GTM_NOSCRIPT_ONLY = """<html><head><title>Shop</title></head><body>
<noscript><iframe src="https://www.googletagmanager.com/ns.html?id=GTM-XYZ789"
height="0" width="0" style="display:none;visibility:hidden"></iframe></noscript>
<p>Welcome</p>
</body></html>
"""

GA4_GTAG_SNIPPET = """<html><head>
<script async src="https://www.googletagmanager.com/gtag/js?id=G-TEST12345"></script>
<script>
  window.dataLayer = window.dataLayer || [];
  function gtag(){dataLayer.push(arguments);}
  gtag('js', new Date());
  gtag('config', 'G-TEST12345');
</script>
</head><body></body></html>
"""

UNIVERSAL_ANALYTICS_SNIPPET = """<html><head>
<script async src="https://www.google-analytics.com/analytics.js"></script>
<script>ga('create', 'UA-1234567-1', 'auto'); ga('send', 'pageview');</script>
</head><body></body></html>
"""

GOOGLE_ADS_SNIPPET = """<html><head>
<script>
  function gtag(){dataLayer.push(arguments);}
  gtag('config', 'AW-987654321');
</script>
</head><body></body></html>
"""

META_PIXEL_SNIPPET = """<html><head>
<script>
!function(f,b,e,v,n,t,s){if(f.fbq)return;n=f.fbq=function(){n.callMethod?
n.callMethod.apply(n,arguments):n.queue.push(arguments)};t=b.createElement(e);t.async=!0;
t.src=v;s=b.getElementsByTagName(e)[0];s.parentNode.insertBefore(t,s)}(window, document,'script',
'https://connect.facebook.net/en_US/fbevents.js');
fbq('init', '112233445566');
fbq('track', 'PageView');
</script>
<noscript><img height="1" width="1" style="display:none"
src="https://www.facebook.com/tr?id=112233445566&ev=PageView&noscript=1"/></noscript>
</head><body></body></html>
"""

FBQ_INIT_ONLY = """<html><body><script>fbq('init', '123456789');</script></body></html>"""

PLAIN_PAGE = """<html><head><title>Plain</title>
<link rel="stylesheet" href="/static/site.css"></head>
<body><div class="gtm-wrapper g-recaptcha"><p>Hello</p></div></body></html>
"""


@pytest.fixture()
def gtm_head_html() -> str:
    return GTM_HEAD_SNIPPET


@pytest.fixture()
def gtm_noscript_html() -> str:
    return GTM_NOSCRIPT_ONLY


@pytest.fixture()
def ga4_html() -> str:
    return GA4_GTAG_SNIPPET


@pytest.fixture()
def universal_analytics_html() -> str:
    return UNIVERSAL_ANALYTICS_SNIPPET


@pytest.fixture()
def google_ads_html() -> str:
    return GOOGLE_ADS_SNIPPET


@pytest.fixture()
def meta_pixel_html() -> str:
    return META_PIXEL_SNIPPET


@pytest.fixture()
def fbq_init_only_html() -> str:
    return FBQ_INIT_ONLY


@pytest.fixture()
def plain_html() -> str:
    return PLAIN_PAGE


# ── Fetcher Doubles ─────────────────────────────────────────────


class RecordingFetcher:
    """Stand-in fetch capability that records every URL requested."""

    def __init__(self, html: str = "", error: BaseException | None = None) -> None:
        self.html = html
        self.error = error
        self.calls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture()
def make_fetcher() -> type[RecordingFetcher]:
    """Factory for fetch doubles: ``make_fetcher(html=...)`` or ``make_fetcher(error=...)``."""
    return RecordingFetcher


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of the tests."""
    for name in (
        "TAG_CHECKER_FETCH_TIMEOUT",
        "TAG_CHECKER_MAX_REDIRECTS",
        "TAG_CHECKER_USER_AGENT",
        "TAG_CHECKER_USE_KNOWN_SITES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

"""Shared base class for Playwright-based schedule scrapers.

Handles page lifecycle and header spoofing; subclasses only navigate
and extract.
"""

from __future__ import annotations

from typing import Any

import structlog
from playwright.async_api import Page

from sportsrelay.domain.entities import DataSource
from sportsrelay.infrastructure.relay.headers import SiteProfile
from sportsrelay.infrastructure.sources.browser import SharedBrowserPool


class PlaywrightSourceBase:
    """Base for ``DataSourcePort`` implementations backed by Playwright.

    Subclasses **must** set ``source`` and ``page_url`` and override
    ``extract()``.
    """

    source: DataSource
    page_url: str = ""
    wait_until: str = "domcontentloaded"

    def __init__(
        self,
        pool: SharedBrowserPool,
        profile: SiteProfile,
        *,
        page_url: str | None = None,
        navigation_timeout_ms: int = 30_000,
    ) -> None:
        self._pool = pool
        self._profile = profile
        if page_url:
            self.page_url = page_url
        self._navigation_timeout_ms = navigation_timeout_ms
        self._log = structlog.get_logger(f"{__name__}.{self.source.value}")

    async def fetch(self) -> list[dict[str, Any]]:
        browser = await self._pool.get_browser()
        page = await browser.new_page()
        try:
            # Referer is set by goto(); the rest mirrors the relay headers
            headers = self._profile.build_headers()
            headers.pop("Referer", None)
            await page.set_extra_http_headers(headers)
            await page.goto(
                self.page_url,
                wait_until=self.wait_until,
                timeout=self._navigation_timeout_ms,
            )
            results = await self.extract(page)
        finally:
            await page.close()

        self._log.info("source_scraped", url=self.page_url, count=len(results))
        return results

    async def extract(self, page: Page) -> list[dict[str, Any]]:
        raise NotImplementedError

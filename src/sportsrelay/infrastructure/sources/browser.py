"""Shared Chromium browser for the Playwright schedule scrapers.

Both scrapers open short-lived pages on one browser process.  The pool
launches Chromium lazily on first use and relaunches it if it died.
"""

from __future__ import annotations

import asyncio

import structlog
from playwright.async_api import Browser, Playwright, async_playwright

log = structlog.get_logger(__name__)

_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]


class SharedBrowserPool:
    """Manages a single shared Chromium browser.

    Usage::

        pool = SharedBrowserPool(headless=True)
        browser = await pool.get_browser()
        ...
        await pool.cleanup()  # at shutdown
    """

    def __init__(self, *, headless: bool = True) -> None:
        self._headless = headless
        self._pw: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def get_browser(self) -> Browser:
        """Return the running browser, launching it if needed.

        Concurrent callers wait on the lock for the first launch and
        then receive the same instance.
        """
        if self._browser is not None and self._browser.is_connected():
            return self._browser

        async with self._lock:
            if self._browser is not None and self._browser.is_connected():
                return self._browser

            # Browser crashed: drop the stale Playwright driver first
            if self._pw is not None:
                try:
                    await self._pw.stop()
                except Exception:  # noqa: BLE001
                    log.debug("shared_browser_stale_pw_stop_error", exc_info=True)
                self._pw = None
                self._browser = None

            self._pw = await async_playwright().start()
            self._browser = await self._pw.chromium.launch(
                headless=self._headless,
                args=_LAUNCH_ARGS,
            )
            log.info("shared_browser_launched", headless=self._headless)
            return self._browser

    async def cleanup(self) -> None:
        """Close the shared browser and Playwright instance."""
        if self._browser is not None:
            try:
                await self._browser.close()
            except Exception:  # noqa: BLE001
                log.warning("shared_browser_close_error", exc_info=True)
            self._browser = None
        if self._pw is not None:
            try:
                await self._pw.stop()
            except Exception:  # noqa: BLE001
                log.warning("shared_pw_stop_error", exc_info=True)
            self._pw = None
        log.info("shared_browser_cleaned_up")

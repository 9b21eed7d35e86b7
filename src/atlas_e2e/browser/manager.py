"""Browser manager for Playwright automation.

Provides singleton browser instance management. Each scenario gets a
fresh, maximized page from the shared Chromium process.
"""

from __future__ import annotations

import asyncio
import atexit
import logging
from typing import TYPE_CHECKING, ClassVar

from playwright.async_api import async_playwright

from atlas_e2e.config import get_headless_mode

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserContext, Page, Playwright

logger = logging.getLogger(__name__)

# Chromium flag matching a maximized window; viewport follows the window size
MAXIMIZED_ARGS = ["--start-maximized"]


class BrowserManager:
    """Manages the Playwright driver and Chromium browser as a singleton.

    Contexts handed out by new_page() are tracked so close() can release
    them together with the browser. Uses asyncio.Lock for safe access.

    Class Attributes:
        _instance: Singleton instance
        _playwright: Playwright driver
        _browser: Playwright Browser instance
        _contexts: Contexts opened through new_page()
        _lock: Async lock guarding launch and teardown
        headless: Headless override, None to read ATLAS_E2E_HEADLESS
        slow_mo_ms: Delay between Playwright operations
    """

    _instance: ClassVar[BrowserManager | None] = None
    _playwright: Playwright | None = None
    _browser: Browser | None = None
    _contexts: ClassVar[list[BrowserContext]] = []
    _lock: asyncio.Lock | None = None

    headless: ClassVar[bool | None] = None
    slow_mo_ms: ClassVar[int] = 0

    def __init__(self) -> None:
        """Initialize browser manager.

        Should not be called directly. Use get_instance() instead.
        """
        pass

    @classmethod
    def get_instance(cls) -> BrowserManager:
        """Get singleton instance of BrowserManager.

        Returns:
            BrowserManager singleton instance
        """
        if cls._instance is None:
            cls._instance = cls()
            cls._lock = asyncio.Lock()
            atexit.register(cls._sync_cleanup)
        return cls._instance

    @classmethod
    def configure(cls, headless: bool | None = None, slow_mo_ms: int = 0) -> None:
        """Set launch options used the next time the browser starts."""
        cls.headless = headless
        cls.slow_mo_ms = slow_mo_ms

    @classmethod
    def _sync_cleanup(cls) -> None:
        """Synchronous cleanup for atexit hook."""
        if cls._browser is not None:
            try:
                loop = asyncio.get_event_loop()
                if loop.is_running():
                    loop.create_task(cls._async_cleanup())
                else:
                    loop.run_until_complete(cls._async_cleanup())
            except RuntimeError:
                # No event loop, create one for cleanup
                asyncio.run(cls._async_cleanup())

    @classmethod
    async def _async_cleanup(cls) -> None:
        """Async cleanup for browser resources."""
        for context in cls._contexts:
            await cls._safe_close_context(context)
        cls._contexts.clear()
        if cls._browser is not None:
            await cls._safe_close_browser()
            cls._browser = None
        if cls._playwright is not None:
            await cls._safe_stop_playwright()
            cls._playwright = None

    @classmethod
    async def _safe_close_context(cls, context: BrowserContext) -> None:
        """Safely close a context, ignoring errors."""
        try:
            await context.close()
        except Exception:  # noqa: S110 - intentionally broad for cleanup
            pass

    @classmethod
    async def _safe_close_browser(cls) -> None:
        """Safely close browser, ignoring errors."""
        try:
            if cls._browser is not None:
                await cls._browser.close()
        except Exception:  # noqa: S110 - intentionally broad for cleanup
            pass

    @classmethod
    async def _safe_stop_playwright(cls) -> None:
        """Safely stop playwright, ignoring errors."""
        try:
            if cls._playwright is not None:
                await cls._playwright.stop()
        except Exception:  # noqa: S110 - intentionally broad for cleanup
            pass

    async def _ensure_browser(self) -> Browser:
        """Ensure the driver and browser are started."""
        if self._playwright is None:
            self.__class__._playwright = await async_playwright().start()
        playwright = self._playwright
        assert playwright is not None

        if self._browser is None or not self._browser.is_connected():
            headless = self.headless if self.headless is not None else get_headless_mode()
            logger.debug("Launching Chromium (headless=%s, slow_mo=%dms)", headless, self.slow_mo_ms)
            self.__class__._browser = await playwright.chromium.launch(
                headless=headless,
                slow_mo=self.slow_mo_ms,
                args=MAXIMIZED_ARGS,
            )
        browser = self._browser
        assert browser is not None
        return browser

    async def new_page(self) -> Page:
        """Open a page in a fresh, maximized browser context.

        Cookies and storage are not shared with earlier pages.

        Returns:
            Playwright Page instance
        """
        if self._lock is None:
            self.__class__._lock = asyncio.Lock()
        lock = self._lock
        assert lock is not None

        async with lock:
            browser = await self._ensure_browser()
            context = await browser.new_context(no_viewport=True)
            self._contexts.append(context)
            return await context.new_page()

    async def close_page(self, page: Page) -> None:
        """Close a page and the context it was opened in."""
        context = page.context
        if context in self._contexts:
            self._contexts.remove(context)
        await self._safe_close_context(context)

    async def close(self) -> None:
        """Close browser and cleanup resources."""
        if self._lock is None:
            self.__class__._lock = asyncio.Lock()
        lock = self._lock
        assert lock is not None

        async with lock:
            await self._async_cleanup()

"""Wait helpers built on Playwright's own polling.

URL and page-state waits are delegated to ``page.wait_for_url`` and
``page.wait_for_function``; timeouts surface as WaitTimeoutError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from atlas_e2e.constants import PAGE_READY_TIMEOUT_MS
from atlas_e2e.models import WaitTimeoutError

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)

DOCUMENT_READY_SCRIPT = "() => document.readyState === 'complete'"


async def wait_for_url_matching(
    page: Page,
    predicate: Callable[[str], bool],
    timeout_ms: int,
    timeout_message: str,
) -> str:
    """Wait until the page URL satisfies a predicate.

    Every URL the page commits to is logged at DEBUG level.

    Args:
        page: Playwright Page
        predicate: Called with each URL; True ends the wait
        timeout_ms: Maximum time to wait
        timeout_message: Message used if the wait times out

    Returns:
        The matching URL

    Raises:
        WaitTimeoutError: If no matching URL is reached in time
    """

    def _check(url: str) -> bool:
        logger.info("Current URL: %s", url)
        return predicate(url)

    if _check(page.url):
        return page.url

    try:
        await page.wait_for_url(_check, timeout=timeout_ms, wait_until="commit")
    except PlaywrightTimeoutError as e:
        raise WaitTimeoutError(timeout_message, page.url) from e
    return page.url


async def wait_for_page_ready(
    page: Page,
    timeout_ms: int = PAGE_READY_TIMEOUT_MS,
    timeout_message: str = "Page did not finish loading",
) -> None:
    """Wait for ``document.readyState`` to become ``complete``.

    Raises:
        WaitTimeoutError: If the document does not finish loading in time
    """
    try:
        await page.wait_for_function(DOCUMENT_READY_SCRIPT, timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise WaitTimeoutError(timeout_message, page.url) from e


async def pause(page: Page, duration_ms: int) -> None:
    """Fixed pause, used where the UI gives nothing to wait on."""
    await page.wait_for_timeout(duration_ms)

"""Page snapshots for failure reporting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError

from atlas_e2e.browser.selectors import BODY
from atlas_e2e.constants import DIAGNOSTIC_BODY_CHARS
from atlas_e2e.models import PageDiagnostics

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


async def capture_diagnostics(page: Page, max_chars: int = DIAGNOSTIC_BODY_CHARS) -> PageDiagnostics:
    """Capture URL, title and the start of the body text.

    Reading title or body can fail on a page that is mid-navigation; the
    missing part is left empty rather than masking the original failure.

    Args:
        page: Playwright Page
        max_chars: Number of body characters to keep

    Returns:
        PageDiagnostics snapshot
    """
    try:
        title = await page.title()
    except PlaywrightError as e:
        logger.debug("Could not read page title: %s", e)
        title = ""

    try:
        body_text = await page.locator(BODY).inner_text()
    except PlaywrightError as e:
        logger.debug("Could not read body text: %s", e)
        body_text = ""

    return PageDiagnostics(url=page.url, title=title, body_excerpt=body_text[:max_chars])


async def log_diagnostics(page: Page, context: str) -> PageDiagnostics:
    """Capture diagnostics and log them at ERROR level."""
    diagnostics = await capture_diagnostics(page)
    logger.error("%s. Current URL: %s", context, diagnostics.url)
    logger.error("Page title: %s", diagnostics.title)
    logger.error("Page content: %s", diagnostics.body_excerpt)
    return diagnostics

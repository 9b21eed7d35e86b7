"""Logout automation for Atlas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from atlas_e2e.browser.probing import click_first
from atlas_e2e.browser.selectors import LOGOUT_CANDIDATES
from atlas_e2e.browser.url_helpers import is_login_url
from atlas_e2e.browser.waits import pause, wait_for_url_matching
from atlas_e2e.constants import LOGOUT_REDIRECT_TIMEOUT_MS, MEDIUM_PAUSE_MS
from atlas_e2e.models import LogoutResult

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


async def logout(page: Page, candidates: list[str] | None = None) -> LogoutResult:
    """Click the first logout control found and wait for the login page.

    Not finding any logout control is logged, not raised.

    Args:
        page: Playwright Page of a logged-in session
        candidates: Logout selectors to try (default: LOGOUT_CANDIDATES)

    Returns:
        LogoutResult; probe.found is False if no control was found

    Raises:
        WaitTimeoutError: If a control was clicked but the browser did not
            reach /login or /signin within 10s
    """
    await pause(page, MEDIUM_PAUSE_MS)

    probe = await click_first(page, candidates or LOGOUT_CANDIDATES)
    if not probe.found:
        logger.info("Logout button not found with common selectors")
        logger.info("You may need to inspect the page and add the correct selector")
        return LogoutResult(probe=probe, url=page.url)

    logger.info("Found logout button with selector: %s", probe.selector)
    url = await wait_for_url_matching(
        page,
        is_login_url,
        LOGOUT_REDIRECT_TIMEOUT_MS,
        "Expected to navigate to login page after logout",
    )
    logger.info("Successfully logged out and redirected to login page")
    return LogoutResult(probe=probe, url=url)

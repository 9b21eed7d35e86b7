"""Dashboard scenario steps.

Steps here check what a logged-in user sees on /dashboard. Optional UI
(navigation links, profile widget) is reported through result models
instead of raised, since the selectors are guesses against a DOM this
suite does not own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError

from atlas_e2e.browser.probing import find_first_existing
from atlas_e2e.browser.selectors import BODY, NAV_LINKS, PROFILE_CANDIDATES
from atlas_e2e.browser.waits import pause, wait_for_page_ready
from atlas_e2e.constants import (
    DASHBOARD_PATH,
    ELEMENT_TIMEOUT_MS,
    MEDIUM_PAUSE_MS,
    PAGE_READY_TIMEOUT_MS,
    SHORT_PAUSE_MS,
)
from atlas_e2e.models import NavigationResult, ProfileResult

if TYPE_CHECKING:
    from playwright.async_api import Page

    from atlas_e2e.models import AtlasSettings

logger = logging.getLogger(__name__)


async def open_dashboard(page: Page, settings: AtlasSettings) -> None:
    """Go back to the dashboard of an existing session and let it settle."""
    await page.goto(settings.url(DASHBOARD_PATH))
    await pause(page, SHORT_PAUSE_MS)


async def wait_for_dashboard(page: Page) -> tuple[str, bool]:
    """Wait for the dashboard to finish loading and check its basics.

    Returns:
        Tuple of (page title, whether the body is displayed)

    Raises:
        WaitTimeoutError: If the page does not finish loading in 15s
        playwright.async_api.TimeoutError: If body never becomes visible
    """
    await wait_for_page_ready(page, PAGE_READY_TIMEOUT_MS, "Dashboard page did not finish loading")
    title = await page.title()
    logger.info("Dashboard page title: %s", title)

    body = page.locator(BODY)
    await body.wait_for(state="visible", timeout=ELEMENT_TIMEOUT_MS)
    return title, await body.is_visible()


async def follow_first_nav_link(page: Page) -> NavigationResult:
    """Click the first navigation link on the page, if there is one."""
    await pause(page, MEDIUM_PAUSE_MS)

    links = page.locator(NAV_LINKS)
    count = await links.count()
    if count == 0:
        logger.info("No navigation links found - may need to adjust selectors")
        return NavigationResult()

    logger.info("Found %d navigation links", count)
    first_link = links.first
    await first_link.wait_for(state="visible", timeout=ELEMENT_TIMEOUT_MS)
    link_text = (await first_link.inner_text()).strip()
    logger.info("Clicking navigation link: %s", link_text)
    await first_link.click(timeout=ELEMENT_TIMEOUT_MS)

    await pause(page, MEDIUM_PAUSE_MS)
    logger.info("Navigated to: %s", page.url)
    return NavigationResult(links_found=count, clicked_text=link_text, url=page.url)


async def find_profile(page: Page) -> ProfileResult:
    """Look for a user profile or account widget.

    Returns:
        ProfileResult; probe.found is False if no candidate matched
    """
    await pause(page, MEDIUM_PAUSE_MS)

    probe, matches = await find_first_existing(page, PROFILE_CANDIDATES)
    if matches is None:
        logger.info("User profile element not found with common selectors - may need customization")
        return ProfileResult(probe=probe)

    logger.info("Found profile element with selector: %s", probe.selector)
    try:
        visible = await matches.first.is_visible()
    except PlaywrightError as e:
        logger.warning("Profile element %r vanished before it could be checked: %s", probe.selector, e)
        visible = False
    return ProfileResult(probe=probe, visible=visible)


async def refresh_session(page: Page) -> tuple[str, str]:
    """Reload the page and wait for it to load again.

    Returns:
        Tuple of (URL before refresh, URL after refresh)

    Raises:
        WaitTimeoutError: If the reloaded page does not finish loading in 15s
    """
    url_before = page.url
    logger.info("URL before refresh: %s", url_before)

    await page.reload()
    await wait_for_page_ready(page, PAGE_READY_TIMEOUT_MS, "Page did not load after refresh")
    await pause(page, MEDIUM_PAUSE_MS)

    url_after = page.url
    logger.info("URL after refresh: %s", url_after)
    return url_before, url_after

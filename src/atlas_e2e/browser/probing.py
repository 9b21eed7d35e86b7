"""Candidate selector probing.

Walks ordered candidate lists and acts on the first selector that
resolves. A candidate that raises while being probed is skipped, so an
absent or stale element never fails the calling scenario.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError

from atlas_e2e.browser.selectors import to_playwright
from atlas_e2e.constants import ELEMENT_TIMEOUT_MS
from atlas_e2e.models import ProbeResult

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page

logger = logging.getLogger(__name__)


async def is_clickable(locator: Locator) -> bool:
    """Check whether an element is displayed and enabled."""
    return await locator.is_visible() and await locator.is_enabled()


async def find_first_existing(page: Page, candidates: list[str]) -> tuple[ProbeResult, Locator | None]:
    """Find the first candidate matching at least one element.

    Args:
        page: Playwright Page
        candidates: Ordered candidate selectors

    Returns:
        Tuple of (probe result, locator of all matches for that candidate).
        The locator is None when nothing matched.
    """
    for selector in candidates:
        matches = page.locator(to_playwright(selector))
        try:
            count = await matches.count()
        except PlaywrightError as e:
            logger.debug("Candidate %r skipped: %s", selector, e)
            continue
        if count > 0:
            return ProbeResult(selector=selector, found=True, count=count), matches
    return ProbeResult(), None


async def click_first(
    page: Page,
    candidates: list[str],
    *,
    require_clickable: bool = False,
    click: bool = True,
    timeout_ms: int = ELEMENT_TIMEOUT_MS,
) -> ProbeResult:
    """Click the first candidate that exists.

    For each candidate in order: skip it if it matches nothing (or, with
    require_clickable, if its first match is hidden or disabled); wait for
    it to become visible, read its text and click it. Errors move on to the
    next candidate.

    Args:
        page: Playwright Page
        candidates: Ordered candidate selectors
        require_clickable: Only consider candidates already clickable
        click: False to locate the control without clicking it
        timeout_ms: How long to wait for the chosen element

    Returns:
        ProbeResult for the candidate acted on, or an empty result
    """
    for selector in candidates:
        matches = page.locator(to_playwright(selector))
        element = matches.first
        try:
            count = await matches.count()
            if count == 0:
                continue
            if require_clickable and not await is_clickable(element):
                logger.debug("Candidate %r exists but is not clickable", selector)
                continue
            await element.wait_for(state="visible", timeout=timeout_ms)
            text = (await element.inner_text()).strip()
            if click:
                await element.click(timeout=timeout_ms)
        except PlaywrightError as e:
            logger.debug("Candidate %r skipped: %s", selector, e)
            continue
        return ProbeResult(selector=selector, found=True, text=text, count=count)
    return ProbeResult()


async def count_matches(page: Page, candidates: list[str]) -> dict[str, int]:
    """Count how many elements each candidate currently matches.

    A candidate that cannot be evaluated is reported as 0.
    """
    counts: dict[str, int] = {}
    for selector in candidates:
        try:
            counts[selector] = await page.locator(to_playwright(selector)).count()
        except PlaywrightError as e:
            logger.debug("Candidate %r could not be counted: %s", selector, e)
            counts[selector] = 0
    return counts

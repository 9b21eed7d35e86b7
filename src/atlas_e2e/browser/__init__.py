"""Browser module for atlas-e2e.

Provides Playwright browser lifecycle, waits and selector probing.
"""

from atlas_e2e.browser.manager import BrowserManager
from atlas_e2e.browser.probing import click_first, find_first_existing
from atlas_e2e.browser.waits import pause, wait_for_page_ready, wait_for_url_matching

__all__ = [
    "BrowserManager",
    "click_first",
    "find_first_existing",
    "pause",
    "wait_for_page_ready",
    "wait_for_url_matching",
]

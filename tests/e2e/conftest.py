"""E2E test fixtures for atlas-e2e.

Provides the live deployment settings, the shared browser and pages for
the login and dashboard suites.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError

from atlas_e2e.auth.login import login
from atlas_e2e.browser.manager import BrowserManager
from atlas_e2e.config import load_settings
from atlas_e2e.health import check_deployment
from atlas_e2e.utils.logging import setup_logging

if TYPE_CHECKING:
    from playwright.async_api import Page

    from atlas_e2e.models import AtlasSettings


@pytest.fixture(scope="session")
def atlas_settings() -> AtlasSettings:
    """Settings read from ATLAS_BASE_URL, TEST_EMAIL, TEST_PASSWORD etc."""
    setup_logging()
    return load_settings()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def reachable_deployment(atlas_settings: AtlasSettings) -> AtlasSettings:
    """Skip every live scenario when the deployment does not answer.

    Returns:
        The same settings, once the deployment has answered
    """
    reason = await check_deployment(atlas_settings.base_url)
    if reason is not None:
        pytest.skip(f"Atlas deployment {atlas_settings.base_url} unreachable: {reason}")
    return atlas_settings


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(reachable_deployment: AtlasSettings) -> AsyncGenerator[BrowserManager]:
    """Start Chromium once for the whole session.

    Raises:
        pytest.skip: If Chromium cannot be launched
    """
    BrowserManager.configure(
        headless=reachable_deployment.headless,
        slow_mo_ms=reachable_deployment.slow_mo_ms,
    )
    manager = BrowserManager.get_instance()
    try:
        probe_page = await manager.new_page()
    except PlaywrightError as e:
        await manager.close()
        pytest.skip(f"Chromium could not be launched: {e}. Run `playwright install chromium` first.")
    await manager.close_page(probe_page)

    yield manager

    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def login_page(browser_manager: BrowserManager) -> AsyncGenerator[Page]:
    """A fresh page with no session, closed after the test."""
    page = await browser_manager.new_page()
    yield page
    await browser_manager.close_page(page)


@pytest_asyncio.fixture(scope="module", loop_scope="session")
async def dashboard_page(
    browser_manager: BrowserManager,
    reachable_deployment: AtlasSettings,
) -> AsyncGenerator[Page]:
    """A page logged in once and shared by every test in the module.

    The session is not reset between tests, so a test that logs out must
    run last.
    """
    page = await browser_manager.new_page()
    try:
        await login(page, reachable_deployment, wait_until_ready=False)
        yield page
    finally:
        await browser_manager.close_page(page)

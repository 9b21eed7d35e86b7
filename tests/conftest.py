"""Pytest configuration and shared fixtures for atlas-e2e tests.

This module provides Playwright doubles used across the unit tests.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from atlas_e2e.models import AtlasSettings, Credentials

BASE_URL = "https://atlas.test"

LocatorFactory = Callable[..., MagicMock]
PageFactory = Callable[..., MagicMock]


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def settings() -> AtlasSettings:
    """Create settings pointing at a fake deployment.

    Returns:
        AtlasSettings with test credentials.
    """
    return AtlasSettings(
        base_url=BASE_URL,
        credentials=Credentials(email="student@example.com", password="s3cret-pass"),
    )


# ============================================================================
# Playwright Doubles
# ============================================================================


def _build_locator(
    count: int = 1,
    visible: bool = True,
    enabled: bool = True,
    text: str = "",
) -> MagicMock:
    locator = MagicMock()
    locator.count = AsyncMock(return_value=count)
    locator.is_visible = AsyncMock(return_value=visible)
    locator.is_enabled = AsyncMock(return_value=enabled)
    locator.wait_for = AsyncMock()
    locator.inner_text = AsyncMock(return_value=text)
    locator.click = AsyncMock()
    locator.fill = AsyncMock()
    locator.first = locator
    return locator


@pytest.fixture
def make_locator() -> LocatorFactory:
    """Factory for Locator doubles.

    The double's ``first`` is the double itself, so configuring the
    collection also configures its first element.

    Returns:
        Callable(count=1, visible=True, enabled=True, text="") -> MagicMock
    """
    return _build_locator


@pytest.fixture
def make_page() -> PageFactory:
    """Factory for Page doubles.

    ``page.locator(selector)`` returns the double registered for that exact
    (Playwright-syntax) selector, or a locator matching nothing.

    Returns:
        Callable(url=..., locators=None, title="Atlas") -> MagicMock
    """

    def factory(
        url: str = f"{BASE_URL}/dashboard",
        locators: dict[str, MagicMock] | None = None,
        title: str = "Atlas",
    ) -> MagicMock:
        registered = locators or {}
        missing = _build_locator(count=0, visible=False, enabled=False)

        page = MagicMock()
        page.url = url
        page.goto = AsyncMock()
        page.reload = AsyncMock()
        page.title = AsyncMock(return_value=title)
        page.wait_for_timeout = AsyncMock()
        page.wait_for_function = AsyncMock()
        page.wait_for_url = AsyncMock()
        page.locator = MagicMock(side_effect=lambda selector: registered.get(selector, missing))
        return page

    return factory


@pytest.fixture
def mock_browser_manager() -> Generator[tuple[MagicMock, AsyncMock], None, None]:
    """Create a mock BrowserManager for testing the CLI.

    Yields:
        A tuple of (mock_manager, mock_page) for configuring browser behavior.
    """
    with patch("atlas_e2e.cli.BrowserManager") as mock_manager_class:
        mock_manager = MagicMock()
        mock_manager_class.get_instance.return_value = mock_manager

        mock_page = AsyncMock()
        mock_manager.new_page = AsyncMock(return_value=mock_page)
        mock_manager.close = AsyncMock()

        yield mock_manager, mock_page

"""E2E tests for the Atlas login page.

Each case starts from a fresh browser context so no session leaks
between them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from atlas_e2e.auth.login import login, submit_rejected_login
from atlas_e2e.constants import MEDIUM_PAUSE_MS, SHORT_PAUSE_MS

if TYPE_CHECKING:
    from playwright.async_api import Page

    from atlas_e2e.models import AtlasSettings

pytestmark = [pytest.mark.e2e, pytest.mark.asyncio(loop_scope="session")]


class TestLogin:
    """Login with valid and rejected credentials."""

    async def test_login_with_valid_credentials(
        self,
        login_page: Page,
        reachable_deployment: AtlasSettings,
    ) -> None:
        url = await login(login_page, reachable_deployment)

        assert "/dashboard" in url

    async def test_login_with_invalid_credentials(
        self,
        login_page: Page,
        reachable_deployment: AtlasSettings,
    ) -> None:
        url = await submit_rejected_login(
            login_page,
            reachable_deployment,
            "invalid@example.com",
            "wrongpassword123",
            MEDIUM_PAUSE_MS,
        )

        assert "/login" in url

    async def test_login_with_empty_email(
        self,
        login_page: Page,
        reachable_deployment: AtlasSettings,
    ) -> None:
        url = await submit_rejected_login(login_page, reachable_deployment, None, "somepassword", SHORT_PAUSE_MS)

        assert "/login" in url

    async def test_login_with_empty_password(
        self,
        login_page: Page,
        reachable_deployment: AtlasSettings,
    ) -> None:
        url = await submit_rejected_login(login_page, reachable_deployment, "test@example.com", None, SHORT_PAUSE_MS)

        assert "/login" in url

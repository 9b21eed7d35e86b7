"""Login form automation for Atlas.

Fills the email/password form, submits it and waits for the redirect
into the application.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError

from atlas_e2e.browser.diagnostics import log_diagnostics
from atlas_e2e.browser.selectors import EMAIL_INPUT, PASSWORD_INPUT, SUBMIT_BUTTON
from atlas_e2e.browser.url_helpers import is_post_login_url
from atlas_e2e.browser.waits import pause, wait_for_page_ready, wait_for_url_matching
from atlas_e2e.constants import (
    ELEMENT_TIMEOUT_MS,
    LOGIN_PATH,
    LOGIN_REDIRECT_TIMEOUT_MS,
    PAGE_READY_TIMEOUT_MS,
)
from atlas_e2e.models import LoginError, LoginErrorCode, WaitTimeoutError

if TYPE_CHECKING:
    from playwright.async_api import Page

    from atlas_e2e.models import AtlasSettings, Credentials

logger = logging.getLogger(__name__)


async def open_login_page(page: Page, settings: AtlasSettings) -> None:
    """Navigate to the login page."""
    await page.goto(settings.url(LOGIN_PATH))


async def fill_login_form(
    page: Page,
    email: str | None,
    password: str | None,
    timeout_ms: int = ELEMENT_TIMEOUT_MS,
) -> None:
    """Fill the login form and submit it.

    A field passed as None is left untouched, which is how the empty-field
    validation cases are driven.

    Args:
        page: Playwright Page showing the login form
        email: Value for the email field, or None to skip it
        password: Value for the password field, or None to skip it
        timeout_ms: How long each element may take to appear

    Raises:
        playwright.async_api.Error: If a form element never becomes usable
    """
    if email is not None:
        email_input = page.locator(EMAIL_INPUT)
        await email_input.wait_for(state="visible", timeout=timeout_ms)
        await email_input.fill(email)

    if password is not None:
        password_input = page.locator(PASSWORD_INPUT)
        await password_input.wait_for(state="visible", timeout=timeout_ms)
        await password_input.fill(password)

    submit = page.locator(SUBMIT_BUTTON)
    await submit.wait_for(state="visible", timeout=timeout_ms)
    await submit.click(timeout=timeout_ms)


async def login(
    page: Page,
    settings: AtlasSettings,
    credentials: Credentials | None = None,
    *,
    wait_until_ready: bool = True,
) -> str:
    """Log in through the form and wait for the application to load.

    Waits up to 30s for the URL to reach /dashboard or /home, then (unless
    disabled) up to 15s for the document to finish loading.

    Args:
        page: Playwright Page
        settings: Deployment settings
        credentials: Account to use (default: settings.credentials)
        wait_until_ready: Also wait for document.readyState == 'complete'

    Returns:
        URL the browser landed on

    Raises:
        LoginError: If the form is missing or the redirect does not happen
        WaitTimeoutError: If the landing page does not finish loading
    """
    credentials = credentials or settings.credentials
    await open_login_page(page, settings)

    try:
        await fill_login_form(page, credentials.email, credentials.password)
    except PlaywrightError as e:
        diagnostics = await log_diagnostics(page, "Login form not usable")
        raise LoginError(
            code=LoginErrorCode.LOGIN_FORM_NOT_FOUND,
            message=f"Login form could not be filled: {e}",
            resolution="Check that the login page still uses email/password inputs and a submit button",
            diagnostics=diagnostics,
        ) from e

    try:
        url = await wait_for_url_matching(
            page,
            is_post_login_url,
            LOGIN_REDIRECT_TIMEOUT_MS,
            "Expected to navigate to dashboard/home page after 30s",
        )
    except WaitTimeoutError as e:
        diagnostics = await log_diagnostics(page, "Navigation failed")
        raise LoginError(
            code=LoginErrorCode.LOGIN_TIMEOUT,
            message=f"{e.message}. Page content: {diagnostics.body_excerpt}",
            resolution="Verify TEST_EMAIL / TEST_PASSWORD and that the deployment is up",
            diagnostics=diagnostics,
        ) from e

    if wait_until_ready:
        await wait_for_page_ready(page, PAGE_READY_TIMEOUT_MS, "Dashboard page did not finish loading")
        url = page.url

    logger.info("Successfully logged in. Current URL: %s", url)
    return url


async def submit_rejected_login(
    page: Page,
    settings: AtlasSettings,
    email: str | None,
    password: str | None,
    pause_ms: int,
) -> str:
    """Submit a login that should be refused and report where the browser is.

    Args:
        page: Playwright Page
        settings: Deployment settings
        email: Email to type, or None to leave the field empty
        password: Password to type, or None to leave the field empty
        pause_ms: Time given to the page to show its validation error

    Returns:
        URL after the pause
    """
    await open_login_page(page, settings)
    await fill_login_form(page, email, password)
    await pause(page, pause_ms)
    logger.info("URL after rejected login attempt: %s", page.url)
    return page.url

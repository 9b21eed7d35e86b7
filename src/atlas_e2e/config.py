"""Environment-based configuration for atlas-e2e.

Environment variables:
    ATLAS_BASE_URL: Deployment root (default: https://app.aristoai.net)
    TEST_EMAIL: Login email (falls back to the shared test account)
    TEST_PASSWORD: Login password (falls back to the shared test account)
    ATLAS_E2E_HEADLESS: Set to "false" to show the browser window
    ATLAS_E2E_SLOW_MO: Milliseconds Playwright waits between operations
"""

from __future__ import annotations

import os

from atlas_e2e.constants import DEFAULT_BASE_URL
from atlas_e2e.models import AtlasSettings, Credentials

BASE_URL_ENV_VAR = "ATLAS_BASE_URL"
EMAIL_ENV_VAR = "TEST_EMAIL"
PASSWORD_ENV_VAR = "TEST_PASSWORD"
HEADLESS_ENV_VAR = "ATLAS_E2E_HEADLESS"
SLOW_MO_ENV_VAR = "ATLAS_E2E_SLOW_MO"

# Shared test account used when TEST_EMAIL / TEST_PASSWORD are not set
FALLBACK_EMAIL = "Avan1@needstreet.org"
FALLBACK_PASSWORD = "password"


def get_headless_mode() -> bool:
    """Get headless mode from ATLAS_E2E_HEADLESS environment variable.

    Default: True (headless mode for CI stability)
    Set ATLAS_E2E_HEADLESS=false to show browser window for debugging.

    Returns:
        True if headless mode is enabled (default)
    """
    return os.environ.get(HEADLESS_ENV_VAR, "true").lower() != "false"


def get_credentials() -> Credentials:
    """Read login credentials, falling back to the shared test account.

    Empty values count as unset.
    """
    return Credentials(
        email=os.environ.get(EMAIL_ENV_VAR) or FALLBACK_EMAIL,
        password=os.environ.get(PASSWORD_ENV_VAR) or FALLBACK_PASSWORD,
    )


def _get_slow_mo() -> int:
    raw = os.environ.get(SLOW_MO_ENV_VAR, "0").strip()
    try:
        return max(int(raw), 0)
    except ValueError as e:
        raise ValueError(f"{SLOW_MO_ENV_VAR} must be an integer number of milliseconds, got {raw!r}") from e


def load_settings() -> AtlasSettings:
    """Build settings from the environment.

    Returns:
        AtlasSettings for the current process

    Raises:
        ValueError: If ATLAS_E2E_SLOW_MO is not an integer
    """
    base_url = os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
    return AtlasSettings(
        base_url=base_url.rstrip("/"),
        credentials=get_credentials(),
        headless=get_headless_mode(),
        slow_mo_ms=_get_slow_mo(),
    )

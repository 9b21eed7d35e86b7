"""Constants for Atlas browser scenarios.

Single source of truth for timeouts, pauses and paths.
"""

# Default deployment under test
DEFAULT_BASE_URL = "https://app.aristoai.net"

# Paths
LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"
TEST_PREP_PATH = "/test-prep"

# Timeouts (milliseconds)
ELEMENT_TIMEOUT_MS = 5000
LOGIN_REDIRECT_TIMEOUT_MS = 30000
PAGE_READY_TIMEOUT_MS = 15000
LOGOUT_REDIRECT_TIMEOUT_MS = 10000

# Fixed pauses (milliseconds)
SHORT_PAUSE_MS = 1000
MEDIUM_PAUSE_MS = 2000
LONG_PAUSE_MS = 3000

# Number of body text characters kept in failure diagnostics
DIAGNOSTIC_BODY_CHARS = 500

"""E2E scenarios against a live Atlas deployment.

Tests in this package require:
- Network connectivity to the deployment (ATLAS_BASE_URL)
- A working test account (TEST_EMAIL / TEST_PASSWORD)
- Chromium installed for Playwright (`playwright install chromium`)

Usage:
    pytest tests/e2e/ -v --tb=short

Note:
    Tests are marked with @pytest.mark.e2e. They are skipped, not failed,
    when the deployment is unreachable or the browser cannot start.
"""

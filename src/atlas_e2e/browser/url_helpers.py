"""URL helper utilities for browser automation.

Provides the URL predicates the scenarios poll for.
"""

DASHBOARD_MARKERS = ("/dashboard", "/home")
LOGIN_MARKERS = ("/login", "/signin")
PROBLEM_AREA_MARKERS = ("sat", "test-prep", "practice", "problem")


def url_contains_any(url: str, markers: tuple[str, ...]) -> bool:
    """Check whether a URL contains any of the given substrings."""
    return any(marker in url for marker in markers)


def is_post_login_url(url: str) -> bool:
    """True once the browser has left the login page for the app."""
    return url_contains_any(url, DASHBOARD_MARKERS)


def is_login_url(url: str) -> bool:
    """True if the URL is the login or sign-in page."""
    return url_contains_any(url, LOGIN_MARKERS)


def is_problem_area_url(url: str) -> bool:
    """Check whether a URL belongs to the Test Prep / SAT practice area.

    The comparison is case-insensitive.

    Args:
        url: The current browser URL

    Returns:
        True if the URL mentions SAT, test prep, practice or a problem
    """
    return url_contains_any(url.lower(), PROBLEM_AREA_MARKERS)

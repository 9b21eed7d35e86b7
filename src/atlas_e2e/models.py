"""Pydantic data models for atlas-e2e.

This module defines the transient values passed between scenario steps:
credentials, settings, page diagnostics, selector probe outcomes and the
error types raised by hard failures.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Email/password pair typed into the login form.

    Attributes:
        email: Account email address
        password: Account password
    """

    email: str
    password: str = Field(repr=False)


class AtlasSettings(BaseModel):
    """Runtime configuration for a scenario run.

    Attributes:
        base_url: Deployment root, without trailing slash
        credentials: Account used for the valid-login precondition
        headless: Whether Chromium runs without a window
        slow_mo_ms: Delay Playwright inserts between operations
    """

    base_url: str
    credentials: Credentials
    headless: bool = True
    slow_mo_ms: int = 0

    def url(self, path: str) -> str:
        """Build an absolute URL for a path on the deployment."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


class PageDiagnostics(BaseModel):
    """Snapshot of the page captured when a hard wait fails.

    Attributes:
        url: Current page URL
        title: Document title
        body_excerpt: Leading characters of the body text
    """

    url: str
    title: str
    body_excerpt: str

    def describe(self) -> str:
        """Format the snapshot for error messages."""
        return f"url={self.url} title={self.title!r} body={self.body_excerpt!r}"


class ProbeResult(BaseModel):
    """Outcome of walking an ordered list of candidate selectors.

    Attributes:
        selector: The candidate that matched, None if none did
        found: True if a candidate matched
        text: Inner text of the matched element, when read
        count: Number of elements the matching candidate resolved to
    """

    selector: str | None = None
    found: bool = False
    text: str | None = None
    count: int = 0


class NavigationResult(BaseModel):
    """Result of clicking the first navigation link on the dashboard.

    Attributes:
        links_found: Number of navigation links on the page
        clicked_text: Text of the link that was clicked
        url: URL after the click, None if nothing was clicked
    """

    links_found: int = 0
    clicked_text: str | None = None
    url: str | None = None


class ProfileResult(BaseModel):
    """Result of looking for a user profile widget.

    Attributes:
        probe: Which profile candidate matched
        visible: Whether the matched element is displayed
    """

    probe: ProbeResult
    visible: bool = False


class LogoutResult(BaseModel):
    """Result of the logout step.

    Attributes:
        probe: Which logout candidate was clicked
        url: URL after the step finished
    """

    probe: ProbeResult
    url: str


class SatNavigationResult(BaseModel):
    """Result of the Test Prep -> SAT -> problem navigation.

    Every field is advisory; the navigation never fails on a missing element.

    Attributes:
        test_prep: Which Test Prep candidate was clicked
        used_direct_url: True if the Test Prep page was opened by URL instead
        sat: Which SAT candidate was clicked
        problem: Which problem/start candidate was clicked
        url: URL after the problem step
        in_problem_area: True if the URL looks like a SAT/practice page
        answers: Which answer candidate matched (count = number of options)
        answer_selected: True if the first answer option was clicked
        submit: Which submit candidate was located (never clicked)
    """

    test_prep: ProbeResult
    used_direct_url: bool = False
    sat: ProbeResult
    problem: ProbeResult
    url: str
    in_problem_area: bool = False
    answers: ProbeResult
    answer_selected: bool = False
    submit: ProbeResult


class SelectorReport(BaseModel):
    """Match counts for one candidate list, used by the probe command.

    Attributes:
        name: Candidate list name (e.g. "logout")
        counts: Selector -> number of matching elements
    """

    name: str
    counts: dict[str, int]

    @property
    def matched(self) -> list[str]:
        """Selectors that resolved to at least one element."""
        return [selector for selector, count in self.counts.items() if count > 0]


class LoginErrorCode(str, Enum):
    """Error codes for login failures."""

    LOGIN_FORM_NOT_FOUND = "login_form_not_found"
    LOGIN_TIMEOUT = "login_timeout"


class LoginError(Exception):
    """Login precondition failed.

    Raised when the login form cannot be filled or the post-login redirect
    does not happen in time.

    Attributes:
        code: Error code
        message: Human-readable error message
        resolution: Suggested next step
        diagnostics: Page snapshot at the time of failure
    """

    def __init__(
        self,
        code: LoginErrorCode,
        message: str,
        resolution: str | None = None,
        diagnostics: PageDiagnostics | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            code: Error code from LoginErrorCode
            message: Human-readable error message
            resolution: Suggested next step (optional)
            diagnostics: Page snapshot (optional)
        """
        self.code = code
        self.message = message
        self.resolution = resolution
        self.diagnostics = diagnostics
        super().__init__(message)


class WaitTimeoutError(TimeoutError):
    """A URL or page-state wait did not complete in time.

    Attributes:
        message: Human-readable error message
        url: Page URL when the wait gave up
    """

    def __init__(self, message: str, url: str) -> None:
        self.message = message
        self.url = url
        super().__init__(f"{message} (current URL: {url})")

"""Selectors and candidate lists for the Atlas UI.

The Atlas DOM is not owned by this suite, so most controls are located by
walking an ordered list of candidate selectors and acting on the first one
that resolves. Candidates use CSS, or the text shorthand ``tag*=Text``
(element whose text contains "Text") and ``tag=Text`` (exact text).
"""

from __future__ import annotations

import re

# Login form
EMAIL_INPUT = "input[type='email']"
PASSWORD_INPUT = "input[type='password']"
SUBMIT_BUTTON = "button[type='submit']"

BODY = "body"
NAV_LINKS = 'nav a, [role="navigation"] a, header a'

PROFILE_CANDIDATES = [
    '[data-testid="user-profile"]',
    '[aria-label*="profile" i]',
    '[aria-label*="account" i]',
    'button[aria-label*="user" i]',
    ".user-profile",
    ".account-menu",
]

LOGOUT_CANDIDATES = [
    "button*=Logout",
    "button*=Log out",
    "button*=Sign out",
    "a*=Logout",
    "a*=Log out",
    "a*=Sign out",
    '[data-testid="logout"]',
    '[aria-label*="logout" i]',
    '[aria-label*="sign out" i]',
]

TEST_PREP_CANDIDATES = [
    "a*=Test Prep",
    "button*=Test Prep",
    '[data-testid*="test-prep" i]',
    '[aria-label*="test prep" i]',
    "nav a*=Test",
    ".nav-item*=Test Prep",
]

SAT_CANDIDATES = [
    "a*=SAT",
    "button*=SAT",
    '[data-testid*="sat" i]',
    "div*=SAT",
    ".test-type*=SAT",
    "h2*=SAT",
    "h3*=SAT",
]

PROBLEM_CANDIDATES = [
    "button*=Start",
    "button*=Begin",
    "button*=Practice",
    '[data-testid*="start" i]',
    '[data-testid*="problem" i]',
    "a*=Start Problem",
    ".problem-card",
    ".question-card",
]

ANSWER_CANDIDATES = [
    'button[role="radio"]',
    'input[type="radio"]',
    ".answer-option",
    ".choice",
    '[data-testid*="answer" i]',
]

SUBMIT_CANDIDATES = [
    "button*=Submit",
    "button*=Check",
    "button*=Next",
    '[data-testid*="submit" i]',
]

# Named candidate lists reported by the probe command
CANDIDATE_GROUPS: dict[str, list[str]] = {
    "profile": PROFILE_CANDIDATES,
    "logout": LOGOUT_CANDIDATES,
    "test_prep": TEST_PREP_CANDIDATES,
    "sat": SAT_CANDIDATES,
    "problem": PROBLEM_CANDIDATES,
    "answer": ANSWER_CANDIDATES,
    "submit": SUBMIT_CANDIDATES,
}

# ``prefix*=text`` or ``prefix=text`` where prefix is a tag, class or
# descendant chain and contains no attribute brackets
_TEXT_SELECTOR = re.compile(r"^(?P<prefix>[^\[\]=*\"']+?)(?P<op>\*?=)(?P<text>.+)$")

# Characters with a meaning in a JavaScript regular expression
_REGEX_SPECIAL = re.compile(r"[.*+?^${}()|[\]\\/]")


def _quote(value: str) -> str:
    """Quote a value as a selector string argument."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_playwright(selector: str) -> str:
    """Translate a candidate selector into Playwright selector syntax.

    ``button*=Log out`` becomes ``button:text-matches("Log out")``, a
    case-sensitive substring match, and ``h2=SAT`` becomes
    ``h2:text-is("SAT")``. CSS selectors are returned unchanged.

    Args:
        selector: Candidate selector

    Returns:
        Selector understood by page.locator()
    """
    match = _TEXT_SELECTOR.match(selector.strip())
    if match is None:
        return selector
    prefix = match.group("prefix").rstrip()
    text = match.group("text").strip()
    if match.group("op") == "=":
        return f"{prefix}:text-is({_quote(text)})"
    # :has-text() ignores case; a regex without flags does not
    pattern = _REGEX_SPECIAL.sub(r"\\\g<0>", text)
    return f"{prefix}:text-matches({_quote(pattern)})"

"""Selector discovery for a live dashboard.

Reports how many elements each candidate selector matches, so a candidate
list can be updated when the Atlas UI changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from atlas_e2e.browser.probing import count_matches
from atlas_e2e.browser.selectors import CANDIDATE_GROUPS, NAV_LINKS
from atlas_e2e.models import SelectorReport

if TYPE_CHECKING:
    from playwright.async_api import Page


async def collect_selector_reports(
    page: Page,
    groups: dict[str, list[str]] | None = None,
) -> list[SelectorReport]:
    """Count matches for the navigation selector and every candidate group.

    Args:
        page: Playwright Page to inspect
        groups: Candidate groups by name (default: CANDIDATE_GROUPS)

    Returns:
        One SelectorReport per group, navigation first
    """
    groups = groups if groups is not None else CANDIDATE_GROUPS
    reports = [SelectorReport(name="navigation", counts=await count_matches(page, [NAV_LINKS]))]
    for name, candidates in groups.items():
        reports.append(SelectorReport(name=name, counts=await count_matches(page, candidates)))
    return reports

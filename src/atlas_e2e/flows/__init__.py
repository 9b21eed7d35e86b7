"""Scenario steps run after login."""

from atlas_e2e.flows.dashboard import (
    find_profile,
    follow_first_nav_link,
    open_dashboard,
    refresh_session,
    wait_for_dashboard,
)
from atlas_e2e.flows.practice import navigate_to_sat_problem

__all__ = [
    "find_profile",
    "follow_first_nav_link",
    "navigate_to_sat_problem",
    "open_dashboard",
    "refresh_session",
    "wait_for_dashboard",
]

"""Deployment reachability check.

Used to skip live scenarios when the Atlas deployment cannot be reached,
instead of letting every case fail on its first navigation.
"""

from __future__ import annotations

import logging

import httpx

from atlas_e2e.constants import LOGIN_PATH

logger = logging.getLogger(__name__)

DEFAULT_HEALTH_TIMEOUT = 10.0


async def check_deployment(base_url: str, timeout: float = DEFAULT_HEALTH_TIMEOUT) -> str | None:
    """Check that the login page of a deployment answers.

    Any HTTP status below 500 counts as reachable: the login page may
    redirect or require cookies, but the server is up.

    Args:
        base_url: Deployment root
        timeout: Request timeout in seconds

    Returns:
        None if reachable, otherwise a short reason
    """
    url = f"{base_url.rstrip('/')}{LOGIN_PATH}"
    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as client:
            response = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Deployment %s unreachable: %s", base_url, e)
        return f"{type(e).__name__}: {e}"

    if response.status_code >= 500:
        logger.warning("Deployment %s answered HTTP %d", base_url, response.status_code)
        return f"HTTP {response.status_code}"
    return None

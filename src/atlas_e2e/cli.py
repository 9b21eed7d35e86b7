"""Command line interface for atlas-e2e.

Runs the login precondition and the selector probe against a deployment
without going through pytest.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

import typer
from playwright.async_api import Error as PlaywrightError

from atlas_e2e.auth.login import login
from atlas_e2e.browser.manager import BrowserManager
from atlas_e2e.config import load_settings
from atlas_e2e.flows.dashboard import open_dashboard
from atlas_e2e.models import AtlasSettings, LoginError, SelectorReport
from atlas_e2e.probe import collect_selector_reports
from atlas_e2e.utils.logging import setup_logging

app = typer.Typer(
    name="atlas-e2e",
    help="Atlas end-to-end helpers - check login and inspect dashboard selectors",
)

BaseUrlOption = Annotated[
    str | None,
    typer.Option(
        "--base-url",
        "-u",
        help="Deployment root (default: ATLAS_BASE_URL or https://app.aristoai.net)",
    ),
]
HeadedOption = Annotated[
    bool,
    typer.Option(
        "--headed",
        help="Show the browser window",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Log every polled URL and skipped selector",
    ),
]


def _build_settings(base_url: str | None, headed: bool) -> AtlasSettings:
    try:
        settings = load_settings()
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(1) from e
    updates: dict[str, object] = {}
    if base_url:
        updates["base_url"] = base_url.rstrip("/")
    if headed:
        updates["headless"] = False
    return settings.model_copy(update=updates)


async def _run_login(settings: AtlasSettings) -> str:
    BrowserManager.configure(headless=settings.headless, slow_mo_ms=settings.slow_mo_ms)
    manager = BrowserManager.get_instance()
    try:
        page = await manager.new_page()
        return await login(page, settings)
    finally:
        await manager.close()


async def _run_probe(settings: AtlasSettings) -> list[SelectorReport]:
    BrowserManager.configure(headless=settings.headless, slow_mo_ms=settings.slow_mo_ms)
    manager = BrowserManager.get_instance()
    try:
        page = await manager.new_page()
        await login(page, settings)
        await open_dashboard(page, settings)
        return await collect_selector_reports(page)
    finally:
        await manager.close()


def _report_login_error(e: LoginError) -> None:
    typer.echo(f"❌ Login failed: {e.message}", err=True)
    if e.resolution:
        typer.echo(f"   Resolution: {e.resolution}", err=True)
    if e.diagnostics:
        typer.echo(f"   Page: {e.diagnostics.describe()}", err=True)


@app.command("login")
def login_command(
    base_url: BaseUrlOption = None,
    headed: HeadedOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Log in with TEST_EMAIL / TEST_PASSWORD and print the landing URL.

    Example:
        atlas-e2e login --base-url https://app.aristoai.net
    """
    setup_logging(logging.DEBUG if verbose else logging.INFO)
    settings = _build_settings(base_url, headed)
    typer.echo(f"🔐 Logging in to {settings.base_url} as {settings.credentials.email}")

    try:
        url = asyncio.run(_run_login(settings))
    except LoginError as e:
        _report_login_error(e)
        raise typer.Exit(1) from e
    except (PlaywrightError, TimeoutError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"✅ Logged in. Landed on: {url}")


@app.command("probe")
def probe_command(
    base_url: BaseUrlOption = None,
    headed: HeadedOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Log in, open the dashboard and report which candidate selectors match.

    Example:
        atlas-e2e probe --headed
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    settings = _build_settings(base_url, headed)
    typer.echo(f"🔍 Probing dashboard selectors on {settings.base_url}")

    try:
        reports = asyncio.run(_run_probe(settings))
    except LoginError as e:
        _report_login_error(e)
        raise typer.Exit(1) from e
    except (PlaywrightError, TimeoutError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1) from e

    for report in reports:
        marker = "✅" if report.matched else "⚠️ "
        typer.echo()
        typer.echo(f"{marker} {report.name}")
        for selector, count in report.counts.items():
            typer.echo(f"   {count:>3}  {selector}")


def main() -> None:
    """Entry point for the atlas-e2e command."""
    app()


if __name__ == "__main__":
    main()

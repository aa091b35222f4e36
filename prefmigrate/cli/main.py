"""prefmigrate CLI — run preference upgrades against the configured store.

`prefmigrate upgrade --from-version-code N` applies pending upgrades,
`prefmigrate mark-up-to-date` stamps a fresh store, and
`prefmigrate status` shows what would run.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from prefmigrate.config import settings
from prefmigrate.exceptions import PrefMigrateError
from prefmigrate.migrations.registry import latest_version
from prefmigrate.migrations.runner import get_pending_upgrades, get_preference_version
from prefmigrate.service import (
    mark_preferences_up_to_date,
    open_preferences,
    upgrade_preferences,
)
from prefmigrate.store import JsonFilePreferenceStore

console = Console()

app = typer.Typer(
    name="prefmigrate",
    help="prefmigrate -- versioned upgrades for preference stores.",
    no_args_is_help=True,
)


def _open_store(preferences: str) -> JsonFilePreferenceStore:
    if preferences:
        return JsonFilePreferenceStore(Path(preferences))
    return open_preferences()


def _fail(error: PrefMigrateError) -> None:
    console.print(f"[red]{error}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("upgrade")
def upgrade(
    from_version_code: int = typer.Option(
        ..., "--from-version-code", "-f", help="Version code of the previously installed release",
    ),
    preferences: str = typer.Option("", "--preferences", "-p", help="Preferences file (default: configured path)"),
):
    """Apply all pending preference upgrades."""
    try:
        store = _open_store(preferences)
        changed = upgrade_preferences(store, from_version_code)
    except PrefMigrateError as e:
        _fail(e)
        return

    if changed:
        console.print(
            f"[green]Preferences upgraded to version {get_preference_version(store)}.[/green]"
        )
    else:
        console.print("[dim]Preferences already up to date.[/dim]")


@app.command("mark-up-to-date")
def mark_up_to_date(
    preferences: str = typer.Option("", "--preferences", "-p", help="Preferences file (default: configured path)"),
):
    """Stamp the store as fully upgraded without running any upgrade."""
    try:
        store = _open_store(preferences)
        mark_preferences_up_to_date(store)
    except PrefMigrateError as e:
        _fail(e)
        return

    console.print(f"[green]Preferences marked as version {latest_version()}.[/green]")


@app.command("status")
def status(
    from_version_code: int = typer.Option(
        0, "--from-version-code", "-f", help="Version code of the previously installed release",
    ),
    preferences: str = typer.Option("", "--preferences", "-p", help="Preferences file (default: configured path)"),
):
    """Show the stored preference version and pending upgrades."""
    try:
        store = _open_store(preferences)
        current = get_preference_version(store)
        pending = get_pending_upgrades(store, from_version_code)
    except PrefMigrateError as e:
        _fail(e)
        return

    pending_text = ", ".join(f"{u.version}:{u.name}" for u in pending) or "none"
    console.print(Panel(
        f"Store:    {store.path}\n"
        f"Version:  {current}\n"
        f"Latest:   {latest_version()}\n"
        f"Pending:  {pending_text}",
        title="Preference Status",
        border_style="cyan",
    ))


@app.command("version")
def version_cmd():
    """Show prefmigrate version."""
    from prefmigrate import __version__
    console.print(f"prefmigrate v{__version__}")

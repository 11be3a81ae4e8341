"""
Interactive menu — the default winadmin surface.

    1  Rename computer
    2  Run Windows updates
    3  Install / uninstall applications
    4  Restart computer
    exit

Each choice is one turn. Failures are reported and the menu comes
back; only "exit" (or end of input) leaves the loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from winadmin.core.services.host_ops import rename_computer, restart_computer, run_updates
from winadmin.core.services.selection import parse_selection
from winadmin.core.use_cases.reconcile import list_catalog, reconcile_selection
from winadmin.ui.cli.packages import (
    echo_catalog,
    echo_invalid,
    echo_outcome,
    echo_start,
    echo_summary,
)
from winadmin.ui.cli.runtime import Runtime, get_runtime

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def _show_menu(runtime: Runtime) -> None:
    click.echo()
    click.secho("🖥️  Windows Host Administration", fg="cyan", bold=True)
    if runtime.mock:
        click.secho("   Mode: mock (no real execution)", fg="yellow")
    click.echo("   1. Rename computer")
    click.echo("   2. Run Windows updates")
    click.echo("   3. Install / uninstall applications")
    click.echo("   4. Restart computer")
    click.echo(f"   Type '{EXIT_COMMAND}' to quit")
    click.echo()


def _rename_turn(runtime: Runtime) -> None:
    new_name = click.prompt("New computer name", default="", show_default=False)
    result = rename_computer(runtime.host, new_name)
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        return

    click.secho(f"✅ Computer renamed to {result['name']}", fg="green", bold=True)
    if click.confirm("Restart now to apply the new name?", default=False):
        _restart(runtime)


def _updates_turn(runtime: Runtime) -> None:
    click.secho("🔄 Installing updates, this can take a while...", fg="cyan")
    result = run_updates(runtime.host)
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        return
    click.secho("✅ Updates installed", fg="green", bold=True)


def _software_turn(runtime: Runtime) -> None:
    rows = list_catalog(runtime.catalog, runtime.manager)
    if not rows:
        click.secho("⚠️  The catalog is empty", fg="yellow")
        return

    echo_catalog(rows)
    delimiter = runtime.settings.selection_delimiter
    text = click.prompt(
        f"Numbers to install/uninstall (separated by '{delimiter}')",
        default="",
        show_default=False,
    )

    selection = parse_selection(text, runtime.catalog, delimiter)
    echo_invalid(selection)

    result = reconcile_selection(
        selection,
        runtime.manager,
        on_start=echo_start,
        on_outcome=echo_outcome,
    )

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        return

    if result.report is None:
        click.secho("Nothing selected.", fg="yellow")
        return

    echo_summary(result.report)


def _restart_turn(runtime: Runtime) -> None:
    if not click.confirm("Restart the computer now?", default=False):
        click.echo("Restart cancelled.")
        return
    _restart(runtime)


def _restart(runtime: Runtime) -> None:
    result = restart_computer(runtime.host)
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        return
    click.secho("🔁 Restarting...", fg="cyan")


_HANDLERS: dict[str, Callable[[Runtime], None]] = {
    "1": _rename_turn,
    "2": _updates_turn,
    "3": _software_turn,
    "4": _restart_turn,
}


def run_menu(runtime: Runtime) -> None:
    """Loop over menu turns until the user types ``exit``."""
    while True:
        _show_menu(runtime)
        choice = click.prompt("Select an option", default="", show_default=False).strip()

        if choice.lower() == EXIT_COMMAND:
            click.echo("Goodbye.")
            return

        handler = _HANDLERS.get(choice)
        if handler is None:
            click.secho(f"⚠️  Invalid choice: '{choice}'", fg="yellow")
            continue

        logger.debug("Menu choice %s", choice)
        handler(runtime)


@click.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Start the interactive administration menu."""
    run_menu(get_runtime(ctx))

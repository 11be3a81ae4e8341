"""
CLI commands for the application catalog.

Thin wrappers over ``winadmin.core.use_cases.reconcile``. The echo_*
helpers are shared with the interactive menu so both surfaces report
outcomes identically.
"""

from __future__ import annotations

import json
import sys

import click

from winadmin.core.engine.reconciler import ReconcileReport
from winadmin.core.models.action import ActionOutcome, PackageVerb
from winadmin.core.models.catalog import CatalogEntry
from winadmin.core.services.selection import SelectionResult
from winadmin.core.use_cases.reconcile import CatalogRow
from winadmin.ui.cli.runtime import get_runtime


# ── Rendering ───────────────────────────────────────────────────


def echo_catalog(rows: list[CatalogRow]) -> None:
    """Numbered catalog, with installed markers when known."""
    click.secho("📦 Applications:", fg="cyan", bold=True)
    for row in rows:
        if row.installed is None:
            marker = "  "
        else:
            marker = "✅" if row.installed else "  "
        click.echo(f"   {row.index:>2}. {marker} {row.entry.display_name}")
    if rows and all(r.installed is None for r in rows):
        click.secho("   (package manager not found, installed state unknown)", dim=True)
    click.echo()


def echo_invalid(selection: SelectionResult) -> None:
    for bad in selection.invalid:
        click.secho(f"⚠️  Skipped: {bad.message}", fg="yellow")


def echo_start(entry: CatalogEntry, verb: PackageVerb) -> None:
    if verb == "install":
        click.secho(f"📦 Installing {entry.display_name}...", fg="cyan")
    else:
        click.secho(f"🗑️  Uninstalling {entry.display_name}...", fg="cyan")


def echo_outcome(outcome: ActionOutcome) -> None:
    past = "installed" if outcome.action == "install" else "uninstalled"
    if outcome.ok:
        click.secho(f"✅ {outcome.display_name} {past}", fg="green")
    else:
        click.secho(f"❌ {outcome.display_name}: {outcome.action} failed", fg="red")
        if outcome.error:
            click.echo(f"   {outcome.error}")


def echo_summary(report: ReconcileReport) -> None:
    status_color = {"ok": "green", "partial": "yellow", "failed": "red"}.get(
        report.status, "white"
    )
    click.echo()
    click.secho(
        f"   Result: {report.succeeded}/{report.total} succeeded",
        fg=status_color,
        bold=True,
    )
    click.echo()


# ── Commands ────────────────────────────────────────────────────


@click.group()
def packages() -> None:
    """Packages — list the catalog, install/uninstall applications."""


@packages.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_packages(ctx: click.Context, as_json: bool) -> None:
    """Show the numbered application catalog."""
    from winadmin.core.use_cases.reconcile import list_catalog

    runtime = get_runtime(ctx)
    rows = list_catalog(runtime.catalog, runtime.manager)

    if as_json:
        click.echo(json.dumps({"packages": [r.to_dict() for r in rows]}, indent=2))
        return

    if not rows:
        click.secho("⚠️  The catalog is empty", fg="yellow")
        return

    echo_catalog(rows)


@packages.command()
@click.argument("selection")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def toggle(ctx: click.Context, selection: str, as_json: bool) -> None:
    """Install absent / uninstall present applications by number.

    Examples:

        winadmin packages toggle "1, 3"

        winadmin --mock packages toggle 2 --json
    """
    from winadmin.core.services.selection import parse_selection
    from winadmin.core.use_cases.reconcile import reconcile_selection, run_reconcile

    runtime = get_runtime(ctx)
    delimiter = runtime.settings.selection_delimiter

    if as_json:
        result = run_reconcile(selection, runtime.catalog, runtime.manager, delimiter=delimiter)
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    parsed = parse_selection(selection, runtime.catalog, delimiter)
    echo_invalid(parsed)
    result = reconcile_selection(
        parsed,
        runtime.manager,
        on_start=echo_start,
        on_outcome=echo_outcome,
    )

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.report is None:
        click.secho("Nothing selected.", fg="yellow")
        return

    echo_summary(result.report)
    if not result.report.all_ok:
        sys.exit(1)

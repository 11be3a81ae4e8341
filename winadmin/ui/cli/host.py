"""
CLI commands for host operations — rename, update, restart.

Thin wrappers over ``winadmin.core.services.host_ops``.
"""

from __future__ import annotations

import sys

import click

from winadmin.ui.cli.runtime import get_runtime


@click.command()
@click.argument("new_name")
@click.option("--restart", "restart_after", is_flag=True, help="Restart immediately to apply.")
@click.pass_context
def rename(ctx: click.Context, new_name: str, restart_after: bool) -> None:
    """Rename this computer."""
    from winadmin.core.services.host_ops import rename_computer, restart_computer

    runtime = get_runtime(ctx)
    result = rename_computer(runtime.host, new_name)

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    click.secho(f"✅ Computer renamed to {result['name']}", fg="green", bold=True)

    if not restart_after:
        click.echo("   Restart to apply the new name.")
        return

    restarted = restart_computer(runtime.host)
    if "error" in restarted:
        click.secho(f"❌ {restarted['error']}", fg="red")
        sys.exit(1)


@click.command()
@click.pass_context
def update(ctx: click.Context) -> None:
    """Install pending Windows updates."""
    from winadmin.core.services.host_ops import run_updates

    runtime = get_runtime(ctx)
    click.secho("🔄 Installing updates, this can take a while...", fg="cyan")
    result = run_updates(runtime.host)

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if ctx.obj.get("verbose") and result.get("output"):
        for line in result["output"].split("\n")[:20]:
            click.echo(f"     │ {line}")
    click.secho("✅ Updates installed", fg="green", bold=True)


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def restart(ctx: click.Context, yes: bool) -> None:
    """Restart this computer."""
    from winadmin.core.services.host_ops import restart_computer

    runtime = get_runtime(ctx)
    if not yes and not click.confirm("Restart the computer now?", default=False):
        click.echo("Restart cancelled.")
        return

    result = restart_computer(runtime.host)
    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)
    click.secho("🔁 Restarting...", fg="cyan")

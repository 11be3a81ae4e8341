"""
winadmin — CLI entrypoint.

Usage:
    winadmin                      # interactive menu
    winadmin packages list
    winadmin packages toggle "1, 3"
    winadmin --mock menu          # no real execution
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from winadmin import __version__
from winadmin.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="winadmin")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to winadmin.yml (default: auto-detect).",
)
@click.option("--mock", is_flag=True, help="Use mock adapters (no real execution).")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    mock: bool,
) -> None:
    """winadmin — basic Windows host administration.

    Without a command, starts the interactive menu.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["mock"] = mock
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )

    if ctx.invoked_subcommand is None:
        from winadmin.ui.cli.menu import run_menu
        from winadmin.ui.cli.runtime import get_runtime

        run_menu(get_runtime(ctx))


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate winadmin.yml configuration."""
    from winadmin.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.settings is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File: {result.config_path}")
        click.echo(f"   Package manager: {result.settings.package_manager.executable}")
        click.echo(f"   Catalog entries: {len(result.catalog) if result.catalog else 0}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register commands from winadmin/ui/cli/ ─────────────────────

from winadmin.ui.cli.host import rename, restart, update  # noqa: E402
from winadmin.ui.cli.menu import menu  # noqa: E402
from winadmin.ui.cli.packages import packages  # noqa: E402

cli.add_command(menu)
cli.add_command(packages)
cli.add_command(rename)
cli.add_command(update)
cli.add_command(restart)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()

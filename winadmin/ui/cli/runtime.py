"""
Per-process CLI runtime — settings, catalog and adapters.

Built lazily on first use and cached on the click context, so
``--help`` and ``config check`` never need a valid configuration,
and mock mode keeps its in-memory inventory across menu turns.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

import click

from winadmin.adapters.base import HostController, PackageManager
from winadmin.adapters.registry import create_host_controller, create_package_manager
from winadmin.core.config.loader import ConfigError, load_catalog, load_settings
from winadmin.core.models.catalog import Catalog
from winadmin.core.models.settings import AppSettings


@dataclass
class Runtime:
    """Everything a command needs to talk to the machine."""

    settings: AppSettings
    catalog: Catalog
    manager: PackageManager
    host: HostController
    mock: bool = False


def get_runtime(ctx: click.Context) -> Runtime:
    """Return the cached runtime, building it on first call.

    Exits with status 1 when the configuration is invalid.
    """
    obj = ctx.ensure_object(dict)
    runtime = obj.get("runtime")
    if runtime is not None:
        return runtime

    mock = bool(obj.get("mock", False))
    try:
        settings = load_settings(obj.get("config_path"))
        catalog = load_catalog(settings)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    runtime = Runtime(
        settings=settings,
        catalog=catalog,
        manager=create_package_manager(settings, mock_mode=mock),
        host=create_host_controller(settings, mock_mode=mock),
        mock=mock,
    )
    obj["runtime"] = runtime
    return runtime

"""
Adapter factory — pick real or mock adapters for this process.

The CLI builds one package manager and one host controller at startup
and hands them to every use case, so mock mode keeps its in-memory
state across menu turns.
"""

from __future__ import annotations

import logging

from winadmin.adapters.base import HostController, PackageManager
from winadmin.adapters.chocolatey import ChocolateyAdapter
from winadmin.adapters.mock import MockHostController, MockPackageManager
from winadmin.adapters.windows_host import WindowsHostAdapter
from winadmin.core.models.settings import AppSettings

logger = logging.getLogger(__name__)


def create_package_manager(settings: AppSettings, mock_mode: bool = False) -> PackageManager:
    """Package-manager adapter for the configured tool, or a mock."""
    if mock_mode:
        logger.debug("Using mock package manager")
        return MockPackageManager()
    return ChocolateyAdapter(settings.package_manager)


def create_host_controller(settings: AppSettings, mock_mode: bool = False) -> HostController:
    """Host adapter for Windows, or a mock."""
    if mock_mode:
        logger.debug("Using mock host controller")
        return MockHostController()
    return WindowsHostAdapter()

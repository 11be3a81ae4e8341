"""
Installed-state probing — is this package on the machine right now?

Every call asks the package manager afresh. Actions earlier in the
same batch may have changed the inventory, so nothing is cached.
"""

from __future__ import annotations

import logging

from winadmin.adapters.base import PackageManager

logger = logging.getLogger(__name__)


class PackageProbe:
    """Point-in-time installed-state checks against a package manager."""

    def __init__(self, manager: PackageManager):
        self._manager = manager

    def installed_ids(self) -> set[str]:
        """Lower-cased ids of everything currently installed."""
        return {pkg.lower() for pkg in self._manager.list_installed()}

    def is_installed(self, package_id: str) -> bool:
        """Whether ``package_id`` appears in the local inventory.

        An empty inventory means "not installed".
        """
        installed = package_id.lower() in self.installed_ids()
        logger.debug("Probe %s: %s", package_id, "installed" if installed else "absent")
        return installed

"""
Package actions — install and uninstall one catalog entry.

Each action is a single non-interactive package-manager invocation.
Exit status 0 is success, anything else is failure. No retries: the
operator re-runs the batch to try again.
"""

from __future__ import annotations

import logging
import subprocess
import time

from winadmin.adapters.base import PackageManager, PackageManagerUnavailable
from winadmin.core.models.action import ActionOutcome, PackageVerb
from winadmin.core.models.catalog import CatalogEntry

logger = logging.getLogger(__name__)


def ensure_package_manager(manager: PackageManager) -> None:
    """Make sure the package manager is present, bootstrapping it if not.

    Idempotent: does nothing when the manager is already available.

    Raises:
        PackageManagerUnavailable: If the bootstrap fails.
    """
    if manager.is_available():
        return

    logger.info("%s not found, bootstrapping", manager.name)
    manager.bootstrap()
    if not manager.is_available():
        raise PackageManagerUnavailable(f"{manager.name} is still unavailable after bootstrap")
    logger.info("%s bootstrapped", manager.name)


class PackageActionExecutor:
    """Run install/uninstall through a package manager and report outcomes."""

    def __init__(self, manager: PackageManager):
        self._manager = manager

    def install(self, entry: CatalogEntry) -> ActionOutcome:
        return self._run("install", entry)

    def uninstall(self, entry: CatalogEntry) -> ActionOutcome:
        return self._run("uninstall", entry)

    def _run(self, verb: PackageVerb, entry: CatalogEntry) -> ActionOutcome:
        logger.info("%s %s (%s)", verb.capitalize(), entry.display_name, entry.package_id)
        start = time.monotonic()

        try:
            exit_code = self._manager.run_action(verb, entry.package_id, auto_confirm=True)
        except subprocess.TimeoutExpired as e:
            logger.warning("%s %s timed out", verb, entry.package_id)
            return ActionOutcome(
                entry=entry,
                action=verb,
                status="failed",
                duration_ms=int((time.monotonic() - start) * 1000),
                error=f"{verb} timed out after {e.timeout}s",
            )
        except OSError as e:
            logger.warning("%s %s could not start: %s", verb, entry.package_id, e)
            return ActionOutcome(
                entry=entry,
                action=verb,
                status="failed",
                duration_ms=int((time.monotonic() - start) * 1000),
                error=f"Cannot run {self._manager.name}: {e}",
            )

        outcome = ActionOutcome.from_exit_code(
            entry,
            verb,
            exit_code,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        if outcome.failed:
            logger.warning("%s %s failed (exit %d)", verb, entry.package_id, exit_code)
        return outcome

"""
Reconcile use case — one software menu turn, end to end.

Parses the selection, makes sure the package manager exists, then
toggles every selected entry. A failed bootstrap ends this turn with
an error; it never propagates further up.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from winadmin.adapters.base import PackageManager, PackageManagerUnavailable
from winadmin.core.engine.reconciler import Reconciler, ReconcileReport
from winadmin.core.models.action import ActionOutcome, PackageVerb
from winadmin.core.models.catalog import Catalog, CatalogEntry
from winadmin.core.services.package_actions import PackageActionExecutor, ensure_package_manager
from winadmin.core.services.package_probe import PackageProbe
from winadmin.core.services.selection import SelectionResult, parse_selection

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Result of one reconcile turn."""

    selection: SelectionResult = field(default_factory=SelectionResult)
    report: ReconcileReport | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and (self.report is None or self.report.all_ok)

    def to_dict(self) -> dict:
        result: dict = self.selection.to_dict()
        if self.error:
            result["error"] = self.error
        if self.report:
            result["report"] = self.report.to_dict()
        return result


@dataclass
class CatalogRow:
    """One line of the numbered catalog view."""

    index: int
    entry: CatalogEntry
    installed: bool | None = None   # None = package manager unavailable

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "name": self.entry.display_name,
            "package": self.entry.package_id,
            "installed": self.installed,
        }


def list_catalog(catalog: Catalog, manager: PackageManager | None = None) -> list[CatalogRow]:
    """Numbered catalog rows, with installed markers when the manager is reachable.

    The inventory is read once for the whole listing; this view is
    informational and never bootstraps the package manager.
    """
    installed: set[str] | None = None
    if manager is not None and manager.is_available():
        installed = PackageProbe(manager).installed_ids()

    rows = []
    for index, entry in enumerate(catalog.entries(), start=1):
        flag = None if installed is None else entry.package_id.lower() in installed
        rows.append(CatalogRow(index=index, entry=entry, installed=flag))
    return rows


def run_reconcile(
    text: str,
    catalog: Catalog,
    manager: PackageManager,
    delimiter: str = ",",
    on_start: Callable[[CatalogEntry, PackageVerb], None] | None = None,
    on_outcome: Callable[[ActionOutcome], None] | None = None,
) -> ReconcileResult:
    """Parse ``text`` against ``catalog`` and toggle every selected entry.

    Args:
        text: Raw user selection, e.g. ``"1, 3"``.
        catalog: Catalog whose display order defines the indices.
        manager: Package-manager adapter.
        delimiter: Selection token separator.
        on_start: Called before each install/uninstall.
        on_outcome: Called after each install/uninstall.

    Returns:
        ReconcileResult. ``report`` is None when nothing ran.
    """
    return reconcile_selection(
        parse_selection(text, catalog, delimiter),
        manager,
        on_start=on_start,
        on_outcome=on_outcome,
    )


def reconcile_selection(
    selection: SelectionResult,
    manager: PackageManager,
    on_start: Callable[[CatalogEntry, PackageVerb], None] | None = None,
    on_outcome: Callable[[ActionOutcome], None] | None = None,
) -> ReconcileResult:
    """Toggle an already-parsed selection.

    The package manager is bootstrapped at most once, and only when
    there is something to do.
    """
    result = ReconcileResult(selection=selection)

    for bad in selection.invalid:
        logger.info("Ignoring selection token: %s", bad.message)

    if selection.is_empty:
        logger.debug("Empty selection, nothing to do")
        return result

    try:
        ensure_package_manager(manager)
    except PackageManagerUnavailable as e:
        logger.error("Package manager unavailable: %s", e)
        result.error = str(e)
        return result

    reconciler = Reconciler(
        PackageProbe(manager),
        PackageActionExecutor(manager),
        on_start=on_start,
        on_outcome=on_outcome,
    )
    result.report = reconciler.reconcile(result.selection.entries)
    return result

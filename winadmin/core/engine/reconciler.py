"""
Reconciler — the central toggle loop.

For each selected entry, in order: probe the installed state, then
run the inverse action (uninstall if present, install if absent).
One package-manager call per entry, one entry at a time. A failed
entry is recorded and the loop moves on; there is no rollback.

Flow:
    selection → (probe → install | uninstall) per entry → report
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from winadmin.core.models.action import ActionOutcome, PackageVerb
from winadmin.core.models.catalog import CatalogEntry
from winadmin.core.services.package_actions import PackageActionExecutor
from winadmin.core.services.package_probe import PackageProbe

logger = logging.getLogger(__name__)


@dataclass
class ReconcileReport:
    """Result of reconciling one selection."""

    outcomes: list[ActionOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.failed)

    @property
    def installed(self) -> list[ActionOutcome]:
        return [o for o in self.outcomes if o.action == "install"]

    @property
    def uninstalled(self) -> list[ActionOutcome]:
        return [o for o in self.outcomes if o.action == "uninstall"]

    @property
    def all_ok(self) -> bool:
        return self.failed == 0

    @property
    def status(self) -> str:
        if self.failed == 0:
            return "ok"
        if self.succeeded > 0:
            return "partial"
        return "failed"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


class Reconciler:
    """Drive each selected entry to the opposite of its current state."""

    def __init__(
        self,
        probe: PackageProbe,
        executor: PackageActionExecutor,
        on_start: Callable[[CatalogEntry, PackageVerb], None] | None = None,
        on_outcome: Callable[[ActionOutcome], None] | None = None,
    ):
        self._probe = probe
        self._executor = executor
        self._on_start = on_start
        self._on_outcome = on_outcome

    def reconcile(self, selection: Sequence[CatalogEntry]) -> ReconcileReport:
        """Toggle every entry in ``selection``, strictly in order.

        Args:
            selection: Entries chosen by the user. May be empty.

        Returns:
            ReconcileReport with exactly one outcome per entry.
        """
        report = ReconcileReport()

        for entry in selection:
            verb: PackageVerb = (
                "uninstall" if self._probe.is_installed(entry.package_id) else "install"
            )

            if self._on_start:
                self._on_start(entry, verb)

            if verb == "uninstall":
                outcome = self._executor.uninstall(entry)
            else:
                outcome = self._executor.install(entry)

            report.outcomes.append(outcome)
            if self._on_outcome:
                self._on_outcome(outcome)

        logger.info(
            "Reconciled %d entries: %d ok, %d failed",
            report.total,
            report.succeeded,
            report.failed,
        )
        return report

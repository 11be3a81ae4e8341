"""
Outcome and Receipt models — the execution contract.

Adapters and executors report what happened through these models.
Never exceptions: a failed install or a failed rename is a value,
not a raise.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from winadmin.core.models.catalog import CatalogEntry

PackageVerb = Literal["install", "uninstall"]
OutcomeStatus = Literal["ok", "failed"]


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class ActionOutcome(BaseModel):
    """Result of one install/uninstall within a reconcile batch."""

    entry: CatalogEntry
    action: PackageVerb
    status: OutcomeStatus = "ok"
    exit_code: int | None = None
    duration_ms: int = 0
    error: str | None = None

    @property
    def package_id(self) -> str:
        return self.entry.package_id

    @property
    def display_name(self) -> str:
        return self.entry.display_name

    @property
    def ok(self) -> bool:
        """Whether the action succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the action failed."""
        return self.status == "failed"

    @classmethod
    def from_exit_code(
        cls,
        entry: CatalogEntry,
        action: PackageVerb,
        exit_code: int,
        **kwargs: Any,
    ) -> ActionOutcome:
        """Map a process exit status to an outcome: zero is success."""
        status: OutcomeStatus = "ok" if exit_code == 0 else "failed"
        error = kwargs.pop("error", None)
        if status == "failed" and error is None:
            error = f"{action} exited with code {exit_code}"
        return cls(
            entry=entry,
            action=action,
            status=status,
            exit_code=exit_code,
            error=error,
            **kwargs,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.display_name,
            "package": self.package_id,
            "action": self.action,
            "status": self.status,
            "exit_code": self.exit_code,
            "duration_ms": self.duration_ms,
            "error": self.error,
        }


class Receipt(BaseModel):
    """Result of a host operation (rename, updates, restart).

    The host adapter NEVER raises — failures are captured here.
    """

    operation: str
    status: Literal["ok", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, operation: str, output: str = "", **kwargs: Any) -> Receipt:
        """Create a success receipt."""
        return cls(operation=operation, status="ok", output=output, **kwargs)

    @classmethod
    def failure(cls, operation: str, error: str, **kwargs: Any) -> Receipt:
        """Create a failure receipt."""
        return cls(operation=operation, status="failed", error=error, **kwargs)

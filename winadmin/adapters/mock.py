"""
Mock adapters — test doubles for the package manager and the host.

Used by ``--mock`` and by the test suite to simulate package and host
operations without touching the machine. The mock package manager
keeps an in-memory inventory that successful actions mutate, so a
second pass over the same selection sees the new state.
"""

from __future__ import annotations

from winadmin.adapters.base import HostController, PackageManager, PackageManagerUnavailable
from winadmin.core.models.action import PackageVerb, Receipt


class MockPackageManager(PackageManager):
    """In-memory package manager.

    By default every action succeeds. Individual packages can be
    configured to fail with a given exit code.
    """

    def __init__(
        self,
        installed: list[str] | None = None,
        available: bool = True,
        bootstrap_ok: bool = True,
        adapter_name: str = "mock",
    ):
        self._name = adapter_name
        self._installed: list[str] = list(installed or [])
        self._available = available
        self._bootstrap_ok = bootstrap_ok
        self._failures: dict[str, int] = {}
        self._call_log: list[tuple[PackageVerb, str]] = []
        self.query_count = 0
        self.bootstrap_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def installed(self) -> list[str]:
        """Current in-memory inventory."""
        return list(self._installed)

    @property
    def call_log(self) -> list[tuple[PackageVerb, str]]:
        """Every (verb, package_id) this mock has run."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of install/uninstall invocations."""
        return len(self._call_log)

    def set_failure(self, package_id: str, exit_code: int = 1) -> None:
        """Configure actions on a specific package to fail."""
        self._failures[package_id] = exit_code

    def is_available(self) -> bool:
        return self._available

    def list_installed(self) -> list[str]:
        self.query_count += 1
        return list(self._installed)

    def run_action(
        self,
        verb: PackageVerb,
        package_id: str,
        auto_confirm: bool = True,
    ) -> int:
        self._call_log.append((verb, package_id))

        if package_id in self._failures:
            return self._failures[package_id]

        if verb == "install":
            if package_id not in self._installed:
                self._installed.append(package_id)
        elif package_id in self._installed:
            self._installed.remove(package_id)
        return 0

    def bootstrap(self) -> None:
        self.bootstrap_count += 1
        if not self._bootstrap_ok:
            raise PackageManagerUnavailable("Mock bootstrap failure")
        self._available = True

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()
        self.query_count = 0
        self.bootstrap_count = 0


class MockHostController(HostController):
    """Host double that records calls and never touches the OS."""

    def __init__(self, adapter_name: str = "mock"):
        self._name = adapter_name
        self._failures: dict[str, str] = {}
        self._call_log: list[tuple[str, dict]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[tuple[str, dict]]:
        return self._call_log

    def set_failure(self, operation: str, error: str = "Mock failure") -> None:
        """Configure an operation ('rename', 'update', 'restart') to fail."""
        self._failures[operation] = error

    def rename(self, new_name: str) -> Receipt:
        return self._record("rename", {"new_name": new_name})

    def install_updates(self) -> Receipt:
        return self._record("update", {})

    def restart(self) -> Receipt:
        return self._record("restart", {})

    def _record(self, operation: str, params: dict) -> Receipt:
        self._call_log.append((operation, params))
        if operation in self._failures:
            return Receipt.failure(
                operation=operation,
                error=self._failures[operation],
                metadata={"mock": True, **params},
            )
        return Receipt.success(
            operation=operation,
            output=f"[mock] {operation}",
            metadata={"mock": True, **params},
        )

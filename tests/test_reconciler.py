"""
Tests for the reconcile core — probe, action executor, reconciler.
"""

import subprocess

import pytest

from winadmin.adapters.base import PackageManagerUnavailable
from winadmin.adapters.mock import MockPackageManager
from winadmin.core.engine.reconciler import Reconciler, ReconcileReport
from winadmin.core.models.action import ActionOutcome
from winadmin.core.services.package_actions import PackageActionExecutor, ensure_package_manager
from winadmin.core.services.package_probe import PackageProbe


def _reconciler(manager, **kwargs) -> Reconciler:
    return Reconciler(PackageProbe(manager), PackageActionExecutor(manager), **kwargs)


# ── Probe ───────────────────────────────────────────────────────────


class TestPackageProbe:
    def test_installed(self):
        probe = PackageProbe(MockPackageManager(installed=["googlechrome", "vlc"]))
        assert probe.is_installed("vlc")

    def test_not_installed(self):
        probe = PackageProbe(MockPackageManager(installed=["vlc"]))
        assert not probe.is_installed("googlechrome")

    def test_empty_inventory_means_absent(self):
        assert not PackageProbe(MockPackageManager()).is_installed("vlc")

    def test_case_insensitive(self):
        probe = PackageProbe(MockPackageManager(installed=["GoogleChrome"]))
        assert probe.is_installed("googlechrome")

    def test_exact_id_not_substring(self):
        probe = PackageProbe(MockPackageManager(installed=["vlc-skins"]))
        assert not probe.is_installed("vlc")

    def test_queries_every_time(self):
        manager = MockPackageManager(installed=["vlc"])
        probe = PackageProbe(manager)
        probe.is_installed("vlc")
        probe.is_installed("vlc")
        assert manager.query_count == 2


# ── Executor ────────────────────────────────────────────────────────


class TestPackageActionExecutor:
    def test_install_success(self, catalog):
        manager = MockPackageManager()
        outcome = PackageActionExecutor(manager).install(catalog.get("Chrome"))
        assert outcome.ok
        assert outcome.action == "install"
        assert manager.call_log == [("install", "googlechrome")]

    def test_uninstall_failure(self, catalog):
        manager = MockPackageManager(installed=["vlc"])
        manager.set_failure("vlc", exit_code=1605)
        outcome = PackageActionExecutor(manager).uninstall(catalog.get("VLC"))
        assert outcome.failed
        assert outcome.action == "uninstall"
        assert outcome.exit_code == 1605

    def test_launch_error_is_failure(self, catalog):
        class Broken(MockPackageManager):
            def run_action(self, verb, package_id, auto_confirm=True):
                raise FileNotFoundError("choco")

        outcome = PackageActionExecutor(Broken()).install(catalog.get("VLC"))
        assert outcome.failed
        assert outcome.exit_code is None
        assert "choco" in outcome.error

    def test_timeout_is_failure(self, catalog):
        class Slow(MockPackageManager):
            def run_action(self, verb, package_id, auto_confirm=True):
                raise subprocess.TimeoutExpired(["choco"], 5)

        outcome = PackageActionExecutor(Slow()).install(catalog.get("VLC"))
        assert outcome.failed
        assert "timed out" in outcome.error


class TestEnsurePackageManager:
    def test_available_no_bootstrap(self):
        manager = MockPackageManager(available=True)
        ensure_package_manager(manager)
        assert manager.bootstrap_count == 0

    def test_missing_is_bootstrapped(self):
        manager = MockPackageManager(available=False)
        ensure_package_manager(manager)
        assert manager.bootstrap_count == 1
        assert manager.is_available()

    def test_idempotent(self):
        manager = MockPackageManager(available=False)
        ensure_package_manager(manager)
        ensure_package_manager(manager)
        assert manager.bootstrap_count == 1

    def test_bootstrap_failure_raises(self):
        manager = MockPackageManager(available=False, bootstrap_ok=False)
        with pytest.raises(PackageManagerUnavailable):
            ensure_package_manager(manager)


# ── Reconciler ──────────────────────────────────────────────────────


class TestReconciler:
    def test_empty_selection(self):
        manager = MockPackageManager()
        report = _reconciler(manager).reconcile([])
        assert report.total == 0
        assert manager.call_count == 0
        assert manager.query_count == 0

    def test_absent_is_installed(self, catalog):
        manager = MockPackageManager()
        report = _reconciler(manager).reconcile([catalog.get("VLC")])
        assert report.outcomes[0].action == "install"
        assert manager.installed == ["vlc"]

    def test_present_is_uninstalled(self, catalog):
        manager = MockPackageManager(installed=["googlechrome"])
        report = _reconciler(manager).reconcile([catalog.get("Chrome")])
        outcome = report.outcomes[0]
        assert outcome.action == "uninstall"
        assert outcome.ok
        assert outcome.package_id == "googlechrome"
        assert manager.installed == []

    def test_one_action_per_item(self, catalog):
        manager = MockPackageManager(installed=["vlc"])
        _reconciler(manager).reconcile(catalog.entries())
        assert manager.call_log == [("install", "googlechrome"), ("uninstall", "vlc")]

    def test_failure_does_not_stop_batch(self, catalog):
        manager = MockPackageManager()
        manager.set_failure("googlechrome")
        report = _reconciler(manager).reconcile(catalog.entries())
        assert [o.status for o in report.outcomes] == ["failed", "ok"]
        assert report.status == "partial"
        assert manager.call_count == 2

    def test_duplicate_entries_toggle_twice(self, catalog):
        manager = MockPackageManager()
        chrome = catalog.get("Chrome")
        report = _reconciler(manager).reconcile([chrome, chrome])
        assert [o.action for o in report.outcomes] == ["install", "uninstall"]
        assert manager.installed == []

    def test_callbacks(self, catalog):
        started = []
        finished: list[ActionOutcome] = []
        manager = MockPackageManager(installed=["vlc"])
        _reconciler(
            manager,
            on_start=lambda entry, verb: started.append((entry.display_name, verb)),
            on_outcome=finished.append,
        ).reconcile(catalog.entries())
        assert started == [("Chrome", "install"), ("VLC", "uninstall")]
        assert [o.display_name for o in finished] == ["Chrome", "VLC"]


class TestReconcileReport:
    def _outcome(self, catalog, status):
        return ActionOutcome(entry=catalog.get("VLC"), action="install", status=status)

    def test_empty_is_ok(self):
        report = ReconcileReport()
        assert report.status == "ok"
        assert report.all_ok

    def test_all_failed(self, catalog):
        report = ReconcileReport(outcomes=[self._outcome(catalog, "failed")])
        assert report.status == "failed"

    def test_to_dict(self, catalog):
        report = ReconcileReport(
            outcomes=[self._outcome(catalog, "ok"), self._outcome(catalog, "failed")]
        )
        d = report.to_dict()
        assert d["status"] == "partial"
        assert d["succeeded"] == 1
        assert d["failed"] == 1
        assert len(d["outcomes"]) == 2

"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from winadmin.adapters.mock import MockHostController, MockPackageManager
from winadmin.core.models.catalog import Catalog


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def catalog() -> Catalog:
    """The two-entry catalog used throughout the reconcile scenarios."""
    return Catalog.from_mapping({"Chrome": "googlechrome", "VLC": "vlc"})


@pytest.fixture
def manager() -> MockPackageManager:
    """An empty in-memory package manager."""
    return MockPackageManager()


@pytest.fixture
def host() -> MockHostController:
    return MockHostController()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run from an empty directory so no stray winadmin.yml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

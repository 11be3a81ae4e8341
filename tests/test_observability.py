"""
Tests for logging setup.
"""

import logging

from winadmin.core.observability.logging_config import resolve_level, setup_logging


class TestResolveLevel:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("WINADMIN_LOG_LEVEL", raising=False)
        assert resolve_level() == "WARNING"

    def test_env(self, monkeypatch):
        monkeypatch.setenv("WINADMIN_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"

    def test_flags_beat_env(self, monkeypatch):
        monkeypatch.setenv("WINADMIN_LOG_LEVEL", "INFO")
        assert resolve_level(quiet=True) == "ERROR"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(debug=True, verbose=True) == "DEBUG"


class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "winadmin.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("winadmin.test").debug("probe vlc")
        for h in root.handlers:
            h.flush()
        assert "probe vlc" in log_file.read_text(encoding="utf-8")

        for h in root.handlers:
            h.close()

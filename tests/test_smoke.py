"""
Smoke tests — verify the package is healthy.

- Package imports successfully
- CLI entrypoint responds
- Bundled catalog loads
"""

from click.testing import CliRunner

from winadmin import __version__
from winadmin.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_help(self):
        """CLI --help should exit cleanly with usage info."""
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "winadmin" in result.output

    def test_config_check_command_exists(self, isolated_cwd):
        result = CliRunner().invoke(cli, ["config", "check"])
        assert result.exit_code == 0

    def test_core_package_imports(self):
        """Core sub-packages should be importable."""
        import winadmin.adapters
        import winadmin.core.config
        import winadmin.core.engine
        import winadmin.core.models
        import winadmin.core.observability
        import winadmin.core.services
        import winadmin.core.use_cases
        import winadmin.ui.cli

    def test_bundled_catalog(self):
        """The default catalog ships with the package."""
        from winadmin.core.data import default_catalog

        catalog = default_catalog()
        assert len(catalog) > 0
        assert catalog.lookup_by_index(1).display_name == "Google Chrome"

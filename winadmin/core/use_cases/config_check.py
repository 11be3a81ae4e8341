"""
Config check use case — validate winadmin.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from winadmin.core.config.loader import ConfigError, find_config_file, load_catalog, load_settings
from winadmin.core.models.catalog import Catalog
from winadmin.core.models.settings import AppSettings


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: AppSettings | None = None
    catalog: Catalog | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "package_manager": (
                self.settings.package_manager.executable if self.settings else None
            ),
            "catalog_size": len(self.catalog) if self.catalog is not None else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate configuration and report issues.

    Args:
        config_path: Optional explicit path to winadmin.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    if config_path is None:
        result.warnings.append("No winadmin.yml found; using built-in defaults.")

    try:
        settings = load_settings(config_path)
        result.settings = settings
        catalog = load_catalog(settings)
        result.catalog = catalog
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    if len(catalog) == 0:
        result.warnings.append("Catalog is empty. There is nothing to install.")

    ids = [e.package_id.lower() for e in catalog.entries()]
    dupes = {i for i in ids if ids.count(i) > 1}
    if dupes:
        result.warnings.append(
            f"Package ids listed more than once: {', '.join(sorted(dupes))}"
        )

    result.valid = len(result.errors) == 0
    return result

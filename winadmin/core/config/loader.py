"""
Configuration loader — reads winadmin.yml into settings and a catalog.

Reads YAML, validates against Pydantic schemas, and returns typed
objects. A missing file is not an error: the built-in defaults are
used. A file that exists but cannot be parsed or validated is.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from winadmin.core.models.catalog import Catalog
from winadmin.core.models.settings import AppSettings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "winadmin.yml"


class ConfigError(Exception):
    """Raised when configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for winadmin.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to winadmin.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> AppSettings:
    """Load and validate settings.

    Args:
        path: Explicit path to winadmin.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated AppSettings.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    explicit = path is not None
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found, using built-in defaults", CONFIG_FILE)
        return AppSettings()

    if not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return AppSettings()

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = AppSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return settings


def load_catalog(settings: AppSettings) -> Catalog:
    """Build the catalog declared by the settings.

    Raises:
        ConfigError: If the catalog violates its invariants
            (e.g. duplicate display names).
    """
    try:
        catalog = settings.build_catalog()
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog: {e}") from e

    logger.debug("Catalog has %d entries", len(catalog))
    return catalog

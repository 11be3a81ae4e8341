"""
Static data shipped with winadmin.

The default application catalog lives in ``catalogs/default_catalog.json``
and is used whenever winadmin.yml does not declare its own ``catalog``.

Usage::

    from winadmin.core.data import default_catalog

    catalog = default_catalog()
    catalog.lookup_by_index(1)   # CatalogEntry(display_name='Google Chrome', ...)
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from winadmin.core.models.catalog import Catalog, CatalogEntry

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent


def _load_json(relative_path: str) -> list | dict:
    """Load a JSON file relative to the data directory."""
    path = _DATA_DIR / relative_path
    if not path.exists():
        logger.warning("Data file not found: %s", path)
        return []
    with open(path, encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The built-in application catalog (loaded once per process)."""
    data = _load_json("catalogs/default_catalog.json")
    catalog = Catalog(items=tuple(CatalogEntry.model_validate(item) for item in data))
    logger.debug("Loaded %d default catalog entries", len(catalog))
    return catalog

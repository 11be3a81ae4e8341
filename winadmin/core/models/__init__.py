"""
Domain models — Pydantic types for winadmin.

All models are re-exported here for convenient access:

    from winadmin.core.models import Catalog, CatalogEntry, ActionOutcome, AppSettings
"""

from winadmin.core.models.action import ActionOutcome, PackageVerb, Receipt
from winadmin.core.models.catalog import Catalog, CatalogEntry
from winadmin.core.models.settings import AppSettings, PackageManagerSettings

__all__ = [
    "ActionOutcome",
    "AppSettings",
    "Catalog",
    "CatalogEntry",
    "PackageManagerSettings",
    "PackageVerb",
    "Receipt",
]

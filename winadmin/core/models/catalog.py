"""
Catalog model — the fixed table of installable applications.

A catalog maps human-readable application names to package-manager
identifiers. It is built once per process and handed explicitly to
the selection parser and the reconciler. Order is insertion order:
displayed index N must resolve to the same entry for the whole run.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CatalogEntry(BaseModel):
    """One installable application."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str = Field(alias="name", min_length=1)
    package_id: str = Field(alias="package", min_length=1)

    def __str__(self) -> str:
        return self.display_name


class Catalog(BaseModel):
    """Ordered, immutable collection of catalog entries.

    Display names are the lookup key for selection and reporting,
    so they must be unique.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[CatalogEntry, ...] = ()

    @model_validator(mode="after")
    def _unique_display_names(self) -> Catalog:
        seen: set[str] = set()
        dupes: list[str] = []
        for entry in self.items:
            if entry.display_name in seen and entry.display_name not in dupes:
                dupes.append(entry.display_name)
            seen.add(entry.display_name)
        if dupes:
            raise ValueError(f"Duplicate catalog names: {', '.join(dupes)}")
        return self

    @classmethod
    def from_mapping(cls, mapping: dict[str, str]) -> Catalog:
        """Build a catalog from ``{display_name: package_id}`` (insertion order)."""
        return cls(
            items=tuple(
                CatalogEntry(display_name=name, package_id=pkg)
                for name, pkg in mapping.items()
            )
        )

    def entries(self) -> list[CatalogEntry]:
        """All entries in display order."""
        return list(self.items)

    def lookup_by_index(self, index: int) -> CatalogEntry | None:
        """Resolve a 1-based display index, or None when out of range."""
        if 1 <= index <= len(self.items):
            return self.items[index - 1]
        return None

    def get(self, display_name: str) -> CatalogEntry | None:
        """Look up an entry by display name."""
        for entry in self.items:
            if entry.display_name == display_name:
                return entry
        return None

    def by_package_id(self, package_id: str) -> CatalogEntry | None:
        """Look up the first entry that uses the given package id."""
        wanted = package_id.lower()
        for entry in self.items:
            if entry.package_id.lower() == wanted:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.items)

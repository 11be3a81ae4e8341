"""
Settings model — the validated shape of winadmin.yml.

Every field has a default, so an empty file (or no file at all)
yields a working configuration that manages the built-in catalog
through Chocolatey.

The default `list_args` assume Chocolatey 2.x, where `choco list`
only reports local packages. Chocolatey 1.x queries the remote feed
with the same command; on those hosts set
`list_args: [list, --local-only, --limit-output]`, otherwise every
catalog id looks installed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from winadmin.core.models.catalog import Catalog, CatalogEntry


class PackageManagerSettings(BaseModel):
    """How to reach the package manager."""

    executable: str = "choco"
    list_args: list[str] = Field(default_factory=lambda: ["list", "--limit-output"])
    extra_args: list[str] = Field(default_factory=list)
    bootstrap: bool = True
    timeout: int | None = None      # seconds; None = wait for the process


class AppSettings(BaseModel):
    """Root configuration — loaded from winadmin.yml."""

    package_manager: PackageManagerSettings = Field(default_factory=PackageManagerSettings)
    selection_delimiter: str = ","
    catalog: list[CatalogEntry] | None = None   # None = built-in default table

    @field_validator("selection_delimiter")
    @classmethod
    def _valid_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("selection_delimiter must not be empty")
        # indices are digit runs; a digit delimiter would split them
        if any(ch.isdigit() for ch in value):
            raise ValueError("selection_delimiter cannot contain digits")
        return value

    def build_catalog(self) -> Catalog:
        """Materialize the configured catalog, falling back to the default table."""
        if self.catalog is None:
            from winadmin.core.data import default_catalog

            return default_catalog()
        return Catalog(items=tuple(self.catalog))

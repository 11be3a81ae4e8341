"""
Selection parsing — turn "1, 3, 5" into catalog entries.

Tokens that are not numbers, or that point outside the catalog, are
dropped and reported; they never abort the rest of the batch. Order
is preserved and repeated indices are kept as separate entries.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal

from winadmin.core.models.catalog import Catalog, CatalogEntry

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class InvalidToken:
    """A token that could not be resolved to a catalog entry."""

    token: str
    reason: Literal["not_a_number", "out_of_range"]
    position: int                  # 1-based position of the token in the input

    @property
    def message(self) -> str:
        if self.reason == "out_of_range":
            return f"'{self.token}' is not a valid choice"
        if not self.token:
            return f"Empty choice at position {self.position}"
        return f"'{self.token}' is not a number"

    def to_dict(self) -> dict:
        return {"token": self.token, "reason": self.reason, "position": self.position}


@dataclass
class SelectionResult:
    """Parsed selection: resolved entries plus dropped-token diagnostics."""

    entries: list[CatalogEntry] = field(default_factory=list)
    invalid: list[InvalidToken] = field(default_factory=list)

    @property
    def package_ids(self) -> list[str]:
        return [e.package_id for e in self.entries]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def to_dict(self) -> dict:
        return {
            "selected": [
                {"name": e.display_name, "package": e.package_id} for e in self.entries
            ],
            "invalid": [t.to_dict() for t in self.invalid],
        }


def parse_selection(text: str, catalog: Catalog, delimiter: str = ",") -> SelectionResult:
    """Resolve user input against the catalog's 1-based indexed view.

    Args:
        text: Raw user input, e.g. ``"1, 9, x"``.
        catalog: The catalog whose display order defines the indices.
        delimiter: Token separator.

    Returns:
        SelectionResult with entries in input order and one diagnostic
        per dropped token. Blank input yields an empty result.
    """
    result = SelectionResult()
    if not text or not text.strip():
        return result

    for position, raw in enumerate(text.split(delimiter), start=1):
        token = raw.strip()

        if not _INDEX_RE.match(token):
            result.invalid.append(InvalidToken(token, "not_a_number", position))
            continue

        try:
            index = int(token)
        except ValueError:
            # more digits than int() will convert; no catalog is that long
            index = 0

        entry = catalog.lookup_by_index(index)
        if entry is None:
            result.invalid.append(InvalidToken(token, "out_of_range", position))
            continue

        result.entries.append(entry)

    logger.debug(
        "Parsed selection %r: %d selected, %d invalid",
        text,
        len(result.entries),
        len(result.invalid),
    )
    return result

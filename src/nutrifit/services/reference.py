"""Read-only food and activity catalogs."""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import TypeVar

from nutrifit.domain.nutrition import MacroProfile
from nutrifit.domain.reference import ActivityReference, FoodReference

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

POPULAR_ACTIVITY_NAMES = (
    "Camminata veloce 5-6 km/h",
    "Corsa 8 km/h",
    "Ciclismo generale",
    "Nuoto stile libero moderato",
    "Palestra fitness generale",
    "Yoga Hatha",
    "Calcio partita",
    "Tennis singolo",
    "Aerobica generale",
    "Salire le scale",
)

_Entry = TypeVar("_Entry", FoodReference, ActivityReference)


@dataclass(frozen=True)
class FoodCatalog:
    """Immutable food table with nutrients per 100g."""

    entries: tuple[FoodReference, ...]

    def search(self, query: str, limit: int = 20) -> list[FoodReference]:
        """Return prefix matches then substring matches; empty query matches nothing."""
        needle = query.strip().lower()
        if not needle:
            return []
        return _rank(self.entries, needle, limit)

    def get_by_name(self, name: str) -> FoodReference | None:
        """Return the entry whose name matches case-insensitively."""
        return _find(self.entries, name)

    @property
    def categories(self) -> list[str]:
        return list(dict.fromkeys(entry.category for entry in self.entries))


@dataclass(frozen=True)
class ActivityCatalog:
    """Immutable activity table with MET coefficients."""

    entries: tuple[ActivityReference, ...]

    def search(
        self, query: str, category: str | None = None, limit: int = 20
    ) -> list[ActivityReference]:
        """Search within an optional category; empty query lists the first entries."""
        candidates = (
            self.by_category(category) if category else list(self.entries)
        )
        needle = query.strip().lower()
        if not needle:
            return candidates[: max(limit, 0)]
        return _rank(candidates, needle, limit)

    def get_by_name(self, name: str) -> ActivityReference | None:
        """Return the entry whose name matches case-insensitively."""
        return _find(self.entries, name)

    def by_category(self, category: str) -> list[ActivityReference]:
        """Return every activity in a category, in catalog order."""
        return [entry for entry in self.entries if entry.category == category]

    def popular(self) -> list[ActivityReference]:
        """Return the quick-access activity list."""
        found = (self.get_by_name(name) for name in POPULAR_ACTIVITY_NAMES)
        return [entry for entry in found if entry is not None]

    @property
    def categories(self) -> list[str]:
        return list(dict.fromkeys(entry.category for entry in self.entries))


def _rank(
    entries: Sequence[_Entry], needle: str, limit: int
) -> list[_Entry]:
    prefix = [entry for entry in entries if entry.name.lower().startswith(needle)]
    partial = [
        entry
        for entry in entries
        if needle in entry.name.lower() and not entry.name.lower().startswith(needle)
    ]
    return (prefix + partial)[: max(limit, 0)]


def _find(entries: Sequence[_Entry], name: str) -> _Entry | None:
    wanted = name.strip().lower()
    for entry in entries:
        if entry.name.lower() == wanted:
            return entry
    return None


def parse_food_catalog(rows: list[dict[str, object]]) -> FoodCatalog:
    """Build a food catalog from raw rows."""
    return FoodCatalog(
        entries=tuple(
            FoodReference(
                name=str(row["name"]),
                per_100g=MacroProfile(
                    calories=float(row.get("calories", 0.0)),
                    protein_g=float(row.get("protein", 0.0)),
                    carbs_g=float(row.get("carbs", 0.0)),
                    fat_g=float(row.get("fat", 0.0)),
                    fiber_g=float(row.get("fiber", 0.0)),
                    sugar_g=float(row.get("sugar", 0.0)),
                ),
                category=str(row.get("category", "")),
                source=str(row.get("source", "CREA")),
            )
            for row in rows
        )
    )


def parse_activity_catalog(rows: list[dict[str, object]]) -> ActivityCatalog:
    """Build an activity catalog from raw rows."""
    return ActivityCatalog(
        entries=tuple(
            ActivityReference(
                name=str(row["name"]),
                met=float(row["met"]),
                category=str(row.get("category", "")),
            )
            for row in rows
        )
    )


@cache
def load_food_catalog() -> FoodCatalog:
    """Load the bundled food table once per process."""
    with (_DATA_DIR / "foods.json").open(encoding="utf-8") as handle:
        return parse_food_catalog(json.load(handle))


@cache
def load_activity_catalog() -> ActivityCatalog:
    """Load the bundled activity table once per process."""
    with (_DATA_DIR / "activities.json").open(encoding="utf-8") as handle:
        return parse_activity_catalog(json.load(handle))

"""Reference catalog entries."""

from dataclasses import dataclass

from nutrifit.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class FoodReference:
    """Food with nutrients per 100g."""

    name: str
    per_100g: MacroProfile
    category: str
    source: str = "CREA"


@dataclass(frozen=True)
class ActivityReference:
    """Physical activity with its MET coefficient."""

    name: str
    met: float
    category: str

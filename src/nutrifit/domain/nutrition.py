"""Nutrition domain models."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties away from zero, the single rounding rule for all figures.

    The value is first snapped to 9 decimals so float noise such as
    290.49999999999994 rounds like the intended 290.5.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(round(value, 9))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


@dataclass(frozen=True)
class MacroProfile:
    """Calories and macronutrients for a food portion or total."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float = 0.0
    sugar_g: float = 0.0

    def __add__(self, other: "MacroProfile") -> "MacroProfile":
        return MacroProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sugar_g=self.sugar_g + other.sugar_g,
        )

    def rounded(self) -> "MacroProfile":
        """Return integer calories and macros to one decimal."""
        return MacroProfile(
            calories=round_half_up(self.calories),
            protein_g=round_half_up(self.protein_g, 1),
            carbs_g=round_half_up(self.carbs_g, 1),
            fat_g=round_half_up(self.fat_g, 1),
            fiber_g=round_half_up(self.fiber_g, 1),
            sugar_g=round_half_up(self.sugar_g, 1),
        )


EMPTY_MACROS = MacroProfile(0.0, 0.0, 0.0, 0.0)

"""Food record domain model."""

from dataclasses import dataclass

KJ_PER_KCAL = 4.184


@dataclass(frozen=True)
class Food:
    """Nutrient values for a food item, per 100 g.

    Sodium is in milligrams, energy in kilocalories, everything else in grams.
    """

    name: str
    kcal: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    sugar: float = 0.0
    fiber: float = 0.0
    satfat: float = 0.0
    sodium: float = 0.0

    @property
    def energy_kj(self) -> float:
        """Energy in kilojoules."""
        return self.kcal * KJ_PER_KCAL


def fold_name(text: str) -> str:
    """Return the canonical lowercase form used for name comparisons."""
    return text.lower()

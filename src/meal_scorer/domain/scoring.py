"""Nutrition scoring based on banded point tables.

Every table lists inclusive upper bounds. A value scores the index of the first
bound it does not exceed, or the table length when it exceeds them all, so a
value sitting exactly on a bound takes the lower band.
"""

from dataclasses import dataclass
from enum import StrEnum

from meal_scorer.domain.food import Food

MIN_SCORE = 1
MAX_SCORE = 10

ENERGY_KJ_BANDS = (335, 670, 1005, 1340, 1675, 2010, 2345, 2680, 3015, 3350)
SATFAT_BANDS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
# Irregular tail (31 -> 36 -> 40 -> 45) kept as published.
SUGAR_BANDS = (4.5, 9, 13.5, 18, 22.5, 27, 31, 36, 40, 45)
SODIUM_BANDS = (90, 180, 270, 360, 450, 540, 630, 720, 810, 900)

PROTEIN_BANDS = (1.6, 3.2, 4.8, 6.4, 8.0)
FIBER_BANDS = (0.9, 1.9, 2.8, 3.7, 4.7)


class FeedbackCategory(StrEnum):
    """Qualitative grade derived from a score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    BELOW_AVERAGE = "below average"
    POOR = "poor"


_FEEDBACK_THRESHOLDS = (
    (9, FeedbackCategory.EXCELLENT),
    (7, FeedbackCategory.GOOD),
    (5, FeedbackCategory.MODERATE),
    (3, FeedbackCategory.BELOW_AVERAGE),
)

_FEEDBACK_MESSAGES = {
    FeedbackCategory.EXCELLENT: "Excellent! Very nutritious choice.",
    FeedbackCategory.GOOD: "Good! This is a healthy option.",
    FeedbackCategory.MODERATE: "Moderate. Could be balanced with healthier foods.",
    FeedbackCategory.BELOW_AVERAGE: "Below average. Consider healthier alternatives.",
    FeedbackCategory.POOR: "Poor nutritional value. Try to limit consumption.",
}


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-nutrient points behind a score."""

    energy: int
    satfat: int
    sugar: int
    sodium: int
    protein: int
    fiber: int

    @property
    def negative(self) -> int:
        return self.energy + self.satfat + self.sugar + self.sodium

    @property
    def positive(self) -> int:
        return self.protein + self.fiber


def band_points(value: float, bands: tuple[float, ...]) -> int:
    """Return the band index of value in an inclusive upper-bound table."""
    for points, upper in enumerate(bands):
        if value <= upper:
            return points
    return len(bands)


def energy_kj(food: Food) -> float:
    return food.energy_kj


def breakdown(food: Food) -> ScoreBreakdown:
    """Compute the points each nutrient contributes."""
    return ScoreBreakdown(
        energy=band_points(food.energy_kj, ENERGY_KJ_BANDS),
        satfat=band_points(food.satfat, SATFAT_BANDS),
        sugar=band_points(food.sugar, SUGAR_BANDS),
        sodium=band_points(food.sodium, SODIUM_BANDS),
        protein=band_points(food.protein, PROTEIN_BANDS),
        fiber=band_points(food.fiber, FIBER_BANDS),
    )


def negative_points(food: Food) -> int:
    """Points for energy, saturated fat, sugar and sodium (0-40)."""
    return breakdown(food).negative


def positive_points(food: Food) -> int:
    """Points for protein and fiber (0-10)."""
    return breakdown(food).positive


def score(food: Food) -> int:
    """Return the nutrition score of a food, clamped to 1-10."""
    points = breakdown(food)
    raw = MAX_SCORE - (points.negative - points.positive)
    return max(MIN_SCORE, min(MAX_SCORE, raw))


def feedback_for_score(value: int) -> FeedbackCategory:
    for threshold, category in _FEEDBACK_THRESHOLDS:
        if value >= threshold:
            return category
    return FeedbackCategory.POOR


def feedback(food: Food) -> FeedbackCategory:
    """Return the feedback category for a food's score."""
    return feedback_for_score(score(food))


def feedback_message(category: FeedbackCategory) -> str:
    """Return the user-facing sentence for a feedback category."""
    return _FEEDBACK_MESSAGES[category]

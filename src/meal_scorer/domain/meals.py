"""Domain models for meals."""

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from meal_scorer.domain.food import Food
from meal_scorer.domain.scoring import FeedbackCategory

DEFAULT_SERVING_G = 100.0
MEAL_TOTAL_NAME = "Your Complete Meal"


@dataclass(frozen=True)
class MealItem:
    """A food added to a meal, with nutrients scaled to the serving."""

    food: Food
    grams: float


@dataclass(frozen=True)
class MealSummary:
    """Aggregated meal with its score."""

    items: list[MealItem]
    total: Food
    score: int
    feedback: FeedbackCategory


@dataclass(frozen=True)
class SavedMeal:
    """A meal stored in the history."""

    id: UUID
    name: str
    score: int
    feedback: FeedbackCategory
    items: list[MealItem]
    total: Food
    saved_at: datetime


def scale_food(food: Food, grams: float) -> MealItem:
    """Scale per-100 g nutrients to a serving; non-positive grams mean 100 g."""
    serving = grams if grams > 0 else DEFAULT_SERVING_G
    factor = serving / 100.0
    scaled = replace(
        food,
        kcal=food.kcal * factor,
        protein=food.protein * factor,
        fat=food.fat * factor,
        carbs=food.carbs * factor,
        sugar=food.sugar * factor,
        fiber=food.fiber * factor,
        satfat=food.satfat * factor,
        sodium=food.sodium * factor,
    )
    return MealItem(food=scaled, grams=serving)


def meal_total(items: list[MealItem], name: str = MEAL_TOTAL_NAME) -> Food:
    """Sum nutrients of all items into a single food record."""
    total = Food(name=name)
    for item in items:
        food = item.food
        total = Food(
            name=name,
            kcal=total.kcal + food.kcal,
            protein=total.protein + food.protein,
            fat=total.fat + food.fat,
            carbs=total.carbs + food.carbs,
            sugar=total.sugar + food.sugar,
            fiber=total.fiber + food.fiber,
            satfat=total.satfat + food.satfat,
            sodium=total.sodium + food.sodium,
        )
    return total

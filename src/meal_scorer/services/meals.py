"""Meal session service: build a meal, score it, keep a history."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from meal_scorer.domain.food import Food
from meal_scorer.domain.meals import (
    MealItem,
    MealSummary,
    SavedMeal,
    meal_total,
    scale_food,
)
from meal_scorer.domain.scoring import feedback, score
from meal_scorer.services.hash_index import HashIndex

_logger = logging.getLogger(__name__)


class MealError(Exception):
    """Base error for meal operations."""


class EmptyMealError(MealError):
    """Raised when an operation needs at least one meal item."""


class MealSelectionError(MealError):
    """Raised when a selection index is out of range."""


class MealNotFoundError(MealError):
    """Raised when a saved meal does not exist."""


class MealHistoryRepository(Protocol):
    """Persistence interface for saved meals."""

    def list_meals(self) -> list[SavedMeal]:
        """Return saved meals in the order they were saved."""

    def get_meal(self, meal_id: UUID) -> SavedMeal | None:
        """Return a saved meal by id, if present."""

    def add_meal(self, meal: SavedMeal) -> None:
        """Append a meal to the history."""

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal, returning whether it existed."""


@dataclass
class InMemoryMealHistoryRepository(MealHistoryRepository):
    """Meal history kept for the lifetime of the process."""

    meals: list[SavedMeal] = field(default_factory=list)

    def list_meals(self) -> list[SavedMeal]:
        return list(self.meals)

    def get_meal(self, meal_id: UUID) -> SavedMeal | None:
        for meal in self.meals:
            if meal.id == meal_id:
                return meal
        return None

    def add_meal(self, meal: SavedMeal) -> None:
        self.meals.append(meal)

    def delete_meal(self, meal_id: UUID) -> bool:
        for position, meal in enumerate(self.meals):
            if meal.id == meal_id:
                del self.meals[position]
                return True
        return False


@dataclass
class MealService:
    """Single-user meal session backed by the hash index."""

    hash_index: HashIndex
    repository: MealHistoryRepository
    max_candidates: int = 20
    items: list[MealItem] = field(default_factory=list)

    def candidates(self, query: str) -> list[Food]:
        """Return foods whose name contains the query, capped for selection."""
        return self.hash_index.search_contains(query)[: self.max_candidates]

    def add_item(self, food: Food, grams: float) -> MealItem:
        """Add a food to the meal scaled to the given serving."""
        item = scale_food(food, grams)
        self.items.append(item)
        _logger.info("Added to meal: %s (%.0fg)", food.name, item.grams)
        return item

    def add_from_search(self, query: str, choice: int, grams: float) -> MealItem:
        """Add the food at a 1-based position among the query candidates."""
        options = self.candidates(query)
        if not options:
            raise MealSelectionError(f"No foods found matching '{query}'")
        if choice < 1 or choice > len(options):
            raise MealSelectionError(f"Choice must be between 1 and {len(options)}")
        return self.add_item(options[choice - 1], grams)

    def remove_item(self, index: int) -> MealItem:
        """Remove and return the item at a 0-based position."""
        if index < 0 or index >= len(self.items):
            raise MealSelectionError(f"No meal item at position {index}")
        return self.items.pop(index)

    def clear(self) -> None:
        self.items = []

    def summary(self) -> MealSummary:
        """Aggregate the current meal and score the total."""
        if not self.items:
            raise EmptyMealError("No items in meal")
        total = meal_total(self.items)
        return MealSummary(
            items=list(self.items),
            total=total,
            score=score(total),
            feedback=feedback(total),
        )

    def save(self, name: str) -> SavedMeal:
        """Save the current meal to the history."""
        current = self.summary()
        meal = SavedMeal(
            id=uuid4(),
            name=name,
            score=current.score,
            feedback=current.feedback,
            items=current.items,
            total=current.total,
            saved_at=datetime.now(tz=UTC),
        )
        self.repository.add_meal(meal)
        _logger.info("Meal saved: %s (score=%s)", name, meal.score)
        return meal

    def history(self) -> list[SavedMeal]:
        return self.repository.list_meals()

    def load(self, meal_id: UUID) -> SavedMeal:
        """Replace the current meal with a saved one."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(f"Meal {meal_id} not found")
        self.items = list(meal.items)
        return meal

    def delete(self, meal_id: UUID) -> None:
        if not self.repository.delete_meal(meal_id):
            raise MealNotFoundError(f"Meal {meal_id} not found")

"""JSON file implementation of the meal history."""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from uuid import UUID

from meal_scorer.domain.food import Food
from meal_scorer.domain.meals import MealItem, SavedMeal
from meal_scorer.domain.scoring import FeedbackCategory
from meal_scorer.services.meals import MealHistoryRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonMealHistoryRepository(MealHistoryRepository):
    """Meal history stored as a JSON document, rewritten on every change."""

    path: Path
    _meals: list[SavedMeal] | None = field(default=None, init=False, repr=False)

    def list_meals(self) -> list[SavedMeal]:
        return list(self._load())

    def get_meal(self, meal_id: UUID) -> SavedMeal | None:
        for meal in self._load():
            if meal.id == meal_id:
                return meal
        return None

    def add_meal(self, meal: SavedMeal) -> None:
        self._write([*self._load(), meal])

    def delete_meal(self, meal_id: UUID) -> bool:
        meals = self._load()
        remaining = [meal for meal in meals if meal.id != meal_id]
        if len(remaining) == len(meals):
            return False
        self._write(remaining)
        return True

    def _load(self) -> list[SavedMeal]:
        if self._meals is None:
            if self.path.exists():
                payload = json.loads(self.path.read_text(encoding="utf-8"))
                self._meals = [_parse_meal(row) for row in payload.get("meals", [])]
            else:
                self._meals = []
        return self._meals

    def _write(self, meals: list[SavedMeal]) -> None:
        """Replace the file with meals, then update the cached list."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"meals": [_serialize_meal(meal) for meal in meals]}
        staging = self.path.with_name(f"{self.path.name}.tmp")
        staging.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        staging.replace(self.path)
        self._meals = meals
        _logger.info("Meal history written: %s meals to %s", len(meals), self.path)


def _serialize_meal(meal: SavedMeal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "score": meal.score,
        "feedback": meal.feedback.value,
        "saved_at": meal.saved_at.isoformat(),
        "total": asdict(meal.total),
        "items": [
            {"grams": item.grams, "food": asdict(item.food)} for item in meal.items
        ],
    }


def _parse_food(row: dict[str, object]) -> Food:
    return Food(
        name=str(row.get("name", "")),
        kcal=float(row.get("kcal", 0.0)),
        protein=float(row.get("protein", 0.0)),
        fat=float(row.get("fat", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        sugar=float(row.get("sugar", 0.0)),
        fiber=float(row.get("fiber", 0.0)),
        satfat=float(row.get("satfat", 0.0)),
        sodium=float(row.get("sodium", 0.0)),
    )


def _parse_meal(row: dict[str, object]) -> SavedMeal:
    items_raw = row.get("items") or []
    return SavedMeal(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        score=int(row.get("score", 0)),
        feedback=FeedbackCategory(row.get("feedback", FeedbackCategory.POOR)),
        items=[
            MealItem(food=_parse_food(item["food"]), grams=float(item["grams"]))
            for item in items_raw
        ],
        total=_parse_food(row.get("total") or {}),
        saved_at=datetime.fromisoformat(str(row["saved_at"])),
    )

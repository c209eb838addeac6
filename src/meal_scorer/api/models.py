"""Pydantic models for API request and response payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from meal_scorer.domain.food import Food
from meal_scorer.domain.meals import MealItem, MealSummary, SavedMeal
from meal_scorer.domain.scoring import feedback, feedback_message, score


class FoodOut(BaseModel):
    """Food record with its score."""

    name: str
    kcal: float
    energy_kj: float
    protein: float
    fat: float
    carbs: float
    sugar: float
    fiber: float
    satfat: float
    sodium: float
    score: int
    feedback: str
    feedback_message: str

    @classmethod
    def from_food(cls, food: Food) -> "FoodOut":
        category = feedback(food)
        return cls(
            name=food.name,
            kcal=food.kcal,
            energy_kj=food.energy_kj,
            protein=food.protein,
            fat=food.fat,
            carbs=food.carbs,
            sugar=food.sugar,
            fiber=food.fiber,
            satfat=food.satfat,
            sodium=food.sodium,
            score=score(food),
            feedback=category.value,
            feedback_message=feedback_message(category),
        )


class IndexResults(BaseModel):
    """Results from one index, capped for display."""

    total: int
    micros: float
    foods: list[FoodOut]


class SearchResponse(BaseModel):
    """Search results from both indexes."""

    query: str
    mode: str
    hash_index: IndexResults
    trie_index: IndexResults
    faster: str


class ScoreResponse(BaseModel):
    """Score details for a single food."""

    food: FoodOut
    negative_points: int
    positive_points: int
    points: dict[str, int]


class AddMealItemRequest(BaseModel):
    """Add a food picked from the candidates of a query."""

    query: str = Field(min_length=1)
    choice: int = 1
    grams: float = 100.0


class SaveMealRequest(BaseModel):
    """Name for a saved meal."""

    name: str = Field(min_length=1)


class MealItemOut(BaseModel):
    """Meal item with scaled nutrients."""

    name: str
    grams: float
    kcal: float

    @classmethod
    def from_item(cls, item: MealItem) -> "MealItemOut":
        return cls(name=item.food.name, grams=item.grams, kcal=item.food.kcal)


class MealOut(BaseModel):
    """Current meal with totals and score."""

    items: list[MealItemOut]
    total: FoodOut
    score: int
    feedback: str

    @classmethod
    def from_summary(cls, summary: MealSummary) -> "MealOut":
        return cls(
            items=[MealItemOut.from_item(item) for item in summary.items],
            total=FoodOut.from_food(summary.total),
            score=summary.score,
            feedback=summary.feedback.value,
        )


class SavedMealOut(BaseModel):
    """Saved meal entry in the history."""

    id: UUID
    name: str
    score: int
    feedback: str
    item_count: int
    saved_at: datetime

    @classmethod
    def from_saved(cls, meal: SavedMeal) -> "SavedMealOut":
        return cls(
            id=meal.id,
            name=meal.name,
            score=meal.score,
            feedback=meal.feedback.value,
            item_count=len(meal.items),
            saved_at=meal.saved_at,
        )

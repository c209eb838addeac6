"""Shared test fixtures."""

from pathlib import Path

import pytest

from meal_scorer.config import Settings
from meal_scorer.containers import AppContainer
from meal_scorer.domain.food import Food
from meal_scorer.services.meals import InMemoryMealHistoryRepository, MealService
from meal_scorer.services.search import SearchService

CSV_HEADER = "name,kcal,protein,fat,carbs,sugar,fiber,satfat,sodium"


def make_food(name: str, **nutrients: float) -> Food:
    """Build a food with zero defaults for unspecified nutrients."""
    return Food(name=name, **nutrients)


@pytest.fixture
def foods() -> list[Food]:
    return [
        Food("Apple", 52, 0.3, 0.2, 14, 10, 2.4, 0, 1),
        Food("Apple Pie", 237, 1.9, 11, 34, 16, 1.6, 3.8, 266),
        Food("apple", 48, 0.2, 0.1, 13, 9.5, 2.1, 0, 1),
        Food("Pineapple", 50, 0.5, 0.1, 13, 10, 1.4, 0, 1),
        Food("Banana", 89, 1.1, 0.3, 23, 12, 2.6, 0.1, 1),
        Food("Mac & Cheese", 164, 6.6, 7.8, 17, 1.7, 0.9, 3.5, 355),
        Food("Greek Yogurt 2%", 73, 9.9, 1.9, 3.9, 3.6, 0, 1.2, 34),
        Food("Chicken Breast", 165, 31, 3.6, 0, 0, 0, 1, 74),
    ]


@pytest.fixture
def csv_path(tmp_path: Path, foods: list[Food]) -> Path:
    lines = [CSV_HEADER]
    for food in foods:
        lines.append(
            f'"{food.name}",{food.kcal},{food.protein},{food.fat},{food.carbs},'
            f"{food.sugar},{food.fiber},{food.satfat},{food.sodium}"
        )
    path = tmp_path / "foods.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(csv_path: Path) -> Settings:
    return Settings(data_csv_path=csv_path, hash_bucket_count=101)


@pytest.fixture
def search_service(foods: list[Food]) -> SearchService:
    return SearchService.from_records(foods, bucket_count=101)


@pytest.fixture
def meal_service(search_service: SearchService) -> MealService:
    return MealService(
        hash_index=search_service.hash_index,
        repository=InMemoryMealHistoryRepository(),
    )


@pytest.fixture
def container(
    settings: Settings,
    search_service: SearchService,
    meal_service: MealService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        search_service=search_service,
        meal_service=meal_service,
    )

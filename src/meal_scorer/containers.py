"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_scorer.adapters.csv_food_reader import load_foods
from meal_scorer.adapters.json_meal_history_repository import (
    JsonMealHistoryRepository,
)
from meal_scorer.config import Settings
from meal_scorer.services.meals import (
    InMemoryMealHistoryRepository,
    MealHistoryRepository,
    MealService,
)
from meal_scorer.services.search import SearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    search_service: SearchService
    meal_service: MealService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Loads the food CSV and builds both indexes, so this runs once per process.
    """
    resolved_settings = settings or Settings()
    foods = load_foods(resolved_settings.data_csv_path)
    search_service = SearchService.from_records(
        foods,
        bucket_count=resolved_settings.hash_bucket_count,
        debug=resolved_settings.debug,
    )
    history_repository: MealHistoryRepository
    if resolved_settings.history_path is not None:
        history_repository = JsonMealHistoryRepository(resolved_settings.history_path)
    else:
        history_repository = InMemoryMealHistoryRepository()
    meal_service = MealService(
        hash_index=search_service.hash_index,
        repository=history_repository,
        max_candidates=resolved_settings.max_meal_candidates,
    )

    return AppContainer(
        settings=resolved_settings,
        search_service=search_service,
        meal_service=meal_service,
    )

"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Query, Request, status

from meal_scorer.api.meals import router as meals_router
from meal_scorer.api.models import (
    FoodOut,
    IndexResults,
    ScoreResponse,
    SearchResponse,
)
from meal_scorer.app_logging import configure_logging
from meal_scorer.containers import AppContainer
from meal_scorer.domain.food import Food
from meal_scorer.domain.scoring import breakdown
from meal_scorer.services.search import SearchMode


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Quality Scorer")
    app.state.container = container

    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    def search_foods(
        request: Request,
        q: str = Query(min_length=1),
        mode: SearchMode = SearchMode.CONTAINS,
    ) -> SearchResponse:
        """Search both indexes and compare their timings."""
        state_container: AppContainer = request.app.state.container
        limit = state_container.settings.max_display_results
        comparison = state_container.search_service.compare(q, mode)
        logger.debug("Search %s %r: faster=%s", mode.value, q, comparison.faster)
        return SearchResponse(
            query=comparison.query,
            mode=comparison.mode.value,
            hash_index=_index_results(
                comparison.hash_results, comparison.hash_micros, limit
            ),
            trie_index=_index_results(
                comparison.trie_results, comparison.trie_micros, limit
            ),
            faster=comparison.faster,
        )

    @app.get("/foods/score")
    def score_food(
        request: Request, name: str = Query(min_length=1)
    ) -> ScoreResponse:
        """Return the score breakdown of the first food named exactly `name`."""
        state_container: AppContainer = request.app.state.container
        matches = state_container.search_service.hash_index.search_exact(name)
        if not matches:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No food named '{name}'",
            )
        food = matches[0]
        points = breakdown(food)
        return ScoreResponse(
            food=FoodOut.from_food(food),
            negative_points=points.negative,
            positive_points=points.positive,
            points={
                "energy": points.energy,
                "satfat": points.satfat,
                "sugar": points.sugar,
                "sodium": points.sodium,
                "protein": points.protein,
                "fiber": points.fiber,
            },
        )

    @app.get("/stats")
    def index_stats(request: Request) -> dict[str, object]:
        """Return hash and trie statistics with build timings."""
        state_container: AppContainer = request.app.state.container
        stats = state_container.search_service.stats()
        hash_stats = stats.hash_index
        return {
            "hash_index": {
                "bucket_count": hash_stats.bucket_count,
                "total_items": hash_stats.total_items,
                "non_empty_buckets": hash_stats.non_empty_buckets,
                "load_factor": hash_stats.load_factor,
                "max_chain_length": hash_stats.max_chain_length,
                "build_ms": stats.timings.hash_ms,
            },
            "trie_index": {
                "total_nodes": stats.trie_index.total_nodes,
                "total_items": len(state_container.search_service.trie_index),
                "build_ms": stats.timings.trie_ms,
            },
        }

    return app


def _index_results(foods: list[Food], micros: float, limit: int) -> IndexResults:
    return IndexResults(
        total=len(foods),
        micros=micros,
        foods=[FoodOut.from_food(food) for food in foods[:limit]],
    )

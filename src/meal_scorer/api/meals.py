"""Meal session and history endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status

from meal_scorer.api.models import (
    AddMealItemRequest,
    FoodOut,
    MealItemOut,
    MealOut,
    SavedMealOut,
    SaveMealRequest,
)
from meal_scorer.services.meals import (
    EmptyMealError,
    MealNotFoundError,
    MealSelectionError,
)

if TYPE_CHECKING:
    from meal_scorer.services.meals import MealService

router = APIRouter(tags=["meals"])


def _meal_service(request: Request) -> MealService:
    return request.app.state.container.meal_service


@router.get("/meal")
def current_meal(request: Request) -> MealOut:
    """Return the current meal with its aggregated score."""
    try:
        summary = _meal_service(request).summary()
    except EmptyMealError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return MealOut.from_summary(summary)


@router.get("/meal/candidates")
def meal_candidates(
    request: Request, q: str = Query(min_length=1)
) -> dict[str, list[FoodOut]]:
    """Return foods that can be added for a query, numbered from 1."""
    foods = _meal_service(request).candidates(q)
    return {"candidates": [FoodOut.from_food(food) for food in foods]}


@router.post("/meal/items", status_code=status.HTTP_201_CREATED)
def add_meal_item(payload: AddMealItemRequest, request: Request) -> MealItemOut:
    """Add one of the query candidates to the meal."""
    try:
        item = _meal_service(request).add_from_search(
            payload.query, payload.choice, payload.grams
        )
    except MealSelectionError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return MealItemOut.from_item(item)


@router.delete("/meal/items/{index}")
def remove_meal_item(index: int, request: Request) -> MealItemOut:
    """Remove the meal item at a 0-based position."""
    try:
        item = _meal_service(request).remove_item(index)
    except MealSelectionError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return MealItemOut.from_item(item)


@router.delete("/meal")
def clear_meal(request: Request) -> dict[str, str]:
    _meal_service(request).clear()
    return {"status": "ok"}


@router.post("/meal/save", status_code=status.HTTP_201_CREATED)
def save_meal(payload: SaveMealRequest, request: Request) -> SavedMealOut:
    """Save the current meal to the history."""
    try:
        meal = _meal_service(request).save(payload.name)
    except EmptyMealError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return SavedMealOut.from_saved(meal)


@router.get("/history")
def meal_history(request: Request) -> dict[str, list[SavedMealOut]]:
    """Return saved meals."""
    meals = _meal_service(request).history()
    return {"meals": [SavedMealOut.from_saved(meal) for meal in meals]}


@router.post("/history/{meal_id}/load")
def load_meal(meal_id: UUID, request: Request) -> MealOut:
    """Replace the current meal with a saved one."""
    service = _meal_service(request)
    try:
        service.load(meal_id)
    except MealNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return MealOut.from_summary(service.summary())


@router.delete("/history/{meal_id}")
def delete_meal(meal_id: UUID, request: Request) -> dict[str, str]:
    try:
        _meal_service(request).delete(meal_id)
    except MealNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return {"status": "ok"}

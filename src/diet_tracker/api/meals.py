"""Meal API endpoints, all behind the session cookie."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from diet_tracker.api.models import CreateMealBody, UpdateMealBody  # noqa: TC001
from diet_tracker.api.sessions import require_session_id

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer
    from diet_tracker.domain.models import MealRecord, MealSummary

router = APIRouter(
    prefix="/meals", tags=["meals"], dependencies=[Depends(require_session_id)]
)


@router.get("")
async def list_meals(
    request: Request, session_id: str = Depends(require_session_id)
) -> dict[str, object]:
    """Return the caller's meals, newest date first."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals(session_id)
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.get("/summary")
async def get_summary(
    request: Request, session_id: str = Depends(require_session_id)
) -> dict[str, object]:
    """Return meal counters and the best on-diet day for the caller."""
    container: AppContainer = request.app.state.container
    return serialize_summary(container.meal_service.get_summary(session_id))


@router.get("/{meal_id}")
async def get_meal(meal_id: UUID, request: Request) -> dict[str, object]:
    """Return a single meal by id."""
    container: AppContainer = request.app.state.container
    return {"meal": serialize_meal(container.meal_service.get_meal(meal_id))}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: CreateMealBody,
    request: Request,
    session_id: str = Depends(require_session_id),
) -> Response:
    """Record a meal for the caller."""
    container: AppContainer = request.app.state.container
    container.meal_service.create_meal(
        session_id=session_id,
        name=body.name,
        description=body.description,
        date=body.date,
        time=body.time,
        is_on_diet=body.is_on_diet,
    )
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_meal(
    meal_id: UUID, body: UpdateMealBody, request: Request
) -> Response:
    """Update only the supplied fields of a meal."""
    container: AppContainer = request.app.state.container
    container.meal_service.update_meal(meal_id, body.changes())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_200_OK)
async def delete_meal(meal_id: UUID, request: Request) -> Response:
    """Delete a meal by id."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(meal_id)
    return Response(status_code=status.HTTP_200_OK)


def serialize_meal(meal: MealRecord) -> dict[str, object]:
    """Return the JSON shape of a meal row."""
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "name": meal.name,
        "description": meal.description,
        "date": meal.date,
        "time": meal.time,
        "is_on_diet": meal.is_on_diet,
        "created_at": meal.created_at.isoformat() if meal.created_at else None,
    }


def serialize_summary(summary: MealSummary) -> dict[str, object]:
    """Return the summary payload; a user without on-diet meals gets 0."""
    best = (
        {"dietSequence": summary.best_diet_sequence}
        if summary.best_diet_sequence
        else 0
    )
    return {
        "totalOfMeals": summary.total_of_meals,
        "totalInDiet": summary.total_in_diet,
        "totalOffdiet": summary.total_off_diet,
        "bestDietSequence": best,
    }

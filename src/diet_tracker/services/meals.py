"""Meal logging service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import NotFoundError
from diet_tracker.domain.models import MealRecord, MealSummary
from diet_tracker.services.users import UserService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: UUID) -> list[MealRecord] | None:
        """Return a user's meals ordered by date, newest first."""

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id regardless of owner."""

    def create_meal(  # noqa: PLR0913
        self,
        meal_id: UUID,
        user_id: UUID,
        name: str,
        description: str,
        date: str,
        time: str,
        is_on_diet: bool,
    ) -> MealRecord:
        """Insert a meal row and return it."""

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> None:
        """Write only the given columns of a meal row."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""

    def count_meals(self, user_id: UUID, is_on_diet: bool | None = None) -> int:
        """Count a user's meals, optionally filtered by the diet flag."""

    def best_diet_day_count(self, user_id: UUID) -> int | None:
        """Return the most on-diet meals created on one UTC day, or None."""


@dataclass
class MealService:
    """Service for recording meals and summarising a user's diet."""

    repository: MealRepository
    user_service: UserService

    def list_meals(self, session_id: str) -> list[MealRecord]:
        """Return the session owner's meals, newest date first."""
        user = self.user_service.resolve_session(session_id)
        meals = self.repository.list_meals(user.id)
        if meals is None:
            raise NotFoundError("Diet list not found.")
        return meals

    def get_meal(self, meal_id: UUID) -> MealRecord:
        """Return a meal by id.

        Lookup is by id alone; any authenticated caller can read any meal.
        """
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise NotFoundError("Meal not found.")
        return meal

    def get_summary(self, session_id: str) -> MealSummary:
        """Return meal counters and the best on-diet day for the session owner."""
        user = self.user_service.resolve_session(session_id)
        return MealSummary(
            total_of_meals=self.repository.count_meals(user.id),
            total_in_diet=self.repository.count_meals(user.id, is_on_diet=True),
            total_off_diet=self.repository.count_meals(user.id, is_on_diet=False),
            best_diet_sequence=self.repository.best_diet_day_count(user.id),
        )

    def create_meal(  # noqa: PLR0913
        self,
        session_id: str,
        name: str,
        description: str,
        date: str,
        time: str,
        is_on_diet: bool,
    ) -> MealRecord:
        """Record a meal for the session owner."""
        user = self.user_service.resolve_session(session_id)
        meal = self.repository.create_meal(
            meal_id=uuid4(),
            user_id=user.id,
            name=name,
            description=description,
            date=date,
            time=time,
            is_on_diet=is_on_diet,
        )
        _logger.info("Meal created: id=%s user_id=%s", meal.id, user.id)
        return meal

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> None:
        """Apply a sparse update; omitted fields keep their stored values."""
        self.get_meal(meal_id)
        if not changes:
            return
        self.repository.update_meal(meal_id, changes)
        _logger.info("Meal updated: id=%s fields=%s", meal_id, sorted(changes))

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""
        self.get_meal(meal_id)
        self.repository.delete_meal(meal_id)
        _logger.info("Meal deleted: id=%s", meal_id)

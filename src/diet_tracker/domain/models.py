"""Domain models for the diet tracker."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    session_id: str | None
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealRecord:
    """A meal row owned by a single user."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    date: str
    time: str
    is_on_diet: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealSummary:
    """Aggregate counters for a user's meals."""

    total_of_meals: int
    total_in_diet: int
    total_off_diet: int
    best_diet_sequence: int | None

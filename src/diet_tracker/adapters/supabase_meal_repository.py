"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.models import MealRecord
from diet_tracker.services.meals import MealRepository

_MEAL_COLUMNS = "id, user_id, name, description, date, time, is_on_diet, created_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self, user_id: UUID) -> list[MealRecord] | None:
        """Return a user's meals ordered by date, newest first."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        if response.data is None:
            return None
        return [_parse_meal(row) for row in response.data]

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id regardless of owner."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

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
        response = (
            self.client.table("meals")
            .insert(
                {
                    "id": str(meal_id),
                    "user_id": str(user_id),
                    "name": name,
                    "description": description,
                    "date": date,
                    "time": time,
                    "is_on_diet": is_on_diet,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> None:
        """Write only the given columns of a meal row."""
        self.client.table("meals").update(changes).eq("id", str(meal_id)).execute()

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()

    def count_meals(self, user_id: UUID, is_on_diet: bool | None = None) -> int:
        """Count a user's meals, optionally filtered by the diet flag."""
        query = (
            self.client.table("meals")
            .select("id", count="exact")
            .eq("user_id", str(user_id))
        )
        if is_on_diet is not None:
            query = query.eq("is_on_diet", is_on_diet)
        response = query.execute()
        return int(response.count or 0)

    def best_diet_day_count(self, user_id: UUID) -> int | None:
        """Return the most on-diet meals created on one UTC day, if any."""
        response = self.client.rpc(
            "best_diet_sequence", {"p_user_id": str(user_id)}
        ).execute()
        if response.data is None:
            return None
        return int(response.data)


def _parse_meal(row: dict[str, object]) -> MealRecord:
    created_at_raw = row.get("created_at")
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        date=str(row.get("date", "")),
        time=str(row.get("time", "")),
        is_on_diet=bool(row.get("is_on_diet", False)),
        created_at=(
            datetime.fromisoformat(created_at_raw)
            if isinstance(created_at_raw, str) and created_at_raw
            else None
        ),
    )

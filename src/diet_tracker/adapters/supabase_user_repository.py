"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from supabase import Client

from diet_tracker.domain.models import UserRecord
from diet_tracker.services.users import UserRepository

_USER_COLUMNS = "id, name, email, session_id, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_users(self) -> list[UserRecord]:
        """Return every user row."""
        response = self.client.table("users").select(_USER_COLUMNS).execute()
        return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        return self._first("id", str(user_id))

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        return self._first("email", email)

    def get_by_session_id(self, session_id: str) -> UserRecord | None:
        """Return the first user holding a session identifier, if present."""
        return self._first("session_id", session_id)

    def create_user(self, name: str, email: str, session_id: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "id": str(uuid4()),
                    "name": name,
                    "email": email,
                    "session_id": session_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def _first(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None


def _parse_user(row: dict[str, object]) -> UserRecord:
    created_at_raw = row.get("created_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        session_id=str(row["session_id"]) if row.get("session_id") else None,
        created_at=(
            datetime.fromisoformat(created_at_raw)
            if isinstance(created_at_raw, str) and created_at_raw
            else None
        ),
    )

"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import ConflictError, NotFoundError
from diet_tracker.domain.models import UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def list_users(self) -> list[UserRecord]:
        """Return every user row."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def get_by_session_id(self, session_id: str) -> UserRecord | None:
        """Return the first user holding a session identifier, if present."""

    def create_user(self, name: str, email: str, session_id: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass(frozen=True)
class Registration:
    """Outcome of a successful registration."""

    user: UserRecord
    session_id: str
    issued_session: bool


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        return self.repository.list_users()

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, or None when it does not exist."""
        return self.repository.get_user(user_id)

    def register_user(
        self, name: str, email: str, session_id: str | None = None
    ) -> Registration:
        """Create a user, issuing a session identifier when none is supplied.

        The email check runs first so that a rejected registration never
        issues a session identifier.
        """
        if self.repository.get_by_email(email):
            _logger.info("Registration rejected, email in use")
            raise ConflictError("Email already in use")

        issued = not session_id
        resolved_session_id = session_id or str(uuid4())
        user = self.repository.create_user(
            name=name, email=email, session_id=resolved_session_id
        )
        _logger.info("Registered user: id=%s new_session=%s", user.id, issued)
        return Registration(
            user=user, session_id=resolved_session_id, issued_session=issued
        )

    def resolve_session(self, session_id: str) -> UserRecord:
        """Return the user owning a session identifier."""
        user = self.repository.get_by_session_id(session_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

"""User API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status

from diet_tracker.api.models import CreateUserBody  # noqa: TC001

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer
    from diet_tracker.domain.models import UserRecord

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(request: Request) -> dict[str, object]:
    """Return every registered user."""
    container: AppContainer = request.app.state.container
    users = container.user_service.list_users()
    return {"users": [serialize_user(user) for user in users]}


@router.get("/{user_id}")
async def get_user(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user by id; a missing user yields a null `user`."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    return {"user": serialize_user(user) if user else None}


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_user(body: CreateUserBody, request: Request) -> Response:
    """Register a user and issue a session cookie when the caller has none."""
    container: AppContainer = request.app.state.container
    cookie_name = container.settings.session_cookie_name
    registration = container.user_service.register_user(
        name=body.name,
        email=str(body.email),
        session_id=request.cookies.get(cookie_name),
    )
    response = Response(status_code=status.HTTP_201_CREATED)
    if registration.issued_session:
        response.set_cookie(
            cookie_name,
            registration.session_id,
            max_age=container.settings.session_max_age_seconds,
            path="/",
        )
    return response


def serialize_user(user: UserRecord) -> dict[str, object]:
    """Return the JSON shape of a user row."""
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "session_id": user.session_id,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }

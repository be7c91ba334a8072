"""Session cookie authorization for protected routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from diet_tracker.domain.errors import NotFoundError

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer


async def require_session_id(request: Request) -> str:
    """Return the request's session identifier.

    A request without the cookie is halted before the handler runs, with the
    same response as a cookie that matches no user.
    """
    container: AppContainer = request.app.state.container
    session_id = request.cookies.get(container.settings.session_cookie_name)
    if not session_id:
        raise NotFoundError("User not found.")
    return session_id

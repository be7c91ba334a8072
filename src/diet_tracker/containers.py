"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from diet_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from diet_tracker.config import Settings
from diet_tracker.services.meals import MealService
from diet_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    meal_service: MealService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        user_service=user_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        meal_service=meal_service,
        close_resources=close_resources,
    )

"""Shared test fixtures."""

from collections import Counter
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from diet_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from diet_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer
from diet_tracker.domain.models import MealRecord, UserRecord
from diet_tracker.services.meals import MealRepository, MealService
from diet_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def get_by_session_id(self, session_id: str) -> UserRecord | None:
        for user in self.users.values():
            if user.session_id == session_id:
                return user
        return None

    def create_user(self, name: str, email: str, session_id: str) -> UserRecord:
        if self.get_by_email(email):
            raise RuntimeError("duplicate key value violates unique constraint")
        user = UserRecord(
            id=uuid4(),
            name=name,
            email=email,
            session_id=session_id,
            created_at=datetime.now(tz=UTC),
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)
    updates: list[dict[str, object]] = field(default_factory=list)

    def list_meals(self, user_id: UUID) -> list[MealRecord] | None:
        owned = [meal for meal in self.meals.values() if meal.user_id == user_id]
        return sorted(owned, key=lambda meal: meal.date, reverse=True)

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        return self.meals.get(meal_id)

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
        meal = MealRecord(
            id=meal_id,
            user_id=user_id,
            name=name,
            description=description,
            date=date,
            time=time,
            is_on_diet=is_on_diet,
            created_at=datetime.now(tz=UTC),
        )
        self.meals[meal.id] = meal
        return meal

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> None:
        self.updates.append(changes)
        self.meals[meal_id] = replace(self.meals[meal_id], **changes)

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)

    def count_meals(self, user_id: UUID, is_on_diet: bool | None = None) -> int:
        return sum(
            1
            for meal in self.meals.values()
            if meal.user_id == user_id
            and (is_on_diet is None or meal.is_on_diet == is_on_diet)
        )

    def best_diet_day_count(self, user_id: UUID) -> int | None:
        per_day = Counter(
            meal.created_at.astimezone(UTC).date()
            for meal in self.meals.values()
            if meal.user_id == user_id and meal.is_on_diet and meal.created_at
        )
        return max(per_day.values(), default=None)

    def seed(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        name: str = "Meal",
        date: str = "2024-01-10",
        time: str = "12:00",
        is_on_diet: bool = True,
        created_at: datetime | None = None,
    ) -> MealRecord:
        meal = MealRecord(
            id=uuid4(),
            user_id=user_id,
            name=name,
            description=f"{name} description",
            date=date,
            time=time,
            is_on_diet=is_on_diet,
            created_at=created_at or datetime.now(tz=UTC),
        )
        self.meals[meal.id] = meal
        return meal


@dataclass
class FakeResponse:
    data: object
    count: int | None = None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[object]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    count_queue: list[int] = field(default_factory=list)
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None
    last_count: str | None = None

    def queue(self, action: str, data: object) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args, count: str | None = None) -> "FakeTable":
        self._action = "select"
        self.last_count = count
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        if action == "select" and self.last_count:
            return FakeResponse(data=[], count=self.count_queue.pop(0))
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeRpcCall:
    data: object

    def execute(self) -> FakeResponse:
        return FakeResponse(data=self.data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    rpc_results: dict[str, object] = field(default_factory=dict)
    rpc_calls: list[tuple[str, dict[str, object]]] = field(default_factory=list)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]

    def rpc(self, name: str, params: dict[str, object]) -> FakeRpcCall:
        self.rpc_calls.append((name, params))
        return FakeRpcCall(data=self.rpc_results.get(name))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    meal_repository: InMemoryMealRepository,
) -> AppContainer:
    user_service = UserService(user_repository)
    meal_service = MealService(repository=meal_repository, user_service=user_service)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        meal_service=meal_service,
        close_resources=close_resources,
    )


@pytest.fixture
def supabase_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def supabase_container(
    settings: Settings, supabase_client: FakeSupabaseClient
) -> AppContainer:
    user_service = UserService(SupabaseUserRepository(supabase_client))
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        user_service=user_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        meal_service=meal_service,
        close_resources=close_resources,
    )

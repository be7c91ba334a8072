"""Pydantic models for request bodies."""

from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)


def _require_dash(value: str) -> str:
    if "-" not in value:
        raise ValueError("Date format must be YYYY-MM-DD.")
    return value


def _require_colon(value: str) -> str:
    if ":" not in value:
        raise ValueError("Time format must be HH:mm.")
    return value


MealDate = Annotated[StrictStr, Field(min_length=10), AfterValidator(_require_dash)]
MealTime = Annotated[StrictStr, Field(min_length=5), AfterValidator(_require_colon)]


class CreateUserBody(BaseModel):
    """Registration payload."""

    name: StrictStr
    email: EmailStr


class CreateMealBody(BaseModel):
    """Payload for recording a meal."""

    name: StrictStr
    description: StrictStr
    date: MealDate
    time: MealTime
    is_on_diet: StrictBool


class UpdateMealBody(BaseModel):
    """Payload for a partial meal update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr | None = None
    description: StrictStr | None = None
    date: MealDate | None = None
    time: MealTime | None = None
    is_on_diet: StrictBool | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("Field may be omitted but not null.")
        return value

    def changes(self) -> dict[str, object]:
        """Return only the fields the caller supplied."""
        return self.model_dump(exclude_unset=True)

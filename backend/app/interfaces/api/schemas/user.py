import uuid
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field
from pydantic_core import PydanticCustomError


def required(message: str) -> BeforeValidator:
    def check_present(value: Any) -> Any:
        if value is None or value == "":
            raise PydanticCustomError("missing", message)
        return value

    return BeforeValidator(check_present)


def at_least(minimum: int, message: str) -> AfterValidator:
    def check_minimum(value: int | None) -> int | None:
        if value is not None and value < minimum:
            raise PydanticCustomError("greater_than_equal", message)
        return value

    return AfterValidator(check_minimum)


class UserCreate(BaseModel):
    name: Annotated[str, required("Name is required")] = Field(default=None, validate_default=True)
    email: Annotated[EmailStr, required("Email is required")] = Field(default=None, validate_default=True)
    age: Annotated[int | None, at_least(0, "Age must be >= 0")] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    age: int | None = None
    created_at: datetime

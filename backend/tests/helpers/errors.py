from types import SimpleNamespace

import pytest
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError


class TwoFields(BaseModel):
    a: str
    b: str

    @field_validator("a")
    @classmethod
    def reject_a(cls, value: str) -> str:
        raise PydanticCustomError("invalid", "A invalid")

    @field_validator("b")
    @classmethod
    def reject_b(cls, value: str) -> str:
        raise PydanticCustomError("invalid", "B invalid")


class PostgresUniqueViolation(Exception):
    pgcode = "23505"

    def __init__(self, detail: str) -> None:
        super().__init__("duplicate key value violates unique constraint")
        self.diag = SimpleNamespace(message_detail=detail)


def two_field_validation_error() -> ValidationError:
    with pytest.raises(ValidationError) as exc:
        TwoFields.model_validate({"a": "x", "b": "y"})
    return exc.value

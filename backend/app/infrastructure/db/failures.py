"""Recognize persistence and validation failures by their shape.

The rest of the application never inspects SQLAlchemy, driver or pydantic
exceptions directly. It asks ``describe_failure`` which known shape, if any,
an exception has and works with the returned variant.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound

IDENTIFIER_ERROR_TYPES = frozenset({"uuid_parsing", "uuid_type", "uuid_version"})

SQLITE_CONSTRAINT_UNIQUE = 2067
SQLITE_CONSTRAINT_PRIMARYKEY = 1555
POSTGRES_UNIQUE_VIOLATION = "23505"

_SQLITE_UNIQUE_MESSAGE = re.compile(r"UNIQUE constraint failed: (?P<columns>.+)")
_POSTGRES_KEY_DETAIL = re.compile(r"Key \((?P<columns>[^)]+)\)=")


@dataclass(frozen=True)
class InvalidIdentifier:
    pass


@dataclass(frozen=True)
class FieldValidationFailure:
    messages: tuple[str, ...]


@dataclass(frozen=True)
class UniquenessConflict:
    fields: tuple[str, ...]


@dataclass(frozen=True)
class DocumentNotFound:
    pass


FailureShape = InvalidIdentifier | FieldValidationFailure | UniquenessConflict | DocumentNotFound


def _validation_entries(exc: BaseException) -> list[dict[str, Any]]:
    if isinstance(exc, (PydanticValidationError, RequestValidationError)):
        return [dict(entry) for entry in exc.errors()]
    return []


def _is_identifier_failure(entries: list[dict[str, Any]]) -> bool:
    return bool(entries) and all(entry.get("type") in IDENTIFIER_ERROR_TYPES for entry in entries)


def _as_invalid_identifier(exc: BaseException) -> FailureShape | None:
    if _is_identifier_failure(_validation_entries(exc)):
        return InvalidIdentifier()
    return None


def _as_field_validation(exc: BaseException) -> FailureShape | None:
    entries = _validation_entries(exc)
    if not entries or _is_identifier_failure(entries):
        return None
    return FieldValidationFailure(messages=tuple(str(entry.get("msg", "")) for entry in entries))


def _split_columns(columns: str) -> tuple[str, ...]:
    names = (column.strip().rsplit(".", 1)[-1] for column in columns.split(","))
    return tuple(name for name in names if name)


def _unique_violation_fields(driver_error: Any) -> tuple[str, ...] | None:
    """Return the offending columns, or None when this is not a unique violation."""
    text = str(driver_error)

    sqlite_code = getattr(driver_error, "sqlite_errorcode", None)
    if sqlite_code in (SQLITE_CONSTRAINT_UNIQUE, SQLITE_CONSTRAINT_PRIMARYKEY) or text.startswith("UNIQUE constraint failed"):
        match = _SQLITE_UNIQUE_MESSAGE.search(text)
        return _split_columns(match.group("columns")) if match else ()

    sqlstate = getattr(driver_error, "pgcode", None) or getattr(driver_error, "sqlstate", None)
    if sqlstate == POSTGRES_UNIQUE_VIOLATION:
        diag = getattr(driver_error, "diag", None)
        detail = getattr(diag, "message_detail", None) or text
        match = _POSTGRES_KEY_DETAIL.search(detail)
        return _split_columns(match.group("columns")) if match else ()

    return None


def _as_uniqueness_conflict(exc: BaseException) -> FailureShape | None:
    if not isinstance(exc, IntegrityError):
        return None
    fields = _unique_violation_fields(exc.orig)
    if fields is None:
        return None
    return UniquenessConflict(fields=fields)


def _as_document_not_found(exc: BaseException) -> FailureShape | None:
    if isinstance(exc, NoResultFound):
        return DocumentNotFound()
    return None


_SHAPE_RULES: tuple[Callable[[BaseException], FailureShape | None], ...] = (
    _as_invalid_identifier,
    _as_field_validation,
    _as_uniqueness_conflict,
    _as_document_not_found,
)


def describe_failure(exc: BaseException) -> FailureShape | None:
    """Map an exception onto a known failure shape.

    Every rule is evaluated in order and a later match overwrites an earlier
    one. Returns None when the exception has none of the known shapes.
    """
    shape: FailureShape | None = None
    for rule in _SHAPE_RULES:
        matched = rule(exc)
        if matched is not None:
            shape = matched
    return shape

from fastapi import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.errors import ApplicationError
from app.infrastructure.db.failures import (
    DocumentNotFound,
    FailureShape,
    FieldValidationFailure,
    InvalidIdentifier,
    UniquenessConflict,
    describe_failure,
)

GENERIC_ERROR_MESSAGE = "Something went wrong"
INVALID_IDENTIFIER_MESSAGE = "Invalid ID format"
DOCUMENT_NOT_FOUND_MESSAGE = "Requested document not found"
FIELD_MESSAGE_SEPARATOR = ". "


def error_from_shape(shape: FailureShape) -> ApplicationError:
    if isinstance(shape, InvalidIdentifier):
        return ApplicationError(INVALID_IDENTIFIER_MESSAGE, status.HTTP_400_BAD_REQUEST)
    if isinstance(shape, FieldValidationFailure):
        return ApplicationError(FIELD_MESSAGE_SEPARATOR.join(shape.messages), status.HTTP_400_BAD_REQUEST)
    if isinstance(shape, UniquenessConflict):
        if not shape.fields:
            return ApplicationError("Duplicate field value", status.HTTP_400_BAD_REQUEST)
        return ApplicationError(f"Duplicate field value: {', '.join(shape.fields)}", status.HTTP_400_BAD_REQUEST)
    if isinstance(shape, DocumentNotFound):
        return ApplicationError(DOCUMENT_NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
    raise TypeError(f"Unknown failure shape: {shape!r}")


def classify_error(exc: BaseException, expose_unexpected: bool = False) -> ApplicationError:
    """
    Turn any exception into the ApplicationError sent to the client.

    The input is never modified. Application errors are returned as they are,
    recognized persistence and validation failures become fresh 4xx errors,
    and anything else becomes a non-operational 500. The raw message of such
    a 500 is only kept when ``expose_unexpected`` is set.
    """
    if isinstance(exc, ApplicationError):
        return exc

    shape = describe_failure(exc)
    if shape is not None:
        return error_from_shape(shape)

    if isinstance(exc, StarletteHTTPException):
        return ApplicationError(str(exc.detail), exc.status_code)

    raw_message = str(exc) if expose_unexpected else ""
    return ApplicationError.unexpected(raw_message or GENERIC_ERROR_MESSAGE)

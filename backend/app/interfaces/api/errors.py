from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.errors import ApplicationError
from app.application.services.error_service import GENERIC_ERROR_MESSAGE, classify_error
from app.config import settings
from app.infrastructure.logging import get_logger
from app.interfaces.api.schemas.error import ErrorResponse

logger = get_logger(__name__)


async def respond_with_error(request: Request, exc: Exception) -> JSONResponse:
    """Log a failed request's original error and answer with one JSON error body."""
    logger.error(
        "request_failed",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )

    try:
        error = classify_error(exc, expose_unexpected=settings.expose_error_details)
    except Exception:
        logger.exception("error_classification_failed", error_type=type(exc).__name__)
        error = ApplicationError.unexpected(GENERIC_ERROR_MESSAGE)

    status_code = error.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
    body = ErrorResponse(status_code=status_code, message=error.message or GENERIC_ERROR_MESSAGE)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def register_error_handlers(app: FastAPI) -> None:
    """Send failures raised outside route handlers, such as 405s from routing, through the same responder."""
    app.add_exception_handler(StarletteHTTPException, respond_with_error)
    app.add_exception_handler(RequestValidationError, respond_with_error)
    app.add_exception_handler(Exception, respond_with_error)

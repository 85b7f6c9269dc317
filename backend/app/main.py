from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.infrastructure.db.session import init_db
from app.infrastructure.logging import configure_logging, get_logger, log_requests
from app.interfaces.api.errors import register_error_handlers
from app.interfaces.api.router import api_router

logger = get_logger(__name__)

OPENAPI_DESCRIPTION = """
Demonstration API for request error handling.

Every failure, whether raised synchronously, raised after an `await`, or coming from the
database or request validation, is answered with the same JSON body:

    {"statusCode": <int>, "message": "<text>"}
"""

OPENAPI_TAGS = [
    {"name": "errors", "description": "Routes that fail on purpose, synchronously and asynchronously."},
    {"name": "users", "description": "User records whose validation, uniqueness and lookup failures are classified."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    init_db()
    logger.info("app_startup", app_name=settings.app_name, version=settings.app_version)
    yield
    logger.info("app_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=OPENAPI_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

app.middleware("http")(log_requests)
register_error_handlers(app)

app.include_router(api_router)

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import Request, Response
from structlog.typing import EventDict, WrappedLogger

from app.config import settings


def add_app_context(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("version", settings.app_version)
    return event_dict


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Route structlog through stdlib logging; arguments override the settings."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(format="%(message)s", level=getattr(logging, level_name, logging.INFO))
    render_json = settings.log_json if json_logs is None else json_logs

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if render_json else structlog.dev.ConsoleRenderer(colors=False),
    ]
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


request_logger = get_logger("app.requests")


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """HTTP middleware that logs one line per finished request."""
    started = time.perf_counter()
    structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        request_logger.info("request_completed", status_code=response.status_code, duration_ms=elapsed_ms)
        return response
    finally:
        structlog.contextvars.unbind_contextvars("method", "path")

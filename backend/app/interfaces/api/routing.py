from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.routing import APIRoute

from app.interfaces.api.errors import respond_with_error

RouteHandler = Callable[[Request], Awaitable[Response]]
ForwardFailure = Callable[[Request, Exception], Awaitable[Response]]


def catch_async(handler: RouteHandler, forward: ForwardFailure) -> RouteHandler:
    """
    Wrap a route handler so that its failures are forwarded instead of raised.

    Failures raised before or after the handler suspends take the same path:
    ``forward`` is awaited once with the request and the exception, and its
    response is returned in place of the handler's.
    """

    @wraps(handler)
    async def guarded(request: Request) -> Response:
        try:
            return await handler(request)
        except Exception as exc:
            return await forward(request, exc)

    return guarded


class ForwardingRoute(APIRoute):
    def get_route_handler(self) -> RouteHandler:
        return catch_async(super().get_route_handler(), forward=respond_with_error)


class ForwardingRouter(APIRouter):
    """APIRouter whose own routes are always built as ForwardingRoute."""

    def __init__(self, **kwargs: Any) -> None:
        kwargs["route_class"] = ForwardingRoute
        super().__init__(**kwargs)

    def add_api_route(self, path: str, endpoint: Callable[..., Any], **kwargs: Any) -> None:
        kwargs["route_class_override"] = ForwardingRoute
        super().add_api_route(path, endpoint, **kwargs)

from fastapi import Request, status

from app.application.errors import ApplicationError
from app.interfaces.api.routing import ForwardingRouter

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

router = ForwardingRouter()


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def route_not_found(request: Request):
    raise ApplicationError(f"Can't find {request.url.path} on this server", status.HTTP_404_NOT_FOUND)

import asyncio

from app.interfaces.api.routing import ForwardingRouter

router = ForwardingRouter(tags=["errors"])


async def fail_later(message: str) -> None:
    await asyncio.sleep(0)
    raise RuntimeError(message)


@router.get("/")
def root():
    return {"message": "Hello - error handling demo"}


@router.get("/error-throw")
def error_throw():
    raise RuntimeError("Synchronous error thrown!")


@router.get("/next-error")
async def next_error():
    error = RuntimeError("Error passed to the error handler")
    raise error


@router.get("/async-good")
async def async_good():
    await fail_later("Async failure inside a wrapped handler")

from fastapi import status


class ApplicationError(Exception):
    """Error with an HTTP status and a message that is safe to show to clients."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self._message = message
        self._status_code = status_code
        self._is_operational = True

    @classmethod
    def unexpected(cls, message: str) -> "ApplicationError":
        """Build the 500 used for failures nothing recognized."""
        error = cls(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
        error._is_operational = False
        return error

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def is_operational(self) -> bool:
        return self._is_operational


class NotFoundError(ApplicationError):
    """Raised when an expected entity does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_404_NOT_FOUND)

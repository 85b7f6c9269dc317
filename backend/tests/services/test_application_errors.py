import pytest

from app.application.errors import ApplicationError, NotFoundError


def test_application_error_is_operational():
    """
    Validate explicit construction marks the error as operational.

    1. Construct an ApplicationError with message and status.
    2. Validate message, status and operational flag.
    """
    error = ApplicationError("Bad input", 400)
    assert error.message == "Bad input"
    assert error.status_code == 400
    assert error.is_operational is True
    assert str(error) == "Bad input"


def test_unexpected_builder_marks_non_operational_500():
    """
    Validate the unexpected builder.

    1. Build an unexpected error.
    2. Validate status 500 and operational flag false.
    """
    error = ApplicationError.unexpected("Something went wrong")
    assert error.status_code == 500
    assert error.is_operational is False


def test_not_found_error_is_404():
    """
    Validate NotFoundError is fixed at 404.

    1. Construct a NotFoundError.
    2. Validate it is an ApplicationError with status 404.
    """
    error = NotFoundError("User Not Found")
    assert isinstance(error, ApplicationError)
    assert error.status_code == 404


def test_status_and_message_are_read_only():
    """
    Validate status and message cannot be reassigned.

    1. Construct an ApplicationError.
    2. Try to overwrite status and message.
    3. Validate both assignments fail.
    """
    error = ApplicationError("Bad input", 400)
    with pytest.raises(AttributeError):
        error.status_code = 500
    with pytest.raises(AttributeError):
        error.message = "changed"

"""Error taxonomy for the car API.

Every failure that can reach the HTTP boundary is either a ``CarApiError``
(carrying an ``ErrorKind``) or an unexpected exception, which the boundary
treats as ``ErrorKind.INTERNAL``. Translation to a status code and body
happens once, in ``to_http_error``.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of errors exposed by the API, with their HTTP status."""

    INVALID_INPUT = "invalid_input"
    UNPROCESSABLE = "unprocessable_entity"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    INTERNAL = "internal_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UNPROCESSABLE: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.TIMEOUT: 500,
    ErrorKind.INTERNAL: 500,
}


class CarApiError(Exception):
    """Base error with a kind, a human readable message and optional details."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"code": self.kind.value, "message": self.message}
        if self.details:
            body["details"] = self.details
        return {"error": body}


class InvalidInputError(CarApiError):
    """One or more request fields failed validation."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, violations: dict[str, str], message: str = "invalid input") -> None:
        self.violations = violations
        super().__init__(message, details=violations)


class UnprocessableEntityError(CarApiError):
    """The request body could not be decoded."""

    kind = ErrorKind.UNPROCESSABLE


class NotFoundError(CarApiError):
    """The requested record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ServiceTimeoutError(CarApiError):
    """A service operation exceeded its deadline."""

    kind = ErrorKind.TIMEOUT


def to_http_error(exc: Exception) -> tuple[int, dict[str, Any]]:
    """Map any exception to an HTTP status code and JSON body.

    Unknown exceptions become a generic 500 so driver details never
    reach the client.
    """
    if isinstance(exc, CarApiError):
        return exc.kind.status_code, exc.to_dict()

    fallback = CarApiError("internal server error")
    return fallback.kind.status_code, fallback.to_dict()

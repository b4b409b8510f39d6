"""Required-field validation for car write requests."""

from car_api.dto import CarRequest
from car_api.errors import InvalidInputError

REQUIRED_FIELDS = (
    "make",
    "model",
    "package",
    "color",
    "year",
    "category",
    "mileage",
    "price",
    "identification",
)

BLANK_MESSAGE = "cannot be blank"


def _is_blank(value: object) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return not value


def find_violations(request: CarRequest) -> dict[str, str]:
    """Return field -> message for every required field that is empty or zero.

    Fields are reported in declaration order; an empty dict means valid.
    """
    return {
        name: BLANK_MESSAGE
        for name in REQUIRED_FIELDS
        if _is_blank(getattr(request, name))
    }


def validate_car_request(request: CarRequest) -> None:
    """Raise InvalidInputError if any required field is blank."""
    violations = find_violations(request)
    if violations:
        raise InvalidInputError(violations)

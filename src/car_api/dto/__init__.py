"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request decoding and response serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CarRequest, CreateCarRequest, UpdateCarRequest
from .responses import (
    CarItem,
    CarListResponse,
    CarResponse,
    ErrorBody,
    ErrorResponse,
    HealthCheckResponse,
    MessageResponse,
)

__all__ = [
    "CarRequest",
    "CreateCarRequest",
    "UpdateCarRequest",
    "CarItem",
    "CarResponse",
    "CarListResponse",
    "MessageResponse",
    "ErrorBody",
    "ErrorResponse",
    "HealthCheckResponse",
]

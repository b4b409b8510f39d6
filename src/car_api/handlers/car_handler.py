"""HTTP handlers for car operations.

Handlers convert between DTOs (API contracts) and service calls.
They own decoding, validation and the mapping of unexpected failures;
rendering of ``CarApiError`` into a response is done by the app's
exception handler through ``car_api.errors.to_http_error``.
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from pydantic import ValidationError

from car_api.dto import (
    CarItem,
    CarListResponse,
    CarRequest,
    CarResponse,
    CreateCarRequest,
    HealthCheckResponse,
    MessageResponse,
    UpdateCarRequest,
)
from car_api.errors import CarApiError, NotFoundError, UnprocessableEntityError
from car_api.services import CarService
from car_api.validator import validate_car_request

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=CarRequest)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class CarHandler:
    """HTTP handlers for the /api/v1/cars resource.

    This handler delegates business logic to CarService and handles
    HTTP-specific concerns like:
    - Decoding request bodies (422 on malformed input)
    - Required-field validation (400) before any service call
    - Parsing path ids (404 when not a numeric int64)
    - Converting entities to DTOs

    Example:
        ```python
        handler = CarHandler(car_service=service)

        @router.get("/cars/{car_id}", response_model=CarResponse)
        async def get_car(car_id: str):
            return await handler.get_car(car_id)
        ```
    """

    def __init__(self, car_service: CarService) -> None:
        """Initialize the car handler.

        Args:
            car_service: The car service for business logic (required).
        """
        self._cars = car_service

    @staticmethod
    def _parse_id(raw_id: str) -> int:
        try:
            car_id = int(raw_id)
        except ValueError as e:
            raise NotFoundError("car not found") from e
        # ids are BIGSERIAL; anything outside int64 cannot exist
        if not INT64_MIN <= car_id <= INT64_MAX:
            raise NotFoundError("car not found")
        return car_id

    @staticmethod
    def _decode(body: bytes, request_type: type[R]) -> R:
        try:
            request = request_type.model_validate_json(body or b"")
        except ValidationError as e:
            details = {
                ".".join(str(part) for part in error["loc"]) or "body": error["msg"]
                for error in e.errors()
            }
            raise UnprocessableEntityError("malformed request body", details=details) from e
        validate_car_request(request)
        return request

    async def _call(self, operation: str, work: Awaitable[T]) -> T:
        try:
            return await work
        except CarApiError:
            raise
        except Exception as e:
            logger.exception("Unexpected error during %s", operation)
            raise CarApiError(f"failed to {operation}") from e

    async def create_car(self, body: bytes) -> MessageResponse:
        """Handle POST /api/v1/cars requests."""
        request = self._decode(body, CreateCarRequest)
        car = await self._call("create car", self._cars.create_car(request))
        logger.info("Created car id=%s", car.id)
        return MessageResponse(message="car created")

    async def get_car(self, raw_id: str) -> CarResponse:
        """Handle GET /api/v1/cars/{id} requests."""
        car_id = self._parse_id(raw_id)
        car = await self._call("get car", self._cars.get_car(car_id))
        return CarResponse(data=CarItem.model_validate(car))

    async def list_cars(self) -> CarListResponse:
        """Handle GET /api/v1/cars requests."""
        cars = await self._call("list cars", self._cars.list_cars())
        return CarListResponse(data=[CarItem.model_validate(car) for car in cars])

    async def update_car(self, raw_id: str, body: bytes) -> MessageResponse:
        """Handle PUT /api/v1/cars/{id} requests (full replace)."""
        car_id = self._parse_id(raw_id)
        request = self._decode(body, UpdateCarRequest)
        await self._call("update car", self._cars.update_car(car_id, request))
        logger.info("Updated car id=%s", car_id)
        return MessageResponse(message="car updated")

    async def delete_car(self, raw_id: str) -> MessageResponse:
        """Handle DELETE /api/v1/cars/{id} requests."""
        car_id = self._parse_id(raw_id)
        await self._call("delete car", self._cars.delete_car(car_id))
        logger.info("Deleted car id=%s", car_id)
        return MessageResponse(message="car deleted")

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        checks = await self._cars.is_healthy()
        healthy = all(checks.values())
        return HealthCheckResponse(
            status="healthy" if healthy else "unhealthy",
            database=checks["database"],
            cache=checks["cache"],
        )

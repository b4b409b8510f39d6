"""Routes for the /api/v1/cars resource."""

from fastapi import APIRouter, Request

from car_api.api.dependencies import HandlerDep
from car_api.dto import (
    CarListResponse,
    CarRequest,
    CarResponse,
    ErrorResponse,
    MessageResponse,
)

router = APIRouter(prefix="/api/v1", tags=["cars"])

_WRITE_ERRORS = {
    400: {"model": ErrorResponse, "description": "A required field is blank"},
    422: {"model": ErrorResponse, "description": "Malformed request body"},
    500: {"model": ErrorResponse, "description": "Unexpected failure"},
}
_READ_ERRORS = {
    404: {"model": ErrorResponse, "description": "Car not found"},
    500: {"model": ErrorResponse, "description": "Unexpected failure"},
}

# The body is decoded by the handler, so FastAPI only documents its schema.
_CAR_BODY = {"requestBody": {"content": {"application/json": {"schema": CarRequest.model_json_schema()}}}}


@router.post("/cars", response_model=MessageResponse, responses=_WRITE_ERRORS, openapi_extra=_CAR_BODY)
async def create_car(request: Request, handler: HandlerDep) -> MessageResponse:
    """Create a car."""
    return await handler.create_car(await request.body())


@router.get("/cars/{car_id}", response_model=CarResponse, responses=_READ_ERRORS)
async def get_car(car_id: str, handler: HandlerDep) -> CarResponse:
    """Get a car by id."""
    return await handler.get_car(car_id)


@router.get("/cars", response_model=CarListResponse, responses={500: _READ_ERRORS[500]})
async def list_cars(handler: HandlerDep) -> CarListResponse:
    """List all cars (served from a 30s cache when warm)."""
    return await handler.list_cars()


@router.put(
    "/cars/{car_id}",
    response_model=MessageResponse,
    responses={**_WRITE_ERRORS, **_READ_ERRORS},
    openapi_extra=_CAR_BODY,
)
async def update_car(car_id: str, request: Request, handler: HandlerDep) -> MessageResponse:
    """Replace every field of a car."""
    return await handler.update_car(car_id, await request.body())


@router.delete("/cars/{car_id}", response_model=MessageResponse, responses=_READ_ERRORS)
async def delete_car(car_id: str, handler: HandlerDep) -> MessageResponse:
    """Delete a car."""
    return await handler.delete_car(car_id)

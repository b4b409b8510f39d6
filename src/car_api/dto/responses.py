"""Response DTOs for API endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CarItem(BaseModel):
    """Car as exposed over HTTP."""

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())

    id: int
    make: str
    model: str
    package: str
    color: str
    year: int
    category: str
    mileage: int
    price: int
    identification: str
    created_at: datetime
    updated_at: datetime


class CarResponse(BaseModel):
    """Response DTO for GET /api/v1/cars/{id}."""

    data: CarItem


class CarListResponse(BaseModel):
    """Response DTO for GET /api/v1/cars."""

    data: list[CarItem] = Field(default_factory=list)


class MessageResponse(BaseModel):
    """Acknowledgement for create, update and delete."""

    message: str = Field(..., description="Human-readable status message")


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-2xx response."""

    error: ErrorBody


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database: bool = Field(..., description="Whether the relational store is reachable")
    cache: bool = Field(..., description="Whether the cache backend is reachable")

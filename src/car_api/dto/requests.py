"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

# Bounds of the PostgreSQL INTEGER columns holding year, mileage and price
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class CarRequest(BaseModel):
    """Request body for creating or replacing a car.

    Missing fields decode to their zero value so the validator can report
    them as blank. Decoding is strict: a string, float or boolean where an
    integer is expected fails decoding, as does an integer outside the 32-bit
    range of the integer columns.
    """

    model_config = ConfigDict(extra="ignore", strict=True, protected_namespaces=())

    make: str = Field("", description="Manufacturer, e.g. Toyota")
    model: str = Field("", description="Model name, e.g. Corolla")
    package: str = Field("", description="Trim or package, e.g. LE")
    color: str = Field("", description="Exterior color")
    year: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Model year")
    category: str = Field("", description="Body category, e.g. Sedan")
    mileage: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Odometer reading")
    price: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Asking price")
    identification: str = Field("", description="VIN-like identification string")


class CreateCarRequest(CarRequest):
    """Request DTO for POST /api/v1/cars."""


class UpdateCarRequest(CarRequest):
    """Request DTO for PUT /api/v1/cars/{id} (full replace)."""

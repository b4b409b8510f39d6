"""Car domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CarEntity:
    """Domain entity for a car record.

    ``id`` is assigned by the relational store on insert and is ``0`` until
    then. ``created_at`` and ``updated_at`` are stamped by the service.

    Attributes:
        id: Store-assigned identifier
        make: Manufacturer, e.g. "Toyota"
        model: Model name, e.g. "Corolla"
        package: Trim/package, e.g. "LE"
        color: Exterior color
        year: Model year
        category: Body category, e.g. "Sedan"
        mileage: Odometer reading
        price: Asking price
        identification: VIN-like identification string
        created_at: When the record was created
        updated_at: When the record was last replaced
    """

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

"""Car repository protocol.

Defines the durable CRUD contract for car records keyed by numeric ID.
"""

from typing import Protocol, runtime_checkable

from car_api.entities import CarEntity


@runtime_checkable
class CarRepository(Protocol):
    """Protocol for the relational store holding car records.

    Implementations raise ``NoRowsError`` from ``get_by_id`` when the record
    is absent and ``RowsAffectedError`` from ``update``/``delete`` when the
    write touched anything other than exactly one row. Every other driver
    error propagates unchanged.
    """

    async def create(self, car: CarEntity) -> CarEntity:
        """Insert a new record.

        Args:
            car: The car to insert; its ``id`` is ignored, timestamps are stored verbatim

        Returns:
            The car with the store-assigned id
        """
        ...

    async def get_by_id(self, car_id: int) -> CarEntity:
        """Fetch one record.

        Raises:
            NoRowsError: If no record has this id
        """
        ...

    async def fetch(self) -> list[CarEntity]:
        """Return all records in the store's natural order."""
        ...

    async def update(self, car: CarEntity) -> None:
        """Replace every mutable field of the record matching ``car.id``.

        Raises:
            RowsAffectedError: If the affected-row count is not exactly 1
        """
        ...

    async def delete(self, car_id: int) -> None:
        """Remove the record matching ``car_id``.

        Raises:
            RowsAffectedError: If the affected-row count is not exactly 1
        """
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable."""
        ...

"""PostgreSQL implementation of CarRepository.

Uses an asyncpg connection pool and positional ($n) parameters.
"""

import logging
from dataclasses import replace

import asyncpg

from car_api.config import create_db_pool
from car_api.entities import CarEntity

from .errors import NoRowsError, RowsAffectedError

logger = logging.getLogger(__name__)

CAR_COLUMNS = (
    "id, make, model, package, color, mileage, price, category, year, "
    "identification, created_at, updated_at"
)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS cars (
    id BIGSERIAL PRIMARY KEY,
    make TEXT NOT NULL,
    model TEXT NOT NULL,
    package TEXT NOT NULL,
    color TEXT NOT NULL,
    mileage INTEGER NOT NULL,
    price INTEGER NOT NULL,
    category TEXT NOT NULL,
    year INTEGER NOT NULL,
    identification TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL
)
"""


def _affected_rows(status: str) -> int:
    """Extract the row count from a command tag such as ``UPDATE 1``."""
    return int(status.rsplit(" ", 1)[-1])


def _to_entity(record: asyncpg.Record) -> CarEntity:
    return CarEntity(
        id=record["id"],
        make=record["make"],
        model=record["model"],
        package=record["package"],
        color=record["color"],
        year=record["year"],
        category=record["category"],
        mileage=record["mileage"],
        price=record["price"],
        identification=record["identification"],
        created_at=record["created_at"],
        updated_at=record["updated_at"],
    )


class PostgresCarRepository:
    """asyncpg implementation of the CarRepository protocol.

    This class satisfies the protocol through structural typing - no
    explicit inheritance needed. Driver errors are not wrapped.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        """Initialize the repository.

        Args:
            pool: asyncpg connection pool (required).
        """
        self._pool = pool

    @classmethod
    async def create_from_settings(cls) -> "PostgresCarRepository":
        """Build a repository around a fresh pool configured from settings."""
        pool = await create_db_pool()
        return cls(pool)

    async def ensure_schema(self) -> None:
        """Create the cars table if it does not exist."""
        await self._pool.execute(CREATE_TABLE_SQL)
        logger.info("Ensured table exists: cars")

    async def create(self, car: CarEntity) -> CarEntity:
        query = (
            "INSERT INTO cars (make, model, package, color, mileage, price, category, year, "
            "identification, created_at, updated_at) "
            "VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11) RETURNING id"
        )
        car_id = await self._pool.fetchval(
            query,
            car.make,
            car.model,
            car.package,
            car.color,
            car.mileage,
            car.price,
            car.category,
            car.year,
            car.identification,
            car.created_at,
            car.updated_at,
        )
        return replace(car, id=car_id)

    async def get_by_id(self, car_id: int) -> CarEntity:
        query = f"SELECT {CAR_COLUMNS} FROM cars WHERE id = $1"
        record = await self._pool.fetchrow(query, car_id)
        if record is None:
            raise NoRowsError()
        return _to_entity(record)

    async def fetch(self) -> list[CarEntity]:
        query = f"SELECT {CAR_COLUMNS} FROM cars"
        records = await self._pool.fetch(query)
        return [_to_entity(record) for record in records]

    async def update(self, car: CarEntity) -> None:
        query = (
            "UPDATE cars SET make = $1, model = $2, package = $3, color = $4, mileage = $5, "
            "price = $6, category = $7, year = $8, identification = $9, updated_at = $10 "
            "WHERE id = $11"
        )
        status = await self._pool.execute(
            query,
            car.make,
            car.model,
            car.package,
            car.color,
            car.mileage,
            car.price,
            car.category,
            car.year,
            car.identification,
            car.updated_at,
            car.id,
        )
        affected = _affected_rows(status)
        if affected != 1:
            raise RowsAffectedError(affected)

    async def delete(self, car_id: int) -> None:
        status = await self._pool.execute("DELETE FROM cars WHERE id = $1", car_id)
        affected = _affected_rows(status)
        if affected != 1:
            raise RowsAffectedError(affected)

    async def health_check(self) -> bool:
        """Check if PostgreSQL is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return await self._pool.fetchval("SELECT 1") == 1
        except Exception:
            logger.warning("PostgreSQL health check failed", exc_info=True)
            return False

    async def close(self) -> None:
        """Close the underlying pool."""
        await self._pool.close()

    @property
    def pool(self) -> asyncpg.Pool:
        """Get the asyncpg pool."""
        return self._pool

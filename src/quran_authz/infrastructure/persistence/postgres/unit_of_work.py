"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from quran_authz.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from quran_authz.infrastructure.persistence.postgres.resource_repository import (
    PostgresResourceRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one read-only transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._resources = PostgresResourceRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        try:
            if self._conn:
                await self._conn.rollback()
        finally:
            if self._conn_cm:
                await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def resources(self) -> PostgresResourceRepository:
        return self._resources


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    The engine never writes, so every unit of work ends in a rollback.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with PostgresUnitOfWork(pool) as uow:
            yield uow

    return factory

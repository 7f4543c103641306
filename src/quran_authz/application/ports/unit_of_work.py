"""Unit of Work port - read-only transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from quran_authz.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from quran_authz.application.ports.repositories.resource_repository import (
    ResourceRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - one connection, repositories bound to it."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def resources(self) -> ResourceRepository: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...

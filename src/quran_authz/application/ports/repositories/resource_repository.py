"""Resource repository port."""

from typing import Protocol
from uuid import UUID

from quran_authz.domain.entities import ResourceRecord
from quran_authz.domain.value_objects import ResourceKind


class ResourceRepository(Protocol):
    """Port for reading attribute snapshots of stored resources."""

    async def get(self, kind: ResourceKind, resource_id: UUID) -> ResourceRecord | None: ...

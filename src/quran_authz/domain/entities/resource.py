"""Resource record - attribute snapshot of one stored resource."""

from dataclasses import dataclass
from uuid import UUID

from quran_authz.domain.value_objects import ResourceKind


@dataclass(frozen=True)
class ResourceRecord:
    """Attributes of one resource instance; None where not stored."""

    kind: ResourceKind
    id: UUID
    owner_id: UUID | None = None
    creator_id: UUID | None = None
    language: str | None = None
    number: int | None = None
    bismillah_status: bool | None = None

"""Permission entities - subject/object/action grants with conditions."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Permission:
    """Grant of `action` on `object` to `subject`."""

    id: int
    external_id: UUID
    creator_id: int
    subject: str
    object: str
    action: str
    created_at: datetime
    updated_at: datetime


@dataclass
class PermissionCondition:
    """Extra predicate on a Permission: attribute `name` must equal `value`."""

    id: int
    external_id: UUID
    permission_id: int
    creator_id: int
    name: str
    value: str
    created_at: datetime
    updated_at: datetime


@dataclass
class PermissionWithConditions:
    """Permission loaded together with its conditions."""

    permission: Permission
    conditions: list[PermissionCondition] = field(default_factory=list)

    @property
    def is_unconditional(self) -> bool:
        return not self.conditions

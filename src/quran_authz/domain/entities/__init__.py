"""Domain entities."""

from quran_authz.domain.entities.permission import (
    Permission,
    PermissionCondition,
    PermissionWithConditions,
)
from quran_authz.domain.entities.resource import ResourceRecord
from quran_authz.domain.entities.subject import Subject

__all__ = [
    "Permission",
    "PermissionCondition",
    "PermissionWithConditions",
    "ResourceRecord",
    "Subject",
]

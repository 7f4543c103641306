"""Repository ports."""

from quran_authz.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from quran_authz.application.ports.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "PermissionRepository",
    "ResourceRepository",
]

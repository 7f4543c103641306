"""Application ports - interfaces for external adapters."""

from quran_authz.application.ports.attribute_resolver import AttributeResolver
from quran_authz.application.ports.permission_checker import PermissionChecker
from quran_authz.application.ports.permission_store import PermissionStore
from quran_authz.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AttributeResolver",
    "PermissionChecker",
    "PermissionStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]

"""Permission store port - candidate permission lookup."""

from collections.abc import Collection
from typing import Protocol

from quran_authz.domain.entities import PermissionWithConditions


class PermissionStore(Protocol):
    """Port for loading permissions that could match a request.

    Failures surface as PersistenceFailure.
    """

    async def load_candidates(
        self,
        subjects: Collection[str],
        object: str,
        actions: Collection[str],
    ) -> list[PermissionWithConditions]: ...

"""Permission repository port."""

from typing import Protocol

from quran_authz.domain.entities import PermissionWithConditions


class PermissionRepository(Protocol):
    """Port for reading permissions and their conditions."""

    async def list_candidates(
        self,
        subjects: list[str],
        object: str,
        actions: list[str],
    ) -> list[PermissionWithConditions]: ...

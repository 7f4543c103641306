"""Permission store backed by the unit of work."""

import psycopg

from quran_authz.domain.entities import PermissionWithConditions
from quran_authz.domain.exceptions import PersistenceFailure


class UnitOfWorkPermissionStore:
    """Loads candidate permissions in one read-only unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def load_candidates(
        self,
        subjects,
        object: str,
        actions,
    ) -> list[PermissionWithConditions]:
        try:
            async with self._uow_factory() as uow:
                return await uow.permissions.list_candidates(
                    list(subjects), object, list(actions)
                )
        except (psycopg.Error, OSError) as exc:
            raise PersistenceFailure(f"Permission query failed: {exc}") from exc

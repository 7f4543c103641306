"""PostgreSQL permission repository implementation."""

from psycopg import AsyncConnection

from quran_authz.domain.entities import (
    Permission,
    PermissionCondition,
    PermissionWithConditions,
)


class PostgresPermissionRepository:
    """Reads app_permissions and app_permission_conditions."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_candidates(
        self,
        subjects: list[str],
        object: str,
        actions: list[str],
    ) -> list[PermissionWithConditions]:
        """Permissions for any of the subjects and actions on object, with conditions."""
        cur = await self._conn.execute(
            "SELECT id, uuid, creator_user_id, subject, object, action, created_at, updated_at "
            "FROM app_permissions "
            "WHERE subject = ANY(%s) AND object = %s AND action = ANY(%s) "
            "ORDER BY id",
            (list(subjects), object, list(actions)),
        )
        rows = await cur.fetchall()
        candidates = {
            r[0]: PermissionWithConditions(
                permission=Permission(
                    id=r[0],
                    external_id=r[1],
                    creator_id=r[2],
                    subject=r[3],
                    object=r[4],
                    action=r[5],
                    created_at=r[6],
                    updated_at=r[7],
                )
            )
            for r in rows
        }
        if not candidates:
            return []

        cur = await self._conn.execute(
            "SELECT id, uuid, permission_id, creator_user_id, name, value, created_at, updated_at "
            "FROM app_permission_conditions WHERE permission_id = ANY(%s) ORDER BY id",
            (list(candidates),),
        )
        for r in await cur.fetchall():
            candidates[r[2]].conditions.append(
                PermissionCondition(
                    id=r[0],
                    external_id=r[1],
                    permission_id=r[2],
                    creator_id=r[3],
                    name=r[4],
                    value=r[5],
                    created_at=r[6],
                    updated_at=r[7],
                )
            )
        return list(candidates.values())

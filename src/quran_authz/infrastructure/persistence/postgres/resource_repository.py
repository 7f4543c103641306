"""PostgreSQL resource repository - attribute snapshots of content tables.

Every query returns (owner_id, creator_id, language, number,
bismillah_status) for the resource whose public uuid is given. Creator ids
are stored as app_users.id and exposed as the creator's account uuid.
"""

from uuid import UUID

from psycopg import AsyncConnection

from quran_authz.domain.entities import ResourceRecord
from quran_authz.domain.value_objects import ResourceKind

_CREATOR_JOIN = (
    "JOIN app_users cu ON cu.id = t.creator_user_id "
    "JOIN app_accounts ca ON ca.id = cu.account_id "
)

_QUERIES: dict[ResourceKind, str] = {
    ResourceKind.ACCOUNT: (
        "SELECT t.uuid, NULL, NULL, NULL, NULL FROM app_accounts t WHERE t.uuid = %s"
    ),
    ResourceKind.USER: (
        "SELECT a.uuid, NULL, t.language, NULL, NULL FROM app_users t "
        "JOIN app_accounts a ON a.id = t.account_id WHERE a.uuid = %s"
    ),
    ResourceKind.ORGANIZATION: (
        "SELECT oa.uuid, ca.uuid, NULL, NULL, NULL FROM app_organizations t "
        "JOIN app_accounts a ON a.id = t.account_id "
        "JOIN app_accounts oa ON oa.id = t.owner_account_id "
        + _CREATOR_JOIN
        + "WHERE a.uuid = %s"
    ),
    ResourceKind.MUSHAF: (
        "SELECT NULL, ca.uuid, NULL, NULL, NULL FROM mushafs t "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
    ResourceKind.QURAN_SURAH: (
        "SELECT NULL, ca.uuid, NULL, t.number, t.bismillah_status FROM quran_surahs t "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
    ResourceKind.QURAN_AYAH: (
        "SELECT NULL, ca.uuid, NULL, t.ayah_number, NULL FROM quran_ayahs t "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
    ResourceKind.QURAN_WORD: (
        "SELECT NULL, ca.uuid, NULL, NULL, NULL FROM quran_words t "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
    ResourceKind.TRANSLATION: (
        "SELECT ta.uuid, ca.uuid, t.language, NULL, NULL FROM translations t "
        "JOIN app_accounts ta ON ta.id = t.translator_account_id "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
    ResourceKind.TRANSLATION_TEXT: (
        "SELECT NULL, ca.uuid, NULL, NULL, NULL FROM translations_text t "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
    ResourceKind.PERMISSION: (
        "SELECT NULL, ca.uuid, NULL, NULL, NULL FROM app_permissions t "
        + _CREATOR_JOIN
        + "WHERE t.uuid = %s"
    ),
}


class PostgresResourceRepository:
    """Resource repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, kind: ResourceKind, resource_id: UUID) -> ResourceRecord | None:
        """Get attribute snapshot of one resource, None if missing or kind unknown."""
        query = _QUERIES.get(kind)
        if query is None:
            return None
        cur = await self._conn.execute(query, (resource_id,))
        r = await cur.fetchone()
        if not r:
            return None
        return ResourceRecord(
            kind=kind,
            id=resource_id,
            owner_id=r[0],
            creator_id=r[1],
            language=r[2],
            number=r[3],
            bismillah_status=r[4],
        )

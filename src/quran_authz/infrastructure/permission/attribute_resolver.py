"""Attribute resolver - one resolver row per ModelAttrib."""

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

import psycopg

from quran_authz.domain.entities import ResourceRecord
from quran_authz.domain.exceptions import (
    AttributeUnavailableForResourceKind,
    AttributeValueMissing,
    PersistenceFailure,
    ResourceNotFound,
)
from quran_authz.domain.value_objects import ModelAttrib, ModelAttribResult, ResourceKind


@dataclass(frozen=True)
class AttributeResolution:
    """Which resource kinds carry an attribute, and how to read it."""

    kinds: frozenset[ResourceKind]
    read: Callable[[ResourceRecord], object]


RESOLUTIONS: dict[ModelAttrib, AttributeResolution] = {
    ModelAttrib.OWNER_ID: AttributeResolution(
        kinds=frozenset({
            ResourceKind.ACCOUNT,
            ResourceKind.USER,
            ResourceKind.ORGANIZATION,
            ResourceKind.TRANSLATION,
        }),
        read=lambda r: r.owner_id,
    ),
    ModelAttrib.CREATOR_ID: AttributeResolution(
        kinds=frozenset({
            ResourceKind.ORGANIZATION,
            ResourceKind.MUSHAF,
            ResourceKind.QURAN_SURAH,
            ResourceKind.QURAN_AYAH,
            ResourceKind.QURAN_WORD,
            ResourceKind.TRANSLATION,
            ResourceKind.TRANSLATION_TEXT,
            ResourceKind.PERMISSION,
        }),
        read=lambda r: r.creator_id,
    ),
    ModelAttrib.LANGUAGE: AttributeResolution(
        kinds=frozenset({ResourceKind.USER, ResourceKind.TRANSLATION}),
        read=lambda r: r.language,
    ),
    ModelAttrib.NUMBER: AttributeResolution(
        kinds=frozenset({ResourceKind.QURAN_SURAH, ResourceKind.QURAN_AYAH}),
        read=lambda r: r.number,
    ),
    ModelAttrib.BISMILLAH_STATUS: AttributeResolution(
        kinds=frozenset({ResourceKind.QURAN_SURAH}),
        read=lambda r: r.bismillah_status,
    ),
}


class RepositoryAttributeResolver:
    """Resolves attributes through the resource repository."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(
        self,
        attrib: ModelAttrib,
        resource_kind: ResourceKind,
        resource_id: UUID | None,
    ) -> ModelAttribResult:
        resolution = RESOLUTIONS[attrib]
        if resource_kind not in resolution.kinds:
            raise AttributeUnavailableForResourceKind(
                f"{attrib} does not apply to {resource_kind}"
            )
        if resource_id is None:
            raise ResourceNotFound(f"No {resource_kind} id in request path")

        try:
            async with self._uow_factory() as uow:
                record = await uow.resources.get(resource_kind, resource_id)
        except (psycopg.Error, OSError) as exc:
            raise PersistenceFailure(f"Resource lookup failed: {exc}") from exc

        if record is None:
            raise ResourceNotFound(f"{resource_kind} {resource_id} not found")
        value = resolution.read(record)
        if value is None:
            raise AttributeValueMissing(f"{resource_kind} {resource_id} has no {attrib}")
        return ModelAttribResult.of(attrib, value)

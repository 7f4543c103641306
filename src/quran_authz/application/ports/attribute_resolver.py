"""Attribute resolver port - live resource attribute values."""

from typing import Protocol
from uuid import UUID

from quran_authz.domain.value_objects import ModelAttrib, ModelAttribResult, ResourceKind


class AttributeResolver(Protocol):
    """Port for resolving a ModelAttrib against one resource.

    Raises ResourceNotFound, AttributeUnavailableForResourceKind or
    AttributeValueMissing (ResolutionError) when the attribute cannot be
    resolved, PersistenceFailure when storage is unreachable.
    """

    async def resolve(
        self,
        attrib: ModelAttrib,
        resource_kind: ResourceKind,
        resource_id: UUID | None,
    ) -> ModelAttribResult: ...

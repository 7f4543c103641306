"""Catalog of resource attributes that conditions can refer to."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from quran_authz.domain.exceptions import UnknownAttribute
from quran_authz.domain.value_objects.condition_value import ConditionValueType


class ModelAttrib(StrEnum):
    """Closed set of resolvable resource attributes."""

    OWNER_ID = "resource-owner-id"
    CREATOR_ID = "resource-creator-id"
    LANGUAGE = "resource-language"
    NUMBER = "resource-number"
    BISMILLAH_STATUS = "resource-bismillah-status"

    @classmethod
    def try_from(cls, name: str) -> "ModelAttrib":
        try:
            return cls(name)
        except ValueError:
            raise UnknownAttribute(name) from None

    def declared_type(self) -> ConditionValueType:
        return _DECLARED_TYPES[self]


_DECLARED_TYPES: dict[ModelAttrib, ConditionValueType] = {
    ModelAttrib.OWNER_ID: ConditionValueType.IDENTIFIER,
    ModelAttrib.CREATOR_ID: ConditionValueType.IDENTIFIER,
    ModelAttrib.LANGUAGE: ConditionValueType.TEXT,
    ModelAttrib.NUMBER: ConditionValueType.INTEGER,
    ModelAttrib.BISMILLAH_STATUS: ConditionValueType.BOOLEAN,
}


@dataclass(frozen=True)
class ModelAttribResult:
    """Live value of an attribute on one resource, tagged with its type."""

    declared_type: ConditionValueType
    value: bool | int | UUID | str

    def __post_init__(self) -> None:
        if not self.declared_type.accepts(self.value):
            raise TypeError(
                f"{type(self.value).__name__} is not a valid {self.declared_type} value"
            )

    @classmethod
    def of(cls, attrib: ModelAttrib, value: bool | int | UUID | str) -> "ModelAttribResult":
        return cls(attrib.declared_type(), value)

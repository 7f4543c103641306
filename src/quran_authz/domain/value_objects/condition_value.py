"""Typed literal values stored on permission conditions.

A condition literal is stored as a string. Its type is inferred from its
shape, never from the attribute it is compared against:

    "true" / "false"              -> BOOLEAN
    optional sign + digits        -> INTEGER (signed 64-bit)
    8-4-4-4-12 hex UUID           -> IDENTIFIER
    anything else                 -> TEXT

Literals that almost fit a typed shape ("True", a UUID layout with non-hex
characters, an integer out of range) are rejected instead of falling back
to TEXT.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from quran_authz.domain.exceptions import ConditionTypeMismatch, MalformedConditionValue

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_UUID_LAYOUT_RE = re.compile(r"[^-]{8}-[^-]{4}-[^-]{4}-[^-]{4}-[^-]{12}")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ConditionValueType(StrEnum):
    """Value kinds a condition literal or resolved attribute can have."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    IDENTIFIER = "identifier"
    TEXT = "text"

    @classmethod
    def try_from(cls, literal: str) -> "ConditionValueType":
        """Infer the type tag of a literal."""
        return ConditionValue.parse(literal).type

    def accepts(self, value: object) -> bool:
        """Whether a Python value is a valid runtime value of this type."""
        if self is ConditionValueType.BOOLEAN:
            return isinstance(value, bool)
        if self is ConditionValueType.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ConditionValueType.IDENTIFIER:
            return isinstance(value, UUID)
        return isinstance(value, str)


@dataclass(frozen=True)
class ConditionValue:
    """A parsed condition literal."""

    type: ConditionValueType
    value: bool | int | UUID | str

    @classmethod
    def parse(cls, literal: str) -> "ConditionValue":
        if literal in ("true", "false"):
            return cls(ConditionValueType.BOOLEAN, literal == "true")
        if literal.lower() in ("true", "false"):
            raise MalformedConditionValue(
                f"Boolean literals must be lowercase: {literal!r}"
            )

        if _INTEGER_RE.fullmatch(literal):
            number = int(literal)
            if not _INT64_MIN <= number <= _INT64_MAX:
                raise MalformedConditionValue(f"Integer out of range: {literal!r}")
            return cls(ConditionValueType.INTEGER, number)

        if _UUID_RE.fullmatch(literal):
            return cls(ConditionValueType.IDENTIFIER, UUID(literal))
        if _UUID_LAYOUT_RE.fullmatch(literal):
            raise MalformedConditionValue(f"Malformed identifier: {literal!r}")

        return cls(ConditionValueType.TEXT, literal)

    def matches(self, result) -> bool:
        """Compare against a resolved ModelAttribResult.

        Raises ConditionTypeMismatch when the type tags differ; values of
        different kinds are never compared.
        """
        if self.type != result.declared_type:
            raise ConditionTypeMismatch(
                f"Condition value is {self.type}, attribute is {result.declared_type}"
            )
        return self.value == result.value

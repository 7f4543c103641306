"""Domain value objects."""

from quran_authz.domain.value_objects.condition_value import (
    ConditionValue,
    ConditionValueType,
)
from quran_authz.domain.value_objects.model_attrib import ModelAttrib, ModelAttribResult
from quran_authz.domain.value_objects.parsed_path import ParsedPath, parse_path
from quran_authz.domain.value_objects.resource_kind import ResourceKind
from quran_authz.domain.value_objects.verdict import DenialReason, Verdict

__all__ = [
    "ConditionValue",
    "ConditionValueType",
    "DenialReason",
    "ModelAttrib",
    "ModelAttribResult",
    "ParsedPath",
    "ResourceKind",
    "Verdict",
    "parse_path",
]

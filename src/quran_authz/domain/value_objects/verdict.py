"""Authorization verdict."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class DenialReason(StrEnum):
    NO_CANDIDATE = "no_candidate"
    CONDITIONS_NOT_MET = "conditions_not_met"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class Verdict:
    """Outcome of one decision; permission_id is the granting permission."""

    allowed: bool
    reason: DenialReason | None = None
    permission_id: UUID | None = None

    @classmethod
    def allow(cls, permission_id: UUID | None = None) -> "Verdict":
        return cls(allowed=True, permission_id=permission_id)

    @classmethod
    def deny(cls, reason: DenialReason) -> "Verdict":
        return cls(allowed=False, reason=reason)

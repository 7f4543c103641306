"""Subject - the authenticated identity behind a request."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class Subject:
    """Authenticated account and its roles. Anonymous requests have no Subject."""

    account_id: UUID
    roles: frozenset[str] = field(default_factory=frozenset)

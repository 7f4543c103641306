"""Permission checker port - ABAC authorization."""

from typing import Protocol

from quran_authz.domain.entities import Subject
from quran_authz.domain.value_objects import ParsedPath, Verdict


class PermissionChecker(Protocol):
    """Port for deciding whether a subject may perform a request."""

    async def check(self, subject: Subject | None, path: ParsedPath) -> bool: ...

    async def evaluate(self, subject: Subject | None, path: ParsedPath) -> Verdict: ...

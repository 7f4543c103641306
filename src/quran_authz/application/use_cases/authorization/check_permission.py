"""Check permission use case - the ABAC decision core."""

import logging

from quran_authz.application.ports import AttributeResolver, PermissionStore
from quran_authz.domain.entities import Subject
from quran_authz.domain.exceptions import PersistenceFailure, ResolutionError
from quran_authz.domain.policy import (
    action_selectors,
    condition_attribs,
    evaluate_candidates,
    permission_matches,
    subject_selectors,
)
from quran_authz.domain.value_objects import (
    DenialReason,
    ModelAttrib,
    ModelAttribResult,
    ParsedPath,
    ResourceKind,
    Verdict,
)

logger = logging.getLogger(__name__)


class CheckPermissionUseCase:
    """Decide allow/deny for a subject, resource path and method."""

    def __init__(
        self,
        permission_store: PermissionStore,
        attribute_resolver: AttributeResolver,
    ) -> None:
        self._store = permission_store
        self._resolver = attribute_resolver

    async def check(self, subject: Subject | None, path: ParsedPath) -> bool:
        """True when any matching permission grants the request."""
        verdict = await self.evaluate(subject, path)
        return verdict.allowed

    async def evaluate(self, subject: Subject | None, path: ParsedPath) -> Verdict:
        """Full verdict with denial reason.

        Raises PersistenceFailure when candidates or attributes cannot be
        loaded; callers must treat that as a deny.
        """
        if path.resource_kind is ResourceKind.UNKNOWN:
            return Verdict.deny(DenialReason.NO_CANDIDATE)

        try:
            loaded = await self._store.load_candidates(
                sorted(subject_selectors(subject)),
                path.resource_kind.value,
                sorted(action_selectors(path.method)),
            )
        except PersistenceFailure:
            raise
        except Exception as exc:
            raise PersistenceFailure("Failed to load candidate permissions") from exc

        candidates = [c for c in loaded if permission_matches(c, subject, path)]
        if not candidates:
            return Verdict.deny(DenialReason.NO_CANDIDATE)

        for candidate in candidates:
            if candidate.is_unconditional:
                return Verdict.allow(candidate.permission.external_id)

        resolved = await self._resolve_all(condition_attribs(candidates), path)
        return evaluate_candidates(candidates, resolved)

    async def _resolve_all(
        self,
        attribs: set[ModelAttrib],
        path: ParsedPath,
    ) -> dict[ModelAttrib, ModelAttribResult | ResolutionError]:
        resolved: dict[ModelAttrib, ModelAttribResult | ResolutionError] = {}
        for attrib in sorted(attribs):
            try:
                resolved[attrib] = await self._resolver.resolve(
                    attrib, path.resource_kind, path.resource_id
                )
            except ResolutionError as exc:
                logger.debug("Could not resolve %s for %s: %s", attrib, path, exc)
                resolved[attrib] = exc
            except PersistenceFailure:
                raise
            except Exception as exc:
                raise PersistenceFailure(f"Failed to resolve {attrib}") from exc
        return resolved

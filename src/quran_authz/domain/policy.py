"""Permission matching and decision rules.

Matching is case-sensitive and exact:

- subject: the permission's subject must be one of the request's selectors
  ("anonymous" for unauthenticated requests, otherwise "authenticated",
  "account:<uuid>" and "role:<name>" for each role);
- object: equal to the parsed resource kind; "unknown" never matches;
- action: equal to the HTTP method, or a verb class containing it.

Conditions of one permission are ANDed, candidates are ORed, default deny.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from quran_authz.domain.entities import PermissionWithConditions, Subject
from quran_authz.domain.exceptions import (
    ConditionTypeMismatch,
    ResolutionError,
    ValidationError,
)
from quran_authz.domain.value_objects import (
    ConditionValue,
    DenialReason,
    ModelAttrib,
    ModelAttribResult,
    ParsedPath,
    ResourceKind,
    Verdict,
)

logger = logging.getLogger(__name__)

ANONYMOUS_SUBJECT = "anonymous"
AUTHENTICATED_SUBJECT = "authenticated"

ACTION_CLASSES: dict[str, frozenset[str]] = {
    "read": frozenset({"GET", "HEAD"}),
    "write": frozenset({"POST", "PUT", "PATCH", "DELETE"}),
}
ANY_ACTION = "any"


def subject_selectors(subject: Subject | None) -> frozenset[str]:
    """Permission subjects that apply to this request subject."""
    if subject is None:
        return frozenset({ANONYMOUS_SUBJECT})
    selectors = {AUTHENTICATED_SUBJECT, f"account:{subject.account_id}"}
    selectors.update(f"role:{role}" for role in subject.roles)
    return frozenset(selectors)


def action_selectors(method: str) -> frozenset[str]:
    """Permission actions that cover this HTTP method."""
    actions = {method, ANY_ACTION}
    actions.update(name for name, verbs in ACTION_CLASSES.items() if method in verbs)
    return frozenset(actions)


def permission_matches(
    candidate: PermissionWithConditions,
    subject: Subject | None,
    path: ParsedPath,
) -> bool:
    perm = candidate.permission
    if path.resource_kind is ResourceKind.UNKNOWN:
        return False
    return (
        perm.object == path.resource_kind.value
        and perm.action in action_selectors(path.method)
        and perm.subject in subject_selectors(subject)
    )


def validate_condition(name: str, value: str) -> tuple[ModelAttrib, ConditionValue]:
    """Authoring-time check of one condition.

    Raises UnknownAttribute, MalformedConditionValue or ConditionTypeMismatch.
    """
    attrib = ModelAttrib.try_from(name)
    parsed = ConditionValue.parse(value)
    if parsed.type != attrib.declared_type():
        raise ConditionTypeMismatch(
            f"Condition {name!r} expects {attrib.declared_type()}, got {parsed.type}"
        )
    return attrib, parsed


def validate_conditions(conditions: Iterable[tuple[str, str]]) -> None:
    """Validate (name, value) pairs, stopping at the first invalid one."""
    for name, value in conditions:
        validate_condition(name, value)


def condition_attribs(candidates: Iterable[PermissionWithConditions]) -> set[ModelAttrib]:
    """Distinct known attributes referenced by the candidates' conditions."""
    attribs = set()
    for candidate in candidates:
        for condition in candidate.conditions:
            try:
                attribs.add(ModelAttrib.try_from(condition.name))
            except ValidationError:
                continue
    return attribs


def conditions_hold(
    candidate: PermissionWithConditions,
    resolved: Mapping[ModelAttrib, ModelAttribResult | ResolutionError],
) -> bool:
    for condition in candidate.conditions:
        try:
            attrib, expected = validate_condition(condition.name, condition.value)
        except ValidationError as exc:
            logger.warning(
                "Invalid condition %s on permission %s: %s",
                condition.external_id,
                candidate.permission.external_id,
                exc,
            )
            return False

        outcome = resolved.get(attrib)
        if outcome is None or isinstance(outcome, ResolutionError):
            return False
        try:
            if not expected.matches(outcome):
                return False
        except ConditionTypeMismatch as exc:
            logger.warning("Resolved %s has the wrong type: %s", attrib, exc)
            return False
    return True


def evaluate_candidates(
    candidates: Sequence[PermissionWithConditions],
    resolved: Mapping[ModelAttrib, ModelAttribResult | ResolutionError],
) -> Verdict:
    """Decide over matched candidates and pre-resolved attributes."""
    if not candidates:
        return Verdict.deny(DenialReason.NO_CANDIDATE)
    for candidate in candidates:
        if candidate.is_unconditional or conditions_hold(candidate, resolved):
            return Verdict.allow(candidate.permission.external_id)
    return Verdict.deny(DenialReason.CONDITIONS_NOT_MET)

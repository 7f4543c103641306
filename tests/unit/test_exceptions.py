"""Unit tests for domain exceptions."""

import pytest

from quran_authz.domain.exceptions import (
    AttributeUnavailableForResourceKind,
    AttributeValueMissing,
    ConditionTypeMismatch,
    MalformedConditionValue,
    PersistenceFailure,
    QuranAuthzError,
    ResolutionError,
    ResourceNotFound,
    UnknownAttribute,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc",
    [UnknownAttribute, MalformedConditionValue, ConditionTypeMismatch],
)
def test_authoring_errors_are_validation_errors(exc) -> None:
    """Authoring-time failures share the ValidationError base."""
    assert issubclass(exc, ValidationError)


@pytest.mark.parametrize(
    "exc",
    [ResourceNotFound, AttributeUnavailableForResourceKind, AttributeValueMissing],
)
def test_lookup_errors_are_resolution_errors(exc) -> None:
    """Decision-time lookup failures share the ResolutionError base."""
    assert issubclass(exc, ResolutionError)


def test_persistence_failure_is_not_resolution_error() -> None:
    """Store failures must not be recovered like resolution failures."""
    assert not issubclass(PersistenceFailure, ResolutionError)


@pytest.mark.parametrize(
    "exc",
    [ValidationError, ResolutionError, PersistenceFailure],
)
def test_all_inherit_base(exc) -> None:
    assert issubclass(exc, QuranAuthzError)


def test_unknown_attribute_keeps_name() -> None:
    """UnknownAttribute exposes the rejected name."""
    with pytest.raises(ValidationError, match="resource-colour") as info:
        raise UnknownAttribute("resource-colour")
    assert info.value.name == "resource-colour"

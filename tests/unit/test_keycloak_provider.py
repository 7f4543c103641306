"""Unit tests for bearer token introspection."""

from unittest.mock import Mock
from uuid import uuid4

import pytest
from keycloak.exceptions import KeycloakConnectionError

from quran_authz.infrastructure.auth.keycloak_provider import KeycloakProvider


@pytest.fixture
def provider() -> KeycloakProvider:
    p = KeycloakProvider("http://keycloak:8080", "quran", "quran-api")
    p._keycloak = Mock()
    return p


def test_active_token(provider: KeycloakProvider) -> None:
    account = uuid4()
    provider._keycloak.introspect.return_value = {
        "active": True,
        "sub": str(account),
        "realm_access": {"roles": ["editor", "reviewer"]},
    }

    subject = provider.decode_token("t")

    assert subject.account_id == account
    assert subject.roles == frozenset({"editor", "reviewer"})


def test_no_roles(provider: KeycloakProvider) -> None:
    provider._keycloak.introspect.return_value = {"active": True, "sub": str(uuid4())}
    assert provider.decode_token("t").roles == frozenset()


def test_inactive_token(provider: KeycloakProvider) -> None:
    provider._keycloak.introspect.return_value = {"active": False}
    assert provider.decode_token("t") is None


@pytest.mark.parametrize("sub", [None, "", "service-account"])
def test_subject_must_be_uuid(provider: KeycloakProvider, sub) -> None:
    provider._keycloak.introspect.return_value = {"active": True, "sub": sub}
    assert provider.decode_token("t") is None


def test_introspection_error(provider: KeycloakProvider) -> None:
    provider._keycloak.introspect.side_effect = KeycloakConnectionError("unreachable")
    assert provider.decode_token("t") is None

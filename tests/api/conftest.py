"""Fixtures for API tests."""

from uuid import UUID

import falcon
import pytest
from falcon.testing import TestClient

from quran_authz.application.use_cases.authorization.check_permission import (
    CheckPermissionUseCase,
)
from quran_authz.domain.entities import Subject
from quran_authz.infrastructure.permission.attribute_resolver import (
    RepositoryAttributeResolver,
)
from quran_authz.infrastructure.permission.permission_store import (
    UnitOfWorkPermissionStore,
)
from quran_authz.interfaces.api.app import create_app

EDITOR_TOKEN = "editor-token"
EDITOR_ID = UUID("6f1c1f4e-9a55-4d4e-8a36-5b0f2c6c1e01")


class FakeKeycloakProvider:
    """Accepts a single known token."""

    def __init__(self) -> None:
        self.tokens: list[str] = []

    def decode_token(self, token: str) -> Subject | None:
        self.tokens.append(token)
        if token == EDITOR_TOKEN:
            return Subject(account_id=EDITOR_ID, roles=frozenset({"editor"}))
        return None


class RecordingResource:
    """Stand-in content handler that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.verdicts = []

    def _record(self, req, resp, status=falcon.HTTP_200) -> None:
        self.calls.append((req.method, req.path))
        self.verdicts.append(req.context.verdict)
        resp.status = status
        resp.media = {"handled": req.path}

    async def on_get(self, req, resp, **params) -> None:
        self._record(req, resp)

    async def on_put(self, req, resp, **params) -> None:
        self._record(req, resp)

    async def on_post(self, req, resp, **params) -> None:
        self._record(req, resp, falcon.HTTP_201)

    async def on_delete(self, req, resp, **params) -> None:
        self._record(req, resp, falcon.HTTP_204)
        resp.media = None


@pytest.fixture
def handler() -> RecordingResource:
    return RecordingResource()


@pytest.fixture
def keycloak() -> FakeKeycloakProvider:
    return FakeKeycloakProvider()


@pytest.fixture
def checker(uow_factory) -> CheckPermissionUseCase:
    """Real decision core over the in-memory UnitOfWork."""
    return CheckPermissionUseCase(
        permission_store=UnitOfWorkPermissionStore(uow_factory),
        attribute_resolver=RepositoryAttributeResolver(uow_factory),
    )


def _add_content_routes(app, handler: RecordingResource, prefix: str = "") -> None:
    app.add_route(f"{prefix}/mushaf", handler)
    app.add_route(f"{prefix}/mushaf/{{mushaf_id}}", handler)
    app.add_route(f"{prefix}/ayah/{{ayah_id}}", handler)
    app.add_route(f"{prefix}/organization/{{org_id}}", handler)


@pytest.fixture
def make_client(handler, keycloak):
    """Build a client around any permission checker."""

    def _make(permission_checker, **kwargs) -> TestClient:
        kwargs.setdefault("keycloak_provider", keycloak)
        prefix = kwargs.get("api_prefix", "")
        app = create_app(permission_checker, **kwargs)
        _add_content_routes(app, handler, prefix)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, checker) -> TestClient:
    """Falcon ASGI test client with the gate in front of the content routes."""
    return make_client(checker)

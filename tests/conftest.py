"""Pytest fixtures for quran-authz tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from itertools import count
from uuid import UUID, uuid4

import pytest

from quran_authz.domain.entities import (
    Permission,
    PermissionCondition,
    PermissionWithConditions,
    ResourceRecord,
    Subject,
)
from quran_authz.domain.value_objects import ResourceKind

_ids = count(1)


def make_permission(
    subject: str,
    object: str,
    action: str,
    conditions: list[tuple[str, str]] | None = None,
) -> PermissionWithConditions:
    """Build a permission with (name, value) conditions."""
    now = datetime.now(UTC)
    perm = Permission(
        id=next(_ids),
        external_id=uuid4(),
        creator_id=1,
        subject=subject,
        object=object,
        action=action,
        created_at=now,
        updated_at=now,
    )
    return PermissionWithConditions(
        permission=perm,
        conditions=[
            PermissionCondition(
                id=next(_ids),
                external_id=uuid4(),
                permission_id=perm.id,
                creator_id=1,
                name=name,
                value=value,
                created_at=now,
                updated_at=now,
            )
            for name, value in (conditions or [])
        ],
    )


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission repository."""

    def __init__(self) -> None:
        self._items: list[PermissionWithConditions] = []
        self.calls: list[tuple[list[str], str, list[str]]] = []

    def add(self, permission: PermissionWithConditions) -> PermissionWithConditions:
        """Helper to store a permission for tests."""
        self._items.append(permission)
        return permission

    async def list_candidates(
        self,
        subjects: list[str],
        object: str,
        actions: list[str],
    ) -> list[PermissionWithConditions]:
        self.calls.append((subjects, object, actions))
        return [
            p
            for p in self._items
            if p.permission.subject in subjects
            and p.permission.object == object
            and p.permission.action in actions
        ]


class FailingPermissionRepository:
    """Permission repository whose queries always fail."""

    async def list_candidates(self, subjects, object, actions):
        raise OSError("connection refused")


class FakeResourceRepository:
    """In-memory resource repository."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[ResourceKind, UUID], ResourceRecord] = {}
        self.lookups = 0

    def add(self, record: ResourceRecord) -> ResourceRecord:
        """Helper to store a resource for tests."""
        self._by_key[(record.kind, record.id)] = record
        return record

    async def get(self, kind: ResourceKind, resource_id: UUID) -> ResourceRecord | None:
        self.lookups += 1
        return self._by_key.get((kind, resource_id))


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.resources = FakeResourceRepository()


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager that yields the test's fake_uow."""

    @asynccontextmanager
    async def _factory():
        yield fake_uow

    return _factory


@pytest.fixture
def editor() -> Subject:
    """Authenticated subject holding the editor role."""
    return Subject(account_id=uuid4(), roles=frozenset({"editor"}))


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows by default."""
    from unittest.mock import AsyncMock

    from quran_authz.domain.value_objects import Verdict

    mock = AsyncMock()
    mock.evaluate.return_value = Verdict.allow()
    mock.check.return_value = True
    return mock

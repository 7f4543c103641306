"""Unit tests for bearer token subject extraction."""

import asyncio
import threading
from types import SimpleNamespace
from uuid import uuid4

import pytest

from quran_authz.domain.entities import Subject
from quran_authz.interfaces.api.middleware.auth import AuthMiddleware


def _request(authorization: str | None = None):
    headers = {"Authorization": authorization} if authorization else {}
    return SimpleNamespace(context=SimpleNamespace(), get_header=headers.get)


class BlockingProvider:
    """Blocks in decode_token until another coroutine releases it."""

    def __init__(self) -> None:
        self.release = threading.Event()
        self.released_while_waiting = None
        self.subject = Subject(account_id=uuid4())

    def decode_token(self, token: str) -> Subject:
        self.released_while_waiting = self.release.wait(timeout=2)
        return self.subject


@pytest.mark.asyncio
async def test_introspection_does_not_block_event_loop() -> None:
    """Other coroutines keep running while a token is being introspected."""
    provider = BlockingProvider()
    middleware = AuthMiddleware(provider)
    req = _request("Bearer token")

    async def other_request() -> None:
        await asyncio.sleep(0)
        provider.release.set()

    await asyncio.gather(middleware.process_request(req, None), other_request())

    assert provider.released_while_waiting is True
    assert req.context.subject == provider.subject


@pytest.mark.asyncio
async def test_missing_header_is_anonymous() -> None:
    provider = BlockingProvider()
    req = _request()

    await AuthMiddleware(provider).process_request(req, None)

    assert req.context.subject is None
    assert provider.released_while_waiting is None


@pytest.mark.asyncio
async def test_non_bearer_scheme_is_anonymous() -> None:
    req = _request("Basic dXNlcjpwYXNz")
    await AuthMiddleware(BlockingProvider()).process_request(req, None)
    assert req.context.subject is None


@pytest.mark.asyncio
async def test_no_provider_is_anonymous() -> None:
    req = _request("Bearer token")
    await AuthMiddleware(None).process_request(req, None)
    assert req.context.subject is None

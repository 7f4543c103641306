"""Health check endpoints."""

import logging

import falcon
import falcon.asgi
import psycopg
from psycopg_pool import AsyncConnectionPool

from quran_authz.infrastructure.persistence.postgres.connection import ping

logger = logging.getLogger(__name__)


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (permission database)."""
        if self._pool is not None:
            try:
                reachable = await ping(self._pool)
            except (psycopg.Error, OSError) as exc:
                logger.warning("Readiness check failed: %s", exc)
                reachable = False
            if not reachable:
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200

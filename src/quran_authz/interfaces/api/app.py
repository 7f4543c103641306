"""Falcon ASGI application."""

import logging
from collections.abc import Iterable

import falcon
import falcon.asgi
from falcon.asgi import App
from psycopg_pool import AsyncConnectionPool

from quran_authz.application.ports import PermissionChecker
from quran_authz.interfaces.api.middleware.auth import AuthMiddleware
from quran_authz.interfaces.api.middleware.authz import AuthZMiddleware
from quran_authz.interfaces.api.middleware.cors import CORSMiddleware
from quran_authz.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from quran_authz.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)

HEALTH_PATH = "/v1/health"
READY_PATH = "/v1/health/ready"


async def _log_exception(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    permission_checker: PermissionChecker,
    *,
    keycloak_provider=None,
    pool: AsyncConnectionPool | None = None,
    cors_origins: Iterable[str] = (),
    api_prefix: str = "",
    exempt_paths: Iterable[str] = (HEALTH_PATH, READY_PATH),
) -> App:
    """Create Falcon ASGI app with the authorization gate in front of all routes.

    Content handlers are added by the caller with app.add_route; they only
    run for requests the gate allows.
    """
    middleware = [CORSMiddleware(list(cors_origins))]
    if pool is not None:
        middleware.append(PoolLifespanMiddleware(pool))
    middleware.append(AuthMiddleware(keycloak_provider))
    middleware.append(
        AuthZMiddleware(permission_checker, prefix=api_prefix, exempt_paths=exempt_paths)
    )

    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(Exception, _log_exception)

    health = HealthResource(pool)
    app.add_route(HEALTH_PATH, health)
    app.add_route(READY_PATH, health, suffix="ready")
    return app

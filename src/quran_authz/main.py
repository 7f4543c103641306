"""Application entry point and composition root."""

import logging

from quran_authz import __version__
from quran_authz.application.use_cases.authorization.check_permission import (
    CheckPermissionUseCase,
)
from quran_authz.config import Settings, get_settings
from quran_authz.infrastructure.auth.keycloak_provider import KeycloakProvider
from quran_authz.infrastructure.permission.attribute_resolver import (
    RepositoryAttributeResolver,
)
from quran_authz.infrastructure.permission.permission_store import (
    UnitOfWorkPermissionStore,
)
from quran_authz.infrastructure.persistence.postgres.connection import create_pool
from quran_authz.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from quran_authz.interfaces.api.app import create_app

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"quran-authz v{__version__}")


def create_quran_authz_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; all requests are anonymous")

    check_permission = CheckPermissionUseCase(
        permission_store=UnitOfWorkPermissionStore(uow_factory),
        attribute_resolver=RepositoryAttributeResolver(uow_factory),
    )

    return create_app(
        check_permission,
        keycloak_provider=keycloak,
        pool=pool,
        cors_origins=settings.cors_origin_list,
        api_prefix=settings.api_prefix,
        exempt_paths=settings.authz_exempt_path_list,
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_quran_authz_app(), host="0.0.0.0", port=8000)

"""Keycloak OIDC provider - turns bearer tokens into subjects."""

import logging
from uuid import UUID

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from quran_authz.domain.entities import Subject

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts account id and realm roles."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> Subject | None:
        """Introspect token, return Subject or None if inactive or invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as exc:
            logger.warning("Token introspection failed: %s", exc)
            return None
        if not token_info.get("active"):
            return None
        try:
            account_id = UUID(token_info.get("sub") or "")
        except ValueError:
            return None
        roles = token_info.get("realm_access", {}).get("roles", [])
        return Subject(account_id=account_id, roles=frozenset(roles))

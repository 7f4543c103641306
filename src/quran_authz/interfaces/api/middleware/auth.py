"""Auth middleware - attaches the request subject, or None for anonymous."""

import asyncio

import falcon.asgi


class AuthMiddleware:
    """Middleware that introspects the bearer token and sets req.context.subject.

    Introspection is a blocking HTTP round trip to Keycloak, so it runs in a
    worker thread and other requests keep being served meanwhile.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract subject from Authorization header."""
        req.context.subject = None
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and self._keycloak:
            req.context.subject = await asyncio.to_thread(
                self._keycloak.decode_token, auth[7:]
            )

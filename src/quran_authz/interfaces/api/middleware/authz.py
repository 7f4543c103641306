"""Authorization gate - runs the ABAC decision before any responder."""

import logging
from collections.abc import Iterable

import falcon
import falcon.asgi

from quran_authz.application.ports import PermissionChecker
from quran_authz.domain.entities import Subject
from quran_authz.domain.exceptions import PersistenceFailure
from quran_authz.domain.value_objects import DenialReason, ParsedPath, Verdict

logger = logging.getLogger(__name__)

DENIAL_MESSAGE = "You don't have access to this resource!"
INTERNAL_ERROR_MESSAGE = "internal server error"


class AuthZMiddleware:
    """Middleware that forwards allowed requests and answers denied ones with 403.

    Must be registered after AuthMiddleware, which sets req.context.subject.
    """

    def __init__(
        self,
        permission_checker: PermissionChecker,
        *,
        prefix: str = "",
        exempt_paths: Iterable[str] = (),
    ) -> None:
        self._checker = permission_checker
        self._prefix = prefix
        self._exempt_paths = frozenset(exempt_paths)

    async def authorize(self, subject: Subject | None, raw_path: str, method: str) -> Verdict:
        """Decide one request. Every engine failure becomes a deny."""
        path = ParsedPath.from_request(raw_path, method, self._prefix)
        try:
            return await self._checker.evaluate(subject, path)
        except PersistenceFailure:
            logger.exception("Permission lookup failed for %s %s", method, raw_path)
        except Exception:
            logger.exception("Authorization engine error for %s %s", method, raw_path)
        return Verdict.deny(DenialReason.INTERNAL_ERROR)

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.path in self._exempt_paths:
            return

        subject = getattr(req.context, "subject", None)
        verdict = await self.authorize(subject, req.path, req.method)
        req.context.verdict = verdict
        if verdict.allowed:
            return

        logger.info(
            "Denied %s %s for %s: %s",
            req.method,
            req.path,
            subject.account_id if subject else "anonymous",
            verdict.reason,
        )
        if verdict.reason is DenialReason.INTERNAL_ERROR:
            resp.status = falcon.HTTP_500
            resp.text = INTERNAL_ERROR_MESSAGE
        else:
            resp.status = falcon.HTTP_403
            resp.text = DENIAL_MESSAGE
        resp.content_type = falcon.MEDIA_TEXT
        resp.set_header("Access-Control-Allow-Origin", "*")
        resp.complete = True

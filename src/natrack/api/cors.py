"""CORS allow-list policy."""

import logging
from collections.abc import Sequence

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization", "X-API-Key")


def is_origin_allowed(origin: str | None, allowed_origins: Sequence[str]) -> bool:
    """Return True when the request origin passes the allow-list.

    Requests without an Origin header (curl, server-to-server) are always
    allowed, and an empty allow-list allows every origin.
    """
    if not origin:
        return True
    if not allowed_origins:
        return True
    return origin in allowed_origins


class AllowListCORSMiddleware(CORSMiddleware):
    """CORS middleware that mirrors back origins accepted by the allow-list.

    Disallowed preflights are answered with 400; disallowed simple requests
    are served without any Access-Control-* headers.
    """

    def __init__(self, app: ASGIApp, allowed_origins: Sequence[str] = ()) -> None:
        super().__init__(
            app,
            allow_origins=list(allowed_origins),
            allow_methods=ALLOWED_METHODS,
            allow_headers=ALLOWED_HEADERS,
            allow_credentials=True,
        )
        self.allowed_origins = tuple(allowed_origins)

    async def simple_response(
        self, scope: Scope, receive: Receive, send: Send, request_headers: Headers
    ) -> None:
        if not self.is_allowed_origin(origin=request_headers["origin"]):
            await self.app(scope, receive, send)
            return
        await super().simple_response(scope, receive, send, request_headers)

    def is_allowed_origin(self, origin: str) -> bool:
        allowed = is_origin_allowed(origin, self.allowed_origins)
        if not allowed:
            logger.warning("Origin rejected by CORS", extra={"origin": origin})
        return allowed

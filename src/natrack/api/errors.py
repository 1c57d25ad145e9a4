"""Exception handlers mapping errors to JSON responses."""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from natrack.api.navigation import NavigationBlockedError
from natrack.services.errors import AuthError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers producing the {"error": ...} response shape."""

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info(
            "Rejected invalid request",
            extra={"path": request.url.path, "reason": str(exc)},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = "; ".join(_format_error(error) for error in exc.errors())
        logger.info(
            "Rejected malformed request",
            extra={"path": request.url.path, "reason": message},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message or "invalid request"},
        )

    @app.exception_handler(AuthError)
    async def auth_error(request: Request, exc: AuthError) -> JSONResponse:
        logger.warning("Unauthorized write attempt", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"error": "unauthorized"}
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("Session not found", extra={"session_id": str(exc)})
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": "not found"}
        )

    @app.exception_handler(NavigationBlockedError)
    async def navigation_blocked(
        request: Request, exc: NavigationBlockedError
    ) -> Response:
        logger.debug("Blocked browser navigation", extra={"path": request.url.path})
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            extra={"path": request.url.path, "method": request.method},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message

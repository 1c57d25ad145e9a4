"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from natrack.api.cors import AllowListCORSMiddleware
from natrack.api.errors import register_exception_handlers
from natrack.api.health import router as health_router
from natrack.api.sessions import router as sessions_router
from natrack.app_logging import configure_logging
from natrack.containers import AppContainer

API_PREFIXES = ("", "/api")


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting natrack API",
            extra={"environment": container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="natrack", lifespan=lifespan)
    app.state.container = container

    if not container.settings.edit_token:
        logger.warning("EDIT_TOKEN is not set; every write request will be rejected")

    app.add_middleware(
        AllowListCORSMiddleware, allowed_origins=container.allowed_origins
    )
    register_exception_handlers(app)

    for prefix in API_PREFIXES:
        app.include_router(health_router, prefix=prefix)
        app.include_router(sessions_router, prefix=prefix)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Plain liveness ping."""
        return "API up"

    return app

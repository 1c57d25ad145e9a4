"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from natrack.adapters.database import create_engine
from natrack.adapters.sql_session_repository import SqlSessionRepository
from natrack.config import Settings, parse_allowed_origins
from natrack.services.sessions import SessionService


@dataclass(frozen=True)
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    allowed_origins: tuple[str, ...]
    session_service: SessionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    engine = create_engine(resolved_settings)
    session_service = SessionService(SqlSessionRepository(engine))

    async def close_resources() -> None:
        await engine.dispose()

    return AppContainer(
        settings=resolved_settings,
        allowed_origins=tuple(parse_allowed_origins(resolved_settings.cors_origin)),
        session_service=session_service,
        close_resources=close_resources,
    )

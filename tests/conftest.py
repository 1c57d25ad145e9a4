"""Shared test fixtures."""

from dataclasses import dataclass, field, replace

import pytest
from fastapi.testclient import TestClient

from natrack.api.app import create_app
from natrack.config import Settings, parse_allowed_origins
from natrack.containers import AppContainer
from natrack.domain.sessions import SessionChanges, SessionRecord
from natrack.services.sessions import SessionRepository, SessionService

EDIT_TOKEN = "edit-token"
ALLOWED_ORIGIN = "https://natrack.example.com"


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    healthy: bool = True

    async def ping(self) -> bool:
        return self.healthy

    async def list_sessions(self, session_type: str | None) -> list[SessionRecord]:
        records = [
            record
            for record in self.sessions.values()
            if session_type is None or record.type == session_type
        ]
        return sorted(records, key=lambda record: record.date)

    async def get_session(self, session_id: str) -> SessionRecord | None:
        return self.sessions.get(session_id)

    async def create_session(self, record: SessionRecord) -> SessionRecord:
        self.sessions[record.id] = record
        return record

    async def update_session(self, session_id: str, changes: SessionChanges) -> bool:
        current = self.sessions.get(session_id)
        if current is None:
            return False
        self.sessions[session_id] = replace(current, **changes.as_values())
        return True

    async def delete_session(self, session_id: str) -> bool:
        return self.sessions.pop(session_id, None) is not None


@dataclass
class FailingSessionRepository(SessionRepository):
    """Repository whose every call fails like an unreachable database."""

    message: str = "connection refused"

    async def ping(self) -> bool:
        raise ConnectionError(self.message)

    async def list_sessions(self, session_type: str | None) -> list[SessionRecord]:
        raise ConnectionError(self.message)

    async def get_session(self, session_id: str) -> SessionRecord | None:
        raise ConnectionError(self.message)

    async def create_session(self, record: SessionRecord) -> SessionRecord:
        raise ConnectionError(self.message)

    async def update_session(self, session_id: str, changes: SessionChanges) -> bool:
        raise ConnectionError(self.message)

    async def delete_session(self, session_id: str) -> bool:
        raise ConnectionError(self.message)


def make_container(
    settings: Settings, repository: SessionRepository
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        allowed_origins=tuple(parse_allowed_origins(settings.cors_origin)),
        session_service=SessionService(repository),
        close_resources=close_resources,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        edit_token=EDIT_TOKEN,
        cors_origin=f"{ALLOWED_ORIGIN}, http://localhost:3000",
        database_url="sqlite+aiosqlite://",
    )


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def container(
    settings: Settings, session_repository: InMemorySessionRepository
) -> AppContainer:
    return make_container(settings, session_repository)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {EDIT_TOKEN}"}

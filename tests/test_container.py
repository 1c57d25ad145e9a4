"""Tests for container wiring."""

import asyncio

from natrack.adapters.sql_session_repository import SqlSessionRepository
from natrack.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.session_service.repository, SqlSessionRepository)
    assert container.allowed_origins == (
        "https://natrack.example.com",
        "http://localhost:3000",
    )
    asyncio.run(container.close_resources())

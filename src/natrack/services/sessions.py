"""Training session business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol
from uuid import uuid4

from natrack.domain.sessions import SessionChanges, SessionRecord
from natrack.domain.validation import (
    is_valid_date,
    is_valid_type,
    normalize_type,
    parse_distance,
)
from natrack.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for training sessions."""

    async def ping(self) -> bool:
        """Run a trivial query and report whether the database answered."""

    async def list_sessions(self, session_type: str | None) -> list[SessionRecord]:
        """Return sessions ordered by date, optionally filtered by type."""

    async def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""

    async def create_session(self, record: SessionRecord) -> SessionRecord:
        """Insert a session row and return it."""

    async def update_session(self, session_id: str, changes: SessionChanges) -> bool:
        """Apply changes to a session; return False when no row matched."""

    async def delete_session(self, session_id: str) -> bool:
        """Delete a session; return False when no row matched."""


@dataclass
class SessionService:
    """Application service for session CRUD."""

    repository: SessionRepository

    async def check_database(self) -> bool:
        """Return True when the database answers a liveness query."""
        return await self.repository.ping()

    async def list_sessions(
        self, session_type: str | None = None
    ) -> list[SessionRecord]:
        """List sessions, filtering by a normalized type when one is given."""
        if session_type is None:
            return await self.repository.list_sessions(None)
        normalized = normalize_type(session_type)
        if not is_valid_type(normalized):
            raise ValidationError("type must be one of: run, swim")
        return await self.repository.list_sessions(normalized)

    async def create_session(
        self,
        date: str | None,
        distance: object,
        session_type: str | None = None,
        session_id: str | None = None,
    ) -> SessionRecord:
        """Validate input and persist a new session."""
        if not is_valid_date(date) or distance is None or distance == "":
            raise ValidationError("distance and date are required")
        parsed_distance = parse_distance(distance)
        if parsed_distance is None:
            raise ValidationError("distance must be a number greater than 0")
        normalized_type = normalize_type(session_type)
        if not is_valid_type(normalized_type):
            raise ValidationError("type must be one of: run, swim")
        record = SessionRecord(
            id=session_id or str(uuid4()),
            date=str(date),
            distance=parsed_distance,
            type=normalized_type,
        )
        created = await self.repository.create_session(record)
        logger.info("Session created", extra={"session_id": created.id})
        return created

    async def update_session(
        self,
        session_id: str,
        date: str | None = None,
        distance: object = None,
        session_type: str | None = None,
    ) -> SessionRecord:
        """Validate supplied fields, update them and return the stored row."""
        if date is None and distance is None and session_type is None:
            raise ValidationError("no fields to update")
        rejected: list[str] = []
        changes = SessionChanges(
            date=_keep_valid(self._validated_date, date, rejected),
            distance=_keep_valid(self._validated_distance, distance, rejected),
            type=_keep_valid(self._validated_type, session_type, rejected),
        )
        if not changes.as_values():
            raise ValidationError("; ".join(rejected))
        if rejected:
            logger.info(
                "Ignoring invalid session fields",
                extra={"session_id": session_id, "reasons": rejected},
            )
        if not await self.repository.update_session(session_id, changes):
            raise NotFoundError(session_id)
        updated = await self.repository.get_session(session_id)
        if updated is None:
            raise NotFoundError(session_id)
        logger.info("Session updated", extra={"session_id": session_id})
        return updated

    async def delete_session(self, session_id: str) -> None:
        """Delete a session or raise NotFoundError."""
        if not await self.repository.delete_session(session_id):
            raise NotFoundError(session_id)
        logger.info("Session deleted", extra={"session_id": session_id})

    @staticmethod
    def _validated_date(date: str | None) -> str | None:
        if date is None:
            return None
        if not is_valid_date(date):
            raise ValidationError("date must not be empty")
        return date

    @staticmethod
    def _validated_distance(distance: object) -> float | None:
        if distance is None:
            return None
        parsed = parse_distance(distance)
        if parsed is None:
            raise ValidationError("distance must be a number greater than 0")
        return parsed

    @staticmethod
    def _validated_type(session_type: str | None) -> str | None:
        if session_type is None:
            return None
        normalized = normalize_type(session_type)
        if not is_valid_type(normalized):
            raise ValidationError("type must be one of: run, swim")
        return normalized


def _keep_valid(
    validate: Callable[[Any], Any], value: object, rejected: list[str]
) -> Any:
    try:
        return validate(value)
    except ValidationError as exc:
        rejected.append(str(exc))
        return None

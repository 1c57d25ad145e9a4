"""SQLAlchemy-backed session repository."""

from dataclasses import dataclass
from datetime import date

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncEngine

from natrack.adapters.database import sessions_table
from natrack.domain.sessions import SessionChanges, SessionRecord
from natrack.services.sessions import SessionRepository


@dataclass
class SqlSessionRepository(SessionRepository):
    """SQL implementation for training sessions."""

    engine: AsyncEngine

    async def ping(self) -> bool:
        """Run SELECT 1 and report whether it returned 1."""
        async with self.engine.connect() as connection:
            result = await connection.execute(text("SELECT 1 AS ok"))
            return result.scalar_one() == 1

    async def list_sessions(self, session_type: str | None) -> list[SessionRecord]:
        """Return sessions ordered by date, optionally filtered by type."""
        query = select(sessions_table).order_by(sessions_table.c.date.asc())
        if session_type is not None:
            query = query.where(sessions_table.c.type == session_type)
        async with self.engine.connect() as connection:
            result = await connection.execute(query)
            return [_to_record(row) for row in result.mappings()]

    async def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""
        query = select(sessions_table).where(sessions_table.c.id == session_id)
        async with self.engine.connect() as connection:
            result = await connection.execute(query)
            row = result.mappings().first()
        if row is None:
            return None
        return _to_record(row)

    async def create_session(self, record: SessionRecord) -> SessionRecord:
        """Insert a session row and return it."""
        statement = insert(sessions_table).values(
            id=record.id,
            date=_to_date(record.date),
            distance=record.distance,
            type=record.type,
        )
        async with self.engine.begin() as connection:
            await connection.execute(statement)
        return record

    async def update_session(self, session_id: str, changes: SessionChanges) -> bool:
        """Update only the supplied columns; return False when no row matched."""
        values = changes.as_values()
        if "date" in values:
            values["date"] = _to_date(str(values["date"]))
        statement = (
            update(sessions_table)
            .where(sessions_table.c.id == session_id)
            .values(**values)
        )
        async with self.engine.begin() as connection:
            result = await connection.execute(statement)
        return result.rowcount > 0

    async def delete_session(self, session_id: str) -> bool:
        """Delete a session row; return False when no row matched."""
        statement = delete(sessions_table).where(sessions_table.c.id == session_id)
        async with self.engine.begin() as connection:
            result = await connection.execute(statement)
        return result.rowcount > 0


def _to_date(value: str) -> date:
    return date.fromisoformat(value.strip())


def _to_record(row: RowMapping) -> SessionRecord:
    raw_date = row["date"]
    return SessionRecord(
        id=row["id"],
        date=raw_date.isoformat() if isinstance(raw_date, date) else str(raw_date),
        distance=float(row["distance"]),
        type=row["type"],
    )

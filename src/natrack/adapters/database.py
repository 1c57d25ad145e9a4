"""Database engine and table definitions."""

from sqlalchemy import Column, Date, Float, MetaData, String, Table
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from natrack.config import Settings

metadata = MetaData()

sessions_table = Table(
    "sessions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("date", Date, nullable=False),
    Column("distance", Float, nullable=False),
    Column("type", String(16), nullable=False, server_default="swim"),
)


def build_database_url(settings: Settings) -> URL:
    """Return the SQLAlchemy URL, preferring an explicit DATABASE_URL."""
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        drivername=settings.db_driver,
        username=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def create_engine(settings: Settings) -> AsyncEngine:
    """Create an async engine backed by a bounded connection pool."""
    url = build_database_url(settings)
    if url.get_backend_name() == "sqlite":
        return create_async_engine(url)
    return create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_pre_ping=True,
    )

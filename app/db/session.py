"""
Database session management.

Database owns the SQLAlchemy engine (and with it the connection pool).
One instance is built at startup and shared through app.state.
"""

from typing import Any, Generator, Optional

from fastapi import Request
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine, text

from app.core.config import Settings


class Database:
    """Process-scoped persistence gateway."""

    def __init__(self, url: str, **engine_kwargs: Any):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DATABASE_URL, **cls.engine_options(settings))

    @staticmethod
    def engine_options(settings: Settings) -> dict[str, Any]:
        """Engine keyword arguments for the configured database."""
        url = settings.DATABASE_URL
        engine_kwargs: dict[str, Any] = {
            "echo": settings.DEBUG,  # Log SQL queries in debug mode
            "pool_pre_ping": True,   # Verify connections before using
        }
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            return engine_kwargs

        engine_kwargs["pool_size"] = settings.DB_POOL_SIZE
        engine_kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
        # Neon only accepts TLS connections
        if "neon.tech" in url and "sslmode=" not in url:
            engine_kwargs["connect_args"] = {"sslmode": "require"}
        return engine_kwargs

    def connect(self) -> None:
        """
        Verify the database is reachable.

        Raises:
            SystemExit: if no connection can be established
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database connection error: {}", e)
            raise SystemExit(1) from e
        logger.info("Database connected ({})", self.engine.url.render_as_string(hide_password=True))

    def init_schema(self) -> None:
        """Create the users and contact_forms tables if they do not exist."""
        from app.db.init_db import init_db

        init_db(self.engine)

    def query(self, sql: str, params: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        """
        Execute a parameterised statement and return its rows.

        Args:
            sql: SQL text with named placeholders (":name")
            params: Values bound to the placeholders

        Returns:
            Rows as dicts, empty for statements that return nothing
        """
        with self.engine.begin() as conn:
            result = conn.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    def session(self) -> Session:
        return Session(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance, closed when the request ends
    """
    with get_database(request).session() as session:
        yield session

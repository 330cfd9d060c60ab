"""
Database initialization.

Creates all tables. Safe to run on every startup: existing tables are left alone.
"""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def init_db(engine: Engine) -> None:
    """Create the users and contact_forms tables if absent."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    SQLModel.metadata.create_all(engine, checkfirst=True)
    logger.info("Tables initialized successfully")

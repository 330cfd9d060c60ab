"""
Database initialization script.

Run this script to verify connectivity and create the database tables.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from loguru import logger

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.session import Database

if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    database = Database.from_settings(settings)
    try:
        database.connect()
        database.init_schema()
    finally:
        database.dispose()

    logger.info("Database initialized")

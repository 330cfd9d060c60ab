"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.core.mailer import MailTransport, build_transport
from app.db.session import Database
from app.services.notification_service import NotificationService


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    database.connect()
    database.init_schema()
    yield
    database.dispose()
    logger.info("Database pool closed")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    transport: Optional[MailTransport] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to settings read from the environment
        database: Defaults to a pooled engine on DATABASE_URL
        transport: Defaults to the HTTP provider, or log-only when unconfigured
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="User signup and contact form backend.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.notifier = NotificationService(transport or build_transport(settings), settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"])

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()

"""Shared fixtures: in-memory SQLite database, recording mail transport, test client."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.mailer import DeliveryReceipt, EmailMessage
from app.db.session import Database
from app.main import create_app
from app.services.notification_service import NotificationService


class RecordingTransport:
    """Mail transport that keeps every message; raises when `fail` is set."""

    def __init__(self):
        self.sent: list[EmailMessage] = []
        self.fail = False

    def deliver(self, message: EmailMessage) -> DeliveryReceipt:
        if self.fail:
            raise ConnectionError("SMTP relay unreachable")
        self.sent.append(message)
        return DeliveryReceipt(recipient=message.to, provider_id=f"msg-{len(self.sent)}")


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", ADMIN_EMAIL="owner@example.com", FROM_EMAIL="noreply@example.com",
                    LOG_LEVEL="WARNING")


@pytest.fixture
def database():
    db = Database("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def notifier(transport, settings) -> NotificationService:
    return NotificationService(transport, settings)


@pytest.fixture
def client(settings, database, transport):
    app = create_app(settings=settings, database=database, transport=transport)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def signup_payload() -> dict:
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "5550100",
        "password": "analytical-engine",
        "confirmPassword": "analytical-engine",
        "agreeToTerms": True,
    }


@pytest.fixture
def contact_payload() -> dict:
    return {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "phone": "123",
        "message": "hi",
    }

"""Business logic services."""

from app.services.user_service import UserService
from app.services.contact_service import ContactService
from app.services.notification_service import ContactEvent, NotificationService

__all__ = [
    "UserService",
    "ContactService",
    "ContactEvent",
    "NotificationService",
]

"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.contact_form import ContactFormRepository

__all__ = [
    "UserRepository",
    "ContactFormRepository",
]

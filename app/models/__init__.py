"""SQLModel database models."""

from app.models.user import User
from app.models.contact_form import ContactForm

__all__ = [
    "User",
    "ContactForm",
]

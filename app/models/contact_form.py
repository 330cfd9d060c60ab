"""
Contact form database model.

Defines the contact_forms table. Submissions are never edited in place.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

DEFAULT_SERVICE_TYPE = "Other"


class ContactForm(SQLModel, table=True):
    """
    A single contact form submission.

    No uniqueness on email: the same person may write several times.
    """
    __tablename__ = "contact_forms"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=100, nullable=False)
    last_name: str = Field(max_length=100, nullable=False)
    email: str = Field(max_length=255, nullable=False)
    phone: str = Field(max_length=20, nullable=False)
    message: str = Field(sa_column=Column(Text, nullable=False))
    subject: Optional[str] = Field(default=None, max_length=255)
    service_type: str = Field(default=DEFAULT_SERVICE_TYPE, max_length=50)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

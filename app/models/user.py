"""
User database model.

Defines the users table for account signup and management.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    Registered user account.

    `password` holds the bcrypt digest, never the plaintext, and is
    excluded from every response schema.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Profile
    first_name: str = Field(max_length=100, nullable=False)
    last_name: str = Field(max_length=100, nullable=False)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    phone: str = Field(max_length=20, nullable=False)

    # Credentials
    password: str = Field(max_length=255, nullable=False)
    agree_to_terms: bool = Field(default=False, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

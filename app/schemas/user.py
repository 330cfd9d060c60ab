"""
User API schemas.

Pydantic models for user-related request/response validation.
Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema accepting and emitting camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Request schemas
class SignUpRequest(CamelModel):
    """
    Schema for account signup.

    Required fields are checked by UserService.sign_up so that missing and
    empty values are rejected the same way.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    agree_to_terms: bool = False


class UserCreate(CamelModel):
    """Validated signup data handed to the repository."""
    first_name: str
    last_name: str
    email: str
    phone: str
    password: str
    agree_to_terms: bool


class UserUpdate(CamelModel):
    """Partial profile update. Absent or empty fields are left untouched."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


# Response schemas
class UserResponse(CamelModel):
    """Schema for user data in API responses (no password digest)."""
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    agree_to_terms: bool
    created_at: datetime
    updated_at: datetime


class SignUpResponse(BaseModel):
    message: str = Field(..., description="Human readable confirmation")
    user: UserResponse


class UserUpdateResponse(BaseModel):
    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    message: str

"""Pydantic schemas for request/response validation."""

from app.schemas.user import (
    MessageResponse,
    SignUpRequest,
    SignUpResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
    UserUpdateResponse,
)
from app.schemas.contact_form import ContactFormCreate, ContactFormResponse, ContactSubmitResponse

__all__ = [
    "MessageResponse",
    "SignUpRequest",
    "SignUpResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "UserUpdateResponse",
    "ContactFormCreate",
    "ContactFormResponse",
    "ContactSubmitResponse",
]

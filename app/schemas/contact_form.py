"""
Contact form API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.user import CamelModel


class ContactFormCreate(CamelModel):
    """
    Schema for a contact form submission.

    `subject` and `service_type` are optional; the repository stores a
    missing service type as "Other".
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    subject: Optional[str] = None
    service_type: Optional[str] = None


class ContactFormResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    message: str
    subject: Optional[str]
    service_type: str
    created_at: datetime
    updated_at: datetime


class ContactSubmitResponse(BaseModel):
    message: str
    data: ContactFormResponse

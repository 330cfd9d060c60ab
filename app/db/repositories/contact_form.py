"""
Contact form repository.

Handles database operations for ContactForm model.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, delete, select

from app.core.exceptions import StorageError
from app.models.contact_form import DEFAULT_SERVICE_TYPE, ContactForm
from app.schemas.contact_form import ContactFormCreate


class ContactFormRepository:
    """Repository for ContactForm database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, data: ContactFormCreate) -> ContactForm:
        """Store a submission; empty subject becomes NULL, empty service type becomes "Other"."""
        form = ContactForm(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            message=data.message,
            subject=data.subject or None,
            service_type=data.service_type or DEFAULT_SERVICE_TYPE,
        )
        self.session.add(form)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise StorageError.from_integrity_error(e) from e
        self.session.refresh(form)
        return form

    def get_by_id(self, form_id: int) -> Optional[ContactForm]:
        return self.session.get(ContactForm, form_id)

    def get_all(self) -> list[ContactForm]:
        """Get all submissions, newest first."""
        statement = select(ContactForm).order_by(ContactForm.created_at.desc(), ContactForm.id.desc())
        return list(self.session.exec(statement).all())

    def delete(self, form_id: int) -> bool:
        result = self.session.exec(delete(ContactForm).where(ContactForm.id == form_id))
        self.session.commit()
        return result.rowcount > 0

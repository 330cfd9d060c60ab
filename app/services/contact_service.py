"""
Contact service.

Business logic for contact form submissions.
"""

from typing import Optional

from fastapi import BackgroundTasks
from loguru import logger
from sqlmodel import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.db.repositories.contact_form import ContactFormRepository
from app.models.contact_form import ContactForm
from app.schemas.contact_form import ContactFormCreate
from app.services.notification_service import ContactEvent, NotificationService


class ContactService:
    """Service for contact form business logic."""

    def __init__(
        self,
        session: Session,
        notifier: NotificationService,
        background_tasks: Optional[BackgroundTasks] = None,
    ):
        self.repository = ContactFormRepository(session)
        self.notifier = notifier
        self.background_tasks = background_tasks

    def submit(self, data: ContactFormCreate) -> ContactForm:
        """
        Store a contact form and notify admin and submitter.

        Raises:
            ValidationError: If a required field is missing or empty
        """
        if not all([data.first_name, data.last_name, data.email, data.phone, data.message]):
            raise ValidationError("All required fields must be provided")

        form = self.repository.create(data)
        logger.info("Contact form {} received from {}", form.id, form.email)

        event = ContactEvent.from_contact_form(form)
        name = form.first_name or form.email
        if self.background_tasks is not None:
            self.background_tasks.add_task(self.notifier.notify_admin, event)
            self.background_tasks.add_task(self.notifier.acknowledge_client, form.email, name)
        else:
            self.notifier.notify_admin(event)
            self.notifier.acknowledge_client(form.email, name)
        return form

    def get_all(self) -> list[ContactForm]:
        return self.repository.get_all()

    def get(self, form_id: int) -> ContactForm:
        form = self.repository.get_by_id(form_id)
        if not form:
            raise NotFoundError("Contact form not found")
        return form

    def delete(self, form_id: int) -> None:
        if not self.repository.delete(form_id):
            raise NotFoundError("Contact form not found")

"""
Notification service.

Builds the admin notification and client acknowledgement emails and hands
them to the mail transport. Delivery is best-effort: failures are logged
and never reach the caller.
"""

from dataclasses import dataclass
from datetime import datetime
from html import escape
from typing import Optional

from loguru import logger

from app.core.config import Settings
from app.core.mailer import DeliveryReceipt, EmailMessage, MailTransport
from app.models.contact_form import ContactForm
from app.models.user import User


@dataclass(frozen=True)
class ContactEvent:
    """Payload for the admin notification (contact submission or registration)."""

    first_name: str
    last_name: str
    email: str
    phone: str
    message: str
    subject: Optional[str] = None
    service_type: Optional[str] = None

    @classmethod
    def from_contact_form(cls, form: ContactForm) -> "ContactEvent":
        return cls(
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            phone=form.phone,
            message=form.message,
            subject=form.subject,
            service_type=form.service_type,
        )

    @classmethod
    def from_registration(cls, user: User) -> "ContactEvent":
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            subject="New User Registration",
            message=f"A new user has signed up: {user.first_name} {user.last_name} ({user.email})",
            service_type="Other",
        )


ADMIN_TEMPLATE = """
    <h2>New Contact Form Submission</h2>
    <p><strong>Name:</strong> {first_name} {last_name}</p>
    <p><strong>Email:</strong> {email}</p>
    <p><strong>Phone:</strong> {phone}</p>
    <p><strong>Service Type:</strong> {service_type}</p>
    {subject_line}
    <p><strong>Message:</strong></p>
    <p>{message}</p>
    <hr>
    <p><em>Submitted on: {submitted_on}</em></p>
"""

CLIENT_TEMPLATE = """
    <h2>Thank You for Contacting {company}!</h2>
    <p>Hi {name},</p>
    <p>Thank you for reaching out to us. We have received your message and appreciate your interest in our services.</p>
    <p>Our team will review your request and get back to you as soon as possible. We typically respond within 24-48 hours.</p>
    <p>If you have any urgent inquiries, please feel free to call us directly.</p>
    <br>
    <p>Best regards,<br>
    <strong>{company} Team</strong><br>
    Achieve Your Goals</p>
"""


class NotificationService:
    """Formats and dispatches transactional emails."""

    def __init__(self, transport: MailTransport, settings: Settings):
        self.transport = transport
        self.settings = settings

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def admin_notification(self, event: ContactEvent) -> EmailMessage:
        subject_line = f"<p><strong>Subject:</strong> {escape(event.subject)}</p>" if event.subject else ""
        html = ADMIN_TEMPLATE.format(
            first_name=escape(event.first_name),
            last_name=escape(event.last_name),
            email=escape(event.email),
            phone=escape(event.phone),
            service_type=escape(event.service_type or "Not specified"),
            subject_line=subject_line,
            message=escape(event.message).replace("\n", "<br>"),
            submitted_on=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        )
        return EmailMessage(
            sender=self.settings.FROM_EMAIL,
            to=self.settings.admin_address,
            subject=f"New Contact Form: {event.subject or event.first_name} {event.last_name}",
            html=html,
        )

    def client_acknowledgement(self, email: str, name: Optional[str] = None) -> EmailMessage:
        company = escape(self.settings.COMPANY_NAME)
        return EmailMessage(
            sender=self.settings.FROM_EMAIL,
            to=email,
            subject=f"We Received Your Message - {self.settings.COMPANY_NAME}",
            html=CLIENT_TEMPLATE.format(company=company, name=escape(name or email)),
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def notify_admin(self, event: ContactEvent) -> Optional[DeliveryReceipt]:
        """Send the admin notification; returns None on failure."""
        return self._dispatch(self.admin_notification(event), "admin notification")

    def acknowledge_client(self, email: str, name: Optional[str] = None) -> Optional[DeliveryReceipt]:
        """Send the thank-you email to the submitter; returns None on failure."""
        return self._dispatch(self.client_acknowledgement(email, name), "client acknowledgement")

    def _dispatch(self, message: EmailMessage, kind: str) -> Optional[DeliveryReceipt]:
        try:
            receipt = self.transport.deliver(message)
        except Exception:
            logger.exception("Failed to send {} to {}", kind, message.to)
            return None
        logger.info("Sent {} to {}", kind, message.to)
        return receipt

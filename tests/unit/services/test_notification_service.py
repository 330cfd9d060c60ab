"""Tests for email templates and best-effort dispatch."""

from dataclasses import replace

import pytest

from app.models.contact_form import ContactForm
from app.models.user import User
from app.services.notification_service import ContactEvent, NotificationService


@pytest.fixture
def event() -> ContactEvent:
    return ContactEvent(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone="5550100",
        message="Line one\nLine two",
        subject="Partnership",
        service_type="Consulting",
    )


class TestAdminNotification:
    def test_addressed_to_admin(self, notifier, event):
        message = notifier.admin_notification(event)
        assert message.to == "owner@example.com"
        assert message.sender == "noreply@example.com"

    def test_subject_uses_submission_subject(self, notifier, event):
        assert notifier.admin_notification(event).subject == "New Contact Form: Partnership Lovelace"

    def test_subject_falls_back_to_first_name(self, notifier, event):
        event = replace(event, subject=None)
        assert notifier.admin_notification(event).subject == "New Contact Form: Ada Lovelace"

    def test_body_summarises_event(self, notifier, event):
        html = notifier.admin_notification(event).html
        assert "ada@example.com" in html
        assert "5550100" in html
        assert "Consulting" in html
        assert "<strong>Subject:</strong> Partnership" in html
        assert "Line one<br>Line two" in html

    def test_missing_service_type(self, notifier, event):
        event = replace(event, service_type=None, subject=None)
        html = notifier.admin_notification(event).html
        assert "Not specified" in html
        assert "<strong>Subject:</strong>" not in html

    def test_user_input_is_escaped(self, notifier, event):
        event = replace(event, message="<script>alert(1)</script>")
        html = notifier.admin_notification(event).html
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestClientAcknowledgement:
    def test_greets_by_name(self, notifier):
        message = notifier.client_acknowledgement("ada@example.com", "Ada")
        assert message.to == "ada@example.com"
        assert "Hi Ada," in message.html
        assert message.subject == "We Received Your Message - Mango Admi"

    def test_falls_back_to_email(self, notifier):
        assert "Hi ada@example.com," in notifier.client_acknowledgement("ada@example.com").html


class TestDispatch:
    def test_delivers_both(self, notifier, transport, event):
        assert notifier.notify_admin(event) is not None
        assert notifier.acknowledge_client("ada@example.com", "Ada") is not None
        assert [m.to for m in transport.sent] == ["owner@example.com", "ada@example.com"]

    def test_failure_is_swallowed(self, notifier, transport, event):
        transport.fail = True
        assert notifier.notify_admin(event) is None
        assert notifier.acknowledge_client("ada@example.com", "Ada") is None
        assert transport.sent == []


class TestContactEvent:
    def test_from_contact_form(self):
        form = ContactForm(first_name="A", last_name="B", email="a@b.com", phone="1", message="hi",
                           service_type="Other")
        event = ContactEvent.from_contact_form(form)
        assert event.subject is None
        assert event.message == "hi"

    def test_from_registration(self):
        user = User(first_name="Ada", last_name="Lovelace", email="ada@example.com", phone="1", password="x")
        event = ContactEvent.from_registration(user)
        assert event.subject == "New User Registration"
        assert event.service_type == "Other"
        assert "Ada Lovelace (ada@example.com)" in event.message

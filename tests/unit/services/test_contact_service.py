"""Tests for ContactService business rules."""

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.contact_form import ContactFormCreate
from app.services.contact_service import ContactService


@pytest.fixture
def service(session, notifier) -> ContactService:
    return ContactService(session, notifier)


@pytest.fixture
def form() -> ContactFormCreate:
    return ContactFormCreate(first_name="A", last_name="B", email="a@b.com", phone="123", message="hi")


class TestSubmit:
    @pytest.mark.parametrize("field", ["first_name", "last_name", "email", "phone", "message"])
    def test_required_fields(self, service, form, field):
        with pytest.raises(ValidationError, match="All required fields must be provided"):
            service.submit(form.model_copy(update={field: ""}))
        assert service.get_all() == []

    def test_optional_fields_missing(self, service, form):
        created = service.submit(form)
        assert created.service_type == "Other"
        assert created.subject is None

    def test_emails_admin_and_submitter(self, service, form, transport):
        service.submit(form.model_copy(update={"subject": "Quote"}))
        assert [m.to for m in transport.sent] == ["owner@example.com", "a@b.com"]
        assert transport.sent[0].subject == "New Contact Form: Quote B"
        assert "Hi A," in transport.sent[1].html

    def test_mail_failure_does_not_fail_submission(self, service, form, transport):
        transport.fail = True
        created = service.submit(form)
        assert service.get(created.id).message == "hi"


class TestManage:
    def test_get_missing(self, service):
        with pytest.raises(NotFoundError, match="Contact form not found"):
            service.get(1)

    def test_delete(self, service, form):
        created = service.submit(form)
        service.delete(created.id)
        with pytest.raises(NotFoundError):
            service.delete(created.id)

"""
Contact form endpoints.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_contact_service
from app.schemas.contact_form import ContactFormCreate, ContactFormResponse, ContactSubmitResponse
from app.schemas.user import MessageResponse
from app.services.contact_service import ContactService

router = APIRouter()


@router.post("/submit",
             summary="Submit the contact form.",
             response_model=ContactSubmitResponse,
             status_code=status.HTTP_201_CREATED)
def submit_contact_form(data: ContactFormCreate, service: ContactService = Depends(get_contact_service)):
    """Store the submission; admin and submitter are emailed after the response."""
    form = service.submit(data)
    return ContactSubmitResponse(
        message="Thank you for contacting us. We have received your message and will get back to you soon!",
        data=ContactFormResponse.model_validate(form),
    )


@router.get("", summary="List contact forms, newest first.", response_model=list[ContactFormResponse])
def get_contact_forms(service: ContactService = Depends(get_contact_service)):
    return service.get_all()


@router.get("/{form_id}", summary="Get a contact form by id.", response_model=ContactFormResponse)
def get_contact_form(form_id: int, service: ContactService = Depends(get_contact_service)):
    return service.get(form_id)


@router.delete("/{form_id}", summary="Delete a contact form.", response_model=MessageResponse)
def delete_contact_form(form_id: int, service: ContactService = Depends(get_contact_service)):
    service.delete(form_id)
    return MessageResponse(message="Contact form deleted successfully")

"""
User endpoints.

Signup and basic account management.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_user_service
from app.schemas.user import (
    MessageResponse,
    SignUpRequest,
    SignUpResponse,
    UserResponse,
    UserUpdate,
    UserUpdateResponse,
)
from app.services.user_service import UserService

router = APIRouter()


@router.post("/signup",
             summary="User signup endpoint.",
             response_model=SignUpResponse,
             status_code=status.HTTP_201_CREATED)
def sign_up(data: SignUpRequest, service: UserService = Depends(get_user_service)):
    """
    Register a new user.

    Returns:
        Created user data (without password)

    Raises:
        400: Missing field, password mismatch or terms not accepted
        409: Email already registered
    """
    user = service.sign_up(data)
    return SignUpResponse(
        message="Account created successfully! We have received your information and will get back to you soon.",
        user=UserResponse.model_validate(user),
    )


@router.get("/{user_id}", summary="Get a user by id.", response_model=UserResponse)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get_user(user_id)


@router.get("", summary="List all users, newest first.", response_model=list[UserResponse])
def get_all_users(service: UserService = Depends(get_user_service)):
    return service.get_all_users()


@router.put("/{user_id}", summary="Update first name, last name or phone.", response_model=UserUpdateResponse)
def update_user(user_id: int, changes: UserUpdate, service: UserService = Depends(get_user_service)):
    """Only non-empty fields are applied; a request with none of them is a 404."""
    user = service.update_user(user_id, changes)
    return UserUpdateResponse(message="User updated successfully", user=UserResponse.model_validate(user))


@router.delete("/{user_id}", summary="Delete a user.", response_model=MessageResponse)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")

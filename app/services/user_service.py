"""
User service.

Business logic for signup and user management.
"""

from typing import Optional

from fastapi import BackgroundTasks
from loguru import logger
from sqlmodel import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.security import verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import SignUpRequest, UserCreate, UserUpdate
from app.services.notification_service import ContactEvent, NotificationService


class UserService:
    """Service for user-related business logic."""

    def __init__(
        self,
        session: Session,
        notifier: NotificationService,
        background_tasks: Optional[BackgroundTasks] = None,
    ):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
            notifier: Sends signup emails
            background_tasks: When given, emails go out after the response
        """
        self.repository = UserRepository(session)
        self.notifier = notifier
        self.background_tasks = background_tasks

    def sign_up(self, data: SignUpRequest) -> User:
        """
        Register a new user.

        Args:
            data: Signup form

        Returns:
            Created user

        Raises:
            ValidationError: If a field is missing, passwords differ or terms not accepted
            ConflictError: If email already exists
        """
        if not all([data.first_name, data.last_name, data.email, data.phone, data.password]):
            raise ValidationError("All fields are required")

        if data.password != data.confirm_password:
            raise ValidationError("Passwords do not match")

        if not data.agree_to_terms:
            raise ValidationError("You must agree to the terms and conditions")

        if self.repository.exists_by_email(data.email):
            raise ConflictError("Email already registered")

        user = self.repository.create(UserCreate(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            password=data.password,
            agree_to_terms=data.agree_to_terms,
        ))
        logger.info("New user registered: {} (id={})", user.email, user.id)

        self._notify(ContactEvent.from_registration(user), user.email, user.first_name)
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """
        Check credentials.

        Not exposed over HTTP yet; kept for the login endpoint.

        Returns:
            The user if the password matches, None otherwise
        """
        user = self.repository.get_by_email(email)
        if not user or not verify_password(password, user.password):
            return None
        return user

    def get_user(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.repository.get_by_email(email)

    def get_all_users(self) -> list[User]:
        return self.repository.get_all()

    def update_user(self, user_id: int, changes: UserUpdate) -> User:
        """
        Update first name, last name and/or phone.

        Raises:
            NotFoundError: If no such user or no field to update
        """
        user = self.repository.update(user_id, changes)
        if not user:
            raise NotFoundError("User not found")
        return user

    def delete_user(self, user_id: int) -> None:
        if not self.repository.delete(user_id):
            raise NotFoundError("User not found")

    def _notify(self, event: ContactEvent, email: str, name: str) -> None:
        if self.background_tasks is not None:
            self.background_tasks.add_task(self.notifier.notify_admin, event)
            self.background_tasks.add_task(self.notifier.acknowledge_client, email, name)
        else:
            self.notifier.notify_admin(event)
            self.notifier.acknowledge_client(email, name)

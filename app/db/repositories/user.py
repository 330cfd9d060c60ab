"""
User repository.

Handles database operations for User model.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, delete, select, update

from app.core.exceptions import StorageError
from app.core.security import get_password_hash
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

UPDATABLE_FIELDS = ("first_name", "last_name", "phone")


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, data: UserCreate) -> User:
        """
        Create a new user in the database.

        Args:
            data: Validated signup data with the plaintext password

        Returns:
            Created user with generated id and timestamps

        Raises:
            StorageError: If a constraint is violated (e.g. duplicate email)
        """
        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            password=get_password_hash(data.password),
            agree_to_terms=data.agree_to_terms,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise StorageError.from_integrity_error(e) from e
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (exact match).

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_all(self) -> list[User]:
        """Get all users, most recently created first."""
        statement = select(User).order_by(User.created_at.desc(), User.id.desc())
        return list(self.session.exec(statement).all())

    def update(self, user_id: int, changes: UserUpdate) -> Optional[User]:
        """
        Apply a partial profile update.

        Only first_name, last_name and phone are considered, and only when
        present and non-empty.

        Args:
            user_id: User ID
            changes: Partial update

        Returns:
            Updated user, or None if nothing to update or no such user
        """
        values = {field: getattr(changes, field) for field in UPDATABLE_FIELDS if getattr(changes, field)}
        if not values:
            return None

        statement = (
            update(User)
            .where(User.id == user_id)
            .values(**values, updated_at=datetime.now(timezone.utc))
            .returning(User)
        )
        user = self.session.exec(statement).scalar_one_or_none()
        self.session.commit()
        if user is None:
            return None

        self.session.refresh(user)
        return user

    def delete(self, user_id: int) -> bool:
        """
        Delete a user by ID.

        Args:
            user_id: User ID to delete

        Returns:
            True if deleted, False if not found
        """
        result = self.session.exec(delete(User).where(User.id == user_id))
        self.session.commit()
        return result.rowcount > 0

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None

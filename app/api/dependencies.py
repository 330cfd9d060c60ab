"""
Shared API dependencies.

Reusable FastAPI dependencies for database access and services.
"""

from fastapi import BackgroundTasks, Depends, Request
from sqlmodel import Session

from app.db.session import get_db
from app.services.contact_service import ContactService
from app.services.notification_service import NotificationService
from app.services.user_service import UserService


def get_notifier(request: Request) -> NotificationService:
    return request.app.state.notifier


def get_user_service(background_tasks: BackgroundTasks, db: Session = Depends(get_db),
                     notifier: NotificationService = Depends(get_notifier), ) -> UserService:
    return UserService(db, notifier, background_tasks)


def get_contact_service(background_tasks: BackgroundTasks, db: Session = Depends(get_db),
                        notifier: NotificationService = Depends(get_notifier), ) -> ContactService:
    return ContactService(db, notifier, background_tasks)

"""
Notification service.

Notifications are simple status-tagged messages; the default status for a
new notification is ``Unread``. Status values are free text so the front end
can introduce its own (``Read``, ``Archived``...). Updates replace title,
message and status as a whole; an omitted status falls back to ``Unread``.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from licensing.db import models
from licensing.db.repositories import notifications as notification_repo
from licensing.errors import NotFoundError, require_max_length, require_positive_id, require_text

DEFAULT_STATUS = "Unread"
TITLE_MAX_LENGTH = 200
STATUS_MAX_LENGTH = 50


class NotificationService:

    def __init__(self, db: Session):
        self.db = db

    def list_notifications(self) -> List[models.Notification]:
        return notification_repo.get_notifications(self.db)

    def get_notification(self, notification_id: int) -> models.Notification:
        require_positive_id(notification_id, "notification")
        notification = notification_repo.get_notification(self.db, notification_id)
        if notification is None:
            raise NotFoundError(f"Notification with ID {notification_id} not found.")
        return notification

    def list_by_status(self, status: str) -> List[models.Notification]:
        status = require_text(status, "Status is required")
        return notification_repo.get_notifications_by_status(self.db, status)

    def _validated(self, title: str, message: str, status: Optional[str]):
        title = require_text(title, "Notification title is required")
        require_max_length(title, TITLE_MAX_LENGTH, "Notification title")
        message = require_text(message, "Notification message is required")
        status = (status or "").strip() or DEFAULT_STATUS
        require_max_length(status, STATUS_MAX_LENGTH, "Notification status")
        return title, message, status

    def create_notification(self, title: str, message: str, status: Optional[str] = None) -> models.Notification:
        title, message, status = self._validated(title, message, status)
        return notification_repo.create_notification(self.db, title=title, message=message, status=status)

    def update_notification(
        self,
        notification_id: int,
        title: str,
        message: Optional[str] = None,
        status: Optional[str] = None,
    ) -> models.Notification:
        notification = self.get_notification(notification_id)
        title, message, status = self._validated(title, message, status)
        return notification_repo.update_notification(
            self.db, notification, title=title, message=message, status=status
        )

    def delete_notification(self, notification_id: int) -> None:
        notification = self.get_notification(notification_id)
        notification_repo.delete_notification(self.db, notification)

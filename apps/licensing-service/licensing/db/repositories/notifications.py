"""
Notification repository functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy import desc
from sqlalchemy.orm import Session

from licensing.db import models


def get_notifications(db: Session) -> List[models.Notification]:
    return db.query(models.Notification).order_by(desc(models.Notification.created_date)).all()


def get_notification(db: Session, notification_id: int) -> Optional[models.Notification]:
    return (
        db.query(models.Notification)
        .filter(models.Notification.notification_id == notification_id)
        .first()
    )


def get_notifications_by_status(db: Session, status: str) -> List[models.Notification]:
    return (
        db.query(models.Notification)
        .filter(models.Notification.status == status)
        .order_by(desc(models.Notification.created_date))
        .all()
    )


def create_notification(db: Session, *, title: str, message: str, status: str) -> models.Notification:
    db_notification = models.Notification(title=title, message=message, status=status)
    db.add(db_notification)
    db.commit()
    db.refresh(db_notification)
    return db_notification


def update_notification(
    db: Session,
    db_notification: models.Notification,
    *,
    title: str,
    message: str,
    status: str,
) -> models.Notification:
    db_notification.title = title
    db_notification.message = message
    db_notification.status = status
    db_notification.updated_date = models.now_utc()
    db.commit()
    db.refresh(db_notification)
    return db_notification


def delete_notification(db: Session, db_notification: models.Notification) -> None:
    try:
        db.delete(db_notification)
        db.commit()
    except Exception:
        db.rollback()
        raise

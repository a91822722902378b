"""Notification repository - Database operations for the in-app inbox"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Notification, UserProfile


class NotificationRepository:
    """Repository for notification database operations"""

    @staticmethod
    def get_for_user(db: Session, user_id: str) -> list[Notification]:
        """Newest first"""
        return (
            db.query(Notification)
            .filter(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
            .all()
        )

    @staticmethod
    def count_unread(db: Session, user_id: str) -> int:
        return (
            db.query(func.count(Notification.id))
            .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
            .scalar()
        )

    @staticmethod
    def get_by_id(db: Session, notification_id: str) -> Optional[Notification]:
        return db.query(Notification).filter(Notification.id == notification_id).first()

    @staticmethod
    def add_many(db: Session, notifications: list[Notification]) -> None:
        db.add_all(notifications)
        db.commit()

    @staticmethod
    def mark_read(db: Session, notification: Notification) -> Notification:
        notification.is_read = True
        db.commit()
        db.refresh(notification)
        return notification

    @staticmethod
    def mark_all_read(db: Session, user_id: str) -> int:
        updated = (
            db.query(Notification)
            .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
            .update({Notification.is_read: True}, synchronize_session=False)
        )
        db.commit()
        return updated

    @staticmethod
    def delete(db: Session, notification: Notification) -> None:
        db.delete(notification)
        db.commit()

    @staticmethod
    def get_admin_user_ids(db: Session) -> list[str]:
        rows = db.query(UserProfile.user_id).filter(UserProfile.role == "admin").all()
        return [row.user_id for row in rows]

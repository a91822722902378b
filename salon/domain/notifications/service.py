"""
Notification service

Writes in-app notifications when appointments are created or change status,
and serves the per-user inbox. Fan-out is a best-effort side channel: it runs
after the appointment has been committed and never fails the calling request.
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment, Notification
from ..catalog.repository import CatalogRepository
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

STATUS_NOTIFICATION_TYPES = {
    "cancelled": ("appointment_cancelled", "Appointment cancelled"),
    "completed": ("appointment_completed", "Appointment completed"),
}


class NotificationService:
    """Service layer for notifications"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepository()

    # ------------------------------------------------------------------
    # Fan-out
    # ------------------------------------------------------------------

    def notify_new_appointment(self, appointment: Appointment) -> int:
        """
        Notify the booked stylist (when linked to a user) and every admin.

        Returns the number of notifications written, 0 on failure.
        """
        appointment_id = appointment.id
        try:
            recipients = []
            stylist = CatalogRepository.get_team_member(self.db, appointment.stylist_id)
            if stylist and stylist.user_id:
                recipients.append(stylist.user_id)

            for admin_id in self.repo.get_admin_user_ids(self.db):
                if admin_id not in recipients:
                    recipients.append(admin_id)

            message = (
                f"{appointment.client_name} booked an appointment on "
                f"{appointment.date.isoformat()} at {appointment.time}"
            )
            notifications = [
                Notification(
                    user_id=user_id,
                    type="new_appointment",
                    title="New appointment",
                    message=message,
                    related_id=appointment_id,
                )
                for user_id in recipients
            ]
            self.repo.add_many(self.db, notifications)
            logger.info(
                f"🔔 Appointment {appointment_id}: notified {len(notifications)} recipient(s)"
            )
            return len(notifications)
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to fan out notifications for appointment {appointment_id}: {e}")
            return 0

    def notify_status_change(self, appointment: Appointment, previous_status: str) -> int:
        """Tell the booking client that their appointment status changed"""
        if appointment.status == previous_status or appointment.client_id == "guest":
            return 0

        appointment_id = appointment.id

        notification_type, title = STATUS_NOTIFICATION_TYPES.get(
            appointment.status, ("appointment_update", "Appointment updated")
        )
        try:
            self.repo.add_many(
                self.db,
                [
                    Notification(
                        user_id=appointment.client_id,
                        type=notification_type,
                        title=title,
                        message=(
                            f"Your appointment on {appointment.date.isoformat()} at "
                            f"{appointment.time} is now {appointment.status}"
                        ),
                        related_id=appointment_id,
                    )
                ],
            )
            return 1
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to notify status change for appointment {appointment_id}: {e}")
            return 0

    # ------------------------------------------------------------------
    # Inbox
    # ------------------------------------------------------------------

    def get_notifications(self, user_id: str) -> list[Notification]:
        return self.repo.get_for_user(self.db, user_id)

    def get_unread_count(self, user_id: str) -> int:
        return self.repo.count_unread(self.db, user_id)

    def _get_owned(self, notification_id: str, user_id: str) -> Notification:
        notification = self.repo.get_by_id(self.db, notification_id)
        if not notification:
            raise HTTPException(status_code=404, detail="Notification not found")
        if notification.user_id != user_id:
            logger.warning(f"🚫 User {user_id} tried to access notification {notification_id}")
            raise HTTPException(status_code=403, detail="You can only access your own notifications")
        return notification

    def mark_read(self, notification_id: str, user_id: str) -> Notification:
        return self.repo.mark_read(self.db, self._get_owned(notification_id, user_id))

    def mark_all_read(self, user_id: str) -> int:
        return self.repo.mark_all_read(self.db, user_id)

    def delete(self, notification_id: str, user_id: str) -> None:
        self.repo.delete(self.db, self._get_owned(notification_id, user_id))

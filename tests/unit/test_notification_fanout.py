"""
Unit tests for best-effort notification fan-out with a failing database.
"""

from datetime import date
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from salon.domain.notifications.repository import NotificationRepository
from salon.domain.notifications.service import NotificationService


def _session():
    db = MagicMock()
    db.query.return_value.filter.return_value.first.return_value = None
    db.query.return_value.filter.return_value.all.return_value = [MagicMock(user_id="uid-admin")]
    return db


class ExpiringAppointment:
    """Appointment whose attributes can no longer be loaded once the session rolled back"""

    def __init__(self, db):
        self._db = db
        self._id = "apt-1"
        self.stylist_id = "sty-1"
        self.client_id = "uid-client"
        self.client_name = "Claire Client"
        self.date = date(2026, 1, 19)
        self.time = "10:00"
        self.status = "cancelled"

    @property
    def id(self):
        if self._db.rollback.called:
            raise OperationalError("SELECT appointments", {}, Exception("database is locked"))
        return self._id


def _broken_add_many(db, notifications):
    raise OperationalError("INSERT INTO notifications", {}, Exception("database is locked"))


def test_new_appointment_fan_out_failure_is_swallowed(monkeypatch):
    db = _session()
    monkeypatch.setattr(NotificationRepository, "add_many", staticmethod(_broken_add_many))
    appointment = ExpiringAppointment(db)

    assert NotificationService(db).notify_new_appointment(appointment) == 0
    db.rollback.assert_called_once()


def test_status_change_failure_is_swallowed(monkeypatch):
    db = _session()
    monkeypatch.setattr(NotificationRepository, "add_many", staticmethod(_broken_add_many))
    appointment = ExpiringAppointment(db)

    assert NotificationService(db).notify_status_change(appointment, "pending") == 0
    db.rollback.assert_called_once()

"""Appointment repository - Database operations for appointments"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Appointment


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def get_appointments(db: Session) -> list[Appointment]:
        return db.query(Appointment).order_by(Appointment.date, Appointment.time).all()

    @staticmethod
    def get_by_client(db: Session, client_id: str) -> list[Appointment]:
        return (
            db.query(Appointment)
            .filter(Appointment.client_id == client_id)
            .order_by(Appointment.date, Appointment.time)
            .all()
        )

    @staticmethod
    def get_by_stylist(db: Session, stylist_id: str) -> list[Appointment]:
        return (
            db.query(Appointment)
            .filter(Appointment.stylist_id == stylist_id)
            .order_by(Appointment.date, Appointment.time)
            .all()
        )

    @staticmethod
    def get_by_stylist_and_date(db: Session, stylist_id: str, day: date) -> list[Appointment]:
        """Every appointment of the day regardless of status"""
        return (
            db.query(Appointment)
            .filter(Appointment.stylist_id == stylist_id, Appointment.date == day)
            .all()
        )

    @staticmethod
    def slot_is_taken(db: Session, stylist_id: str, day: date, time: str) -> bool:
        """True when a non-cancelled appointment already holds the slot"""
        return (
            db.query(Appointment.id)
            .filter(
                Appointment.stylist_id == stylist_id,
                Appointment.date == day,
                Appointment.time == time,
                Appointment.status != "cancelled",
            )
            .first()
            is not None
        )

    @staticmethod
    def get_by_id(db: Session, appointment_id: str) -> Optional[Appointment]:
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def create(db: Session, **data) -> Appointment:
        appointment = Appointment(**data)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def update(db: Session, appointment: Appointment, **updates) -> Appointment:
        for key, value in updates.items():
            if hasattr(appointment, key):
                setattr(appointment, key, value)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def delete(db: Session, appointment: Appointment) -> None:
        db.delete(appointment)
        db.commit()

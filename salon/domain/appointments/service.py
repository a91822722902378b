"""Appointment service - Booking, availability and appointment management"""

import logging
from datetime import date
from typing import Iterable, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import config
from ...auth import AuthContext, ensure_can_manage_appointment
from ...models import Appointment
from ...shared.validators import DAILY_SLOTS
from ..catalog.repository import CatalogRepository
from ..notifications.service import NotificationService
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)


GUEST_CLIENT_ID = "guest"
NULLABLE_FIELDS = {"address", "notes"}


def compute_availability(booked_times: Iterable[str]) -> tuple[list[str], list[str]]:
    """
    Split the daily slots into (available, booked).

    Available slots keep the chronological order of DAILY_SLOTS; booked slots keep
    the order in which they were given, without duplicates.
    """
    booked = list(dict.fromkeys(booked_times))
    taken = set(booked)
    available = [slot for slot in DAILY_SLOTS if slot not in taken]
    return available, booked


class AppointmentService:
    """Service layer for appointment business logic"""

    def __init__(self, db: Session, enforce_slot_exclusivity: Optional[bool] = None):
        self.db = db
        self.repo = AppointmentRepository()
        self.notifications = NotificationService(db)
        if enforce_slot_exclusivity is None:
            enforce_slot_exclusivity = config.ENFORCE_SLOT_EXCLUSIVITY
        self.enforce_slot_exclusivity = enforce_slot_exclusivity

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    def get_availability(self, stylist_id: str, day: date) -> dict:
        """Free and booked slots for a stylist on a given day"""
        # Cancelled appointments still hold their slot until someone reopens it manually
        appointments = self.repo.get_by_stylist_and_date(self.db, stylist_id, day)
        available, booked = compute_availability(a.time for a in appointments)
        return {
            "date": day,
            "stylist_id": stylist_id,
            "available_slots": available,
            "booked_slots": booked,
        }

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_appointments(self) -> list[Appointment]:
        return self.repo.get_appointments(self.db)

    def get_client_appointments(self, ctx: AuthContext) -> list[Appointment]:
        return self.repo.get_by_client(self.db, ctx.uid)

    def get_stylist_appointments(self, ctx: AuthContext) -> list[Appointment]:
        member = CatalogRepository.get_team_member_by_user_id(self.db, ctx.uid)
        if not member:
            raise HTTPException(status_code=404, detail="Stylist profile not found")
        return self.repo.get_by_stylist(self.db, member.id)

    def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = self.repo.get_by_id(self.db, appointment_id)
        if not appointment:
            raise HTTPException(status_code=404, detail="Appointment not found")
        return appointment

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_appointment(self, data: AppointmentCreate, ctx: AuthContext) -> Appointment:
        """Book an appointment and notify the stylist and admins"""
        if not CatalogRepository.get_team_member(self.db, data.stylist_id):
            raise HTTPException(status_code=404, detail="Stylist not found")

        if self.enforce_slot_exclusivity and self.repo.slot_is_taken(
            self.db, data.stylist_id, data.date, data.time
        ):
            logger.warning(
                f"⚠️ Slot {data.date} {data.time} already taken for stylist {data.stylist_id}"
            )
            raise HTTPException(status_code=409, detail="This time slot is no longer available")

        values = data.model_dump()
        values["client_id"] = ctx.uid if ctx.is_authenticated else GUEST_CLIENT_ID
        # Only the stylist or an admin moves a booking past pending
        values["status"] = "pending"
        if data.location != "domicile":
            values["address"] = None

        logger.info(
            f"📥 Booking {data.date} {data.time} with stylist {data.stylist_id} for {values['client_id']}"
        )
        appointment = self.repo.create(self.db, **values)

        # Separate commit unit: a failed fan-out never undoes the booking
        self.notifications.notify_new_appointment(appointment)
        return appointment

    def update_appointment(
        self, appointment_id: str, data: AppointmentUpdate, ctx: AuthContext
    ) -> Appointment:
        appointment = self.get_appointment(appointment_id)
        ensure_can_manage_appointment(self.db, ctx, appointment)

        updates = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if "stylist_id" in updates and not CatalogRepository.get_team_member(
            self.db, updates["stylist_id"]
        ):
            raise HTTPException(status_code=404, detail="Stylist not found")

        previous_status = appointment.status
        appointment = self.repo.update(self.db, appointment, **updates)
        if appointment.status != previous_status:
            logger.info(
                f"🔄 Appointment {appointment.id}: {previous_status} -> {appointment.status} by {ctx.uid}"
            )
            self.notifications.notify_status_change(appointment, previous_status)
        return appointment

    def delete_appointment(self, appointment_id: str, ctx: AuthContext) -> None:
        appointment = self.get_appointment(appointment_id)
        ensure_can_manage_appointment(self.db, ctx, appointment)
        self.repo.delete(self.db, appointment)
        logger.info(f"🗑️ Appointment {appointment_id} deleted by {ctx.uid}")

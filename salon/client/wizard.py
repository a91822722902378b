"""
Booking wizard - the client-side state machine behind "book an appointment".

Steps run strictly in order: service -> location -> stylist -> datetime -> confirm.
The wizard never jumps; go_next() only advances when the current step is complete.
"""

import logging
from dataclasses import dataclass
from datetime import date as Date, timedelta
from enum import Enum
from typing import Optional

from .. import config
from ..shared.pricing import best_discount, discounted_price
from .api import SalonApiClient
from .session import AuthSession, SessionUser

logger = logging.getLogger(__name__)

BOOKING_WINDOW_DAYS = 30


class BookingStep(str, Enum):
    SERVICE = "service"
    LOCATION = "location"
    STYLIST = "stylist"
    DATETIME = "datetime"
    CONFIRM = "confirm"


STEPS = list(BookingStep)


class WizardError(Exception):
    pass


class LoginRequired(WizardError):
    """Raised when a booking is submitted without a signed-in session"""

    def __init__(self, login_url: str):
        super().__init__(f"Sign in to confirm your booking: {login_url}")
        self.login_url = login_url


@dataclass
class BookingData:
    service_id: Optional[str] = None
    location: str = "salon"
    address: str = ""
    client_phone: str = ""
    stylist_id: Optional[str] = None
    date: Optional[Date] = None
    time: Optional[str] = None
    notes: str = ""
    client_name: str = ""


class BookingWizard:
    def __init__(
        self,
        api: SalonApiClient,
        session: AuthSession,
        service_id: Optional[str] = None,
        stylist_id: Optional[str] = None,
        today: Optional[Date] = None,
        login_url: Optional[str] = None,
    ):
        self.api = api
        self.session = session
        self.today = today or Date.today()
        self.login_url = login_url or config.LOGIN_URL
        self.data = BookingData(service_id=service_id, stylist_id=stylist_id)
        self.step = BookingStep.SERVICE
        self._events: Optional[list[dict]] = None
        self._slots: Optional[list[str]] = None

        self._prefill(session.user)
        self._unsubscribe = session.subscribe(self._prefill)

    def close(self):
        self._unsubscribe()

    def _prefill(self, user: Optional[SessionUser]):
        if user is not None:
            self.data.client_name = user.full_name

    # Navigation
    @property
    def step_index(self) -> int:
        return STEPS.index(self.step)

    def can_proceed(self) -> bool:
        data = self.data
        if self.step == BookingStep.SERVICE:
            return bool(data.service_id)
        if self.step == BookingStep.LOCATION:
            if data.location == "domicile":
                return bool(data.client_phone.strip()) and bool(data.address.strip())
            return data.location == "salon"
        if self.step == BookingStep.STYLIST:
            return bool(data.stylist_id)
        if self.step == BookingStep.DATETIME:
            return data.date is not None and bool(data.time)
        return bool(data.client_name.strip())

    def go_next(self) -> bool:
        if self.step_index == len(STEPS) - 1 or not self.can_proceed():
            return False
        self.step = STEPS[self.step_index + 1]
        return True

    def go_prev(self) -> bool:
        if self.step_index == 0:
            return False
        self.step = STEPS[self.step_index - 1]
        return True

    # Selections
    def select_service(self, service_id: str):
        self.data.service_id = service_id

    def select_location(self, location: str, address: str = "", client_phone: str = ""):
        if location not in ("salon", "domicile"):
            raise WizardError(f"Unknown location: {location}")
        self.data.location = location
        self.data.address = address
        self.data.client_phone = client_phone

    def select_stylist(self, stylist_id: str):
        if stylist_id != self.data.stylist_id:
            self.data.time = None
            self._slots = None
        self.data.stylist_id = stylist_id

    def select_date(self, day: Date):
        """Pick a day in the booking window; any previously chosen time is dropped"""
        if day < self.today or day > self.today + timedelta(days=BOOKING_WINDOW_DAYS):
            raise WizardError(f"Date must be between {self.today} and {BOOKING_WINDOW_DAYS} days ahead")
        self.data.date = day
        self.data.time = None
        self._slots = None

    def available_slots(self) -> list[str]:
        if not self.data.stylist_id or self.data.date is None:
            return []
        availability = self.api.get_availability(self.data.stylist_id, self.data.date)
        self._slots = availability["availableSlots"]
        return self._slots

    def select_time(self, time: str):
        if self._slots is not None and time not in self._slots:
            raise WizardError(f"{time} is not available")
        self.data.time = time

    # Pricing
    def best_discount(self) -> int:
        if self._events is None:
            self._events = self.api.active_events()
        return best_discount(self._events, self.today)

    def displayed_price(self, price: int) -> int:
        return discounted_price(price, self.best_discount())

    # Submission
    def build_payload(self) -> dict:
        data = self.data
        payload = {
            "clientId": self.session.user.id if self.session.user else None,
            "clientName": data.client_name.strip(),
            "serviceId": data.service_id,
            "stylistId": data.stylist_id,
            "date": data.date.isoformat() if data.date else None,
            "time": data.time,
            "location": data.location,
            "notes": data.notes or None,
        }
        if data.location == "domicile":
            payload["address"] = data.address.strip()
            payload["clientPhone"] = data.client_phone.strip()
        return payload

    def submit(self) -> dict:
        if self.step != BookingStep.CONFIRM or not self.can_proceed():
            raise WizardError("Booking is not ready to be confirmed")
        if not self.session.is_authenticated:
            logger.info("🚫 Booking submit without session, redirecting to login")
            raise LoginRequired(self.login_url)

        appointment = self.api.create_appointment(self.build_payload())
        logger.info(f"✅ Appointment booked: {appointment.get('id')}")
        return appointment

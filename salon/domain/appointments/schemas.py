"""Appointment domain schemas - Pydantic models for validation"""

from datetime import date as Date, datetime
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from ...shared.schemas import CamelModel
from ...shared.validators import validate_phone, validate_time_slot

AppointmentStatus = Literal["pending", "confirmed", "completed", "cancelled"]
AppointmentLocation = Literal["salon", "domicile"]


class AppointmentCreate(CamelModel):
    """Schema for booking an appointment"""

    # Overwritten server-side: caller's uid when signed in, "guest" otherwise
    client_id: Optional[str] = None
    client_name: str = Field(min_length=1)
    client_phone: str = ""
    stylist_id: str = Field(min_length=1)
    service_id: str = Field(min_length=1)
    date: Date
    time: str
    location: AppointmentLocation = "salon"
    address: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("client_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("clientName must not be blank")
        return v.strip()

    @field_validator("client_phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        return validate_phone(v) if v else v

    @field_validator("time")
    @classmethod
    def check_time(cls, v: str) -> str:
        return validate_time_slot(v)

    @model_validator(mode="after")
    def check_home_visit(self):
        if self.location == "domicile" and not (self.address and self.address.strip()):
            raise ValueError("address is required for home visits")
        if self.location == "domicile" and not self.client_phone:
            raise ValueError("clientPhone is required for home visits")
        return self


class AppointmentUpdate(CamelModel):
    """Partial update; status transitions are free-form"""

    client_name: Optional[str] = Field(default=None, min_length=1)
    client_phone: Optional[str] = None
    stylist_id: Optional[str] = None
    service_id: Optional[str] = None
    date: Optional[Date] = None
    time: Optional[str] = None
    location: Optional[AppointmentLocation] = None
    address: Optional[str] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None

    @field_validator("client_phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v) if v else v

    @field_validator("time")
    @classmethod
    def check_time(cls, v):
        return validate_time_slot(v) if v is not None else v


class AppointmentResponse(CamelModel):
    id: str
    client_id: str
    client_name: str
    client_phone: str
    stylist_id: str
    service_id: str
    date: Date
    time: str
    location: str
    address: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class AvailabilityResponse(CamelModel):
    date: Date
    stylist_id: str
    available_slots: list[str]
    booked_slots: list[str]

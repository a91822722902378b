import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    String,
    Text,
)
from sqlalchemy.sql import func

from .database import Base

USER_ROLES = ("client", "stylist", "admin")
APPOINTMENT_STATUSES = ("pending", "confirmed", "completed", "cancelled")
APPOINTMENT_LOCATIONS = ("salon", "domicile")
NOTIFICATION_TYPES = (
    "new_appointment",
    "appointment_update",
    "appointment_cancelled",
    "appointment_completed",
    "receipt",
    "new_user",
    "system",
)


def generate_id():
    """Generate a UUID primary key"""
    return str(uuid.uuid4())


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(128), unique=True, index=True, nullable=False)  # Firebase UID
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default="client")  # client, stylist, admin
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    specialty = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    profile_image = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price_min = Column(Integer, nullable=False)
    price_max = Column(Integer, nullable=True)
    duration = Column(Integer, nullable=False, default=60)  # minutes, informational only
    category = Column(String(100), nullable=True)
    image_url = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)  # False = archived


class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(128), index=True, nullable=True)  # Linked UserProfile.user_id
    name = Column(String(255), nullable=False)
    specialty = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    profile_image = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)  # False = archived
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(String(128), index=True, nullable=False)  # Firebase UID or "guest"
    client_name = Column(String(255), nullable=False)
    client_phone = Column(String(50), nullable=False)
    stylist_id = Column(String(36), index=True, nullable=False)
    service_id = Column(String(36), nullable=False)
    date = Column(Date, index=True, nullable=False)
    time = Column(String(5), nullable=False)  # HH:MM
    location = Column(String(20), nullable=False, default="salon")  # salon, domicile
    address = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # Open-ended when null
    discount_percent = Column(Integer, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class GalleryImage(Base):
    __tablename__ = "gallery_images"

    id = Column(String(36), primary_key=True, default=generate_id)
    image_url = Column(Text, nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    stylist_id = Column(String(36), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(128), index=True, nullable=False)
    type = Column(String(50), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(String(36), nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

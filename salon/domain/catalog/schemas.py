"""Catalog domain schemas - services, team members, events and gallery images"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ...shared.schemas import CamelModel
from ...shared.validators import reject_null, validate_phone

# ============================================================================
# SERVICES
# ============================================================================


class ServiceCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price_min: int = Field(ge=0)
    price_max: Optional[int] = Field(default=None, ge=0)
    duration: int = Field(default=60, gt=0)
    category: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_price_range(self):
        if self.price_max is not None and self.price_max < self.price_min:
            raise ValueError("priceMax must be greater than or equal to priceMin")
        return self


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price_min: Optional[int] = Field(default=None, ge=0)
    price_max: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, gt=0)
    category: Optional[str] = None
    image_url: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "price_min", "duration", "is_active")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class ServiceResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    price_min: int
    price_max: Optional[int] = None
    duration: int
    category: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool


# ============================================================================
# TEAM
# ============================================================================


class TeamMemberCreate(CamelModel):
    user_id: Optional[str] = None
    name: str = Field(min_length=1)
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)


class TeamMemberUpdate(CamelModel):
    user_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    phone: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)


class TeamMemberResponse(CamelModel):
    id: str
    user_id: Optional[str] = None
    name: str
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


# ============================================================================
# EVENTS
# ============================================================================


class EventCreate(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    discount_percent: Optional[int] = Field(default=None, ge=0, le=100)
    is_active: bool = True

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class EventUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    discount_percent: Optional[int] = Field(default=None, ge=0, le=100)
    is_active: Optional[bool] = None

    @field_validator("title", "start_date", "is_active")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class EventResponse(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    discount_percent: Optional[int] = None
    is_active: bool
    created_at: Optional[datetime] = None


# ============================================================================
# GALLERY
# ============================================================================


class GalleryImageCreate(CamelModel):
    image_url: str = Field(min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    stylist_id: Optional[str] = None


class GalleryImageResponse(CamelModel):
    id: str
    image_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    stylist_id: Optional[str] = None
    created_at: Optional[datetime] = None

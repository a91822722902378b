"""User domain schemas"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from ...shared.schemas import CamelModel
from ...shared.validators import validate_phone


class ProfileResponse(CamelModel):
    id: str
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: str
    phone: Optional[str] = None
    address: Optional[str] = None
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


class SyncResponse(CamelModel):
    """Returned to the client after each sign-in"""

    user_id: str
    email: Optional[str] = None
    first_name: str
    last_name: str
    role: str
    phone: Optional[str] = None
    address: Optional[str] = None


class CurrentUserResponse(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: str
    last_name: str
    role: str
    phone: Optional[str] = None
    address: Optional[str] = None
    profile_image_url: Optional[str] = None


class ProfileUpdate(CamelModel):
    """Self-service profile edit; role is deliberately absent"""

    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    specialty: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v) if v else v


class RoleUpdate(CamelModel):
    # Checked in the service so the self-edit ban wins over value validation
    role: str

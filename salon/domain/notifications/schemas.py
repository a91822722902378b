"""Notification domain schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...shared.schemas import CamelModel


class NotificationResponse(CamelModel):
    id: str
    user_id: str
    type: str
    title: str
    message: str
    related_id: Optional[str] = None
    is_read: bool
    created_at: Optional[datetime] = None


class UnreadCountResponse(BaseModel):
    count: int

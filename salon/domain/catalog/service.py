"""Catalog service - Business logic for services, team, events and gallery"""

import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Event, GalleryImage, Service, TeamMember
from ...shared.pricing import is_event_active
from .repository import CatalogRepository
from .schemas import (
    EventCreate,
    EventUpdate,
    GalleryImageCreate,
    ServiceCreate,
    ServiceUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Service layer for the salon catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CatalogRepository()

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    def get_services(self) -> list[Service]:
        return self.repo.get_services(self.db)

    def get_service(self, service_id: str) -> Service:
        service = self.repo.get_service(self.db, service_id)
        if not service:
            raise HTTPException(status_code=404, detail="Service not found")
        return service

    def create_service(self, data: ServiceCreate) -> Service:
        service = self.repo.create_service(self.db, **data.model_dump())
        logger.info(f"✅ Service created: {service.name} ({service.id})")
        return service

    def update_service(self, service_id: str, data: ServiceUpdate) -> Service:
        service = self.get_service(service_id)
        updates = data.model_dump(exclude_unset=True)

        price_min = updates.get("price_min", service.price_min)
        price_max = updates.get("price_max", service.price_max)
        if price_max is not None and price_max < price_min:
            raise HTTPException(
                status_code=400, detail="priceMax must be greater than or equal to priceMin"
            )

        return self.repo.update_service(self.db, service, **updates)

    def archive_service(self, service_id: str) -> None:
        """Archive instead of deleting so past appointments keep resolving the service"""
        service = self.get_service(service_id)
        self.repo.update_service(self.db, service, is_active=False)
        logger.info(f"🗄️ Service archived: {service_id}")

    # ------------------------------------------------------------------
    # Team
    # ------------------------------------------------------------------

    def get_team_members(self) -> list[TeamMember]:
        return self.repo.get_team_members(self.db)

    def get_team_member(self, member_id: str) -> TeamMember:
        member = self.repo.get_team_member(self.db, member_id)
        if not member:
            raise HTTPException(status_code=404, detail="Team member not found")
        return member

    def create_team_member(self, data: TeamMemberCreate) -> TeamMember:
        member = self.repo.create_team_member(self.db, **data.model_dump())
        logger.info(f"✅ Team member created: {member.name} ({member.id})")
        return member

    def update_team_member(self, member_id: str, data: TeamMemberUpdate) -> TeamMember:
        member = self.get_team_member(member_id)
        return self.repo.update_team_member(self.db, member, **data.model_dump(exclude_unset=True))

    def archive_team_member(self, member_id: str) -> None:
        member = self.get_team_member(member_id)
        self.repo.update_team_member(self.db, member, is_active=False)
        logger.info(f"🗄️ Team member archived: {member_id}")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def get_events(self) -> list[Event]:
        return self.repo.get_events(self.db)

    def get_active_events(self, today: Optional[date] = None) -> list[Event]:
        """Enabled events whose date range contains today"""
        today = today or date.today()
        return [e for e in self.repo.get_enabled_events(self.db) if is_event_active(e, today)]

    def get_event(self, event_id: str) -> Event:
        event = self.repo.get_event(self.db, event_id)
        if not event:
            raise HTTPException(status_code=404, detail="Event not found")
        return event

    def create_event(self, data: EventCreate) -> Event:
        return self.repo.create_event(self.db, **data.model_dump())

    def update_event(self, event_id: str, data: EventUpdate) -> Event:
        event = self.get_event(event_id)
        updates = data.model_dump(exclude_unset=True)

        start = updates.get("start_date", event.start_date)
        end = updates.get("end_date", event.end_date)
        if end is not None and end < start:
            raise HTTPException(status_code=400, detail="endDate must not be before startDate")

        return self.repo.update_event(self.db, event, **updates)

    def delete_event(self, event_id: str) -> None:
        self.repo.delete_event(self.db, self.get_event(event_id))

    # ------------------------------------------------------------------
    # Gallery
    # ------------------------------------------------------------------

    def get_gallery_images(self, category: Optional[str] = None) -> list[GalleryImage]:
        return self.repo.get_gallery_images(self.db, category)

    def create_gallery_image(self, data: GalleryImageCreate) -> GalleryImage:
        return self.repo.create_gallery_image(self.db, **data.model_dump())

    def delete_gallery_image(self, image_id: str) -> None:
        image = self.repo.get_gallery_image(self.db, image_id)
        if not image:
            raise HTTPException(status_code=404, detail="Gallery image not found")
        self.repo.delete_gallery_image(self.db, image)

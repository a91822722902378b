"""Catalog router - public reads, admin-only writes"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin
from ...database import get_db
from .schemas import (
    EventCreate,
    EventResponse,
    EventUpdate,
    GalleryImageCreate,
    GalleryImageResponse,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
    TeamMemberCreate,
    TeamMemberResponse,
    TeamMemberUpdate,
)
from .service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Catalog"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(db)


# ============================================================================
# SERVICES
# ============================================================================


@router.get("/services", response_model=list[ServiceResponse])
async def get_services(service: CatalogService = Depends(get_catalog_service)):
    """List active services"""
    return service.get_services()


@router.get("/services/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, service: CatalogService = Depends(get_catalog_service)):
    return service.get_service(service_id)


@router.post("/services", response_model=ServiceResponse, status_code=201)
async def create_service(
    data: ServiceCreate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.create_service(data)


@router.patch("/services/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.update_service(service_id, data)


@router.delete("/services/{service_id}", status_code=204)
async def delete_service(
    service_id: str,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    """Archive a service"""
    service.archive_service(service_id)
    return Response(status_code=204)


# ============================================================================
# TEAM
# ============================================================================


@router.get("/team", response_model=list[TeamMemberResponse])
async def get_team(service: CatalogService = Depends(get_catalog_service)):
    """List active team members"""
    return service.get_team_members()


@router.get("/team/{member_id}", response_model=TeamMemberResponse)
async def get_team_member(member_id: str, service: CatalogService = Depends(get_catalog_service)):
    """Get a team member by ID, including archived ones"""
    return service.get_team_member(member_id)


@router.post("/team", response_model=TeamMemberResponse, status_code=201)
async def create_team_member(
    data: TeamMemberCreate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.create_team_member(data)


@router.patch("/team/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    member_id: str,
    data: TeamMemberUpdate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.update_team_member(member_id, data)


@router.delete("/team/{member_id}", status_code=204)
async def delete_team_member(
    member_id: str,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    """Archive a team member"""
    service.archive_team_member(member_id)
    return Response(status_code=204)


# ============================================================================
# EVENTS
# ============================================================================


@router.get("/events", response_model=list[EventResponse])
async def get_events(service: CatalogService = Depends(get_catalog_service)):
    return service.get_events()


@router.get("/events/active", response_model=list[EventResponse])
async def get_active_events(service: CatalogService = Depends(get_catalog_service)):
    """Events running today"""
    return service.get_active_events()


@router.post("/events", response_model=EventResponse, status_code=201)
async def create_event(
    data: EventCreate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.create_event(data)


@router.patch("/events/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    data: EventUpdate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.update_event(event_id, data)


@router.delete("/events/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    service.delete_event(event_id)
    return Response(status_code=204)


# ============================================================================
# GALLERY
# ============================================================================


@router.get("/gallery", response_model=list[GalleryImageResponse])
async def get_gallery(
    category: Optional[str] = Query(None),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.get_gallery_images(category)


@router.post("/gallery", response_model=GalleryImageResponse, status_code=201)
async def create_gallery_image(
    data: GalleryImageCreate,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return service.create_gallery_image(data)


@router.delete("/gallery/{image_id}", status_code=204)
async def delete_gallery_image(
    image_id: str,
    _: AuthContext = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    service.delete_gallery_image(image_id)
    return Response(status_code=204)

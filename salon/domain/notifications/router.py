from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...auth import AuthContext, get_current_identity
from ...database import get_db
from .schemas import NotificationResponse, UnreadCountResponse
from .service import NotificationService

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


@router.get("", response_model=list[NotificationResponse])
async def get_notifications(
    ctx: AuthContext = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
):
    """Inbox of the current user, newest first"""
    return service.get_notifications(ctx.uid)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    ctx: AuthContext = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
):
    return UnreadCountResponse(count=service.get_unread_count(ctx.uid))


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    ctx: AuthContext = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
):
    return service.mark_read(notification_id, ctx.uid)


@router.post("/mark-all-read")
async def mark_all_read(
    ctx: AuthContext = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
):
    updated = service.mark_all_read(ctx.uid)
    return {"message": "Notifications marked as read", "updated": updated}


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: str,
    ctx: AuthContext = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
):
    service.delete(notification_id, ctx.uid)
    return Response(status_code=204)

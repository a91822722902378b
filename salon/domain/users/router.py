"""User router - auth sync, current user and admin role management"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...auth import AuthContext, get_current_identity, require_admin
from ...database import get_db
from .schemas import (
    CurrentUserResponse,
    ProfileResponse,
    ProfileUpdate,
    RoleUpdate,
    SyncResponse,
)
from .service import UserService, split_display_name

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/api/auth", tags=["Authentication"])
router = APIRouter(prefix="/api/users", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


@auth_router.post("/firebase-sync", response_model=SyncResponse)
async def firebase_sync(
    ctx: AuthContext = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
):
    """Create the profile on first sign-in and return the caller's role"""
    profile = service.sync_profile(ctx.identity)
    first_name, last_name = split_display_name(ctx.identity.name, ctx.identity.email)
    return SyncResponse(
        user_id=profile.user_id,
        email=ctx.identity.email,
        first_name=first_name,
        last_name=last_name,
        role=profile.role,
        phone=profile.phone,
        address=profile.address,
    )


@auth_router.get("/user", response_model=CurrentUserResponse)
async def get_current_user(ctx: AuthContext = Depends(get_current_identity)):
    if not ctx.profile:
        raise HTTPException(status_code=404, detail="User profile not found")

    first_name, last_name = split_display_name(ctx.identity.name, ctx.identity.email)
    return CurrentUserResponse(
        id=ctx.uid,
        email=ctx.identity.email,
        first_name=first_name,
        last_name=last_name,
        role=ctx.profile.role,
        phone=ctx.profile.phone,
        address=ctx.profile.address,
        profile_image_url=ctx.identity.picture,
    )


@router.get("", response_model=list[ProfileResponse])
async def get_users(
    _: AuthContext = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return service.get_profiles()


@router.patch("/me", response_model=ProfileResponse)
async def update_me(
    data: ProfileUpdate,
    ctx: AuthContext = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
):
    """Edit the caller's own contact details"""
    return service.update_own_profile(ctx, data)


@router.patch("/{user_id}/role", response_model=ProfileResponse)
async def update_user_role(
    user_id: str,
    data: RoleUpdate,
    ctx: AuthContext = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return service.change_role(ctx, user_id, data.role)

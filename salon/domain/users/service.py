"""User service - Profile sync, self-service edits and role management"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...auth import AuthContext, Identity
from ...models import USER_ROLES, UserProfile
from ..catalog.repository import CatalogRepository
from .repository import UserRepository
from .schemas import ProfileUpdate

logger = logging.getLogger(__name__)

BOOKABLE_ROLES = ("stylist", "admin")


def split_display_name(name: Optional[str], email: Optional[str]) -> tuple[str, str]:
    """First/last name from a display name, falling back to the email local part"""
    parts = (name or "").split()
    first_name = parts[0] if parts else (email.split("@")[0] if email else "")
    return first_name, " ".join(parts[1:])


class UserService:
    """Service layer for user profiles"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    def sync_profile(self, identity: Identity) -> UserProfile:
        """
        Get or lazily create the profile for a signed-in identity.

        The very first profile, created while no admin exists, becomes admin so
        that a fresh install can be administered.
        """
        profile = self.repo.get_profile(self.db, identity.uid)
        if profile:
            updates = {}
            if identity.email and not profile.email:
                updates["email"] = identity.email
            if identity.name and not profile.name:
                updates["name"] = identity.name
            if updates:
                profile = self.repo.update_profile(self.db, profile, **updates)
            return profile

        role = "client" if self.repo.has_admin(self.db) else "admin"
        try:
            profile = self.repo.create_profile(
                self.db,
                user_id=identity.uid,
                name=identity.name,
                email=identity.email,
                role=role,
                is_active=True,
            )
        except IntegrityError:
            # Concurrent first sign-in of the same identity
            self.db.rollback()
            logger.info(f"🔄 Profile for {identity.uid} created concurrently, reloading")
            return self.repo.get_profile(self.db, identity.uid)

        logger.info(f"🆕 Created user profile for {identity.email} with role: {role}")
        return profile

    def get_profile(self, user_id: str) -> UserProfile:
        profile = self.repo.get_profile(self.db, user_id)
        if not profile:
            raise HTTPException(status_code=404, detail="User profile not found")
        return profile

    def get_profiles(self) -> list[UserProfile]:
        return self.repo.get_profiles(self.db)

    def update_own_profile(self, ctx: AuthContext, data: ProfileUpdate) -> UserProfile:
        profile = self.get_profile(ctx.uid)
        return self.repo.update_profile(self.db, profile, **data.model_dump(exclude_unset=True))

    def change_role(self, ctx: AuthContext, user_id: str, role: str) -> UserProfile:
        """Admin-only role change; admins may not change their own role"""
        if ctx.uid == user_id:
            logger.warning(f"🚫 Admin {ctx.uid} attempted to change their own role")
            raise HTTPException(status_code=403, detail="You cannot change your own role")

        if role not in USER_ROLES:
            raise HTTPException(status_code=400, detail="Invalid role")

        profile = self.get_profile(user_id)
        previous_role = profile.role
        profile = self.repo.update_profile(self.db, profile, role=role)
        logger.info(f"🔑 Role of {user_id} changed {previous_role} -> {role} by {ctx.uid}")

        if role in BOOKABLE_ROLES:
            self._ensure_team_member(profile)
        return profile

    def _ensure_team_member(self, profile: UserProfile) -> None:
        """Give stylists and admins a bookable TeamMember linked to their account"""
        member = CatalogRepository.get_team_member_by_user_id(self.db, profile.user_id)
        if member:
            if not member.is_active:
                CatalogRepository.update_team_member(self.db, member, is_active=True)
            return

        first_name, last_name = split_display_name(profile.name, profile.email)
        CatalogRepository.create_team_member(
            self.db,
            user_id=profile.user_id,
            name=profile.name or f"{first_name} {last_name}".strip() or "Stylist",
            specialty=profile.specialty,
            bio=profile.bio,
            phone=profile.phone,
            profile_image=profile.profile_image,
            is_active=True,
        )
        logger.info(f"✅ Team member created for {profile.user_id}")

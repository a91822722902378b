"""User repository - Database operations for user profiles"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import UserProfile


class UserRepository:
    """Repository for user profile database operations"""

    @staticmethod
    def get_profile(db: Session, user_id: str) -> Optional[UserProfile]:
        return db.query(UserProfile).filter(UserProfile.user_id == user_id).first()

    @staticmethod
    def get_profiles(db: Session) -> list[UserProfile]:
        return db.query(UserProfile).order_by(UserProfile.created_at).all()

    @staticmethod
    def has_admin(db: Session) -> bool:
        return db.query(UserProfile.id).filter(UserProfile.role == "admin").first() is not None

    @staticmethod
    def create_profile(db: Session, **data) -> UserProfile:
        profile = UserProfile(**data)
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def update_profile(db: Session, profile: UserProfile, **updates) -> UserProfile:
        for key, value in updates.items():
            if hasattr(profile, key):
                setattr(profile, key, value)
        db.commit()
        db.refresh(profile)
        return profile

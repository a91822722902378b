"""Catalog repository - Database operations for services, team, events and gallery"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Event, GalleryImage, Service, TeamMember


class CatalogRepository:
    """Repository for catalog database operations"""

    @staticmethod
    def _update(db: Session, row, **updates):
        for key, value in updates.items():
            if hasattr(row, key):
                setattr(row, key, value)
        db.commit()
        db.refresh(row)
        return row

    @staticmethod
    def _create(db: Session, model, **data):
        row = model(**data)
        db.add(row)
        db.commit()
        db.refresh(row)
        return row

    # Services
    @staticmethod
    def get_services(db: Session) -> list[Service]:
        """Get all active (non-archived) services"""
        return db.query(Service).filter(Service.is_active.is_(True)).order_by(Service.name).all()

    @staticmethod
    def get_service(db: Session, service_id: str) -> Optional[Service]:
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def create_service(db: Session, **data) -> Service:
        return CatalogRepository._create(db, Service, **data)

    @staticmethod
    def update_service(db: Session, service: Service, **updates) -> Service:
        return CatalogRepository._update(db, service, **updates)

    # Team members
    @staticmethod
    def get_team_members(db: Session) -> list[TeamMember]:
        """Get all active (non-archived) team members"""
        return (
            db.query(TeamMember)
            .filter(TeamMember.is_active.is_(True))
            .order_by(TeamMember.created_at)
            .all()
        )

    @staticmethod
    def get_team_member(db: Session, member_id: str) -> Optional[TeamMember]:
        """Get a team member by ID, archived or not"""
        return db.query(TeamMember).filter(TeamMember.id == member_id).first()

    @staticmethod
    def get_team_member_by_user_id(db: Session, user_id: str) -> Optional[TeamMember]:
        return db.query(TeamMember).filter(TeamMember.user_id == user_id).first()

    @staticmethod
    def create_team_member(db: Session, **data) -> TeamMember:
        return CatalogRepository._create(db, TeamMember, **data)

    @staticmethod
    def update_team_member(db: Session, member: TeamMember, **updates) -> TeamMember:
        return CatalogRepository._update(db, member, **updates)

    # Events
    @staticmethod
    def get_events(db: Session) -> list[Event]:
        return db.query(Event).order_by(Event.start_date.desc()).all()

    @staticmethod
    def get_enabled_events(db: Session) -> list[Event]:
        return db.query(Event).filter(Event.is_active.is_(True)).all()

    @staticmethod
    def get_event(db: Session, event_id: str) -> Optional[Event]:
        return db.query(Event).filter(Event.id == event_id).first()

    @staticmethod
    def create_event(db: Session, **data) -> Event:
        return CatalogRepository._create(db, Event, **data)

    @staticmethod
    def update_event(db: Session, event: Event, **updates) -> Event:
        return CatalogRepository._update(db, event, **updates)

    @staticmethod
    def delete_event(db: Session, event: Event) -> None:
        db.delete(event)
        db.commit()

    # Gallery
    @staticmethod
    def get_gallery_images(db: Session, category: Optional[str] = None) -> list[GalleryImage]:
        query = db.query(GalleryImage)
        if category:
            query = query.filter(GalleryImage.category == category)
        return query.order_by(GalleryImage.created_at.desc()).all()

    @staticmethod
    def get_gallery_image(db: Session, image_id: str) -> Optional[GalleryImage]:
        return db.query(GalleryImage).filter(GalleryImage.id == image_id).first()

    @staticmethod
    def create_gallery_image(db: Session, **data) -> GalleryImage:
        return CatalogRepository._create(db, GalleryImage, **data)

    @staticmethod
    def delete_gallery_image(db: Session, image: GalleryImage) -> None:
        db.delete(image)
        db.commit()

"""
Seed the catalog with the salon's default services, team and promotions.
Usage: python -m salon.seed
"""

import logging
import sys
from datetime import date

from sqlalchemy.orm import Session

from . import models  # noqa: F401
from .database import Base, SessionLocal, engine
from .models import Event, Service, TeamMember

logger = logging.getLogger(__name__)

SERVICES_SEED = [
    {"name": "Soins de visage", "description": "Traitement complet du visage pour une peau rayonnante", "price_min": 10, "price_max": None, "duration": 45, "category": "Soins"},
    {"name": "Coiffure homme", "description": "Coupe et style pour hommes", "price_min": 3, "price_max": None, "duration": 30, "category": "Coiffure"},
    {"name": "Draid Locks", "description": "Tresses et locks de qualite professionnelle", "price_min": 20, "price_max": 60, "duration": 120, "category": "Coiffure"},
    {"name": "Coiffure dame ceremonie", "description": "Coiffure elegante pour occasions speciales", "price_min": 10, "price_max": None, "duration": 90, "category": "Coiffure"},
    {"name": "Manucure", "description": "Soin des ongles et des mains", "price_min": 5, "price_max": 10, "duration": 45, "category": "Soins"},
    {"name": "Tresse", "description": "Tresses variees selon modele choisi", "price_min": 2, "price_max": 40, "duration": 120, "category": "Coiffure"},
    {"name": "Maquillage", "description": "Maquillage professionnel pour toutes occasions", "price_min": 5, "price_max": 8, "duration": 45, "category": "Maquillage"},
    {"name": "Pedicure", "description": "Soin complet des pieds et ongles", "price_min": 5, "price_max": 10, "duration": 60, "category": "Soins"},
    {"name": "Coiffure dame simple", "description": "Coiffure quotidienne pour dames", "price_min": 5, "price_max": None, "duration": 30, "category": "Coiffure"},
    {"name": "Locks", "description": "Entretien et creation de locks", "price_min": 5, "price_max": None, "duration": 60, "category": "Coiffure"},
    {"name": "Lave tete", "description": "Shampooing et soin des cheveux", "price_min": 3, "price_max": None, "duration": 20, "category": "Soins"},
    {"name": "Twist", "description": "Coiffure twist tendance", "price_min": 10, "price_max": None, "duration": 60, "category": "Coiffure"},
]

TEAM_SEED = [
    {"name": "Marie Kalumba", "specialty": "Coiffure dame, Tresses", "bio": "Specialiste des tresses africaines et coiffures de ceremonie", "phone": "+243 976527237"},
    {"name": "Jean-Pierre Mwamba", "specialty": "Coiffure homme, Locks", "bio": "Expert en coupes modernes et entretien de locks", "phone": "+243 994155412"},
    {"name": "Grace Amani", "specialty": "Maquillage, Soins visage", "bio": "Maquilleuse professionnelle et estheticienne", "phone": "+243 854123658"},
    {"name": "Patrick Bukasa", "specialty": "Draid Locks, Twist", "bio": "Artiste capillaire specialise en styles tendance", "phone": "+243 890357766"},
]

EVENTS_SEED = [
    {"title": "Promotion Week-end", "description": "-20% sur toutes les tresses ce week-end", "discount_percent": 20, "start_date": date(2026, 1, 18), "end_date": date(2026, 1, 19)},
    {"title": "Special Fetes", "description": "Offre speciale maquillage + coiffure pour vos ceremonies", "discount_percent": 15, "start_date": date(2026, 1, 20), "end_date": date(2026, 1, 31)},
    {"title": "Nouveaux clients", "description": "Votre premiere visite a -10%", "discount_percent": 10, "start_date": date(2026, 1, 1), "end_date": date(2026, 12, 31)},
]


def _seed_table(db: Session, model, rows: list[dict], label: str) -> int:
    if db.query(model).first() is not None:
        logger.info(f"{label} already exist, skipping...")
        return 0

    logger.info(f"Inserting {label.lower()}...")
    db.add_all(model(**row) for row in rows)
    db.commit()
    return len(rows)


def seed(db: Session) -> dict:
    """Insert default rows into empty tables; tables that already hold data are left alone"""
    return {
        "services": _seed_table(db, Service, SERVICES_SEED, "Services"),
        "team": _seed_table(db, TeamMember, TEAM_SEED, "Team members"),
        "events": _seed_table(db, Event, EVENTS_SEED, "Events"),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    Base.metadata.create_all(bind=engine, checkfirst=True)

    session = SessionLocal()
    try:
        inserted = seed(session)
        logger.info(f"✅ Seeding complete: {inserted}")
    except Exception as e:
        session.rollback()
        logger.error(f"❌ Seeding failed: {e}")
        sys.exit(1)
    finally:
        session.close()

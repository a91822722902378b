"""
Unit tests for catalog seeding.
"""

from salon.models import Event, Service, TeamMember
from salon.seed import EVENTS_SEED, SERVICES_SEED, TEAM_SEED, seed


def test_seed_fills_empty_catalog(db):
    inserted = seed(db)

    assert inserted == {
        "services": len(SERVICES_SEED),
        "team": len(TEAM_SEED),
        "events": len(EVENTS_SEED),
    }
    assert db.query(Service).count() == 12
    assert db.query(TeamMember).filter(TeamMember.is_active.is_(True)).count() == 4


def test_seed_is_idempotent(db):
    seed(db)

    assert seed(db) == {"services": 0, "team": 0, "events": 0}
    assert db.query(Event).count() == len(EVENTS_SEED)


def test_seed_leaves_populated_tables_alone(db):
    db.add(Service(name="Coupe maison", price_min=4))
    db.commit()

    inserted = seed(db)

    assert inserted["services"] == 0
    assert inserted["team"] == len(TEAM_SEED)
    assert db.query(Service).count() == 1

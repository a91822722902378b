"""
Test configuration and fixtures.

Every test runs against a fresh in-memory SQLite schema. Bearer tokens are
resolved by FakeIdentityProvider instead of Firebase: a token is accepted when
it is registered in the provider's table.
"""

import os

# Must be set BEFORE any import of salon.config / salon.database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENFORCE_SLOT_EXCLUSIVITY"] = "false"

from datetime import date, timedelta  # noqa: E402
from typing import Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from salon.auth import Identity, get_identity_provider  # noqa: E402
from salon.database import Base, SessionLocal, engine  # noqa: E402
from salon.main import app  # noqa: E402
from salon.models import Service, TeamMember, UserProfile  # noqa: E402

ADMIN_TOKEN = "admin.token.sig"
STYLIST_TOKEN = "stylist.token.sig"
CLIENT_TOKEN = "client.token.sig"
OTHER_CLIENT_TOKEN = "other.token.sig"


class FakeIdentityProvider:
    def __init__(self):
        self.tokens: dict[str, Identity] = {}

    def register(self, token: str, uid: str, email: Optional[str] = None, name: Optional[str] = None):
        self.tokens[token] = Identity(uid=uid, email=email, name=name)

    def verify(self, token: str) -> Optional[Identity]:
        return self.tokens.get(token)


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def identity_provider():
    provider = FakeIdentityProvider()
    provider.register(ADMIN_TOKEN, "uid-admin", "admin@salon.test", "Ada Admin")
    provider.register(STYLIST_TOKEN, "uid-stylist", "marie@salon.test", "Marie Kalumba")
    provider.register(CLIENT_TOKEN, "uid-client", "claire@example.com", "Claire Client")
    provider.register(OTHER_CLIENT_TOKEN, "uid-other", "omar@example.com", "Omar Other")
    app.dependency_overrides[get_identity_provider] = lambda: provider
    yield provider
    app.dependency_overrides.clear()


@pytest.fixture
def client(identity_provider):
    return TestClient(app)


@pytest.fixture
def shop(db):
    """
    A small salon: one profile per role, a stylist linked to the stylist
    account, an unlinked stylist and one service.
    """
    db.add_all(
        [
            UserProfile(user_id="uid-admin", name="Ada Admin", email="admin@salon.test", role="admin"),
            UserProfile(user_id="uid-stylist", name="Marie Kalumba", email="marie@salon.test", role="stylist"),
            UserProfile(user_id="uid-client", name="Claire Client", email="claire@example.com", role="client"),
            UserProfile(user_id="uid-other", name="Omar Other", email="omar@example.com", role="client"),
        ]
    )
    linked = TeamMember(user_id="uid-stylist", name="Marie Kalumba", specialty="Tresses")
    unlinked = TeamMember(name="Patrick Bukasa", specialty="Locks")
    service = Service(name="Tresse", price_min=20, price_max=40, duration=120, category="Coiffure")
    db.add_all([linked, unlinked, service])
    db.commit()
    return {"stylist_id": linked.id, "unlinked_stylist_id": unlinked.id, "service_id": service.id}


@pytest.fixture
def booking_date() -> date:
    return date.today() + timedelta(days=3)


@pytest.fixture
def booking(shop, booking_date):
    """Factory for a valid appointment payload"""

    def _payload(**overrides) -> dict:
        payload = {
            "clientName": "Claire Client",
            "clientPhone": "+243 976527237",
            "stylistId": shop["stylist_id"],
            "serviceId": shop["service_id"],
            "date": booking_date.isoformat(),
            "time": "10:00",
            "location": "salon",
        }
        payload.update(overrides)
        return payload

    return _payload

"""
End-to-end booking through the Python client against the real app.

SalonApiClient accepts any httpx.Client, so FastAPI's TestClient stands in
for the network.
"""

from datetime import date, timedelta

import pytest
from conftest import CLIENT_TOKEN, STYLIST_TOKEN

from salon.client import (
    ApiError,
    AuthSession,
    BookingStep,
    BookingWizard,
    LoginRequired,
    SalonApiClient,
    SignedInUser,
    UnreadCountPoller,
)
from salon.models import Event


@pytest.fixture
def session(client):
    holder = {}
    api = SalonApiClient(http=client, token_getter=lambda: holder["session"].get_id_token())
    holder["session"] = AuthSession(api)
    return holder["session"]


def test_signed_in_client_books_through_wizard(client, db, shop, session):
    db.add(Event(title="Promotion", start_date=date.today(), discount_percent=20))
    db.commit()
    session.on_identity_change(
        SignedInUser(uid="uid-client", id_token=CLIENT_TOKEN, email="claire@example.com", display_name="Claire Client")
    )
    assert session.is_client

    wizard = BookingWizard(session.api, session, service_id=shop["service_id"])
    assert wizard.displayed_price(40) == 32
    wizard.go_next()
    wizard.go_next()
    wizard.select_stylist(shop["stylist_id"])
    wizard.go_next()
    wizard.select_date(date.today() + timedelta(days=2))
    slots = wizard.available_slots()
    wizard.select_time(slots[0])
    wizard.go_next()
    assert wizard.step == BookingStep.CONFIRM

    appointment = wizard.submit()

    assert appointment["clientId"] == "uid-client"
    assert appointment["time"] == "07:00"
    assert "07:00" not in wizard.available_slots()
    assert [a["id"] for a in session.api.my_appointments()] == [appointment["id"]]


def test_anonymous_wizard_is_sent_to_login(client, shop, session):
    wizard = BookingWizard(session.api, session, service_id=shop["service_id"], stylist_id=shop["stylist_id"])
    wizard.go_next()
    wizard.go_next()
    wizard.go_next()
    wizard.select_date(date.today())
    wizard.select_time("08:00")
    wizard.go_next()
    wizard.data.client_name = "Walk In"

    with pytest.raises(LoginRequired):
        wizard.submit()


def test_stylist_badge_counts_new_bookings(client, shop, session, booking):
    client.post("/api/appointments", json=booking())
    session.on_identity_change(SignedInUser(uid="uid-stylist", id_token=STYLIST_TOKEN))
    poller = UnreadCountPoller(session.api, interval=30)

    poller.poll_once()

    assert poller.count == 1


def test_api_errors_carry_status_and_detail(client, session):
    with pytest.raises(ApiError) as exc_info:
        session.api.unread_count()

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Unauthorized - No token provided"

"""
Integration tests for appointment booking and management.
"""

from conftest import ADMIN_TOKEN, CLIENT_TOKEN, STYLIST_TOKEN, auth

from salon.models import Appointment

# ============================================================================
# Booking
# ============================================================================


def test_signed_in_booking_records_caller_as_client(client, booking):
    response = client.post(
        "/api/appointments",
        json=booking(clientId="someone-else"),
        headers=auth(CLIENT_TOKEN),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["clientId"] == "uid-client"
    assert body["status"] == "pending"
    assert body["location"] == "salon"
    assert body["address"] is None


def test_anonymous_booking_is_recorded_as_guest(client, booking):
    response = client.post("/api/appointments", json=booking())

    assert response.status_code == 201
    assert response.json()["clientId"] == "guest"


def test_booking_always_starts_pending(client, booking):
    """Callers cannot book straight into a confirmed or completed state"""
    anonymous = client.post("/api/appointments", json=booking(status="confirmed"))
    signed_in = client.post(
        "/api/appointments",
        json=booking(time="11:00", status="completed"),
        headers=auth(CLIENT_TOKEN),
    )

    assert anonymous.status_code == 201
    assert anonymous.json()["status"] == "pending"
    assert signed_in.status_code == 201
    assert signed_in.json()["status"] == "pending"


def test_invalid_token_on_booking_proceeds_as_guest(client, booking):
    response = client.post("/api/appointments", json=booking(), headers=auth("forged.token.sig"))

    assert response.status_code == 201
    assert response.json()["clientId"] == "guest"


def test_double_booking_is_accepted_by_default(client, db, booking):
    """Without slot exclusivity, the same stylist/date/time can be booked twice"""
    first = client.post("/api/appointments", json=booking(), headers=auth(CLIENT_TOKEN))
    second = client.post("/api/appointments", json=booking(clientName="Omar Other"))

    assert first.status_code == 201
    assert second.status_code == 201
    assert db.query(Appointment).count() == 2


def test_double_booking_conflicts_when_exclusivity_enforced(client, db, booking, monkeypatch):
    monkeypatch.setattr("salon.config.ENFORCE_SLOT_EXCLUSIVITY", True)

    first = client.post("/api/appointments", json=booking())
    second = client.post("/api/appointments", json=booking())

    assert first.status_code == 201
    assert second.status_code == 409
    assert db.query(Appointment).count() == 1


def test_cancelled_booking_frees_slot_for_exclusivity_check(client, db, booking, monkeypatch):
    monkeypatch.setattr("salon.config.ENFORCE_SLOT_EXCLUSIVITY", True)
    first = client.post("/api/appointments", json=booking()).json()
    client.patch(
        f"/api/appointments/{first['id']}",
        json={"status": "cancelled"},
        headers=auth(ADMIN_TOKEN),
    )

    response = client.post("/api/appointments", json=booking())

    assert response.status_code == 201


def test_unknown_stylist_is_not_found(client, booking):
    response = client.post("/api/appointments", json=booking(stylistId="missing"))

    assert response.status_code == 404


def test_home_visit_requires_address(client, booking):
    response = client.post("/api/appointments", json=booking(location="domicile"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid data"


def test_home_visit_keeps_address(client, booking):
    response = client.post(
        "/api/appointments",
        json=booking(location="domicile", address="12 avenue du Commerce, Gombe"),
    )

    assert response.status_code == 201
    assert response.json()["address"] == "12 avenue du Commerce, Gombe"


def test_malformed_time_is_rejected(client, booking):
    response = client.post("/api/appointments", json=booking(time="9h"))

    assert response.status_code == 400
    assert any(error["field"] == "time" for error in response.json()["errors"])


def test_blank_client_name_is_rejected(client, booking):
    response = client.post("/api/appointments", json=booking(clientName="   "))

    assert response.status_code == 400


# ============================================================================
# Listing
# ============================================================================


def test_my_appointments_only_lists_callers_bookings(client, booking):
    client.post("/api/appointments", json=booking(), headers=auth(CLIENT_TOKEN))
    client.post("/api/appointments", json=booking(time="11:00"))

    response = client.get("/api/appointments/my", headers=auth(CLIENT_TOKEN))

    assert response.status_code == 200
    assert [a["time"] for a in response.json()] == ["10:00"]


def test_stylist_lists_own_appointments(client, shop, booking):
    client.post("/api/appointments", json=booking())
    client.post("/api/appointments", json=booking(stylistId=shop["unlinked_stylist_id"]))

    response = client.get("/api/appointments/stylist", headers=auth(STYLIST_TOKEN))

    assert response.status_code == 200
    assert [a["stylistId"] for a in response.json()] == [shop["stylist_id"]]


def test_admin_without_team_member_has_no_stylist_view(client, shop):
    response = client.get("/api/appointments/stylist", headers=auth(ADMIN_TOKEN))

    assert response.status_code == 404


def test_admin_lists_all_appointments(client, booking):
    client.post("/api/appointments", json=booking())
    client.post("/api/appointments", json=booking(time="12:00"))

    response = client.get("/api/appointments", headers=auth(ADMIN_TOKEN))

    assert response.status_code == 200
    assert len(response.json()) == 2


# ============================================================================
# Management
# ============================================================================


def test_stylist_updates_own_appointment(client, booking):
    appointment = client.post("/api/appointments", json=booking()).json()

    response = client.patch(
        f"/api/appointments/{appointment['id']}",
        json={"status": "confirmed", "notes": "Bring photos"},
        headers=auth(STYLIST_TOKEN),
    )

    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    assert response.json()["notes"] == "Bring photos"


def test_stylist_cannot_touch_other_stylists_appointment(client, shop, booking):
    appointment = client.post(
        "/api/appointments", json=booking(stylistId=shop["unlinked_stylist_id"])
    ).json()

    patch = client.patch(
        f"/api/appointments/{appointment['id']}",
        json={"status": "confirmed"},
        headers=auth(STYLIST_TOKEN),
    )
    delete = client.delete(f"/api/appointments/{appointment['id']}", headers=auth(STYLIST_TOKEN))

    assert patch.status_code == 403
    assert delete.status_code == 403


def test_admin_can_reassign_and_delete_any_appointment(client, db, shop, booking):
    appointment = client.post("/api/appointments", json=booking()).json()

    patch = client.patch(
        f"/api/appointments/{appointment['id']}",
        json={"stylistId": shop["unlinked_stylist_id"]},
        headers=auth(ADMIN_TOKEN),
    )
    delete = client.delete(f"/api/appointments/{appointment['id']}", headers=auth(ADMIN_TOKEN))

    assert patch.status_code == 200
    assert patch.json()["stylistId"] == shop["unlinked_stylist_id"]
    assert delete.status_code == 204
    assert db.query(Appointment).count() == 0


def test_reassigning_to_unknown_stylist_is_not_found(client, booking):
    appointment = client.post("/api/appointments", json=booking()).json()

    response = client.patch(
        f"/api/appointments/{appointment['id']}",
        json={"stylistId": "missing"},
        headers=auth(ADMIN_TOKEN),
    )

    assert response.status_code == 404


def test_unknown_appointment_is_not_found(client, shop):
    response = client.patch(
        "/api/appointments/missing",
        json={"status": "confirmed"},
        headers=auth(ADMIN_TOKEN),
    )

    assert response.status_code == 404

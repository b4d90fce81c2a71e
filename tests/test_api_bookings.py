from datetime import timedelta

from courtbook.core.timeutils import facility_today
from tests.factories import MONDAY, TUESDAY, next_weekday


def booking_body(court, slot, booking_date, **overrides):
    body = {
        "courtId": court["id"],
        "timeSlotId": slot["id"],
        "customerName": "Jamie Doe",
        "customerEmail": "jamie@example.com",
        "customerPhone": "+1 555 0100",
        "bookingDate": booking_date.isoformat(),
    }
    body.update(overrides)
    return body


def availability(client, court, day):
    response = client.get(f"/api/timeslots/available/{court['id']}", params={"date": day.isoformat()})
    assert response.status_code == 200
    return response.json()["data"]


def test_booking_routes_require_token(client, court, create_slot):
    slot = create_slot(MONDAY)

    response = client.post("/api/bookings", json=booking_body(court, slot, next_weekday(MONDAY)))

    assert response.status_code == 401
    assert response.json()["success"] is False
    assert client.get("/api/bookings").status_code == 401


def test_booking_routes_reject_invalid_token(client):
    response = client.get("/api/bookings", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 403


def test_create_booking_then_slot_is_occupied(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    monday = next_weekday(MONDAY)
    assert availability(client, court, monday)[0]["isAvailable"] is True

    response = client.post(
        "/api/bookings", json=booking_body(court, slot, monday), headers=auth_headers
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "PENDING"
    assert data["bookingDate"] == monday.isoformat()
    assert data["court"]["id"] == court["id"]
    assert data["timeSlot"]["id"] == slot["id"]
    assert data["user"]["clerkId"] == "user_abc123"

    slots = availability(client, court, monday)
    assert slots[0]["isAvailable"] is False
    assert slots[0]["bookings"][0]["id"] == data["id"]


def test_double_booking_is_a_conflict(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    monday = next_weekday(MONDAY)
    first = client.post("/api/bookings", json=booking_body(court, slot, monday), headers=auth_headers)
    assert first.status_code == 201

    second = client.post(
        "/api/bookings",
        json=booking_body(court, slot, monday, customerName="Other"),
        headers=auth_headers,
    )

    assert second.status_code == 409
    assert second.json() == {
        "success": False,
        "error": "This time slot is already booked for the selected date",
        "details": {"timeSlotId": slot["id"], "bookingDate": monday.isoformat()},
    }
    assert len(client.get("/api/bookings", headers=auth_headers).json()["data"]) == 1


def test_past_and_malformed_dates_rejected(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    yesterday = facility_today("UTC") - timedelta(days=1)

    past = client.post(
        "/api/bookings", json=booking_body(court, slot, yesterday), headers=auth_headers
    )
    malformed = client.post(
        "/api/bookings",
        json=booking_body(court, slot, yesterday, bookingDate="2025-02-30"),
        headers=auth_headers,
    )

    assert past.status_code == 400
    assert past.json()["error"] == "Booking date must be in the future"
    assert malformed.status_code == 400
    assert client.get("/api/bookings", headers=auth_headers).json()["data"] == []


def test_missing_fields_rejected(client, auth_headers):
    response = client.post("/api/bookings", json={"courtId": "court-1"}, headers=auth_headers)

    assert response.status_code == 400
    assert "required" in response.json()["error"]


def test_unknown_slot_is_not_found(client, auth_headers, court):
    response = client.post(
        "/api/bookings",
        json=booking_body(court, {"id": "missing"}, next_weekday(MONDAY)),
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_cancel_frees_slot(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    monday = next_weekday(MONDAY)
    booking = client.post(
        "/api/bookings", json=booking_body(court, slot, monday), headers=auth_headers
    ).json()["data"]

    response = client.put(f"/api/bookings/{booking['id']}/cancel", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "CANCELLED"
    assert availability(client, court, monday)[0]["isAvailable"] is True

    again = client.put(f"/api/bookings/{booking['id']}/cancel", headers=auth_headers)
    assert again.status_code == 409


def test_status_update_follows_transition_table(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    booking = client.post(
        "/api/bookings",
        json=booking_body(court, slot, next_weekday(MONDAY)),
        headers=auth_headers,
    ).json()["data"]
    url = f"/api/bookings/{booking['id']}"

    assert client.put(url, json={"status": "COMPLETED"}, headers=auth_headers).status_code == 409
    assert client.put(url, json={"status": "CONFIRMED"}, headers=auth_headers).status_code == 200
    completed = client.put(url, json={"status": "COMPLETED"}, headers=auth_headers)
    assert completed.status_code == 200
    assert completed.json()["data"]["status"] == "COMPLETED"

    reopened = client.put(url, json={"status": "PENDING"}, headers=auth_headers)
    assert reopened.status_code == 409
    assert reopened.json()["error"] == "Cannot change booking status from COMPLETED to PENDING"


def test_unknown_status_value_rejected(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    booking = client.post(
        "/api/bookings",
        json=booking_body(court, slot, next_weekday(MONDAY)),
        headers=auth_headers,
    ).json()["data"]

    response = client.put(
        f"/api/bookings/{booking['id']}", json={"status": "ARCHIVED"}, headers=auth_headers
    )

    assert response.status_code == 400


def test_booking_queries(client, auth_headers, court, create_slot):
    monday_slot = create_slot(MONDAY)
    tuesday_slot = create_slot(TUESDAY)
    monday = next_weekday(MONDAY)
    tuesday = next_weekday(TUESDAY)
    first = client.post(
        "/api/bookings", json=booking_body(court, monday_slot, monday), headers=auth_headers
    ).json()["data"]
    second = client.post(
        "/api/bookings", json=booking_body(court, tuesday_slot, tuesday), headers=auth_headers
    ).json()["data"]

    fetched = client.get(f"/api/bookings/{first['id']}", headers=auth_headers)
    assert fetched.json()["data"]["id"] == first["id"]

    by_date = client.get(f"/api/bookings/date/{tuesday.isoformat()}", headers=auth_headers)
    assert [b["id"] for b in by_date.json()["data"]] == [second["id"]]

    by_court = client.get(f"/api/bookings/court/{court['id']}", headers=auth_headers)
    expected = sorted([first, second], key=lambda b: b["bookingDate"], reverse=True)
    assert [b["id"] for b in by_court.json()["data"]] == [b["id"] for b in expected]

    mine = client.get("/api/bookings/my-bookings", headers=auth_headers)
    assert {b["id"] for b in mine.json()["data"]} == {first["id"], second["id"]}

    bad_date = client.get("/api/bookings/date/yesterday", headers=auth_headers)
    assert bad_date.status_code == 400


def test_delete_booking(client, auth_headers, court, create_slot):
    slot = create_slot(MONDAY)
    booking = client.post(
        "/api/bookings",
        json=booking_body(court, slot, next_weekday(MONDAY)),
        headers=auth_headers,
    ).json()["data"]

    response = client.delete(f"/api/bookings/{booking['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Booking deleted successfully"}
    assert client.get(f"/api/bookings/{booking['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/bookings/{booking['id']}", headers=auth_headers).status_code == 404

"""API tests for /api/events and /api/event-sessions."""

from datetime import datetime
from decimal import Decimal

from checkout.data.models import EventSessionModel


EVENT = {
    "title": "Jazz Night",
    "description": "Late set",
    "status": "ACTIVE",
    "start_date_time": "2026-12-01T20:00:00",
    "end_date_time": "2026-12-01T23:00:00",
    "banner_image": "jazz.png",
}


class TestEvents:

    def test_get_event_by_id(self, client, seed):
        event_id = seed.event("Opera")

        resp = client.get("/api/events/v1", params={"eventId": event_id})

        assert resp.status_code == 200
        [event] = resp.json()
        assert event["event_id"] == event_id
        assert event["title"] == "Opera"

    def test_unknown_event_is_empty_list(self, client):
        resp = client.get("/api/events/v1", params={"eventId": 999})

        assert resp.status_code == 200
        assert resp.json() == []

    def test_missing_event_id_is_bad_request(self, client):
        assert client.get("/api/events/v1").status_code == 400

    def test_all_events_ordered_by_start(self, client, seed):
        seed.event("Late", start=datetime(2026, 12, 24, 18, 0))
        seed.event("Early", start=datetime(2026, 11, 2, 18, 0))

        resp = client.get("/api/events/v1/all")

        assert [e["title"] for e in resp.json()] == ["Early", "Late"]

    def test_add_and_update_event(self, client):
        resp = client.post("/api/events/v1/add/event", json=EVENT)
        assert resp.status_code == 200
        event_id = resp.json()["event_id"]

        resp = client.post(
            "/api/events/v1/update/event",
            json={**EVENT, "event_id": event_id, "status": "CANCELLED"},
        )
        assert resp.json() == {"success": True}

        [event] = client.get("/api/events/v1", params={"eventId": event_id}).json()
        assert event["status"] == "CANCELLED"
        assert event["banner_image"] == "jazz.png"

    def test_add_event_requires_fields(self, client):
        payload = {k: v for k, v in EVENT.items() if k != "title"}

        assert client.post("/api/events/v1/add/event", json=payload).status_code == 400


class TestEventSessions:

    def test_sessions_ordered_by_price(self, client, seed):
        event_id = seed.event()
        seed.event_session(event_id, price="50.00", title="VIP")
        seed.event_session(event_id, price="15.00", title="Balcony")
        other = seed.event()
        seed.event_session(other, price="1.00", title="Elsewhere")

        resp = client.get("/api/event-sessions/v1", params={"eventId": event_id})

        assert [s["title"] for s in resp.json()] == ["Balcony", "VIP"]

    def test_no_sessions_is_empty_list(self, client, seed):
        event_id = seed.event()

        assert client.get("/api/event-sessions/v1", params={"eventId": event_id}).json() == []

    def test_add_session_sets_remaining_quantity(self, client, seed, session):
        event_id = seed.event()

        resp = client.post(
            "/api/event-sessions/v1/add/event/session",
            json={
                "event_id": event_id,
                "title": "Early bird",
                "description": "First 50 tickets",
                "type": "EARLY",
                "price": "9.99",
                "sale": True,
                "sale_end_date_time": "2026-11-15T00:00:00",
                "total_quantity": 50,
            },
        )

        assert resp.status_code == 200
        created = session.get(EventSessionModel, resp.json()["event_session_id"])
        assert created.remaining_quantity == 50
        assert created.price == Decimal("9.99")

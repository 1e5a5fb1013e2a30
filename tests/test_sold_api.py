"""API tests for /api/sold: recording a sale and the sold totals."""

import pytest

from checkout.data.models import CartItemModel, CartModel, TicketSoldModel


@pytest.fixture
def checkout_cart(seed):
    event_id = seed.event()
    standing = seed.event_session(event_id, price="12.50")
    vip = seed.event_session(event_id, price="30.00", title="VIP")
    cart_id = seed.cart("S1")
    items = [
        {"cart_item_id": seed.cart_item(cart_id, standing, 2), "cart_id": cart_id, "event_session_id": standing, "quantity": 2},
        {"cart_item_id": seed.cart_item(cart_id, vip, 1), "cart_id": cart_id, "event_session_id": vip, "quantity": 1},
    ]
    return {"event_id": event_id, "cart_id": cart_id, "standing": standing, "vip": vip, "items": items}


def ticket(cart_item):
    return {
        "cartItem": cart_item,
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace@example.com",
        "phone": "555-0199",
        "company": "Navy",
    }


class TestAddTicketsSold:

    def test_finalize_two_tickets(self, client, checkout_cart, count_rows):
        resp = client.post(
            "/api/sold/v1/add/tickets/sold",
            json={"tickets": [ticket(i) for i in checkout_cart["items"]]},
        )

        assert resp.status_code == 200
        assert resp.json() == {"success": "Added successfully", "tickets_sold": 2}
        assert count_rows(TicketSoldModel) == 2
        assert count_rows(CartItemModel) == 0
        assert count_rows(CartModel) == 0

    @pytest.mark.parametrize("body", [{}, {"tickets": []}, {"tickets": None}])
    def test_empty_tickets_is_bad_request(self, client, checkout_cart, count_rows, body):
        resp = client.post("/api/sold/v1/add/tickets/sold", json=body)

        assert resp.status_code == 400
        assert resp.json() == {"detail": "Tickets cannot be null or empty."}
        assert count_rows(TicketSoldModel) == 0
        assert count_rows(CartItemModel) == 2
        assert count_rows(CartModel) == 1

    def test_ticket_without_email_is_bad_request(self, client, checkout_cart, count_rows):
        bad = ticket(checkout_cart["items"][0])
        del bad["email"]

        resp = client.post("/api/sold/v1/add/tickets/sold", json={"tickets": [bad]})

        assert resp.status_code == 400
        assert count_rows(TicketSoldModel) == 0

    def test_locked_cart_is_conflict(self, client, checkout_cart, lock_service, count_rows):
        lock_service.held.add(checkout_cart["cart_id"])

        resp = client.post(
            "/api/sold/v1/add/tickets/sold",
            json={"tickets": [ticket(i) for i in checkout_cart["items"]]},
        )

        assert resp.status_code == 409
        assert count_rows(TicketSoldModel) == 0

    def test_double_submit_is_not_found(self, client, checkout_cart, count_rows):
        body = {"tickets": [ticket(i) for i in checkout_cart["items"]]}

        first = client.post("/api/sold/v1/add/tickets/sold", json=body)
        second = client.post("/api/sold/v1/add/tickets/sold", json=body)

        assert first.status_code == 200
        assert second.status_code == 404
        assert second.json() == {"detail": f"Cart {checkout_cart['cart_id']} does not exist."}
        assert count_rows(TicketSoldModel) == 2

    def test_foreign_cart_item_is_bad_request(self, client, checkout_cart, seed, count_rows):
        other_cart = seed.cart("S2")
        foreign = {
            "cart_item_id": seed.cart_item(other_cart, checkout_cart["vip"], 5),
            "cart_id": checkout_cart["cart_id"],
            "event_session_id": checkout_cart["vip"],
            "quantity": 5,
        }

        resp = client.post("/api/sold/v1/add/tickets/sold", json={"tickets": [ticket(foreign)]})

        assert resp.status_code == 400
        assert count_rows(TicketSoldModel) == 0
        assert count_rows(CartItemModel, CartItemModel.cart_id == other_cart) == 1


class TestSoldTotals:

    def test_totals_after_sale(self, client, checkout_cart):
        client.post(
            "/api/sold/v1/add/tickets/sold",
            json={"tickets": [ticket(i) for i in checkout_cart["items"]]},
        )

        by_event = client.get("/api/sold/v1/tickets/event", params={"eventId": checkout_cart["event_id"]})
        by_session = client.get(
            "/api/sold/v1/tickets/event/session", params={"eventSessionId": checkout_cart["vip"]}
        )

        assert by_event.json() == {"event_id": checkout_cart["event_id"], "total_sold": 3}
        assert by_session.json() == {"event_session_id": checkout_cart["vip"], "total_sold": 1}

    def test_no_sales_is_zero(self, client, checkout_cart):
        resp = client.get("/api/sold/v1/tickets/event", params={"eventId": checkout_cart["event_id"]})

        assert resp.json()["total_sold"] == 0

    def test_missing_event_session_id_is_bad_request(self, client):
        assert client.get("/api/sold/v1/tickets/event/session").status_code == 400

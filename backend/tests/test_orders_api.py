"""
API Tests — Purchase/sales orders and the fulfilment workflow.
"""

from datetime import date

import pytest
from httpx import AsyncClient

from dashboard import fixtures
from dashboard.orders import OrderBook, OrderStatus, OrderType, can_transition


@pytest.mark.asyncio
class TestOrdersAPI:

    async def test_list_orders(self, client: AsyncClient):
        resp = await client.get("/api/v1/orders/")
        assert resp.status_code == 200
        assert [o["order_number"] for o in resp.json()] == [
            "PO-2025-001",
            "SO-2025-145",
            "PO-2025-002",
            "SO-2025-146",
        ]

    async def test_filter_by_type_and_status(self, client: AsyncClient):
        resp = await client.get("/api/v1/orders/", params={"type": "Purchase Order"})
        assert [o["id"] for o in resp.json()] == [1, 3]

        resp = await client.get("/api/v1/orders/", params={"type": "Purchase Order", "status": "Pending"})
        assert [o["id"] for o in resp.json()] == [1]

    async def test_order_total_and_counterparty(self, client: AsyncClient):
        resp = await client.get("/api/v1/orders/1")
        data = resp.json()
        assert data["total"] == pytest.approx(73999.2)
        assert data["supplier"] == "Apple Inc."
        assert data["customer"] is None
        assert data["next_action"] == "Process"
        assert data["items"][0]["line_total"] == pytest.approx(49999.5)

    async def test_sales_order_has_customer_only(self, client: AsyncClient):
        resp = await client.get("/api/v1/orders/2")
        data = resp.json()
        assert data["customer"] == "TechMart Retail"
        assert data["supplier"] is None
        assert data["next_action"] == "Deliver"

    async def test_summary(self, client: AsyncClient):
        resp = await client.get("/api/v1/orders/summary")
        data = resp.json()
        assert data["total_orders"] == 4
        assert data["pending"] == 1
        assert data["total_value"] == pytest.approx(100199.07)

    async def test_get_order_not_found(self, client: AsyncClient):
        resp = await client.get("/api/v1/orders/42")
        assert resp.status_code == 404

    async def test_create_order(self, client: AsyncClient):
        resp = await client.post(
            "/api/v1/orders/",
            json={
                "type": "Sales Order",
                "counterparty": "Corner Shop",
                "items": [
                    {"product": "Levi's 501 Jeans", "quantity": 4, "unit_price": 89.99},
                    {"product": "Nike Air Max 270", "quantity": "2", "unit_price": "150"},
                ],
                "priority": "Low",
            },
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["status"] == "Pending"
        assert data["customer"] == "Corner Shop"
        assert data["supplier"] is None
        assert data["total"] == pytest.approx(659.96)
        assert data["order_number"].startswith(f"SO-{date.today().year}-")

    async def test_create_order_requires_items(self, client: AsyncClient):
        resp = await client.post(
            "/api/v1/orders/",
            json={"type": "Purchase Order", "counterparty": "Apple Inc.", "items": []},
        )
        assert resp.status_code == 422

    async def test_advance_through_workflow(self, client: AsyncClient):
        for expected in ("Processing", "Shipped", "Delivered"):
            resp = await client.post("/api/v1/orders/1/advance")
            assert resp.status_code == 200
            assert resp.json()["status"] == expected

        assert resp.json()["next_action"] is None
        resp = await client.post("/api/v1/orders/1/advance")
        assert resp.status_code == 409

    async def test_cancel_before_shipping(self, client: AsyncClient):
        resp = await client.post("/api/v1/orders/4/status", json={"status": "Cancelled"})
        assert resp.status_code == 200
        assert resp.json()["status"] == "Cancelled"

    async def test_cannot_cancel_shipped_order(self, client: AsyncClient):
        resp = await client.post("/api/v1/orders/2/status", json={"status": "Cancelled"})
        assert resp.status_code == 409

    async def test_unknown_status_rejected(self, client: AsyncClient):
        resp = await client.post("/api/v1/orders/1/status", json={"status": "Lost"})
        assert resp.status_code == 422

    async def test_status_change_unknown_order(self, client: AsyncClient):
        resp = await client.post("/api/v1/orders/42/status", json={"status": "Processing"})
        assert resp.status_code == 404


class TestOrderBook:

    def test_next_order_number_continues_sequence(self):
        book = OrderBook(fixtures.order_fixtures())
        assert book.next_order_number(OrderType.PURCHASE, date(2025, 11, 1)) == "PO-2025-003"
        assert book.next_order_number(OrderType.SALES, date(2025, 11, 1)) == "SO-2025-147"
        assert book.next_order_number(OrderType.PURCHASE, date(2026, 1, 2)) == "PO-2026-001"

    def test_this_month_counts_orders_in_current_month(self):
        book = OrderBook(fixtures.order_fixtures())
        assert book.summary(today=date(2025, 10, 31)).this_month == 4
        assert book.summary(today=date(2025, 11, 1)).this_month == 0

    def test_terminal_states_have_no_transitions(self):
        for status in OrderStatus:
            assert not can_transition(OrderStatus.DELIVERED, status)
            assert not can_transition(OrderStatus.CANCELLED, status)

"""
API Tests — Inventory levels, threshold status and manual adjustments.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
class TestInventoryAPI:

    async def test_list_inventory(self, client: AsyncClient):
        resp = await client.get("/api/v1/inventory/")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 3
        statuses = {item["sku"]: item["status"] for item in data}
        assert statuses == {
            "APL-IP15P-128": "Healthy",
            "NK-AM270-BK-10": "Low Stock",
            "SAM-Q55-4K": "Low Stock",
        }

    async def test_value_is_stock_times_unit_value(self, client: AsyncClient):
        resp = await client.get("/api/v1/inventory/1")
        data = resp.json()
        assert data["value"] == pytest.approx(45 * 999.99)
        assert data["last_movement"] == {"date": "2025-10-29", "type": "Sale", "quantity": -3}

    async def test_filter_by_status(self, client: AsyncClient):
        resp = await client.get("/api/v1/inventory/", params={"status": "Low Stock"})
        assert [item["id"] for item in resp.json()] == [2, 3]

    async def test_search_covers_location(self, client: AsyncClient):
        resp = await client.get("/api/v1/inventory/", params={"search": "warehouse a"})
        assert [item["id"] for item in resp.json()] == [1, 3]

    async def test_summary(self, client: AsyncClient):
        resp = await client.get("/api/v1/inventory/summary")
        data = resp.json()
        assert data["total_items"] == 3
        assert data["healthy"] == 1
        assert data["low_stock"] == 2
        assert data["critical"] == 0
        assert data["total_value"] == pytest.approx(58049.43)

    async def test_restock_moves_item_to_healthy(self, client: AsyncClient):
        resp = await client.post("/api/v1/inventory/2/adjust", json={"adjustment": 15, "reason": "Cycle count"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["current_stock"] == 38
        assert data["status"] == "Healthy"
        assert data["last_movement"]["type"] == "Adjustment"
        assert data["last_movement"]["quantity"] == 15

    async def test_adjustment_landing_on_min_threshold_is_low_stock(self, client: AsyncClient):
        resp = await client.post("/api/v1/inventory/2/adjust", json={"adjustment": 7})
        data = resp.json()
        assert data["current_stock"] == 30
        assert data["status"] == "Low Stock"

    async def test_removal_can_make_item_critical(self, client: AsyncClient):
        resp = await client.post("/api/v1/inventory/3/adjust", json={"adjustment": -6})
        data = resp.json()
        assert data["current_stock"] == 6
        assert data["status"] == "Critical"

    async def test_adjustment_below_zero_rejected(self, client: AsyncClient):
        resp = await client.post("/api/v1/inventory/1/adjust", json={"adjustment": -100})
        assert resp.status_code == 422

        unchanged = await client.get("/api/v1/inventory/1")
        assert unchanged.json()["current_stock"] == 45

    async def test_unparseable_adjustment_is_zero(self, client: AsyncClient):
        resp = await client.post("/api/v1/inventory/1/adjust", json={"adjustment": "ten"})
        assert resp.status_code == 200
        assert resp.json()["current_stock"] == 45

    async def test_adjust_unknown_item(self, client: AsyncClient):
        resp = await client.post("/api/v1/inventory/99/adjust", json={"adjustment": 1})
        assert resp.status_code == 404

    async def test_alerts_put_critical_first(self, client: AsyncClient):
        await client.post("/api/v1/inventory/3/adjust", json={"adjustment": -6})

        resp = await client.get("/api/v1/inventory/alerts")
        data = resp.json()
        assert [a["item_id"] for a in data] == [3, 2]
        assert data[0]["urgency"] == "high"
        assert data[1]["urgency"] == "medium"


def test_negative_stock_allowed_when_configured():
    from dashboard import fixtures
    from dashboard.inventory import InventoryBoard, InventoryStatus

    board = InventoryBoard(fixtures.inventory_fixtures(), allow_negative_stock=True)
    item = board.adjust_stock(1, -50)
    assert item.current_stock == -5
    assert item.status is InventoryStatus.CRITICAL


@pytest.mark.parametrize(
    "stock, min_threshold, expected",
    [
        (30, 30, "Low Stock"),
        (31, 30, "Healthy"),
        (15, 30, "Critical"),
        (16, 30, "Low Stock"),
        (7, 15, "Critical"),
        (8, 15, "Low Stock"),
        (0, 0, "Critical"),
    ],
)
def test_status_bands_are_inclusive(stock, min_threshold, expected):
    from dashboard.inventory import inventory_status

    assert inventory_status(stock, min_threshold).value == expected

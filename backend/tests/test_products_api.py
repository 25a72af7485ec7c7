"""
API Tests — Product catalog CRUD, derived margin and status.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
class TestProductsAPI:

    async def test_list_products(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 5
        assert data[0]["name"] == "iPhone 15 Pro"
        assert data[0]["margin"] == 25.0
        assert data[0]["status"] == "Active"

    async def test_low_stock_status_is_derived(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/")
        statuses = {p["sku"]: p["status"] for p in resp.json()}
        assert statuses["SAM-Q55-4K"] == "Low Stock"
        assert statuses["KA-SM-RED"] == "Low Stock"
        assert statuses["LEV-501-BL-32"] == "Active"

    async def test_search_matches_name_and_sku(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/", params={"search": "NIKE"})
        assert [p["sku"] for p in resp.json()] == ["NK-AM270-BK-10"]

        resp = await client.get("/api/v1/products/", params={"search": "apl-ip"})
        assert [p["name"] for p in resp.json()] == ["iPhone 15 Pro"]

    async def test_filter_by_category(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/", params={"category": "Electronics"})
        data = resp.json()
        assert len(data) == 2
        assert all(p["category"] == "Electronics" for p in data)

    async def test_search_and_category_combine(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/", params={"search": "pro", "category": "Electronics"})
        assert [p["name"] for p in resp.json()] == ["iPhone 15 Pro"]

    async def test_category_all_returns_everything(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/", params={"category": "all"})
        assert len(resp.json()) == 5

    async def test_summary(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/summary")
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_products"] == 5
        assert data["low_stock_items"] == 2
        assert data["total_value"] == pytest.approx(67118.68)
        assert data["average_margin"] == 39.6

    async def test_categories(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/categories")
        assert resp.json() == ["Electronics", "Footwear", "Clothing", "Home & Kitchen"]

    async def test_get_product_not_found(self, client: AsyncClient):
        resp = await client.get("/api/v1/products/999")
        assert resp.status_code == 404

    async def test_create_product_computes_margin(self, client: AsyncClient):
        resp = await client.post(
            "/api/v1/products/",
            json={
                "name": "Desk Lamp",
                "sku": "LMP-001",
                "category": "Home & Kitchen",
                "price": 40,
                "cost": 30,
                "stock": 100,
            },
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["margin"] == 25.0
        assert data["status"] == "Active"
        assert data["id"] > 5

        listed = await client.get("/api/v1/products/")
        assert len(listed.json()) == 6

    async def test_create_product_unparseable_numbers_fall_back_to_zero(self, client: AsyncClient):
        resp = await client.post(
            "/api/v1/products/",
            json={"name": "Mystery Box", "sku": "MB-1", "price": "abc", "cost": "", "stock": "lots"},
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["price"] == 0.0
        assert data["stock"] == 0
        assert data["margin"] == 0.0
        assert data["status"] == "Low Stock"

    async def test_create_product_requires_name(self, client: AsyncClient):
        resp = await client.post("/api/v1/products/", json={"name": "", "sku": "X-1"})
        assert resp.status_code == 422

    async def test_create_gives_distinct_ids(self, client: AsyncClient):
        first = await client.post("/api/v1/products/", json={"name": "A", "sku": "A-1"})
        second = await client.post("/api/v1/products/", json={"name": "B", "sku": "B-1"})
        assert first.json()["id"] != second.json()["id"]

    async def test_update_recomputes_margin(self, client: AsyncClient):
        resp = await client.patch("/api/v1/products/2", json={"price": 170})
        assert resp.status_code == 200
        data = resp.json()
        assert data["price"] == 170.0
        assert data["cost"] == 85.0
        assert data["margin"] == 50.0

    async def test_update_stock_changes_status(self, client: AsyncClient):
        resp = await client.patch("/api/v1/products/1", json={"stock": 15})
        assert resp.json()["status"] == "Low Stock"

        resp = await client.patch("/api/v1/products/1", json={"active": False})
        assert resp.json()["status"] == "Inactive"

    async def test_update_unknown_product(self, client: AsyncClient):
        resp = await client.patch("/api/v1/products/999", json={"price": 1})
        assert resp.status_code == 404

    @pytest.mark.parametrize("patch", [{"price": None}, {"name": None}, {"stock": None, "cost": 10}])
    async def test_update_with_null_is_rejected_and_leaves_product_intact(self, client: AsyncClient, patch):
        resp = await client.patch("/api/v1/products/1", json=patch)
        assert resp.status_code == 422

        product = await client.get("/api/v1/products/1")
        assert product.status_code == 200
        assert product.json()["name"] == "iPhone 15 Pro"
        assert product.json()["price"] == 999.99
        assert product.json()["cost"] == 750.0
        assert product.json()["margin"] == 25.0

        summary = await client.get("/api/v1/products/summary")
        assert summary.status_code == 200
        assert summary.json()["average_margin"] == 39.6

        stats = await client.get("/api/v1/dashboard/stats")
        assert stats.status_code == 200

    async def test_delete_requires_confirmation(self, client: AsyncClient):
        resp = await client.delete("/api/v1/products/3")
        assert resp.status_code == 400

        still_there = await client.get("/api/v1/products/3")
        assert still_there.status_code == 200

    async def test_delete_removes_exactly_one(self, client: AsyncClient):
        resp = await client.delete("/api/v1/products/3", params={"confirm": "true"})
        assert resp.status_code == 204

        listed = await client.get("/api/v1/products/")
        ids = [p["id"] for p in listed.json()]
        assert ids == [1, 2, 4, 5]

    async def test_delete_unknown_product(self, client: AsyncClient):
        resp = await client.delete("/api/v1/products/999", params={"confirm": "true"})
        assert resp.status_code == 404

"""
API Tests — AI recommendations, demand predictions and the refresh cycle.
"""

import asyncio
from datetime import datetime

import pytest
from httpx import AsyncClient

from dashboard import fixtures
from dashboard.errors import OperationInProgress
from dashboard.insights import InsightsBoard, InsightsProvider, InsightsSnapshot


@pytest.mark.asyncio
class TestInsightsAPI:

    async def test_overview(self, client: AsyncClient):
        resp = await client.get("/api/v1/insights/")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["recommendations"]) == 5
        assert len(data["predictions"]) == 3
        assert len(data["trends"]) == 3
        assert data["pending_count"] == 5
        assert data["is_refreshing"] is False

    async def test_confidence_bands(self, client: AsyncClient):
        resp = await client.get("/api/v1/insights/recommendations")
        bands = {r["id"]: r["confidence_band"] for r in resp.json()}
        assert bands[1] == "high"
        assert bands[2] == "medium"
        assert bands[4] == "low"

    async def test_prediction_urgency(self, client: AsyncClient):
        resp = await client.get("/api/v1/insights/predictions")
        assert [p["urgency"] for p in resp.json()] == ["critical", "warning", "ok"]

    async def test_trends(self, client: AsyncClient):
        resp = await client.get("/api/v1/insights/trends")
        assert [t["direction"] for t in resp.json()] == ["increasing", "stable", "decreasing"]

    async def test_filter_recommendations_by_type(self, client: AsyncClient):
        resp = await client.get("/api/v1/insights/recommendations", params={"type": "pricing"})
        assert [r["id"] for r in resp.json()] == [2]

    async def test_approve_recommendation(self, client: AsyncClient):
        resp = await client.post("/api/v1/insights/recommendations/1/approve")
        assert resp.status_code == 200
        assert resp.json()["status"] == "approved"

        pending = await client.get("/api/v1/insights/recommendations", params={"status": "pending"})
        assert [r["id"] for r in pending.json()] == [2, 3, 4, 5]

    async def test_decision_is_final(self, client: AsyncClient):
        await client.post("/api/v1/insights/recommendations/3/reject")

        resp = await client.post("/api/v1/insights/recommendations/3/approve")
        assert resp.status_code == 409
        resp = await client.post("/api/v1/insights/recommendations/3/reject")
        assert resp.status_code == 409

    async def test_get_recommendation(self, client: AsyncClient):
        resp = await client.get("/api/v1/insights/recommendations/3")
        assert resp.status_code == 200
        assert resp.json()["product"] == "Winter Jackets"

        resp = await client.get("/api/v1/insights/recommendations/77")
        assert resp.status_code == 404

    async def test_decide_unknown_recommendation(self, client: AsyncClient):
        resp = await client.post("/api/v1/insights/recommendations/77/approve")
        assert resp.status_code == 404

    async def test_refresh_keeps_decisions(self, client: AsyncClient):
        await client.post("/api/v1/insights/recommendations/2/approve")

        resp = await client.post("/api/v1/insights/refresh")
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_refreshing"] is False
        assert data["pending_count"] == 4
        assert data["recommendations"][1]["status"] == "approved"

    async def test_pending_count_feeds_dashboard(self, client: AsyncClient):
        await client.post("/api/v1/insights/recommendations/5/reject")

        resp = await client.get("/api/v1/dashboard/stats")
        assert resp.json()["pending_recommendations"] == 4


class _BlockingProvider(InsightsProvider):
    def __init__(self):
        self.release = asyncio.Event()
        self.started = asyncio.Event()

    async def analyze(self, current: InsightsSnapshot) -> InsightsSnapshot:
        self.started.set()
        await self.release.wait()
        return InsightsSnapshot(
            recommendations=current.recommendations,
            predictions=current.predictions,
            trends=current.trends,
            generated_at=datetime(2030, 1, 1),
        )


class _FailingProvider(InsightsProvider):
    async def analyze(self, current: InsightsSnapshot) -> InsightsSnapshot:
        raise RuntimeError("analysis backend unavailable")


@pytest.mark.asyncio
class TestInsightsRefresh:

    async def test_overlapping_refresh_rejected(self):
        provider = _BlockingProvider()
        board = InsightsBoard(fixtures.insights_fixture(), provider)

        first = asyncio.create_task(board.refresh())
        await provider.started.wait()
        assert board.is_refreshing is True

        with pytest.raises(OperationInProgress):
            await board.refresh()

        provider.release.set()
        snapshot = await first
        assert snapshot.generated_at == datetime(2030, 1, 1)
        assert board.is_refreshing is False

    async def test_failed_refresh_clears_busy_flag(self):
        board = InsightsBoard(fixtures.insights_fixture(), _FailingProvider())

        with pytest.raises(RuntimeError):
            await board.refresh()
        assert board.is_refreshing is False
        assert len(board.snapshot.recommendations) == 5

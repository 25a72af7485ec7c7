"""
AI Insights Page — recommendations, demand predictions and market trends.

The analysis itself sits behind ``InsightsProvider``. The shipped provider
only simulates latency and hands back the fixture snapshot; a real
recommendation service plugs in by implementing ``analyze``.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

import structlog

from dashboard.errors import InvalidTransition, OperationInProgress
from dashboard.filters import ALL, filter_exact

logger = structlog.get_logger()


class RecommendationType(str, Enum):
    REORDER = "reorder"
    OVERSTOCK = "overstock"
    SEASONAL = "seasonal"
    TREND = "trend"
    PRICING = "pricing"
    SUPPLIER = "supplier"


class RecommendationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class Recommendation:
    id: int
    type: RecommendationType
    product: str
    suggested_action: str
    reasoning: str
    confidence: float  # 0-1
    priority: str = "medium"
    sku: str | None = None
    potential_impact: str | None = None
    status: RecommendationStatus = RecommendationStatus.PENDING

    @property
    def confidence_band(self) -> str:
        return confidence_band(self.confidence)


@dataclass
class DemandPrediction:
    product: str
    current_stock: int
    predicted_demand: int
    recommended_order: int
    days_until_stockout: int
    confidence: float  # 0-1

    @property
    def urgency(self) -> str:
        return stockout_urgency(self.days_until_stockout)


@dataclass
class MarketTrend:
    category: str
    direction: str  # "increasing", "stable", "decreasing"
    change: str
    period: str
    insight: str


@dataclass
class InsightsSnapshot:
    recommendations: list[Recommendation] = field(default_factory=list)
    predictions: list[DemandPrediction] = field(default_factory=list)
    trends: list[MarketTrend] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.utcnow)


def confidence_band(confidence: float) -> str:
    if confidence >= 0.9:
        return "high"
    if confidence >= 0.8:
        return "medium"
    return "low"


def stockout_urgency(days_until_stockout: int) -> str:
    if days_until_stockout <= 5:
        return "critical"
    if days_until_stockout <= 10:
        return "warning"
    return "ok"


class InsightsProvider(ABC):
    """Source of recommendations, predictions and trends."""

    @abstractmethod
    async def analyze(self, current: InsightsSnapshot) -> InsightsSnapshot:
        """Return a new snapshot, given the one currently shown."""


class SimulatedInsightsProvider(InsightsProvider):
    """Waits a fixed delay and returns the current snapshot re-stamped."""

    def __init__(self, delay_seconds: float = 3.0):
        self.delay_seconds = delay_seconds

    async def analyze(self, current: InsightsSnapshot) -> InsightsSnapshot:
        await asyncio.sleep(self.delay_seconds)
        return replace(current, generated_at=datetime.utcnow())


class InsightsBoard:
    """State of the AI insights page."""

    def __init__(self, snapshot: InsightsSnapshot, provider: InsightsProvider | None = None):
        self.snapshot = snapshot
        self.provider = provider or SimulatedInsightsProvider()
        self.is_refreshing = False

    def recommendations(self, status: str | None = ALL, rec_type: str | None = ALL) -> list[Recommendation]:
        return filter_exact(filter_exact(self.snapshot.recommendations, "status", status), "type", rec_type)

    def get_recommendation(self, recommendation_id: int) -> Recommendation | None:
        for rec in self.snapshot.recommendations:
            if rec.id == recommendation_id:
                return rec
        return None

    def pending_count(self) -> int:
        return sum(1 for r in self.snapshot.recommendations if r.status is RecommendationStatus.PENDING)

    def approve(self, recommendation_id: int) -> Recommendation | None:
        return self._decide(recommendation_id, RecommendationStatus.APPROVED)

    def reject(self, recommendation_id: int) -> Recommendation | None:
        return self._decide(recommendation_id, RecommendationStatus.REJECTED)

    def _decide(self, recommendation_id: int, decision: RecommendationStatus) -> Recommendation | None:
        for index, rec in enumerate(self.snapshot.recommendations):
            if rec.id != recommendation_id:
                continue
            if rec.status is not RecommendationStatus.PENDING:
                raise InvalidTransition(rec.status.value, decision.value)
            decided = replace(rec, status=decision)
            self.snapshot.recommendations[index] = decided
            logger.info(
                "insights.recommendation_decided",
                recommendation_id=recommendation_id,
                decision=decision.value,
                type=rec.type.value,
            )
            return decided
        return None

    async def refresh(self) -> InsightsSnapshot:
        if self.is_refreshing:
            raise OperationInProgress("AI analysis refresh already running")
        self.is_refreshing = True
        logger.info("insights.refresh_started")
        try:
            self.snapshot = await self.provider.analyze(self.snapshot)
        finally:
            self.is_refreshing = False
        logger.info("insights.refresh_finished", generated_at=self.snapshot.generated_at.isoformat())
        return self.snapshot

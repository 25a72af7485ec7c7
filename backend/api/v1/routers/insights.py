"""
AI Insights Router — Recommendations, demand predictions and market trends.

Recommendations start pending and can be approved or rejected once. The
refresh endpoint re-runs the (simulated) analysis.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.deps import get_insights
from dashboard.errors import InvalidTransition, OperationInProgress
from dashboard.filters import ALL
from dashboard.insights import (
    DemandPrediction,
    InsightsBoard,
    InsightsSnapshot,
    Recommendation,
    RecommendationStatus,
    RecommendationType,
)

router = APIRouter(prefix="/api/v1/insights", tags=["insights"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class RecommendationResponse(BaseModel):
    id: int
    type: RecommendationType
    product: str
    sku: str | None
    suggested_action: str
    reasoning: str
    confidence: float
    confidence_band: str
    priority: str
    potential_impact: str | None
    status: RecommendationStatus


class DemandPredictionResponse(BaseModel):
    product: str
    current_stock: int
    predicted_demand: int
    recommended_order: int
    days_until_stockout: int
    confidence: float
    urgency: str


class MarketTrendResponse(BaseModel):
    category: str
    direction: str
    change: str
    period: str
    insight: str


class InsightsResponse(BaseModel):
    recommendations: list[RecommendationResponse]
    predictions: list[DemandPredictionResponse]
    trends: list[MarketTrendResponse]
    generated_at: datetime
    pending_count: int
    is_refreshing: bool


def _recommendation(rec: Recommendation) -> RecommendationResponse:
    return RecommendationResponse(
        id=rec.id,
        type=rec.type,
        product=rec.product,
        sku=rec.sku,
        suggested_action=rec.suggested_action,
        reasoning=rec.reasoning,
        confidence=rec.confidence,
        confidence_band=rec.confidence_band,
        priority=rec.priority,
        potential_impact=rec.potential_impact,
        status=rec.status,
    )


def _prediction(prediction: DemandPrediction) -> DemandPredictionResponse:
    return DemandPredictionResponse(
        product=prediction.product,
        current_stock=prediction.current_stock,
        predicted_demand=prediction.predicted_demand,
        recommended_order=prediction.recommended_order,
        days_until_stockout=prediction.days_until_stockout,
        confidence=prediction.confidence,
        urgency=prediction.urgency,
    )


def _snapshot(board: InsightsBoard, snapshot: InsightsSnapshot) -> InsightsResponse:
    return InsightsResponse(
        recommendations=[_recommendation(r) for r in snapshot.recommendations],
        predictions=[_prediction(p) for p in snapshot.predictions],
        trends=[
            MarketTrendResponse(
                category=t.category,
                direction=t.direction,
                change=t.change,
                period=t.period,
                insight=t.insight,
            )
            for t in snapshot.trends
        ],
        generated_at=snapshot.generated_at,
        pending_count=board.pending_count(),
        is_refreshing=board.is_refreshing,
    )


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/", response_model=InsightsResponse)
async def get_insights_overview(board: InsightsBoard = Depends(get_insights)):
    """Everything shown on the AI insights page."""
    return _snapshot(board, board.snapshot)


@router.get("/recommendations", response_model=list[RecommendationResponse])
async def list_recommendations(
    status: str = ALL,
    type: str = ALL,
    board: InsightsBoard = Depends(get_insights),
):
    return [_recommendation(r) for r in board.recommendations(status, type)]


@router.get("/predictions", response_model=list[DemandPredictionResponse])
async def list_predictions(board: InsightsBoard = Depends(get_insights)):
    return [_prediction(p) for p in board.snapshot.predictions]


@router.get("/trends", response_model=list[MarketTrendResponse])
async def list_trends(board: InsightsBoard = Depends(get_insights)):
    return board.snapshot.trends


@router.get("/recommendations/{recommendation_id}", response_model=RecommendationResponse)
async def get_recommendation(recommendation_id: int, board: InsightsBoard = Depends(get_insights)):
    rec = board.get_recommendation(recommendation_id)
    if not rec:
        raise HTTPException(status_code=404, detail="Recommendation not found")
    return _recommendation(rec)


@router.post("/recommendations/{recommendation_id}/approve", response_model=RecommendationResponse)
async def approve_recommendation(recommendation_id: int, board: InsightsBoard = Depends(get_insights)):
    """Approve a pending recommendation."""
    try:
        rec = board.approve(recommendation_id)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if not rec:
        raise HTTPException(status_code=404, detail="Recommendation not found")
    return _recommendation(rec)


@router.post("/recommendations/{recommendation_id}/reject", response_model=RecommendationResponse)
async def reject_recommendation(recommendation_id: int, board: InsightsBoard = Depends(get_insights)):
    """Reject a pending recommendation."""
    try:
        rec = board.reject(recommendation_id)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if not rec:
        raise HTTPException(status_code=404, detail="Recommendation not found")
    return _recommendation(rec)


@router.post("/refresh", response_model=InsightsResponse)
async def refresh_insights(board: InsightsBoard = Depends(get_insights)):
    """Re-run the analysis. Returns 409 while a refresh is already running."""
    try:
        snapshot = await board.refresh()
    except OperationInProgress as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return _snapshot(board, snapshot)

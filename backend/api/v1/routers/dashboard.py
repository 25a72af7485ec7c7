"""
Dashboard Router — Overview KPIs, stock alerts and recent activity.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.deps import get_workspace
from dashboard.inventory import InventoryStatus
from dashboard.overview import ActivityType, dashboard_stats
from dashboard.workspace import Workspace

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class DashboardStatsResponse(BaseModel):
    total_products: int
    inventory_value: float
    low_stock_items: int
    monthly_revenue: float
    pending_recommendations: int


class DashboardAlert(BaseModel):
    item_id: int
    product: str
    sku: str
    current_stock: int
    min_stock: int
    status: InventoryStatus
    urgency: str


class ActivityResponse(BaseModel):
    id: int
    type: ActivityType
    description: str
    user: str
    timestamp: datetime
    quantity: int


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(workspace: Workspace = Depends(get_workspace)):
    """KPI cards, computed from the current page state."""
    return dashboard_stats(workspace.products, workspace.inventory, workspace.reports, workspace.insights)


@router.get("/alerts", response_model=list[DashboardAlert])
async def get_dashboard_alerts(workspace: Workspace = Depends(get_workspace)):
    return workspace.inventory.alerts()


@router.get("/activity", response_model=list[ActivityResponse])
async def get_recent_activity(
    limit: int = Query(10, ge=1, le=100),
    workspace: Workspace = Depends(get_workspace),
):
    """Most recent stock movements and system events, newest first."""
    return workspace.activity.recent(limit)

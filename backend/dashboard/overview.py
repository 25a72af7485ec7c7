"""
Overview Page — KPIs, stock alerts and the recent activity feed.

KPIs are read from the other pages' current state rather than stored.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from dashboard.inventory import InventoryBoard
from dashboard.insights import InsightsBoard
from dashboard.products import ProductCatalog
from dashboard.reports import ReportCenter


class ActivityType(str, Enum):
    STOCK_IN = "stock_in"
    STOCK_OUT = "stock_out"
    ADJUSTMENT = "adjustment"
    REORDER = "reorder"
    ALERT = "alert"


@dataclass
class ActivityEvent:
    id: int
    type: ActivityType
    description: str
    user: str
    timestamp: datetime
    quantity: int


@dataclass
class DashboardStats:
    total_products: int
    inventory_value: float
    low_stock_items: int
    monthly_revenue: float
    pending_recommendations: int


class ActivityFeed:
    def __init__(self, events: list[ActivityEvent]):
        self.events = list(events)

    def recent(self, limit: int = 10) -> list[ActivityEvent]:
        return sorted(self.events, key=lambda e: e.timestamp, reverse=True)[:limit]


def dashboard_stats(
    products: ProductCatalog,
    inventory: InventoryBoard,
    reports: ReportCenter,
    insights: InsightsBoard,
) -> DashboardStats:
    inventory_summary = inventory.summary()
    monthly = reports.analytics.monthly_sales
    return DashboardStats(
        total_products=products.summary().total_products,
        inventory_value=inventory_summary.total_value,
        low_stock_items=inventory_summary.low_stock + inventory_summary.critical,
        monthly_revenue=monthly[-1].sales if monthly else 0.0,
        pending_recommendations=insights.pending_count(),
    )

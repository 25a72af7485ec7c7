"""
Workspace — the set of independent page states served by one process.

Nothing here is persisted; a new workspace starts from the fixtures again.
"""

from dataclasses import dataclass

from core.config import Settings
from dashboard import fixtures
from dashboard.insights import InsightsBoard, SimulatedInsightsProvider
from dashboard.inventory import InventoryBoard
from dashboard.orders import OrderBook
from dashboard.overview import ActivityFeed
from dashboard.products import ProductCatalog
from dashboard.reports import ReportCenter, SimulatedReportGenerator
from dashboard.suppliers import SupplierDirectory


@dataclass
class Workspace:
    products: ProductCatalog
    inventory: InventoryBoard
    orders: OrderBook
    suppliers: SupplierDirectory
    insights: InsightsBoard
    reports: ReportCenter
    activity: ActivityFeed

    @classmethod
    def from_fixtures(cls, settings: Settings) -> "Workspace":
        return cls(
            products=ProductCatalog(
                fixtures.product_fixtures(),
                low_stock_threshold=settings.product_low_stock_threshold,
            ),
            inventory=InventoryBoard(
                fixtures.inventory_fixtures(),
                allow_negative_stock=settings.allow_negative_stock,
            ),
            orders=OrderBook(fixtures.order_fixtures()),
            suppliers=SupplierDirectory(fixtures.supplier_fixtures()),
            insights=InsightsBoard(
                fixtures.insights_fixture(),
                SimulatedInsightsProvider(settings.insights_refresh_delay_seconds),
            ),
            reports=ReportCenter(
                fixtures.report_type_fixtures(),
                fixtures.analytics_fixture(),
                SimulatedReportGenerator(settings.report_generation_delay_seconds),
            ),
            activity=ActivityFeed(fixtures.activity_fixtures()),
        )

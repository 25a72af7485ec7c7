"""
InvDash API Dependencies

Dependency injection for the in-memory page workspace.
"""

from fastapi import Depends

from core.config import get_settings
from dashboard.insights import InsightsBoard
from dashboard.inventory import InventoryBoard
from dashboard.orders import OrderBook
from dashboard.products import ProductCatalog
from dashboard.reports import ReportCenter
from dashboard.suppliers import SupplierDirectory
from dashboard.workspace import Workspace

_workspace: Workspace | None = None


def get_workspace() -> Workspace:
    """Process-wide workspace, built from fixtures on first use."""
    global _workspace
    if _workspace is None:
        _workspace = Workspace.from_fixtures(get_settings())
    return _workspace


def get_products(workspace: Workspace = Depends(get_workspace)) -> ProductCatalog:
    return workspace.products


def get_inventory(workspace: Workspace = Depends(get_workspace)) -> InventoryBoard:
    return workspace.inventory


def get_orders(workspace: Workspace = Depends(get_workspace)) -> OrderBook:
    return workspace.orders


def get_suppliers(workspace: Workspace = Depends(get_workspace)) -> SupplierDirectory:
    return workspace.suppliers


def get_insights(workspace: Workspace = Depends(get_workspace)) -> InsightsBoard:
    return workspace.insights


def get_reports(workspace: Workspace = Depends(get_workspace)) -> ReportCenter:
    return workspace.reports

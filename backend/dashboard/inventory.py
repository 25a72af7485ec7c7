"""
Inventory Page — stock levels, threshold status, and manual adjustments.

Status bands (inclusive):
  Critical   stock <= min_threshold / 2
  Low Stock  stock <= min_threshold
  Healthy    otherwise

Status and value are derived from the numbers on every read.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import Enum

import structlog

from dashboard.errors import NegativeStockError
from dashboard.filters import ALL, search
from dashboard.store import RecordStore

logger = structlog.get_logger()


class InventoryStatus(str, Enum):
    HEALTHY = "Healthy"
    LOW_STOCK = "Low Stock"
    CRITICAL = "Critical"


class MovementType(str, Enum):
    SALE = "Sale"
    RESTOCK = "Restock"
    ADJUSTMENT = "Adjustment"


@dataclass
class Movement:
    date: date
    type: MovementType
    quantity: int


@dataclass
class InventoryItem:
    id: int
    product_name: str
    sku: str
    current_stock: int
    min_threshold: int
    max_threshold: int
    location: str
    unit_value: float
    last_movement: Movement

    @property
    def value(self) -> float:
        return round(self.current_stock * self.unit_value, 2)

    @property
    def status(self) -> InventoryStatus:
        return inventory_status(self.current_stock, self.min_threshold)


@dataclass
class InventorySummary:
    total_items: int
    healthy: int
    low_stock: int
    critical: int
    total_value: float


@dataclass
class StockAlert:
    item_id: int
    product: str
    sku: str
    current_stock: int
    min_stock: int
    status: InventoryStatus
    urgency: str  # "high", "medium"


def inventory_status(stock: int, min_threshold: int) -> InventoryStatus:
    if stock <= min_threshold / 2:
        return InventoryStatus.CRITICAL
    if stock <= min_threshold:
        return InventoryStatus.LOW_STOCK
    return InventoryStatus.HEALTHY


class InventoryBoard:
    """State of the inventory page."""

    def __init__(self, items: Iterable[InventoryItem] = (), allow_negative_stock: bool = False):
        self.store: RecordStore[InventoryItem] = RecordStore(items)
        self.allow_negative_stock = allow_negative_stock

    def find(self, status: str | None = ALL, search_term: str | None = None) -> list[InventoryItem]:
        items = search(self.store.all(), search_term, fields=("product_name", "sku", "location"))
        if status in (None, "", ALL):
            return items
        return [item for item in items if item.status.value == status]

    def get(self, item_id: int) -> InventoryItem | None:
        return self.store.get(item_id)

    def adjust_stock(
        self,
        item_id: int,
        delta: int,
        reason: str = "",
        today: date | None = None,
    ) -> InventoryItem | None:
        """
        Apply a signed stock adjustment.

        The reason is written to the log only. Returns None for an unknown item.
        """
        item = self.store.get(item_id)
        if item is None:
            logger.info("inventory.adjust_ignored", item_id=item_id)
            return None

        new_stock = item.current_stock + delta
        if new_stock < 0 and not self.allow_negative_stock:
            raise NegativeStockError(item_id, item.current_stock, delta)

        movement = Movement(date=today or date.today(), type=MovementType.ADJUSTMENT, quantity=delta)
        updated = self.store.edit(item_id, {"current_stock": new_stock, "last_movement": movement})
        logger.info(
            "inventory.adjusted",
            item_id=item_id,
            sku=item.sku,
            delta=delta,
            stock_before=item.current_stock,
            stock_after=new_stock,
            status=updated.status.value,
            reason=reason,
        )
        return updated

    def summary(self) -> InventorySummary:
        items = self.store.all()
        statuses = [item.status for item in items]
        return InventorySummary(
            total_items=len(items),
            healthy=statuses.count(InventoryStatus.HEALTHY),
            low_stock=statuses.count(InventoryStatus.LOW_STOCK),
            critical=statuses.count(InventoryStatus.CRITICAL),
            total_value=round(sum(item.value for item in items), 2),
        )

    def alerts(self) -> list[StockAlert]:
        """Items below their minimum threshold, critical first."""
        alerts = [
            StockAlert(
                item_id=item.id,
                product=item.product_name,
                sku=item.sku,
                current_stock=item.current_stock,
                min_stock=item.min_threshold,
                status=item.status,
                urgency="high" if item.status is InventoryStatus.CRITICAL else "medium",
            )
            for item in self.store.all()
            if item.status is not InventoryStatus.HEALTHY
        ]
        return sorted(alerts, key=lambda a: a.urgency != "high")

"""
Suppliers Page — supplier directory with performance metrics.

New suppliers start with no order history and a perfect on-time record.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

import structlog

from dashboard.filters import ALL, distinct, filter_exact, search
from dashboard.store import RecordStore

logger = structlog.get_logger()


class SupplierStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


# On-time delivery % → performance band
PERFORMANCE_BANDS = (
    (90.0, "good"),
    (75.0, "fair"),
)

# Aggregates owned by order history, never taken from the form
NEW_SUPPLIER_DEFAULTS: dict[str, Any] = {
    "total_orders": 0,
    "total_value": 0.0,
    "average_delivery_time": 0,
    "on_time_delivery": 100.0,
    "last_order": None,
}


@dataclass
class Supplier:
    id: int
    name: str
    contact_person: str
    email: str
    phone: str
    address: str
    category: str
    rating: float
    total_orders: int = 0
    total_value: float = 0.0
    average_delivery_time: int = 0
    on_time_delivery: float = 100.0
    status: SupplierStatus = SupplierStatus.ACTIVE
    last_order: date | None = None
    products: list[str] = field(default_factory=list)

    @property
    def performance(self) -> str:
        return performance_band(self.on_time_delivery)


@dataclass
class SupplierSummary:
    total_suppliers: int
    active_suppliers: int
    total_value: float
    average_rating: float


def performance_band(on_time_pct: float) -> str:
    for floor, band in PERFORMANCE_BANDS:
        if on_time_pct >= floor:
            return band
    return "poor"


class SupplierDirectory:
    """State of the suppliers page."""

    def __init__(self, suppliers: Iterable[Supplier] = ()):
        self.store: RecordStore[Supplier] = RecordStore(suppliers)

    def find(
        self,
        category: str | None = ALL,
        status: str | None = ALL,
        search_term: str | None = None,
    ) -> list[Supplier]:
        matches = search(self.store.all(), search_term, fields=("name", "contact_person"))
        return filter_exact(filter_exact(matches, "category", category), "status", status)

    def categories(self) -> list[str]:
        return distinct(self.store.all(), "category")

    def get(self, supplier_id: int) -> Supplier | None:
        return self.store.get(supplier_id)

    def add(self, data: Mapping[str, Any]) -> Supplier:
        fields_ = {**data, **NEW_SUPPLIER_DEFAULTS, "products": []}
        supplier = self.store.add(Supplier(id=0, **fields_))
        logger.info("suppliers.added", supplier_id=supplier.id, name=supplier.name)
        return supplier

    def edit(self, supplier_id: int, patch: Mapping[str, Any]) -> Supplier | None:
        supplier = self.store.edit(supplier_id, patch)
        if supplier is None:
            logger.info("suppliers.edit_ignored", supplier_id=supplier_id)
            return None
        logger.info("suppliers.edited", supplier_id=supplier_id, fields=sorted(patch))
        return supplier

    def remove(self, supplier_id: int, *, confirmed: bool) -> Supplier | None:
        supplier = self.store.remove(supplier_id, confirmed=confirmed)
        if supplier is not None:
            logger.info("suppliers.removed", supplier_id=supplier_id, name=supplier.name)
        return supplier

    def summary(self) -> SupplierSummary:
        suppliers = self.store.all()
        return SupplierSummary(
            total_suppliers=len(suppliers),
            active_suppliers=sum(1 for s in suppliers if s.status == SupplierStatus.ACTIVE),
            total_value=round(sum(s.total_value for s in suppliers), 2),
            average_rating=round(sum(s.rating for s in suppliers) / len(suppliers), 1) if suppliers else 0.0,
        )

"""
Products Page — catalog CRUD with derived margin and status.

Margin and status are never stored; they are computed from price, cost and
stock every time a product is read.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from dashboard.filters import ALL, distinct, filter_exact, search
from dashboard.store import RecordStore

logger = structlog.get_logger()

LOW_STOCK_THRESHOLD = 15

STATUS_ACTIVE = "Active"
STATUS_LOW_STOCK = "Low Stock"
STATUS_INACTIVE = "Inactive"


@dataclass
class Product:
    id: int
    name: str
    sku: str
    category: str
    price: float
    cost: float
    stock: int
    supplier: str = ""
    description: str = ""
    active: bool = True

    @property
    def margin(self) -> float:
        return compute_margin(self.price, self.cost)


@dataclass
class ProductSummary:
    total_products: int
    low_stock_items: int
    total_value: float
    average_margin: float


def compute_margin(price: float, cost: float) -> float:
    """Percentage profit relative to selling price, one decimal place."""
    if price <= 0:
        return 0.0
    return round((price - cost) / price * 100, 1)


def product_status(product: Product, low_stock_threshold: int = LOW_STOCK_THRESHOLD) -> str:
    if not product.active:
        return STATUS_INACTIVE
    if product.stock <= low_stock_threshold:
        return STATUS_LOW_STOCK
    return STATUS_ACTIVE


class ProductCatalog:
    """State of the products page."""

    def __init__(self, products: Iterable[Product] = (), low_stock_threshold: int = LOW_STOCK_THRESHOLD):
        self.store: RecordStore[Product] = RecordStore(products)
        self.low_stock_threshold = low_stock_threshold

    def status_of(self, product: Product) -> str:
        return product_status(product, self.low_stock_threshold)

    def find(self, search_term: str | None = None, category: str | None = ALL) -> list[Product]:
        matches = search(self.store.all(), search_term, fields=("name", "sku"))
        return filter_exact(matches, "category", category)

    def categories(self) -> list[str]:
        return distinct(self.store.all(), "category")

    def get(self, product_id: int) -> Product | None:
        return self.store.get(product_id)

    def add(self, data: Mapping[str, Any]) -> Product:
        product = self.store.add(Product(id=0, **data))
        logger.info("products.added", product_id=product.id, sku=product.sku, margin=product.margin)
        return product

    def edit(self, product_id: int, patch: Mapping[str, Any]) -> Product | None:
        product = self.store.edit(product_id, patch)
        if product is None:
            logger.info("products.edit_ignored", product_id=product_id)
            return None
        logger.info("products.edited", product_id=product_id, fields=sorted(patch))
        return product

    def remove(self, product_id: int, *, confirmed: bool) -> Product | None:
        product = self.store.remove(product_id, confirmed=confirmed)
        if product is not None:
            logger.info("products.removed", product_id=product_id, sku=product.sku)
        return product

    def summary(self) -> ProductSummary:
        products = self.store.all()
        margins = [p.margin for p in products]
        return ProductSummary(
            total_products=len(products),
            low_stock_items=sum(1 for p in products if self.status_of(p) == STATUS_LOW_STOCK),
            total_value=round(sum(p.price * p.stock for p in products), 2),
            average_margin=round(sum(margins) / len(margins), 1) if margins else 0.0,
        )

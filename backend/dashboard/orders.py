"""
Orders Page — purchase and sales orders with a linear fulfilment workflow.

  Pending → Processing → Shipped → Delivered
  Pending / Processing → Cancelled

An order stores a single counterparty. Whether that is the supplier or the
customer follows from the order type, so an order can never carry both.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

import structlog

from dashboard.errors import InvalidTransition
from dashboard.filters import ALL, filter_exact
from dashboard.store import RecordStore

logger = structlog.get_logger()


class OrderType(str, Enum):
    PURCHASE = "Purchase Order"
    SALES = "Sales Order"


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}

# The single forward action offered for each state
NEXT_ACTIONS: dict[OrderStatus, tuple[str, OrderStatus]] = {
    OrderStatus.PENDING: ("Process", OrderStatus.PROCESSING),
    OrderStatus.PROCESSING: ("Ship", OrderStatus.SHIPPED),
    OrderStatus.SHIPPED: ("Deliver", OrderStatus.DELIVERED),
}

ORDER_NUMBER_PREFIX = {OrderType.PURCHASE: "PO", OrderType.SALES: "SO"}


@dataclass
class OrderLine:
    product: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return round(self.quantity * self.unit_price, 2)


@dataclass
class Order:
    id: int
    order_number: str
    type: OrderType
    counterparty: str
    date: date
    status: OrderStatus
    items: list[OrderLine] = field(default_factory=list)
    delivery_date: date | None = None
    priority: Priority = Priority.MEDIUM

    @property
    def supplier(self) -> str | None:
        return self.counterparty if self.type is OrderType.PURCHASE else None

    @property
    def customer(self) -> str | None:
        return self.counterparty if self.type is OrderType.SALES else None

    @property
    def total(self) -> float:
        return round(sum(line.quantity * line.unit_price for line in self.items), 2)


@dataclass
class OrderSummary:
    total_orders: int
    pending: int
    total_value: float
    this_month: int


def next_action(status: OrderStatus) -> tuple[str, OrderStatus] | None:
    return NEXT_ACTIONS.get(status)


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    return requested in TRANSITIONS[current]


class OrderBook:
    """State of the orders page."""

    def __init__(self, orders: Iterable[Order] = ()):
        self.store: RecordStore[Order] = RecordStore(orders)

    def find(self, order_type: str | None = ALL, status: str | None = ALL) -> list[Order]:
        return filter_exact(filter_exact(self.store.all(), "type", order_type), "status", status)

    def get(self, order_id: int) -> Order | None:
        return self.store.get(order_id)

    def next_order_number(self, order_type: OrderType, on: date) -> str:
        prefix = f"{ORDER_NUMBER_PREFIX[order_type]}-{on.year}-"
        pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
        used = [
            int(m.group(1))
            for order in self.store.all()
            if (m := pattern.match(order.order_number))
        ]
        return f"{prefix}{max(used, default=0) + 1:03d}"

    def create(
        self,
        order_type: OrderType,
        counterparty: str,
        items: list[OrderLine],
        delivery_date: date | None = None,
        priority: Priority = Priority.MEDIUM,
        today: date | None = None,
    ) -> Order:
        order_date = today or date.today()
        order = self.store.add(
            Order(
                id=0,
                order_number=self.next_order_number(order_type, order_date),
                type=order_type,
                counterparty=counterparty,
                date=order_date,
                status=OrderStatus.PENDING,
                items=list(items),
                delivery_date=delivery_date,
                priority=priority,
            )
        )
        logger.info(
            "orders.created",
            order_id=order.id,
            order_number=order.order_number,
            type=order.type.value,
            total=order.total,
        )
        return order

    def update_status(self, order_id: int, status: OrderStatus) -> Order | None:
        """Overwrite the status if the workflow allows it. None for an unknown order."""
        order = self.store.get(order_id)
        if order is None:
            return None
        if not can_transition(order.status, status):
            raise InvalidTransition(order.status.value, status.value)
        updated = self.store.edit(order_id, {"status": status})
        logger.info(
            "orders.status_changed",
            order_id=order_id,
            from_status=order.status.value,
            to_status=status.value,
        )
        return updated

    def advance(self, order_id: int) -> Order | None:
        """Apply the forward action offered for the order's current state."""
        order = self.store.get(order_id)
        if order is None:
            return None
        action = next_action(order.status)
        if action is None:
            raise InvalidTransition(order.status.value, "next")
        return self.update_status(order_id, action[1])

    def summary(self, today: date | None = None) -> OrderSummary:
        today = today or date.today()
        orders = self.store.all()
        return OrderSummary(
            total_orders=len(orders),
            pending=sum(1 for o in orders if o.status is OrderStatus.PENDING),
            total_value=round(sum(o.total for o in orders), 2),
            this_month=sum(1 for o in orders if (o.date.year, o.date.month) == (today.year, today.month)),
        )

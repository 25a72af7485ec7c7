"""
Orders Router — Purchase and sales orders with the fulfilment workflow.

Order status moves Pending → Processing → Shipped → Delivered, with
cancellation allowed before shipping. Anything else is a 409.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator

from api.deps import get_orders
from dashboard.errors import InvalidTransition
from dashboard.filters import ALL
from dashboard.orders import (
    Order,
    OrderBook,
    OrderLine,
    OrderStatus,
    OrderType,
    Priority,
    next_action,
)
from dashboard.parsing import coerce_float, coerce_int

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class OrderLineSchema(BaseModel):
    product: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)
    unit_price: float = Field(0.0, ge=0)

    @field_validator("quantity", mode="before")
    @classmethod
    def _parse_quantity(cls, value):
        return coerce_int(value)

    @field_validator("unit_price", mode="before")
    @classmethod
    def _parse_price(cls, value):
        return coerce_float(value)


class OrderLineResponse(BaseModel):
    product: str
    quantity: int
    unit_price: float
    line_total: float


class OrderCreate(BaseModel):
    type: OrderType
    counterparty: str = Field(..., min_length=1, max_length=255)
    items: list[OrderLineSchema] = Field(..., min_length=1)
    delivery_date: date | None = None
    priority: Priority = Priority.MEDIUM


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderResponse(BaseModel):
    id: int
    order_number: str
    type: OrderType
    supplier: str | None
    customer: str | None
    date: date
    status: OrderStatus
    items: list[OrderLineResponse]
    total: float
    delivery_date: date | None
    priority: Priority
    next_action: str | None


class OrderSummaryResponse(BaseModel):
    total_orders: int
    pending: int
    total_value: float
    this_month: int


def _to_response(order: Order) -> OrderResponse:
    action = next_action(order.status)
    return OrderResponse(
        id=order.id,
        order_number=order.order_number,
        type=order.type,
        supplier=order.supplier,
        customer=order.customer,
        date=order.date,
        status=order.status,
        items=[
            OrderLineResponse(
                product=line.product,
                quantity=line.quantity,
                unit_price=line.unit_price,
                line_total=line.line_total,
            )
            for line in order.items
        ],
        total=order.total,
        delivery_date=order.delivery_date,
        priority=order.priority,
        next_action=action[0] if action else None,
    )


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/", response_model=list[OrderResponse])
async def list_orders(
    type: str = ALL,
    status: str = ALL,
    book: OrderBook = Depends(get_orders),
):
    """List orders filtered by type and status label (``all`` for any)."""
    return [_to_response(o) for o in book.find(type, status)]


@router.get("/summary", response_model=OrderSummaryResponse)
async def get_order_summary(book: OrderBook = Depends(get_orders)):
    """Order count, pending count, total value and orders placed this month."""
    return book.summary()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, book: OrderBook = Depends(get_orders)):
    order = book.get(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return _to_response(order)


@router.post("/", response_model=OrderResponse, status_code=201)
async def create_order(body: OrderCreate, book: OrderBook = Depends(get_orders)):
    """
    Create a pending order.

    The order number is the next free ``PO-YYYY-NNN`` / ``SO-YYYY-NNN`` for
    the current year. The total is the sum of the line totals.
    """
    order = book.create(
        order_type=body.type,
        counterparty=body.counterparty,
        items=[OrderLine(line.product, line.quantity, line.unit_price) for line in body.items],
        delivery_date=body.delivery_date,
        priority=body.priority,
    )
    return _to_response(order)


@router.post("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    body: OrderStatusUpdate,
    book: OrderBook = Depends(get_orders),
):
    """Move an order to a new status."""
    try:
        order = book.update_status(order_id, body.status)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return _to_response(order)


@router.post("/{order_id}/advance", response_model=OrderResponse)
async def advance_order(order_id: int, book: OrderBook = Depends(get_orders)):
    """Apply the next workflow action (Process, Ship or Deliver)."""
    try:
        order = book.advance(order_id)
    except InvalidTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return _to_response(order)

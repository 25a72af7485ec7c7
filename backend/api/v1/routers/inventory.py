"""
Inventory Router — Current stock levels, threshold status and adjustments.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator

from api.deps import get_inventory
from dashboard.errors import NegativeStockError
from dashboard.filters import ALL
from dashboard.inventory import InventoryBoard, InventoryItem, InventoryStatus, MovementType
from dashboard.parsing import coerce_int

router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class MovementResponse(BaseModel):
    date: date
    type: MovementType
    quantity: int

    model_config = {"from_attributes": True}


class InventoryItemResponse(BaseModel):
    id: int
    product_name: str
    sku: str
    current_stock: int
    min_threshold: int
    max_threshold: int
    location: str
    unit_value: float
    value: float
    status: InventoryStatus
    last_movement: MovementResponse


class InventorySummary(BaseModel):
    total_items: int
    healthy: int
    low_stock: int
    critical: int
    total_value: float


class StockAlertResponse(BaseModel):
    item_id: int
    product: str
    sku: str
    current_stock: int
    min_stock: int
    status: InventoryStatus
    urgency: str


class StockAdjustmentRequest(BaseModel):
    """Signed adjustment: positive to add stock, negative to remove."""

    adjustment: int = 0
    reason: str = Field("", max_length=500)

    @field_validator("adjustment", mode="before")
    @classmethod
    def _parse_adjustment(cls, value):
        return coerce_int(value)


def _to_response(item: InventoryItem) -> InventoryItemResponse:
    return InventoryItemResponse(
        id=item.id,
        product_name=item.product_name,
        sku=item.sku,
        current_stock=item.current_stock,
        min_threshold=item.min_threshold,
        max_threshold=item.max_threshold,
        location=item.location,
        unit_value=item.unit_value,
        value=item.value,
        status=item.status,
        last_movement=MovementResponse.model_validate(item.last_movement),
    )


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/summary", response_model=InventorySummary)
async def get_inventory_summary(board: InventoryBoard = Depends(get_inventory)):
    """Get status counts and total stock value."""
    return board.summary()


@router.get("/alerts", response_model=list[StockAlertResponse])
async def list_stock_alerts(board: InventoryBoard = Depends(get_inventory)):
    """Items at or below their minimum threshold, critical first."""
    return board.alerts()


@router.get("/", response_model=list[InventoryItemResponse])
async def list_inventory(
    status: str = ALL,
    search: str | None = None,
    board: InventoryBoard = Depends(get_inventory),
):
    """List inventory items, optionally filtered by status label and search text."""
    return [_to_response(item) for item in board.find(status, search)]


@router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_inventory_item(item_id: int, board: InventoryBoard = Depends(get_inventory)):
    item = board.get(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return _to_response(item)


@router.post("/{item_id}/adjust", response_model=InventoryItemResponse)
async def adjust_stock(
    item_id: int,
    body: StockAdjustmentRequest,
    board: InventoryBoard = Depends(get_inventory),
):
    """
    Apply a manual stock adjustment.

    Status is recomputed from the new stock level; the reason is logged.
    """
    try:
        item = board.adjust_stock(item_id, body.adjustment, body.reason)
    except NegativeStockError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return _to_response(item)

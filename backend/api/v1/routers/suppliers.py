"""
Suppliers Router — Supplier directory CRUD and performance metrics.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, field_validator, model_validator

from api.deps import get_suppliers
from dashboard.errors import DeletionNotConfirmed
from dashboard.filters import ALL
from dashboard.parsing import coerce_float, reject_nulls
from dashboard.suppliers import Supplier, SupplierDirectory, SupplierStatus

router = APIRouter(prefix="/api/v1/suppliers", tags=["suppliers"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    category: str = "Electronics"
    rating: float = Field(5.0, ge=0, le=5)
    status: SupplierStatus = SupplierStatus.ACTIVE

    @field_validator("rating", mode="before")
    @classmethod
    def _parse_rating(cls, value):
        return coerce_float(value)


class SupplierUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    category: str | None = None
    rating: float | None = Field(None, ge=0, le=5)
    status: SupplierStatus | None = None

    @model_validator(mode="before")
    @classmethod
    def _reject_nulls(cls, data):
        return reject_nulls(data)

    @field_validator("rating", mode="before")
    @classmethod
    def _parse_rating(cls, value):
        return coerce_float(value)


class SupplierResponse(BaseModel):
    id: int
    name: str
    contact_person: str
    email: str
    phone: str
    address: str
    category: str
    rating: float
    total_orders: int
    total_value: float
    average_delivery_time: int
    on_time_delivery: float
    performance: str
    status: SupplierStatus
    last_order: date | None
    products: list[str]


class SupplierSummaryResponse(BaseModel):
    total_suppliers: int
    active_suppliers: int
    total_value: float
    average_rating: float


def _to_response(supplier: Supplier) -> SupplierResponse:
    return SupplierResponse(
        id=supplier.id,
        name=supplier.name,
        contact_person=supplier.contact_person,
        email=supplier.email,
        phone=supplier.phone,
        address=supplier.address,
        category=supplier.category,
        rating=supplier.rating,
        total_orders=supplier.total_orders,
        total_value=supplier.total_value,
        average_delivery_time=supplier.average_delivery_time,
        on_time_delivery=supplier.on_time_delivery,
        performance=supplier.performance,
        status=supplier.status,
        last_order=supplier.last_order,
        products=list(supplier.products),
    )


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/", response_model=list[SupplierResponse])
async def list_suppliers(
    search: str | None = None,
    category: str = ALL,
    status: str = ALL,
    directory: SupplierDirectory = Depends(get_suppliers),
):
    """List suppliers matching a name/contact search, category and status."""
    return [_to_response(s) for s in directory.find(category, status, search)]


@router.get("/summary", response_model=SupplierSummaryResponse)
async def get_supplier_summary(directory: SupplierDirectory = Depends(get_suppliers)):
    return directory.summary()


@router.get("/categories", response_model=list[str])
async def list_supplier_categories(directory: SupplierDirectory = Depends(get_suppliers)):
    return directory.categories()


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(supplier_id: int, directory: SupplierDirectory = Depends(get_suppliers)):
    """Get a single supplier by ID."""
    supplier = directory.get(supplier_id)
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return _to_response(supplier)


@router.post("/", response_model=SupplierResponse, status_code=201)
async def create_supplier(body: SupplierCreate, directory: SupplierDirectory = Depends(get_suppliers)):
    """Add a supplier. Order history starts empty with a 100% on-time record."""
    return _to_response(directory.add(body.model_dump()))


@router.patch("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_id: int,
    update: SupplierUpdate,
    directory: SupplierDirectory = Depends(get_suppliers),
):
    """Update contact details, rating or status. Order aggregates are kept."""
    supplier = directory.edit(supplier_id, update.model_dump(exclude_unset=True))
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return _to_response(supplier)


@router.delete("/{supplier_id}", status_code=204)
async def delete_supplier(
    supplier_id: int,
    confirm: bool = Query(False, description="Must be true; deletion cannot be undone"),
    directory: SupplierDirectory = Depends(get_suppliers),
):
    try:
        supplier = directory.remove(supplier_id, confirmed=confirm)
    except DeletionNotConfirmed as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")

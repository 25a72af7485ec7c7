"""
Products Router — CRUD for the product catalog page.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, field_validator, model_validator

from api.deps import get_products
from dashboard.errors import DeletionNotConfirmed
from dashboard.filters import ALL
from dashboard.parsing import coerce_float, coerce_int, reject_nulls
from dashboard.products import Product, ProductCatalog

router = APIRouter(prefix="/api/v1/products", tags=["products"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=100)
    category: str = "Electronics"
    price: float = 0.0
    cost: float = 0.0
    stock: int = 0
    supplier: str = ""
    description: str = ""
    active: bool = True

    @field_validator("price", "cost", mode="before")
    @classmethod
    def _parse_amount(cls, value):
        return coerce_float(value)

    @field_validator("stock", mode="before")
    @classmethod
    def _parse_stock(cls, value):
        return coerce_int(value)


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    sku: str | None = Field(None, min_length=1, max_length=100)
    category: str | None = None
    price: float | None = None
    cost: float | None = None
    stock: int | None = None
    supplier: str | None = None
    description: str | None = None
    active: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def _reject_nulls(cls, data):
        return reject_nulls(data)

    @field_validator("price", "cost", mode="before")
    @classmethod
    def _parse_amount(cls, value):
        return coerce_float(value)

    @field_validator("stock", mode="before")
    @classmethod
    def _parse_stock(cls, value):
        return coerce_int(value)


class ProductResponse(BaseModel):
    id: int
    name: str
    sku: str
    category: str
    price: float
    cost: float
    stock: int
    supplier: str
    description: str
    active: bool
    margin: float
    status: str


class ProductSummaryResponse(BaseModel):
    total_products: int
    low_stock_items: int
    total_value: float
    average_margin: float

    model_config = {"from_attributes": True}


def _to_response(catalog: ProductCatalog, product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        sku=product.sku,
        category=product.category,
        price=product.price,
        cost=product.cost,
        stock=product.stock,
        supplier=product.supplier,
        description=product.description,
        active=product.active,
        margin=product.margin,
        status=catalog.status_of(product),
    )


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/", response_model=list[ProductResponse])
async def list_products(
    search: str | None = None,
    category: str = ALL,
    catalog: ProductCatalog = Depends(get_products),
):
    """List products matching a name/SKU search and a category (``all`` for any)."""
    return [_to_response(catalog, p) for p in catalog.find(search, category)]


@router.get("/summary", response_model=ProductSummaryResponse)
async def get_product_summary(catalog: ProductCatalog = Depends(get_products)):
    """Count, low-stock count, stock value and average margin over all products."""
    return catalog.summary()


@router.get("/categories", response_model=list[str])
async def list_product_categories(catalog: ProductCatalog = Depends(get_products)):
    return catalog.categories()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, catalog: ProductCatalog = Depends(get_products)):
    """Get a single product by ID."""
    product = catalog.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return _to_response(catalog, product)


@router.post("/", response_model=ProductResponse, status_code=201)
async def create_product(product: ProductCreate, catalog: ProductCatalog = Depends(get_products)):
    """Create a new product."""
    return _to_response(catalog, catalog.add(product.model_dump()))


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    update: ProductUpdate,
    catalog: ProductCatalog = Depends(get_products),
):
    """Update a product. Margin and status follow the new numbers."""
    product = catalog.edit(product_id, update.model_dump(exclude_unset=True))
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return _to_response(catalog, product)


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: int,
    confirm: bool = Query(False, description="Must be true; deletion cannot be undone"),
    catalog: ProductCatalog = Depends(get_products),
):
    """Delete a product."""
    try:
        product = catalog.remove(product_id, confirmed=confirm)
    except DeletionNotConfirmed as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

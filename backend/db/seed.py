"""
Seed Data — Sample users, catalog, suppliers and orders for development.

Clears every table, then inserts a fixed retail data set: three users, five
categories, three suppliers, five products (each with a preferred supplier
link and an opening stock movement), one pending purchase order and one
reorder recommendation.

Not idempotent beyond "delete everything, insert again"; never point this
at a database holding real data.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import Any

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from db.models import (
    AIRecommendation,
    Category,
    Product,
    ProductSupplier,
    PurchaseOrder,
    PurchaseOrderItem,
    StockMovement,
    Supplier,
    User,
)

logger = structlog.get_logger()

SEED_REFERENCE = "SEED-001"
PREFERRED_MIN_ORDER_QTY = 10

USERS = [
    {"email": "admin@invdash.com", "name": "System Administrator", "role": "ADMIN"},
    {"email": "manager@invdash.com", "name": "Inventory Manager", "role": "MANAGER"},
    {"email": "staff@invdash.com", "name": "Warehouse Staff", "role": "STAFF"},
]

CATEGORIES = [
    {"name": "Electronics", "description": "Electronic devices and accessories"},
    {"name": "Clothing", "description": "Apparel and fashion items"},
    {"name": "Books", "description": "Books and educational materials"},
    {"name": "Home & Garden", "description": "Home improvement and garden supplies"},
    {"name": "Sports & Outdoors", "description": "Sports equipment and outdoor gear"},
]

SUPPLIERS = [
    {
        "name": "TechSupply Co.",
        "contact_name": "John Smith",
        "email": "orders@techsupply.com",
        "phone": "+1-555-0101",
        "address": "123 Tech Street",
        "city": "San Francisco",
        "country": "USA",
        "payment_terms": "Net 30",
        "lead_time": 7,
        "rating": 4.5,
    },
    {
        "name": "Fashion Forward Ltd.",
        "contact_name": "Sarah Johnson",
        "email": "purchasing@fashionforward.com",
        "phone": "+1-555-0202",
        "address": "456 Fashion Ave",
        "city": "New York",
        "country": "USA",
        "payment_terms": "Net 15",
        "lead_time": 14,
        "rating": 4.2,
    },
    {
        "name": "BookWorld Distributors",
        "contact_name": "Mike Wilson",
        "email": "sales@bookworld.com",
        "phone": "+1-555-0303",
        "address": "789 Literary Lane",
        "city": "Chicago",
        "country": "USA",
        "payment_terms": "COD",
        "lead_time": 5,
        "rating": 4.8,
    },
]

# category_name / supplier_name are resolved against the rows above
PRODUCTS = [
    {
        "sku": "LAPTOP-001",
        "name": 'Professional Laptop 15"',
        "description": "High-performance laptop for business use",
        "cost_price": 800.00,
        "selling_price": 1299.99,
        "wholesale_price": 1100.00,
        "weight": 2.1,
        "dimensions": "35.6 x 25.1 x 1.9 cm",
        "barcode": "1234567890123",
        "current_stock": 25,
        "min_stock": 10,
        "max_stock": 100,
        "reorder_point": 15,
        "reorder_qty": 20,
        "category_name": "Electronics",
        "supplier_name": "TechSupply Co.",
    },
    {
        "sku": "PHONE-001",
        "name": "Smartphone Pro",
        "description": "Latest generation smartphone with advanced features",
        "cost_price": 600.00,
        "selling_price": 999.99,
        "wholesale_price": 850.00,
        "weight": 0.2,
        "dimensions": "15.8 x 7.7 x 0.8 cm",
        "barcode": "1234567890124",
        "current_stock": 50,
        "min_stock": 20,
        "max_stock": 200,
        "reorder_point": 30,
        "reorder_qty": 50,
        "category_name": "Electronics",
        "supplier_name": "TechSupply Co.",
    },
    {
        "sku": "SHIRT-001",
        "name": "Cotton T-Shirt (Medium)",
        "description": "Comfortable cotton t-shirt in various colors",
        "cost_price": 8.00,
        "selling_price": 19.99,
        "wholesale_price": 15.00,
        "weight": 0.2,
        "dimensions": "30 x 40 x 2 cm (folded)",
        "barcode": "1234567890125",
        "current_stock": 150,
        "min_stock": 50,
        "max_stock": 500,
        "reorder_point": 75,
        "reorder_qty": 100,
        "category_name": "Clothing",
        "supplier_name": "Fashion Forward Ltd.",
    },
    {
        "sku": "BOOK-001",
        "name": "Business Strategy Handbook",
        "description": "Comprehensive guide to modern business strategies",
        "cost_price": 15.00,
        "selling_price": 29.99,
        "wholesale_price": 24.99,
        "weight": 0.5,
        "dimensions": "23 x 15 x 3 cm",
        "barcode": "1234567890126",
        "current_stock": 75,
        "min_stock": 25,
        "max_stock": 200,
        "reorder_point": 40,
        "reorder_qty": 50,
        "category_name": "Books",
        "supplier_name": "BookWorld Distributors",
    },
    {
        "sku": "TOOL-001",
        "name": "Professional Drill Set",
        "description": "Complete drill set with various bits and accessories",
        "cost_price": 45.00,
        "selling_price": 89.99,
        "wholesale_price": 75.00,
        "weight": 2.5,
        "dimensions": "35 x 25 x 12 cm",
        "barcode": "1234567890127",
        "current_stock": 30,
        "min_stock": 10,
        "max_stock": 80,
        "reorder_point": 15,
        "reorder_qty": 25,
        "category_name": "Home & Garden",
        "supplier_name": "TechSupply Co.",
    },
]

# Children before parents
DELETE_ORDER = (
    AIRecommendation,
    PurchaseOrderItem,
    PurchaseOrder,
    StockMovement,
    ProductSupplier,
    Product,
    Category,
    Supplier,
    User,
)


class SeedLookupError(LookupError):
    """A fixture references a row that the seed did not create."""


@dataclass
class SeedSummary:
    users: int
    categories: int
    suppliers: int
    products: int
    purchase_orders: int
    recommendations: int

    def lines(self) -> list[str]:
        return [
            "Created:",
            f"  - {self.users} users",
            f"  - {self.categories} categories",
            f"  - {self.suppliers} suppliers",
            f"  - {self.products} products",
            f"  - {self.purchase_orders} purchase order",
            f"  - {self.recommendations} AI recommendation",
        ]


def _first_named(rows: list[Any], name: str, kind: str) -> Any:
    for row in rows:
        if row.name == name:
            return row
    raise SeedLookupError(f"{kind} '{name}' not found")


async def _product_by_sku(db: AsyncSession, sku: str, purpose: str) -> Product:
    result = await db.execute(select(Product).where(Product.sku == sku).limit(1))
    product = result.scalar_one_or_none()
    if product is None:
        raise SeedLookupError(f"Product {sku} not found for {purpose}")
    return product


async def clear_database(db: AsyncSession) -> None:
    for model in DELETE_ORDER:
        await db.execute(delete(model))
    logger.info("seed.cleared", tables=len(DELETE_ORDER))


async def seed_database(
    db: AsyncSession,
    products: list[dict[str, Any]] | None = None,
    now: datetime | None = None,
) -> SeedSummary:
    """
    Replace the contents of every table with the sample data set.

    ``products`` overrides the product fixtures. Raises SeedLookupError
    when a product names a category or supplier that is not seeded, or when
    the purchase order / recommendation product is missing. Commits on
    success; on failure nothing is committed.
    """
    products = PRODUCTS if products is None else products
    now = now or datetime.utcnow()

    await clear_database(db)

    # ── Users, categories, suppliers ─────────────────────────
    users = [User(**data) for data in USERS]
    categories = [Category(**data) for data in CATEGORIES]
    suppliers = [Supplier(**data) for data in SUPPLIERS]
    db.add_all([*users, *categories, *suppliers])
    await db.flush()
    admin = next(u for u in users if u.role == "ADMIN")
    logger.info("seed.reference_data_created", users=len(users), categories=len(categories), suppliers=len(suppliers))

    # ── Products ─────────────────────────────────────────────
    for data in products:
        fields = dict(data)
        category = _first_named(categories, fields.pop("category_name"), "Category")
        supplier = _first_named(suppliers, fields.pop("supplier_name"), "Supplier")

        product = Product(
            **fields,
            category_id=category.category_id,
            created_by_id=admin.user_id,
            updated_by_id=admin.user_id,
        )
        db.add(product)
        await db.flush()

        db.add(
            ProductSupplier(
                product_id=product.product_id,
                supplier_id=supplier.supplier_id,
                supplier_sku=f"SUP-{product.sku}",
                supplier_price=product.cost_price,
                lead_time=supplier.lead_time,
                min_order_qty=PREFERRED_MIN_ORDER_QTY,
                is_preferred=True,
            )
        )
        db.add(
            StockMovement(
                product_id=product.product_id,
                type="IN",
                quantity=product.current_stock,
                reason="Initial stock import",
                reference=SEED_REFERENCE,
                stock_before=0,
                stock_after=product.current_stock,
                unit_cost=product.cost_price,
                total_cost=product.cost_price * product.current_stock,
                created_by_id=admin.user_id,
            )
        )
        await db.flush()
    logger.info("seed.products_created", products=len(products))

    # ── Purchase order ───────────────────────────────────────
    tech_supplier = _first_named(suppliers, "TechSupply Co.", "Supplier")
    laptop = await _product_by_sku(db, "LAPTOP-001", "purchase order creation")

    purchase_order = PurchaseOrder(
        po_number="PO-2024-001",
        supplier_id=tech_supplier.supplier_id,
        status="PENDING",
        order_date=now,
        expected_date=now + timedelta(days=7),
        subtotal=16000.00,
        tax_amount=1280.00,
        total_amount=17280.00,
        notes="Quarterly laptop restocking order",
        created_by_id=admin.user_id,
    )
    db.add(purchase_order)
    await db.flush()
    db.add(
        PurchaseOrderItem(
            po_id=purchase_order.po_id,
            product_id=laptop.product_id,
            quantity=20,
            unit_cost=800.00,
            total_cost=16000.00,
        )
    )

    # ── AI recommendation ────────────────────────────────────
    phone = await _product_by_sku(db, "PHONE-001", "AI recommendation creation")
    db.add(
        AIRecommendation(
            product_id=phone.product_id,
            type="REORDER",
            current_stock=phone.current_stock,
            suggested_qty=75,
            confidence=0.85,
            reasoning=(
                "Based on sales velocity and seasonal trends, current stock will be depleted in 12 days. "
                "Recommended reorder to maintain service levels."
            ),
            factors={
                "dailySalesAverage": 4.2,
                "salesVelocityTrend": "increasing",
                "seasonalFactor": 1.15,
                "leadTime": 7,
                "safetyStock": 15,
            },
            seasonality="Q4 peak season detected",
            trend_analysis="Sales increasing 15% week-over-week",
            status="PENDING",
            expires_at=now + timedelta(days=7),
            created_by_id=admin.user_id,
        )
    )
    await db.commit()

    summary = SeedSummary(
        users=len(users),
        categories=len(categories),
        suppliers=len(suppliers),
        products=len(products),
        purchase_orders=1,
        recommendations=1,
    )
    logger.info("seed.completed", **asdict(summary))
    return summary

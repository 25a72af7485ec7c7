"""
InvDash Database Models

Relational schema populated by the seed command.

Tables:
  1. users                 - Dashboard users (ADMIN / MANAGER / STAFF)
  2. categories            - Product categories
  3. suppliers             - Product suppliers
  4. products              - Product catalog with stock levels and pricing
  5. product_suppliers     - Which suppliers carry which products
  6. stock_movements       - Audit trail of stock changes
  7. purchase_orders       - Orders placed with suppliers
  8. purchase_order_items  - Lines of a purchase order
  9. ai_recommendations    - Stocking recommendations awaiting review
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    TypeDecorator,
    UniqueConstraint,
    types,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import relationship

from db.session import Base


class GUID(TypeDecorator):
    """Platform-independent UUID type.

    Uses PostgreSQL UUID when available, stores as CHAR(36) on SQLite.
    """

    impl = types.String(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PG_UUID(as_uuid=True))
        return dialect.type_descriptor(types.String(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if dialect.name == "postgresql":
            return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
        return str(value) if isinstance(value, uuid.UUID) else value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))


USER_ROLES = ("ADMIN", "MANAGER", "STAFF")
STOCK_MOVEMENT_TYPES = ("IN", "OUT", "ADJUSTMENT", "TRANSFER", "DAMAGED", "EXPIRED", "RETURN")
PURCHASE_ORDER_STATUSES = ("DRAFT", "PENDING", "CONFIRMED", "SHIPPED", "RECEIVED", "CANCELLED", "PARTIAL")
RECOMMENDATION_TYPES = ("REORDER", "OVERSTOCK", "SEASONAL", "TREND", "PROMOTION")
RECOMMENDATION_STATUSES = ("PENDING", "APPROVED", "REJECTED", "IMPLEMENTED", "EXPIRED")


def _in(column: str, values: tuple[str, ...]) -> str:
    return f"{column} IN ({', '.join(repr(v) for v in values)})"


# ─── 1. Users ──────────────────────────────────────────────────────────────


class User(Base):
    __tablename__ = "users"

    user_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="STAFF")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (CheckConstraint(_in("role", USER_ROLES), name="ck_user_role"),)


# ─── 2. Categories ─────────────────────────────────────────────────────────


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)
    parent_id = Column(GUID(), ForeignKey("categories.category_id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    products = relationship("Product", back_populates="category")


# ─── 3. Suppliers ──────────────────────────────────────────────────────────


class Supplier(Base):
    __tablename__ = "suppliers"

    supplier_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    contact_name = Column(String(255))
    email = Column(String(255))
    phone = Column(String(50))
    address = Column(String(255))
    city = Column(String(100))
    country = Column(String(100))
    payment_terms = Column(String(50))
    lead_time = Column(Integer, nullable=False, default=7)  # days
    rating = Column(Float)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("lead_time >= 0", name="ck_supplier_lead_time_non_negative"),
        CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 5)", name="ck_supplier_rating_range"),
    )

    product_links = relationship("ProductSupplier", back_populates="supplier")


# ─── 4. Products ───────────────────────────────────────────────────────────


class Product(Base):
    __tablename__ = "products"

    product_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    sku = Column(String(100), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    cost_price = Column(Float, nullable=False)
    selling_price = Column(Float, nullable=False)
    wholesale_price = Column(Float)
    weight = Column(Float)  # kg
    dimensions = Column(String(100))
    barcode = Column(String(50))
    current_stock = Column(Integer, nullable=False, default=0)
    min_stock = Column(Integer, nullable=False, default=0)
    max_stock = Column(Integer)
    reorder_point = Column(Integer)
    reorder_qty = Column(Integer)
    is_active = Column(Boolean, nullable=False, default=True)
    category_id = Column(GUID(), ForeignKey("categories.category_id"), nullable=False)
    created_by_id = Column(GUID(), ForeignKey("users.user_id"), nullable=False)
    updated_by_id = Column(GUID(), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("ix_products_category", "category_id"),
        CheckConstraint("current_stock >= 0", name="ck_product_stock_non_negative"),
    )

    category = relationship("Category", back_populates="products")
    supplier_links = relationship("ProductSupplier", back_populates="product")


# ─── 5. Product ↔ Supplier ─────────────────────────────────────────────────


class ProductSupplier(Base):
    __tablename__ = "product_suppliers"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    product_id = Column(GUID(), ForeignKey("products.product_id"), nullable=False)
    supplier_id = Column(GUID(), ForeignKey("suppliers.supplier_id"), nullable=False)
    supplier_sku = Column(String(100))
    supplier_price = Column(Float)
    lead_time = Column(Integer)  # days
    min_order_qty = Column(Integer, default=1)
    is_preferred = Column(Boolean, nullable=False, default=False)

    __table_args__ = (UniqueConstraint("product_id", "supplier_id", name="uq_product_supplier"),)

    product = relationship("Product", back_populates="supplier_links")
    supplier = relationship("Supplier", back_populates="product_links")


# ─── 6. Stock Movements ────────────────────────────────────────────────────


class StockMovement(Base):
    __tablename__ = "stock_movements"

    movement_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    product_id = Column(GUID(), ForeignKey("products.product_id"), nullable=False)
    type = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False)
    reason = Column(Text)
    reference = Column(String(100))
    stock_before = Column(Integer, nullable=False)
    stock_after = Column(Integer, nullable=False)
    unit_cost = Column(Float)
    total_cost = Column(Float)
    created_by_id = Column(GUID(), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_stock_movements_product", "product_id", "created_at"),
        CheckConstraint(_in("type", STOCK_MOVEMENT_TYPES), name="ck_stock_movement_type"),
    )


# ─── 7. Purchase Orders ────────────────────────────────────────────────────


class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    po_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    po_number = Column(String(50), nullable=False, unique=True)
    supplier_id = Column(GUID(), ForeignKey("suppliers.supplier_id"), nullable=False)
    status = Column(String(20), nullable=False, default="DRAFT")
    order_date = Column(DateTime, nullable=False, default=datetime.utcnow)
    expected_date = Column(DateTime)
    received_date = Column(DateTime)
    subtotal = Column(Float, nullable=False, default=0.0)
    tax_amount = Column(Float, nullable=False, default=0.0)
    total_amount = Column(Float, nullable=False, default=0.0)
    notes = Column(Text)
    created_by_id = Column(GUID(), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_po_supplier_status", "supplier_id", "status"),
        CheckConstraint(_in("status", PURCHASE_ORDER_STATUSES), name="ck_po_status"),
    )

    items = relationship("PurchaseOrderItem", back_populates="purchase_order")


# ─── 8. Purchase Order Items ───────────────────────────────────────────────


class PurchaseOrderItem(Base):
    __tablename__ = "purchase_order_items"

    item_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    po_id = Column(GUID(), ForeignKey("purchase_orders.po_id"), nullable=False)
    product_id = Column(GUID(), ForeignKey("products.product_id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_cost = Column(Float, nullable=False)
    total_cost = Column(Float, nullable=False)
    received_qty = Column(Integer, nullable=False, default=0)

    __table_args__ = (CheckConstraint("quantity > 0", name="ck_po_item_quantity_positive"),)

    purchase_order = relationship("PurchaseOrder", back_populates="items")


# ─── 9. AI Recommendations ─────────────────────────────────────────────────


class AIRecommendation(Base):
    __tablename__ = "ai_recommendations"

    recommendation_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    product_id = Column(GUID(), ForeignKey("products.product_id"), nullable=False)
    type = Column(String(20), nullable=False)
    current_stock = Column(Integer, nullable=False)
    suggested_qty = Column(Integer)
    confidence = Column(Float, nullable=False)
    reasoning = Column(Text)
    factors = Column(JSON)
    seasonality = Column(Text)
    trend_analysis = Column(Text)
    status = Column(String(20), nullable=False, default="PENDING")
    expires_at = Column(DateTime)
    created_by_id = Column(GUID(), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_ai_recommendations_status", "status"),
        CheckConstraint(_in("type", RECOMMENDATION_TYPES), name="ck_recommendation_type"),
        CheckConstraint(_in("status", RECOMMENDATION_STATUSES), name="ck_recommendation_status"),
        CheckConstraint("confidence >= 0 AND confidence <= 1", name="ck_recommendation_confidence_range"),
    )

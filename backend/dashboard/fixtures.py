"""
Demo fixtures for every dashboard page.

Each function builds fresh objects so that every workspace owns its own
copies.
"""

from datetime import date, datetime, timedelta

from dashboard.insights import (
    DemandPrediction,
    InsightsSnapshot,
    MarketTrend,
    Recommendation,
    RecommendationType,
)
from dashboard.inventory import InventoryItem, Movement, MovementType
from dashboard.orders import Order, OrderLine, OrderStatus, OrderType, Priority
from dashboard.overview import ActivityEvent, ActivityType
from dashboard.products import Product
from dashboard.reports import (
    CategoryPerformance,
    MonthlySales,
    ProductSales,
    ReportType,
    SalesAnalytics,
)
from dashboard.suppliers import Supplier, SupplierStatus


def product_fixtures() -> list[Product]:
    return [
        Product(1, "iPhone 15 Pro", "APL-IP15P-128", "Electronics", 999.99, 750.00, 45,
                "Apple Inc.", "Latest iPhone with titanium design and A17 Pro chip"),
        Product(2, "Nike Air Max 270", "NK-AM270-BK-10", "Footwear", 150.00, 85.00, 23,
                "Nike Distribution", "Popular running shoes with Air Max technology"),
        Product(3, 'Samsung 55" QLED TV', "SAM-Q55-4K", "Electronics", 799.99, 500.00, 12,
                "Samsung Electronics", "4K QLED Smart TV with HDR support"),
        Product(4, "Levi's 501 Jeans", "LEV-501-BL-32", "Clothing", 89.99, 45.00, 67,
                "Levi Strauss & Co.", "Classic straight-leg denim jeans"),
        Product(5, "KitchenAid Stand Mixer", "KA-SM-RED", "Home & Kitchen", 379.99, 220.00, 8,
                "Whirlpool Corp.", "Professional 5-quart stand mixer for baking"),
    ]


def inventory_fixtures() -> list[InventoryItem]:
    return [
        InventoryItem(1, "iPhone 15 Pro", "APL-IP15P-128", 45, 20, 100, "Warehouse A - Section 1", 999.99,
                      Movement(date(2025, 10, 29), MovementType.SALE, -3)),
        InventoryItem(2, "Nike Air Max 270", "NK-AM270-BK-10", 23, 30, 80, "Warehouse B - Section 2", 150.00,
                      Movement(date(2025, 10, 28), MovementType.RESTOCK, 15)),
        InventoryItem(3, 'Samsung 55" QLED TV', "SAM-Q55-4K", 12, 15, 40, "Warehouse A - Section 3", 799.99,
                      Movement(date(2025, 10, 27), MovementType.SALE, -2)),
    ]


def order_fixtures() -> list[Order]:
    return [
        Order(1, "PO-2025-001", OrderType.PURCHASE, "Apple Inc.", date(2025, 10, 25), OrderStatus.PENDING,
              [OrderLine("iPhone 15 Pro", 50, 999.99), OrderLine("iPhone 15", 30, 799.99)],
              date(2025, 11, 5), Priority.HIGH),
        Order(2, "SO-2025-145", OrderType.SALES, "TechMart Retail", date(2025, 10, 28), OrderStatus.SHIPPED,
              [OrderLine('Samsung 55" QLED TV', 8, 799.99), OrderLine("iPhone 15 Pro", 5, 999.99)],
              date(2025, 10, 30), Priority.MEDIUM),
        Order(3, "PO-2025-002", OrderType.PURCHASE, "Nike Distribution", date(2025, 10, 29), OrderStatus.DELIVERED,
              [OrderLine("Nike Air Max 270", 50, 150.00), OrderLine("Nike React Infinity", 25, 130.00)],
              date(2025, 10, 29), Priority.LOW),
        Order(4, "SO-2025-146", OrderType.SALES, "Sports Excellence", date(2025, 10, 30), OrderStatus.PROCESSING,
              [OrderLine("Nike Air Max 270", 15, 150.00), OrderLine("Adidas Ultraboost", 10, 180.00)],
              date(2025, 11, 2), Priority.HIGH),
    ]


def supplier_fixtures() -> list[Supplier]:
    return [
        Supplier(1, "Apple Inc.", "Sarah Johnson", "sarah.johnson@apple.com", "+1 (555) 123-4567",
                 "1 Apple Park Way, Cupertino, CA 95014", "Electronics", 4.8,
                 total_orders=45, total_value=1_250_000, average_delivery_time=7, on_time_delivery=95,
                 status=SupplierStatus.ACTIVE, last_order=date(2025, 10, 25),
                 products=["iPhone 15 Pro", "iPad Air", "MacBook Pro"]),
        Supplier(2, "Nike Distribution", "Mike Rodriguez", "mike.r@nike.com", "+1 (555) 987-6543",
                 "1 Bowerman Dr, Beaverton, OR 97005", "Footwear", 4.6,
                 total_orders=32, total_value=485_000, average_delivery_time=5, on_time_delivery=89,
                 status=SupplierStatus.ACTIVE, last_order=date(2025, 10, 29),
                 products=["Nike Air Max 270", "Nike React Infinity", "Nike Dunk Low"]),
        Supplier(3, "Samsung Electronics", "Lisa Chen", "lisa.chen@samsung.com", "+1 (555) 456-7890",
                 "85 Challenger Rd, Ridgefield Park, NJ 07660", "Electronics", 4.4,
                 total_orders=28, total_value=675_000, average_delivery_time=10, on_time_delivery=82,
                 status=SupplierStatus.ACTIVE, last_order=date(2025, 10, 20),
                 products=["Samsung QLED TV", "Galaxy S24", "Galaxy Watch"]),
        Supplier(4, "Levi Strauss & Co.", "David Thompson", "david.t@levi.com", "+1 (555) 321-0987",
                 "1155 Battery St, San Francisco, CA 94111", "Clothing", 4.2,
                 total_orders=18, total_value=125_000, average_delivery_time=12, on_time_delivery=78,
                 status=SupplierStatus.INACTIVE, last_order=date(2025, 9, 15),
                 products=["501 Jeans", "Trucker Jacket", "Vintage Tee"]),
    ]


def insights_fixture() -> InsightsSnapshot:
    return InsightsSnapshot(
        recommendations=[
            Recommendation(
                1, RecommendationType.REORDER, "iPhone 15 Pro", "Order 50 units from Apple Inc.",
                "Current stock (12 units) will run out in 3 days based on current sales velocity.",
                0.94, priority="high", sku="APL-IP15P-128", potential_impact="Prevent $45,000 in lost sales",
            ),
            Recommendation(
                2, RecommendationType.PRICING, "Nike Air Max 270", "Increase price from $150 to $158",
                "Analysis suggests a 5% price increase could improve margins without affecting demand.",
                0.87, priority="medium", sku="NK-AM270-BK-10", potential_impact="+$2,340 monthly revenue",
            ),
            Recommendation(
                3, RecommendationType.SEASONAL, "Winter Jackets", "Increase winter inventory by 35%",
                "Historical data indicates 40% increase in jacket sales in next 30 days.",
                0.91, priority="medium", potential_impact="Capture $18,500 additional sales",
            ),
            Recommendation(
                4, RecommendationType.SUPPLIER, "Samsung Electronics", "Evaluate alternative suppliers",
                "Delivery delays detected. Consider backup supplier for critical items.",
                0.78, priority="low", potential_impact="Reduce stockout risk by 25%",
            ),
            Recommendation(
                5, RecommendationType.OVERSTOCK, "Summer T-Shirt", "Reduce by 40% through promotion",
                "End of summer season. High stock levels detected with declining demand.",
                0.78, priority="medium", sku="SHIRT-003",
            ),
        ],
        predictions=[
            DemandPrediction("iPhone 15 Pro", 12, 45, 50, 3, 0.94),
            DemandPrediction("Samsung QLED TV", 8, 25, 30, 7, 0.89),
            DemandPrediction("Nike Air Max 270", 45, 78, 100, 12, 0.92),
        ],
        trends=[
            MarketTrend("Electronics", "increasing", "+15%", "Last 30 days",
                        "Back-to-school season driving electronics demand"),
            MarketTrend("Footwear", "stable", "+2%", "Last 30 days",
                        "Steady demand across all shoe categories"),
            MarketTrend("Home & Kitchen", "decreasing", "-8%", "Last 30 days",
                        "Post-holiday decline in home goods purchases"),
        ],
    )


def report_type_fixtures() -> list[ReportType]:
    return [
        ReportType("inventory", "Inventory Report", "Current stock levels and valuation"),
        ReportType("sales", "Sales Report", "Sales performance and trends"),
        ReportType("supplier", "Supplier Performance", "Supplier metrics and delivery performance"),
        ReportType("profit", "Profit & Loss", "Financial performance analysis"),
        ReportType("forecast", "Demand Forecast", "Predictive inventory requirements"),
    ]


def analytics_fixture() -> SalesAnalytics:
    return SalesAnalytics(
        total_revenue=2_450_000,
        total_orders=1287,
        top_products=[
            ProductSales("iPhone 15 Pro", 145, 174_000),
            ProductSales("Samsung QLED TV", 89, 133_500),
            ProductSales("Nike Air Max 270", 234, 35_100),
            ProductSales("KitchenAid Mixer", 67, 33_500),
            ProductSales("iPad Air", 78, 46_800),
        ],
        monthly_sales=[
            MonthlySales("Jan", 185_000, 98),
            MonthlySales("Feb", 210_000, 112),
            MonthlySales("Mar", 195_000, 105),
            MonthlySales("Apr", 225_000, 118),
            MonthlySales("May", 240_000, 128),
            MonthlySales("Jun", 265_000, 142),
            MonthlySales("Jul", 280_000, 155),
            MonthlySales("Aug", 275_000, 148),
            MonthlySales("Sep", 290_000, 162),
            MonthlySales("Oct", 295_000, 159),
        ],
        category_performance=[
            CategoryPerformance("Electronics", 1_470_000, 12.5),
            CategoryPerformance("Footwear", 385_000, 8.2),
            CategoryPerformance("Home & Kitchen", 345_000, -2.1),
            CategoryPerformance("Clothing", 250_000, 15.7),
        ],
    )


def activity_fixtures(now: datetime | None = None) -> list[ActivityEvent]:
    now = now or datetime.utcnow()
    return [
        ActivityEvent(1, ActivityType.STOCK_IN, 'Received 50 units of Laptop Pro 15"', "John Smith",
                      now - timedelta(hours=2), 50),
        ActivityEvent(2, ActivityType.STOCK_OUT, "Sold 15 units of Wireless Mouse", "Sarah Johnson",
                      now - timedelta(hours=4), -15),
        ActivityEvent(3, ActivityType.ADJUSTMENT, "Stock adjustment for USB Cables", "Mike Wilson",
                      now - timedelta(hours=6), -5),
        ActivityEvent(4, ActivityType.REORDER, "Reorder placed for Smartphone Pro", "System",
                      now - timedelta(hours=8), 100),
        ActivityEvent(5, ActivityType.ALERT, "Low stock alert for T-Shirts", "System",
                      now - timedelta(hours=12), 0),
    ]

"""
Reports Router — Sales analytics and (simulated) report generation.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.deps import get_reports
from dashboard.errors import OperationInProgress, UnknownReportType
from dashboard.reports import DATE_RANGES, ReportCenter, ReportFormat, ReportRequest, share_of_peak

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class ReportTypeResponse(BaseModel):
    id: str
    name: str
    description: str


class ProductSalesResponse(BaseModel):
    name: str
    units: int
    revenue: float


class MonthlySalesResponse(BaseModel):
    month: str
    sales: float
    orders: int
    share_of_peak: float


class CategoryPerformanceResponse(BaseModel):
    category: str
    revenue: float
    growth: float
    growth_label: str


class SalesAnalyticsResponse(BaseModel):
    total_revenue: float
    total_orders: int
    average_order_value: float
    top_products: list[ProductSalesResponse]
    monthly_sales: list[MonthlySalesResponse]
    category_performance: list[CategoryPerformanceResponse]


class ReportGenerateRequest(BaseModel):
    report_type: str
    format: ReportFormat = ReportFormat.PDF
    date_range_days: int = 30


class GeneratedReportResponse(BaseModel):
    report_type: str
    name: str
    format: ReportFormat
    date_range_days: int
    generated_at: datetime
    message: str


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/types", response_model=list[ReportTypeResponse])
async def list_report_types(center: ReportCenter = Depends(get_reports)):
    return center.report_types


@router.get("/date-ranges", response_model=list[int])
async def list_date_ranges():
    """Selectable report periods, in days."""
    return list(DATE_RANGES)


@router.get("/analytics", response_model=SalesAnalyticsResponse)
async def get_sales_analytics(
    months: int = 6,
    center: ReportCenter = Depends(get_reports),
):
    """
    Sales analytics for the reports page.

    ``monthly_sales`` holds the most recent ``months`` entries, each with its
    bar width relative to the best month shown.
    """
    analytics = center.analytics
    recent = analytics.recent_months(months) if months > 0 else []
    peak_series = [m.sales for m in recent]
    return SalesAnalyticsResponse(
        total_revenue=analytics.total_revenue,
        total_orders=analytics.total_orders,
        average_order_value=analytics.average_order_value,
        top_products=[
            ProductSalesResponse(name=p.name, units=p.units, revenue=p.revenue)
            for p in analytics.top_products
        ],
        monthly_sales=[
            MonthlySalesResponse(
                month=m.month,
                sales=m.sales,
                orders=m.orders,
                share_of_peak=share_of_peak(m.sales, peak_series),
            )
            for m in recent
        ],
        category_performance=[
            CategoryPerformanceResponse(
                category=c.category,
                revenue=c.revenue,
                growth=c.growth,
                growth_label=c.growth_label,
            )
            for c in analytics.category_performance
        ],
    )


@router.post("/generate", response_model=GeneratedReportResponse)
async def generate_report(body: ReportGenerateRequest, center: ReportCenter = Depends(get_reports)):
    """
    Generate a report.

    Only one report generates at a time; a second request while one is
    running gets a 409.
    """
    request = ReportRequest(
        report_type=body.report_type,
        format=body.format,
        date_range_days=body.date_range_days,
    )
    try:
        report = await center.generate(request)
    except UnknownReportType as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except OperationInProgress as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return GeneratedReportResponse(
        report_type=report.report_type,
        name=report.name,
        format=report.format,
        date_range_days=report.date_range_days,
        generated_at=report.generated_at,
        message=report.message,
    )

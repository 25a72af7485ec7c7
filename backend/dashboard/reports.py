"""
Reports Page — sales analytics and report generation.

Report generation goes through ``ReportGenerator``. The shipped generator
simulates the work with a fixed delay and returns a receipt; no file is
produced.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

import structlog

from dashboard.errors import OperationInProgress, UnknownReportType

logger = structlog.get_logger()

DATE_RANGES = (7, 30, 90, 365)


class ReportFormat(str, Enum):
    PDF = "PDF"
    EXCEL = "Excel"


@dataclass
class ReportType:
    id: str
    name: str
    description: str


@dataclass
class ProductSales:
    name: str
    units: int
    revenue: float


@dataclass
class MonthlySales:
    month: str
    sales: float
    orders: int


@dataclass
class CategoryPerformance:
    category: str
    revenue: float
    growth: float  # percent

    @property
    def growth_label(self) -> str:
        return format_growth(self.growth)


@dataclass
class SalesAnalytics:
    total_revenue: float
    total_orders: int
    top_products: list[ProductSales] = field(default_factory=list)
    monthly_sales: list[MonthlySales] = field(default_factory=list)
    category_performance: list[CategoryPerformance] = field(default_factory=list)

    @property
    def average_order_value(self) -> float:
        if self.total_orders <= 0:
            return 0.0
        return round(self.total_revenue / self.total_orders, 2)

    def recent_months(self, count: int = 6) -> list[MonthlySales]:
        return self.monthly_sales[-count:]


@dataclass
class ReportRequest:
    report_type: str
    format: ReportFormat
    date_range_days: int = 30


@dataclass
class GeneratedReport:
    report_type: str
    name: str
    format: ReportFormat
    date_range_days: int
    generated_at: datetime

    @property
    def message(self) -> str:
        return f"{self.name} ({self.format.value}) generated successfully!"


def format_growth(growth: float) -> str:
    sign = "+" if growth > 0 else ""
    return f"{sign}{growth}%"


def share_of_peak(value: float, values: list[float]) -> float:
    """Bar width in percent, relative to the largest value in the series."""
    peak = max(values, default=0)
    if peak <= 0:
        return 0.0
    return round(value / peak * 100, 1)


class ReportGenerator(ABC):
    @abstractmethod
    async def generate(self, request: ReportRequest, report: ReportType) -> GeneratedReport:
        """Produce the report described by ``request``."""


class SimulatedReportGenerator(ReportGenerator):
    def __init__(self, delay_seconds: float = 2.0):
        self.delay_seconds = delay_seconds

    async def generate(self, request: ReportRequest, report: ReportType) -> GeneratedReport:
        await asyncio.sleep(self.delay_seconds)
        return GeneratedReport(
            report_type=report.id,
            name=report.name,
            format=request.format,
            date_range_days=request.date_range_days,
            generated_at=datetime.utcnow(),
        )


class ReportCenter:
    """State of the reports page."""

    def __init__(
        self,
        report_types: list[ReportType],
        analytics: SalesAnalytics,
        generator: ReportGenerator | None = None,
    ):
        self.report_types = list(report_types)
        self.analytics = analytics
        self.generator = generator or SimulatedReportGenerator()
        self.is_generating = False

    def report_type(self, report_id: str) -> ReportType:
        for report in self.report_types:
            if report.id == report_id:
                return report
        raise UnknownReportType(f"Unknown report type '{report_id}'")

    async def generate(self, request: ReportRequest) -> GeneratedReport:
        report = self.report_type(request.report_type)
        if request.date_range_days not in DATE_RANGES:
            raise ValueError(f"date_range_days must be one of {DATE_RANGES}")
        if self.is_generating:
            raise OperationInProgress("A report is already being generated")

        self.is_generating = True
        logger.info(
            "reports.generation_started",
            report_type=report.id,
            format=request.format.value,
            date_range_days=request.date_range_days,
        )
        try:
            generated = await self.generator.generate(request, report)
        finally:
            self.is_generating = False
        logger.info("reports.generated", report_type=report.id, format=request.format.value)
        return generated

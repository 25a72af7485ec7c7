"""
Dashboard domain errors.

Routers translate these into HTTP responses; nothing in the domain layer
knows about HTTP.
"""


class DashboardError(Exception):
    """Base class for all dashboard domain errors."""


class DeletionNotConfirmed(DashboardError):
    """A destructive delete was requested without confirmation."""

    def __init__(self, record_id: int):
        super().__init__(f"Deletion of record {record_id} must be confirmed")
        self.record_id = record_id


class NegativeStockError(DashboardError):
    """A stock adjustment would take on-hand stock below zero."""

    def __init__(self, item_id: int, current_stock: int, delta: int):
        super().__init__(
            f"Adjusting item {item_id} by {delta} would leave {current_stock + delta} units on hand"
        )
        self.item_id = item_id
        self.current_stock = current_stock
        self.delta = delta


class InvalidTransition(DashboardError):
    """A status change that the workflow does not allow."""

    def __init__(self, current: str, requested: str):
        super().__init__(f"Cannot move from '{current}' to '{requested}'")
        self.current = current
        self.requested = requested


class OperationInProgress(DashboardError):
    """A simulated long-running operation is already running for this page."""


class UnknownReportType(DashboardError):
    """Report generation was requested for a report type that does not exist."""

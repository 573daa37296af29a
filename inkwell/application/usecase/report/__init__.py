"""Comment report review use cases."""

from .list_reports import ListReportsRequest, ListReportsResponse, ListReportsUseCase
from .update_report_status import (
    UpdateReportStatusRequest,
    UpdateReportStatusResponse,
    UpdateReportStatusUseCase,
)

__all__ = [
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "UpdateReportStatusRequest",
    "UpdateReportStatusResponse",
    "UpdateReportStatusUseCase",
]

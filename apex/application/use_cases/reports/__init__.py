"""Report use cases."""

from apex.application.use_cases.reports.report_operations import ReportService

__all__ = [
    "ReportService",
]

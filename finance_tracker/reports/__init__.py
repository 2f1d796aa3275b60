"""Report generation package."""

from finance_tracker.reports.formatting import (
    format_all_time_report,
    format_menu,
    format_money,
    format_monthly_report,
)
from finance_tracker.reports.generator import ReportGenerator

__all__ = [
    "ReportGenerator",
    "format_all_time_report",
    "format_menu",
    "format_money",
    "format_monthly_report",
]

"""
Sales reports - immutable model, fluent builder, preset director.

Key principle: a report is validated exactly once, when the builder builds it.
Everything before build() is free-form staging.
"""

from payment_patterns.reports.models import SalesReport
from payment_patterns.reports.builder import SalesReportBuilder
from payment_patterns.reports.director import REPORT_PRESETS, ReportDirector

__all__ = ["REPORT_PRESETS", "ReportDirector", "SalesReport", "SalesReportBuilder"]

"""
Sales Report Builder - Fluent, Validated Construction

Usage:
    report = (
        SalesReportBuilder("Q1 Board Review")
        .set_period(datetime(2024, 1, 1), datetime(2024, 3, 31))
        .with_header("Quarterly Analysis")
        .add_column("Department")
        .add_column("Net Profit")
        .add_chart("Pie")
        .build()
    )

State machine:
    BUILDING --build() ok--> FINALIZED
       |  ^
       +--+ build() fails (no columns): stays BUILDING, caller may fix and retry

In FINALIZED every mutator and build() raise ReportBuilderFinalizedError.
A builder produces at most one report.

Only two things are validated:
- title must be non-blank (at construction)
- at least one column (at build)
Everything else is accepted as given, including an end date before the start date.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import structlog
from pydantic import ValidationError

from payment_patterns.exceptions import ReportBuilderFinalizedError, ReportValidationError
from payment_patterns.reports.models import SalesReport

logger = structlog.get_logger(__name__)

DEFAULT_FORMAT = "PDF"
DEFAULT_ORIENTATION = "Portrait"


class SalesReportBuilder:
    """Mutable staging area for a SalesReport. Mutators return self for chaining."""

    def __init__(self, title: str):
        if title is None or not title.strip():
            raise ReportValidationError("Report title cannot be empty.", title=title)

        now = datetime.now()
        self._title = title.strip()
        self._format = DEFAULT_FORMAT
        self._start_date = now
        self._end_date = now
        self._orientation = DEFAULT_ORIENTATION
        self._watermark: Optional[str] = None

        self._include_header = False
        self._header_text: Optional[str] = None
        self._include_footer = False
        self._footer_text: Optional[str] = None
        self._include_chart = False
        self._chart_type: Optional[str] = None

        self._columns: list[str] = []
        self._filters: list[str] = []

        self._finalized = False

    @property
    def title(self) -> str:
        return self._title

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def _ensure_building(self, operation: str) -> None:
        if self._finalized:
            raise ReportBuilderFinalizedError(title=self._title, operation=operation)

    def set_format(self, fmt: str) -> SalesReportBuilder:
        self._ensure_building("set_format")
        self._format = fmt
        return self

    def set_period(self, start: datetime, end: datetime) -> SalesReportBuilder:
        """Set the reporting window. end < start is not checked."""
        self._ensure_building("set_period")
        self._start_date = start
        self._end_date = end
        return self

    def with_header(self, text: str) -> SalesReportBuilder:
        self._ensure_building("with_header")
        self._include_header = True
        self._header_text = text
        return self

    def with_footer(self, text: str) -> SalesReportBuilder:
        self._ensure_building("with_footer")
        self._include_footer = True
        self._footer_text = text
        return self

    def add_chart(self, chart_type: str) -> SalesReportBuilder:
        """Enable the chart section; a later call replaces the chart type."""
        self._ensure_building("add_chart")
        self._include_chart = True
        self._chart_type = chart_type
        return self

    def add_column(self, column: str) -> SalesReportBuilder:
        """Append a column. Order is preserved and duplicates are kept."""
        self._ensure_building("add_column")
        self._columns.append(column)
        return self

    def add_filter(self, filter_: str) -> SalesReportBuilder:
        self._ensure_building("add_filter")
        self._filters.append(filter_)
        return self

    def set_orientation(self, orientation: str) -> SalesReportBuilder:
        self._ensure_building("set_orientation")
        self._orientation = orientation
        return self

    def with_watermark(self, text: str) -> SalesReportBuilder:
        self._ensure_building("with_watermark")
        self._watermark = text
        return self

    def build(self) -> SalesReport:
        """
        Validate and freeze the accumulated state.

        Raises:
            ReportValidationError: no columns were added, or a field has the wrong type
            ReportBuilderFinalizedError: this builder already built a report
        """
        self._ensure_building("build")

        if not self._columns:
            logger.warning("report_validation_failed", title=self._title, reason="no_columns")
            raise ReportValidationError(
                "A report needs at least one column.", title=self._title
            )

        try:
            report = SalesReport(
                title=self._title,
                format=self._format,
                start_date=self._start_date,
                end_date=self._end_date,
                orientation=self._orientation,
                watermark=self._watermark,
                include_header=self._include_header,
                header_text=self._header_text,
                include_footer=self._include_footer,
                footer_text=self._footer_text,
                include_chart=self._include_chart,
                chart_type=self._chart_type,
                columns=tuple(self._columns),
                filters=tuple(self._filters),
            )
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            logger.warning("report_validation_failed", title=self._title, reason="invalid_field", field=field)
            raise ReportValidationError(
                f"Invalid report field {field}: {first['msg']}",
                title=self._title,
                field=field,
            ) from e
        self._finalized = True
        logger.debug("report_built", title=self._title, columns=len(report.columns))
        return report

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "building"
        return f"SalesReportBuilder(title={self._title!r}, state={state})"

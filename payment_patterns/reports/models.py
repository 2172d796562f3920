"""
Sales Report - Immutable Report Configuration

A SalesReport is the finished product of SalesReportBuilder.build().
It is frozen: once built, nothing about it can change.

Why immutable?
- A report handed to a renderer can't be altered mid-render
- Two consumers of the same report always see the same fields
- Sequences are tuples, so even the column list can't be appended to
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)

PERIOD_FORMAT = "%Y-%m-%d"


class SalesReport(BaseModel):
    """
    Sales report configuration.

    Header, footer and chart are flag + payload pairs: the flag says whether
    the section is rendered, the payload says what it contains.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    format: str
    start_date: datetime
    end_date: datetime
    orientation: str
    watermark: Optional[str] = None

    include_header: bool = False
    header_text: Optional[str] = None
    include_footer: bool = False
    footer_text: Optional[str] = None
    include_chart: bool = False
    chart_type: Optional[str] = None

    columns: tuple[str, ...] = Field(min_length=1)
    filters: tuple[str, ...] = ()

    def describe(self) -> list[str]:
        """
        Render every field as display lines, in a fixed order.

        Order: title, format/orientation, period, header, watermark,
        columns, filters, chart, footer. Disabled or empty optional
        sections are omitted.
        """
        lines = [
            f"=== Report: {self.title} ===",
            f"Format: {self.format} | Orientation: {self.orientation}",
            f"Period: {self.start_date:{PERIOD_FORMAT}} to {self.end_date:{PERIOD_FORMAT}}",
        ]
        if self.include_header:
            lines.append(f"[HEADER]: {self.header_text}")
        if self.watermark:
            lines.append(f"[WATERMARK]: {self.watermark}")
        lines.append(f"Columns: {', '.join(self.columns)}")
        if self.filters:
            lines.append(f"Filters: {', '.join(self.filters)}")
        if self.include_chart:
            lines.append(f"[CHART]: {self.chart_type}")
        if self.include_footer:
            lines.append(f"[FOOTER]: {self.footer_text}")
        return lines

    def generate(self, log: Optional[Any] = None) -> list[str]:
        """Emit a report_generated event with the rendered lines and return them."""
        lines = self.describe()
        (log or logger).info(
            "report_generated",
            title=self.title,
            format=self.format,
            lines=lines,
        )
        return lines

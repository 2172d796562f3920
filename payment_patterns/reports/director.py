"""
Report Director - named presets for common reports.

A preset only drives the builder; it never calls build().
Which report to make (policy) stays separate from validating it (mechanism),
so the caller still decides when and whether to finalize.
"""

from __future__ import annotations

from typing import Callable

from payment_patterns.exceptions import UnknownPresetError
from payment_patterns.reports.builder import SalesReportBuilder

ReportPreset = Callable[[SalesReportBuilder], SalesReportBuilder]


class ReportDirector:
    """Fixed call sequences for frequently used reports."""

    @staticmethod
    def monthly_sales(builder: SalesReportBuilder) -> SalesReportBuilder:
        return (
            builder.set_format("PDF")
            .with_header("Monthly Sales Report")
            .add_column("Product")
            .add_column("Quantity")
            .add_column("Total")
            .add_chart("Bar")
            .with_footer("Internal Use - Confidential")
        )

    @staticmethod
    def simple_list(builder: SalesReportBuilder) -> SalesReportBuilder:
        return (
            builder.set_format("Excel")
            .add_column("Name")
            .add_column("Email")
            .set_orientation("Landscape")
        )

    @staticmethod
    def apply(preset: str, builder: SalesReportBuilder) -> SalesReportBuilder:
        """
        Apply a preset by name (see REPORT_PRESETS).

        Raises:
            UnknownPresetError: no preset registered under that name
        """
        try:
            configure = REPORT_PRESETS[preset]
        except KeyError:
            raise UnknownPresetError(preset, REPORT_PRESETS) from None
        return configure(builder)


REPORT_PRESETS: dict[str, ReportPreset] = {
    "monthly_sales": ReportDirector.monthly_sales,
    "simple_list": ReportDirector.simple_list,
}

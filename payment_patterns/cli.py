"""CLI for payment_patterns.

Walks through both construction patterns: payments through swappable
gateway factories, and sales reports through the fluent builder.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from payment_patterns.exceptions import (
    ReportValidationError,
    UnknownGatewayError,
    UnknownPresetError,
)
from payment_patterns.gateways import available_gateways, create_gateway_factory
from payment_patterns.monitoring import setup_logging
from payment_patterns.reports import REPORT_PRESETS, ReportDirector, SalesReport, SalesReportBuilder
from payment_patterns.services import PaymentResult, PaymentService

app = typer.Typer(
    name="payment-patterns",
    help="Payment gateway factories and sales report builders",
    add_completion=False,
)

console = Console()


def _print_result(result: PaymentResult) -> None:
    table = Table(show_header=False)
    table.add_row("Gateway", result.gateway)
    table.add_row("Amount", str(result.amount))
    table.add_row("Status", result.status.value.upper())
    table.add_row("Transaction", result.transaction_id or "-")
    console.print(table)


def _print_report(report: SalesReport) -> None:
    lines = report.generate()
    console.print(Panel(Text("\n".join(lines[1:])), title=report.title))


@app.command()
def pay(
    amount: str = typer.Option(..., "--amount", "-a", help="Amount to charge"),
    card: str = typer.Option(..., "--card", "-c", help="Card number"),
    gateway: Optional[str] = typer.Option(
        None,
        "--gateway",
        "-g",
        help="Gateway name (defaults to PAYMENT_PATTERNS_DEFAULT_GATEWAY)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Process one payment through a gateway."""
    setup_logging("DEBUG" if verbose else None)

    try:
        value = Decimal(amount)
    except InvalidOperation:
        console.print(f"[red]Error:[/red] Invalid amount: {amount}")
        raise typer.Exit(1)

    try:
        factory = create_gateway_factory(gateway)
    except UnknownGatewayError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_result(PaymentService(factory).process_payment(value, card))


@app.command("demo-payments")
def demo_payments() -> None:
    """Run a payment on each built-in gateway, swapping factories in between."""
    setup_logging()

    console.print("[bold]=== Payment System ===[/bold]")
    service = PaymentService(create_gateway_factory("pagseguro"))
    _print_result(service.process_payment(Decimal("150.00"), "1234567890123456"))

    console.print("\n[bold]--- Switching gateway ---[/bold]")
    service = PaymentService(create_gateway_factory("mercadopago"))
    _print_result(service.process_payment(Decimal("200.00"), "5234567890123456"))


@app.command()
def report(
    title: str = typer.Option(..., "--title", "-t", help="Report title"),
    preset: str = typer.Option(
        "monthly_sales",
        "--preset",
        "-p",
        help=f"Preset name ({', '.join(sorted(REPORT_PRESETS))})",
    ),
) -> None:
    """Build a report from a named preset and print it."""
    setup_logging()

    try:
        built = ReportDirector.apply(preset, SalesReportBuilder(title)).build()
    except (ReportValidationError, UnknownPresetError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_report(built)


@app.command("demo-reports")
def demo_reports() -> None:
    """Build an ad-hoc report, a preset report, and an invalid one."""
    setup_logging()

    console.print("[bold]=== Builder in action ===[/bold]")
    ad_hoc = (
        SalesReportBuilder("Board Ad-Hoc Report")
        .set_period(datetime(2024, 1, 1), datetime(2024, 6, 30))
        .with_header("Half-Year Analysis")
        .with_watermark("CONFIDENTIAL")
        .add_column("Department")
        .add_column("Net Profit")
        .add_chart("Pie")
        .set_orientation("Landscape")
        .build()
    )
    _print_report(ad_hoc)

    _print_report(ReportDirector.monthly_sales(SalesReportBuilder("Sales August/2024")).build())

    try:
        SalesReportBuilder("Broken Report").set_format("HTML").build()
    except ReportValidationError as e:
        console.print(f"\n[red]Error:[/red] Failed to create report: {e}")


@app.command()
def gateways() -> None:
    """List registered gateways."""
    for name in available_gateways():
        console.print(name)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Payment gateway factories and sales report builders."""
    if version:
        from payment_patterns import __version__
        console.print(f"payment-patterns v{__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()

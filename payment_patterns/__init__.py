"""
Payment Patterns - Construction Patterns for Payments and Reports

This package demonstrates two object-construction patterns:
1. Abstract factory: one gateway factory yields a consistent validator/processor/logger set
2. Builder: a fluent builder assembles an immutable sales report, validated only at build time

Switching gateways means switching factories, never mixing components.
"""

from payment_patterns.exceptions import (
    PaymentPatternsError,
    ReportBuilderFinalizedError,
    ReportValidationError,
    UnknownGatewayError,
    UnknownPresetError,
)
from payment_patterns.gateways import (
    MercadoPagoFactory,
    PagSeguroFactory,
    PaymentGatewayFactory,
    create_gateway_factory,
)
from payment_patterns.reports import ReportDirector, SalesReport, SalesReportBuilder
from payment_patterns.services import PaymentResult, PaymentService, PaymentStatus

__version__ = "1.0.0"

__all__ = [
    "MercadoPagoFactory",
    "PagSeguroFactory",
    "PaymentGatewayFactory",
    "PaymentPatternsError",
    "PaymentResult",
    "PaymentService",
    "PaymentStatus",
    "ReportBuilderFinalizedError",
    "ReportDirector",
    "ReportValidationError",
    "SalesReport",
    "SalesReportBuilder",
    "UnknownGatewayError",
    "UnknownPresetError",
    "create_gateway_factory",
]

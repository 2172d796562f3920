"""
Payment gateways - abstract factory families.

Importing this package registers the built-in gateways (PagSeguro, MercadoPago).
"""

from payment_patterns.gateways.base import (
    PaymentGatewayFactory,
    PaymentLogger,
    PaymentProcessor,
    PaymentValidator,
    StructlogPaymentLogger,
    generate_transaction_id,
)
from payment_patterns.gateways.registry import (
    GATEWAY_FACTORIES,
    available_gateways,
    create_gateway_factory,
    register_gateway,
)
from payment_patterns.gateways.pagseguro import PagSeguroFactory
from payment_patterns.gateways.mercadopago import MercadoPagoFactory

__all__ = [
    "GATEWAY_FACTORIES",
    "MercadoPagoFactory",
    "PagSeguroFactory",
    "PaymentGatewayFactory",
    "PaymentLogger",
    "PaymentProcessor",
    "PaymentValidator",
    "StructlogPaymentLogger",
    "available_gateways",
    "create_gateway_factory",
    "generate_transaction_id",
    "register_gateway",
]

"""
MercadoPago gateway.

Stricter than PagSeguro: the card must be 16 digits AND start with "5".
Every card MercadoPago accepts, PagSeguro accepts too - never the reverse.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from payment_patterns.gateways.base import (
    PaymentGatewayFactory,
    StructlogPaymentLogger,
    generate_transaction_id,
    mask_card,
)
from payment_patterns.gateways.registry import register_gateway

logger = structlog.get_logger(__name__)

CARD_LENGTH = 16
REQUIRED_PREFIX = "5"


class MercadoPagoValidator:
    def validate_card(self, card_number: str) -> bool:
        logger.debug("validating_card", gateway=MercadoPagoFactory.name, card=mask_card(card_number))
        return len(card_number) == CARD_LENGTH and card_number.startswith(REQUIRED_PREFIX)


class MercadoPagoProcessor:
    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        logger.info("processing_transaction", gateway=MercadoPagoFactory.name, amount=str(amount))
        return generate_transaction_id(MercadoPagoFactory.transaction_prefix)


class MercadoPagoLogger(StructlogPaymentLogger):
    def __init__(self) -> None:
        super().__init__(gateway=MercadoPagoFactory.name)


@register_gateway
class MercadoPagoFactory(PaymentGatewayFactory):
    """Factory for the MercadoPago component set."""

    name = "mercadopago"
    transaction_prefix = "MP"

    def create_validator(self) -> MercadoPagoValidator:
        return MercadoPagoValidator()

    def create_processor(self) -> MercadoPagoProcessor:
        return MercadoPagoProcessor()

    def create_logger(self) -> MercadoPagoLogger:
        return MercadoPagoLogger()

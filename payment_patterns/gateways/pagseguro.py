"""PagSeguro gateway: any 16-digit card number is accepted."""

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


class PagSeguroValidator:
    def validate_card(self, card_number: str) -> bool:
        logger.debug("validating_card", gateway=PagSeguroFactory.name, card=mask_card(card_number))
        return len(card_number) == CARD_LENGTH


class PagSeguroProcessor:
    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        logger.info("processing_transaction", gateway=PagSeguroFactory.name, amount=str(amount))
        return generate_transaction_id(PagSeguroFactory.transaction_prefix)


class PagSeguroLogger(StructlogPaymentLogger):
    def __init__(self) -> None:
        super().__init__(gateway=PagSeguroFactory.name)


@register_gateway
class PagSeguroFactory(PaymentGatewayFactory):
    """Factory for the PagSeguro component set."""

    name = "pagseguro"
    transaction_prefix = "PAGSEG"

    def create_validator(self) -> PagSeguroValidator:
        return PagSeguroValidator()

    def create_processor(self) -> PagSeguroProcessor:
        return PagSeguroProcessor()

    def create_logger(self) -> PagSeguroLogger:
        return PagSeguroLogger()

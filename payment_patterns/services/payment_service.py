"""
Payment service - drives one gateway's components through a payment.

Flow:
1. Create validator, processor and logger from the SAME factory
2. Validate the card
3. If rejected: log the failure and return (processor never invoked)
4. If valid: process once, log the transaction id, return it

A rejected card is a normal outcome, not an exception.
"Rejected" (business said no) and "errored" (something broke) stay distinct:
component exceptions propagate to the caller untouched.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict

from payment_patterns.gateways.base import PaymentGatewayFactory

logger = structlog.get_logger(__name__)

REJECTED_MESSAGE = "Card validation failed."
APPROVED_MESSAGE = "Transaction processed successfully: {transaction_id}"


class PaymentStatus(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"


class PaymentResult(BaseModel):
    """Outcome of one process_payment call."""

    model_config = ConfigDict(frozen=True)

    status: PaymentStatus
    gateway: str
    amount: Decimal
    transaction_id: Optional[str] = None

    @property
    def approved(self) -> bool:
        return self.status == PaymentStatus.APPROVED


class PaymentService:
    """
    Payment orchestration over an abstract gateway factory.

    The service never knows which gateway is installed. Swapping gateways
    means constructing a new service with a different factory.
    """

    def __init__(self, factory: PaymentGatewayFactory):
        self._factory = factory

    @property
    def factory(self) -> PaymentGatewayFactory:
        return self._factory

    def process_payment(
        self, amount: Union[Decimal, int, float, str], card_number: str
    ) -> PaymentResult:
        """
        Process a payment with the installed gateway.

        Returns:
            PaymentResult: APPROVED with a transaction id, or REJECTED without one.
        """
        amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        gateway = self._factory.name

        validator = self._factory.create_validator()
        processor = self._factory.create_processor()
        payment_logger = self._factory.create_logger()

        if not validator.validate_card(card_number):
            payment_logger.log(REJECTED_MESSAGE)
            logger.info("payment_rejected", gateway=gateway, amount=str(amount))
            return PaymentResult(
                status=PaymentStatus.REJECTED, gateway=gateway, amount=amount
            )

        transaction_id = processor.process_transaction(amount, card_number)
        payment_logger.log(APPROVED_MESSAGE.format(transaction_id=transaction_id))
        logger.info(
            "payment_approved",
            gateway=gateway,
            amount=str(amount),
            transaction_id=transaction_id,
        )
        return PaymentResult(
            status=PaymentStatus.APPROVED,
            gateway=gateway,
            amount=amount,
            transaction_id=transaction_id,
        )

"""
Gateway Abstractions - One Factory, One Consistent Component Set

A payment gateway is three cooperating roles:
- Validator: decides whether a card is acceptable
- Processor: charges the card and returns a transaction id
- Logger: emits observability events for the outcome

CRITICAL: all three roles must come from the SAME gateway.
A PagSeguro validator paired with a MercadoPago processor would accept cards
MercadoPago refuses. The factory is the only place components are created,
so a caller holding one factory can never mix gateways.

The roles are three small Protocols rather than one fat interface:
they have unrelated lifecycles and are swapped independently in tests.
"""

from __future__ import annotations

import itertools
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger(__name__)

TRANSACTION_SUFFIX_LENGTH = 8

TRANSACTION_SUFFIX_SPACE = 16 ** TRANSACTION_SUFFIX_LENGTH

# Process-wide sequence starting at a random offset; wraps after 2**32 ids.
_transaction_sequence = itertools.count(uuid.uuid4().int % TRANSACTION_SUFFIX_SPACE)


@runtime_checkable
class PaymentValidator(Protocol):
    """Validates a card number for one gateway."""

    def validate_card(self, card_number: str) -> bool:
        ...


@runtime_checkable
class PaymentProcessor(Protocol):
    """Processes a transaction for one gateway."""

    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        ...


@runtime_checkable
class PaymentLogger(Protocol):
    """Emits gateway-scoped observability events."""

    def log(self, message: str) -> None:
        ...


def generate_transaction_id(prefix: str) -> str:
    """
    Generate a gateway-prefixed transaction id.

    Format: {prefix}-{8 hex chars}
    Example: PAGSEG-3f9a1c0e

    Unique within the process: the suffix is a process-wide sequence that
    starts at a random uuid4-derived offset, so no id repeats until 2**32
    ids have been issued. Nothing is stored per id. No cross-process guarantee.
    """
    suffix = next(_transaction_sequence) % TRANSACTION_SUFFIX_SPACE
    return f"{prefix}-{suffix:0{TRANSACTION_SUFFIX_LENGTH}x}"


def mask_card(card_number: str) -> str:
    """Never log a full card number. Keep the last four digits."""
    return f"****{card_number[-4:]}" if len(card_number) > 4 else "****"


class StructlogPaymentLogger:
    """
    Gateway logger backed by structlog.

    Every message becomes a `gateway_log` event with the gateway name and a
    timestamp, so downstream consumers can filter per gateway.
    """

    def __init__(self, gateway: str):
        self.gateway = gateway
        self._logger = structlog.get_logger("payment_patterns.gateway").bind(gateway=gateway)

    def log(self, message: str) -> None:
        self._logger.info(
            "gateway_log",
            message=message,
            logged_at=datetime.now().isoformat(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(gateway={self.gateway!r})"


class PaymentGatewayFactory(ABC):
    """
    Abstract factory for a payment gateway's component set.

    Each create_* call returns a NEW instance. Factories are stateless,
    so constructing one is free and has no side effects.
    """

    name: ClassVar[str]
    transaction_prefix: ClassVar[str]

    @abstractmethod
    def create_validator(self) -> PaymentValidator:
        """Create this gateway's card validator."""

    @abstractmethod
    def create_processor(self) -> PaymentProcessor:
        """Create this gateway's transaction processor."""

    @abstractmethod
    def create_logger(self) -> PaymentLogger:
        """Create this gateway's logger."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

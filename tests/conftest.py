"""
Pytest configuration and fixtures for payment_patterns tests.
"""

from unittest.mock import MagicMock

import pytest
import structlog

from payment_patterns.config import get_settings
from payment_patterns.gateways import PaymentGatewayFactory


@pytest.fixture(autouse=True)
def reset_environment():
    """Fresh settings and default structlog config for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class SpyGatewayFactory(PaymentGatewayFactory):
    """Gateway whose components are mocks, for asserting call patterns."""

    name = "spy"
    transaction_prefix = "SPY"

    def __init__(self, card_valid: bool = True, transaction_id: str = "SPY-00000001"):
        self.validator = MagicMock()
        self.validator.validate_card.return_value = card_valid
        self.processor = MagicMock()
        self.processor.process_transaction.return_value = transaction_id
        self.logger = MagicMock()

    def create_validator(self):
        return self.validator

    def create_processor(self):
        return self.processor

    def create_logger(self):
        return self.logger


@pytest.fixture
def approving_factory():
    """Spy gateway that accepts every card."""
    return SpyGatewayFactory(card_valid=True)


@pytest.fixture
def rejecting_factory():
    """Spy gateway that rejects every card."""
    return SpyGatewayFactory(card_valid=False)

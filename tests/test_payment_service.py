"""Tests for PaymentService orchestration."""

import re
from decimal import Decimal

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from payment_patterns.gateways import MercadoPagoFactory, PagSeguroFactory
from payment_patterns.services import PaymentService, PaymentStatus
from payment_patterns.services.payment_service import APPROVED_MESSAGE, REJECTED_MESSAGE


class TestPaymentOrchestration:
    """Validate -> process -> log, regardless of gateway."""

    def test_rejected_card_never_reaches_processor(self, rejecting_factory):
        result = PaymentService(rejecting_factory).process_payment(Decimal("10.00"), "0000")

        assert result.status == PaymentStatus.REJECTED
        assert result.transaction_id is None
        assert not result.approved
        rejecting_factory.validator.validate_card.assert_called_once_with("0000")
        rejecting_factory.processor.process_transaction.assert_not_called()
        rejecting_factory.logger.log.assert_called_once_with(REJECTED_MESSAGE)

    def test_valid_card_processed_exactly_once(self, approving_factory):
        result = PaymentService(approving_factory).process_payment(Decimal("99.90"), "1234567890123456")

        assert result.status == PaymentStatus.APPROVED
        assert result.approved
        assert result.transaction_id == "SPY-00000001"
        approving_factory.processor.process_transaction.assert_called_once_with(
            Decimal("99.90"), "1234567890123456"
        )
        approving_factory.logger.log.assert_called_once_with(
            APPROVED_MESSAGE.format(transaction_id="SPY-00000001")
        )

    def test_validation_happens_before_processing(self, approving_factory):
        calls = []
        approving_factory.validator.validate_card.side_effect = lambda card: calls.append("validate") or True
        approving_factory.processor.process_transaction.side_effect = (
            lambda amount, card: calls.append("process") or "SPY-1"
        )
        approving_factory.logger.log.side_effect = lambda message: calls.append("log")

        PaymentService(approving_factory).process_payment(Decimal("1"), "1234567890123456")

        assert calls == ["validate", "process", "log"]

    def test_each_call_is_independent(self, approving_factory):
        service = PaymentService(approving_factory)

        service.process_payment(Decimal("1"), "1234567890123456")
        service.process_payment(Decimal("2"), "1234567890123456")

        assert approving_factory.processor.process_transaction.call_count == 2

    def test_processor_errors_propagate(self, approving_factory):
        approving_factory.processor.process_transaction.side_effect = RuntimeError("gateway down")

        with pytest.raises(RuntimeError, match="gateway down"):
            PaymentService(approving_factory).process_payment(Decimal("1"), "1234567890123456")

        approving_factory.logger.log.assert_not_called()

    @pytest.mark.parametrize("amount", [10, "10.00", 10.0, Decimal("10.00")])
    def test_amount_coerced_to_decimal(self, approving_factory, amount):
        result = PaymentService(approving_factory).process_payment(amount, "1234567890123456")

        assert isinstance(result.amount, Decimal)
        assert result.amount == Decimal("10")


class TestRealGateways:
    """End-to-end with the built-in gateways."""

    def test_pagseguro_approves_16_digit_card(self):
        with capture_logs() as logs:
            result = PaymentService(PagSeguroFactory()).process_payment(
                Decimal("150.00"), "1234567890123456"
            )

        assert result.approved
        assert result.gateway == "pagseguro"
        assert re.fullmatch(r"PAGSEG-[0-9a-f]{8}", result.transaction_id)

        gateway_logs = [entry for entry in logs if entry["event"] == "gateway_log"]
        assert len(gateway_logs) == 1
        assert gateway_logs[0]["message"] == f"Transaction processed successfully: {result.transaction_id}"

    def test_mercadopago_rejects_card_pagseguro_accepts(self):
        card = "1234567890123456"

        with capture_logs() as logs:
            result = PaymentService(MercadoPagoFactory()).process_payment(Decimal("200.00"), card)

        assert result.status == PaymentStatus.REJECTED
        assert [entry["event"] for entry in logs].count("processing_transaction") == 0
        assert any(entry["event"] == "payment_rejected" for entry in logs)

    def test_swapping_factory_swaps_whole_component_set(self):
        approved = PaymentService(MercadoPagoFactory()).process_payment(Decimal("200.00"), "5234567890123456")

        assert approved.gateway == "mercadopago"
        assert approved.transaction_id.startswith("MP-")

    def test_result_is_immutable(self):
        result = PaymentService(PagSeguroFactory()).process_payment(Decimal("1"), "1234567890123456")

        with pytest.raises(ValidationError):
            result.transaction_id = "tampered"

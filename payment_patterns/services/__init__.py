"""Application services that orchestrate gateway components."""
from .payment_service import PaymentResult, PaymentService, PaymentStatus

__all__ = ["PaymentResult", "PaymentService", "PaymentStatus"]

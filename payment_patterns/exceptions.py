"""
Exception classes for payment_patterns.

Taxonomy:
- ReportValidationError: a report cannot be built (missing columns, empty title)
- ReportBuilderFinalizedError: a builder was used after it already produced a report
- UnknownGatewayError: no gateway factory is registered under the requested name
- UnknownPresetError: no report preset is registered under the requested name

A rejected card is NOT an exception. It is a normal PaymentResult with status "rejected".
"""

from typing import Any, Dict, Iterable, Optional


class PaymentPatternsError(Exception):
    """
    Base exception for all payment_patterns errors.

    Every exception includes:
    - Error code (stable, for programmatic handling)
    - Message (for humans)
    - Context (arbitrary keyword metadata)
    """

    def __init__(self, message: str, error_code: str = "payment_patterns_error", **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for structured logs and CLI output"""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "type": self.__class__.__name__,
                "context": self.context,
            }
        }


# ============================================================================
# REPORT ERRORS
# ============================================================================

class ReportValidationError(PaymentPatternsError):
    """
    Report failed validation at build time.

    Recoverable: add the missing piece (e.g. a column) and call build() again.
    """

    def __init__(self, message: str, title: Optional[str] = None, **kwargs: Any):
        kwargs.setdefault("error_code", "report_validation_error")
        super().__init__(message, title=title, **kwargs)
        self.title = title


class ReportBuilderFinalizedError(ReportValidationError):
    """Builder already produced a report and accepts no further calls."""

    def __init__(self, title: Optional[str] = None, operation: Optional[str] = None):
        super().__init__(
            f"Report builder for '{title}' is already finalized; "
            f"cannot call {operation or 'it'} again. Start a new builder.",
            title=title,
            error_code="report_builder_finalized",
            operation=operation,
        )
        self.operation = operation


# ============================================================================
# LOOKUP ERRORS
# ============================================================================

class UnknownGatewayError(PaymentPatternsError):
    """No gateway factory registered under the requested name."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown payment gateway '{name}'. Available: {', '.join(self.available)}",
            error_code="unknown_gateway",
            gateway=name,
            available=self.available,
        )


class UnknownPresetError(PaymentPatternsError):
    """No report preset registered under the requested name."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown report preset '{name}'. Available: {', '.join(self.available)}",
            error_code="unknown_preset",
            preset=name,
            available=self.available,
        )

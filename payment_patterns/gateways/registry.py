"""
Gateway registry - select a factory by name.

The set of gateways is closed at runtime but extensible: a new gateway module
decorates its factory with @register_gateway and becomes selectable by name,
including through the PAYMENT_PATTERNS_DEFAULT_GATEWAY setting.
"""

from __future__ import annotations

from typing import Optional, Type, TypeVar

import structlog

from payment_patterns.config import get_settings
from payment_patterns.exceptions import UnknownGatewayError
from payment_patterns.gateways.base import PaymentGatewayFactory

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Type[PaymentGatewayFactory])

GATEWAY_FACTORIES: dict[str, Type[PaymentGatewayFactory]] = {}


def register_gateway(factory_cls: F) -> F:
    """Register a gateway factory under its `name` (class decorator)."""
    key = factory_cls.name.lower()
    existing = GATEWAY_FACTORIES.get(key)
    if existing is not None and existing is not factory_cls:
        raise ValueError(
            f"Gateway '{key}' already registered by {existing.__name__}"
        )
    GATEWAY_FACTORIES[key] = factory_cls
    return factory_cls


def available_gateways() -> list[str]:
    return sorted(GATEWAY_FACTORIES)


def create_gateway_factory(name: Optional[str] = None) -> PaymentGatewayFactory:
    """
    Create a new factory for the named gateway.

    Args:
        name: Gateway name (case-insensitive). Defaults to Settings.default_gateway.

    Raises:
        UnknownGatewayError: no gateway registered under that name
    """
    key = (name or get_settings().default_gateway).strip().lower()
    try:
        factory_cls = GATEWAY_FACTORIES[key]
    except KeyError:
        raise UnknownGatewayError(key, GATEWAY_FACTORIES) from None

    logger.debug("gateway_factory_selected", gateway=key)
    return factory_cls()

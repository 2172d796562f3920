"""Configuration package for payment_patterns."""
from .settings import get_settings, Settings

__all__ = ["Settings", "get_settings"]

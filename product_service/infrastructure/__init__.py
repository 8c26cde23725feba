"""Infrastructure: configuration and logging."""

from product_service.infrastructure.config import Settings, get_settings, settings
from product_service.infrastructure.logging import configure_logging

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "settings",
]

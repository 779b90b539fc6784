"""Configuration module."""

from edufin.config.logging import bound_draft, configure_logging, get_logger
from edufin.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "bound_draft",
]

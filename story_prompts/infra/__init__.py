"""
Infrastructure module - configuration and logging.
"""

from .config import (
    ConfigurationError,
    Settings,
    load_settings,
)

from .logging_config import setup_logging

__all__ = [
    # config
    "ConfigurationError",
    "Settings",
    "load_settings",
    # logging
    "setup_logging",
]

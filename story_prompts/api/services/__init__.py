"""
API services package.
"""

from .generation_service import (
    get_generation_client,
    startup_generation_client,
    shutdown_generation_client,
)

__all__ = [
    "get_generation_client",
    "startup_generation_client",
    "shutdown_generation_client",
]

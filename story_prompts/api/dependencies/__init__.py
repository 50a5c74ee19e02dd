"""
API Dependencies package.

The per-browser session lookup shared by the session router.
"""

from .session import current_session

__all__ = ["current_session"]

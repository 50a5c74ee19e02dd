"""
API Routers package.
"""

from . import session, story

__all__ = ["session", "story"]

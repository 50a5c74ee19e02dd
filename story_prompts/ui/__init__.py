"""
UI shell state - theme, session state machine and result presenter.
"""

from .theme import Theme, ThemeController, resolve_theme
from .presenter import copy_all_text, copy_one_text, present_result, CopyAcknowledgements
from .session import (
    RequestPhase,
    SessionUIState,
    SessionRegistry,
    InvalidTransitionError,
    run_submission,
    get_session_registry,
)

__all__ = [
    "Theme",
    "ThemeController",
    "resolve_theme",
    "copy_all_text",
    "copy_one_text",
    "present_result",
    "CopyAcknowledgements",
    "RequestPhase",
    "SessionUIState",
    "SessionRegistry",
    "InvalidTransitionError",
    "run_submission",
    "get_session_registry",
]

"""
Session UI state.

One explicit state object per browser session, changed only through its
transitions:

- set_input: replace the pasted text (ignored while a request is pending)
- begin_submit: IDLE/RESOLVED/REJECTED -> PENDING, clears result and error
- resolve / reject: PENDING -> RESOLVED / REJECTED
- toggle_theme: flip and persist the theme
- copy_prompt / copy_all: set the transient copied markers

A submit while PENDING is a no-op, so a session never has two requests in
flight.
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..infra.config import SESSION_LIMIT
from ..story.errors import GenerationError
from ..story.generation_client import GenerationClient
from ..story.models import StoryResult
from .presenter import CopyAcknowledgements, copy_all_text, copy_one_text, present_result
from .theme import Theme, ThemeController

logger = logging.getLogger("story_prompts")

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class RequestPhase(str, Enum):
    """Lifecycle of the single generation request of a session."""

    IDLE = "IDLE"
    PENDING = "PENDING"
    RESOLVED = "RESOLVED"
    REJECTED = "REJECTED"


class InvalidTransitionError(Exception):
    """Raised when a transition is not allowed from the current state."""
    pass


@dataclass
class SessionUIState:
    """State of the single-page form for one session."""

    theme: Theme = Theme.LIGHT
    input_text: str = ""
    phase: RequestPhase = RequestPhase.IDLE
    error: Optional[str] = None
    result: Optional[StoryResult] = None
    acks: CopyAcknowledgements = field(default_factory=CopyAcknowledgements)

    @property
    def is_loading(self) -> bool:
        return self.phase is RequestPhase.PENDING

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and len(self.input_text.strip()) > 0

    def set_input(self, text: str) -> bool:
        if self.is_loading:
            return False
        self.input_text = text
        return True

    def begin_submit(self) -> bool:
        """Enter PENDING. Returns False (no change) if already pending or input is blank."""
        if not self.can_submit:
            return False
        self.phase = RequestPhase.PENDING
        self.error = None
        self.result = None
        self.acks.clear()
        return True

    def resolve(self, result: StoryResult) -> None:
        self._require_pending("resolve")
        self.result = result
        self.phase = RequestPhase.RESOLVED

    def reject(self, message: str) -> None:
        self._require_pending("reject")
        self.error = message
        self.phase = RequestPhase.REJECTED

    def toggle_theme(self, controller: ThemeController) -> Theme:
        self.theme = controller.toggle(self.theme)
        return self.theme

    def copy_prompt(self, index: int) -> str:
        text = copy_one_text(self._require_result(), index)
        self.acks.mark_item(index)
        return text

    def copy_all(self) -> str:
        text = copy_all_text(self._require_result())
        self.acks.mark_all()
        return text

    def snapshot(self) -> Dict[str, Any]:
        """Serializable view of the state for the page."""
        return {
            "theme": self.theme.value,
            "input": self.input_text,
            "phase": self.phase.value,
            "is_loading": self.is_loading,
            "can_submit": self.can_submit,
            "error": self.error,
            "result": present_result(self.result) if self.result else None,
            "copied_index": self.acks.copied_index,
            "all_copied": self.acks.all_copied,
        }

    def _require_pending(self, transition: str) -> None:
        if self.phase is not RequestPhase.PENDING:
            raise InvalidTransitionError(f"Cannot {transition} from {self.phase.value}")

    def _require_result(self) -> StoryResult:
        if self.result is None:
            raise InvalidTransitionError("No result to copy")
        return self.result


async def run_submission(state: SessionUIState, client: GenerationClient) -> bool:
    """
    Run one submit cycle on the session.

    Returns:
        False if the submit was a no-op (already pending or blank input)
    """
    if not state.begin_submit():
        return False

    try:
        result = await client.generate(state.input_text)
    except GenerationError as e:
        state.reject(e.message)
    except Exception as e:
        logger.error(f"[Session] Unexpected generation failure: {e}", exc_info=True)
        state.reject(UNKNOWN_ERROR_MESSAGE)
    except BaseException:
        # Cancelled mid-request; the session must not stay pending.
        logger.warning("[Session] Submission cancelled before a response arrived")
        state.reject(UNKNOWN_ERROR_MESSAGE)
        raise
    else:
        state.resolve(result)

    return True


class SessionRegistry:
    """In-memory session states keyed by session id, least recently used evicted."""

    def __init__(self, limit: int = SESSION_LIMIT):
        self.limit = limit
        self._sessions: "OrderedDict[str, SessionUIState]" = OrderedDict()

    def get(self, session_id: Optional[str]) -> Optional[SessionUIState]:
        if session_id is None or session_id not in self._sessions:
            return None
        self._sessions.move_to_end(session_id)
        return self._sessions[session_id]

    def create(self, theme: Theme) -> Tuple[str, SessionUIState]:
        session_id = uuid.uuid4().hex
        state = SessionUIState(theme=theme)
        self._sessions[session_id] = state

        while len(self._sessions) > self.limit:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug(f"[Session] Evicted session {evicted}")

        return session_id, state

    def __len__(self) -> int:
        return len(self._sessions)


# Global session registry instance
_session_registry: Optional[SessionRegistry] = None


def get_session_registry() -> SessionRegistry:
    """Get or create the global session registry."""
    global _session_registry
    if _session_registry is None:
        _session_registry = SessionRegistry()
    return _session_registry


def reset_session_registry() -> None:
    """Drop all sessions."""
    global _session_registry
    _session_registry = None

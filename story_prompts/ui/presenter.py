"""
Result presenter.

Formats a StoryResult for display and for the clipboard, and tracks the
transient "copied" acknowledgements shown after each copy action.
"""

import time
from typing import Any, Callable, Dict, List, Optional

from ..infra.config import COPY_ACK_SECONDS
from ..story.models import StoryResult


def copy_one_text(result: StoryResult, index: int) -> str:
    """Text copied for a single prompt (0-based index)."""
    if not 0 <= index < len(result.story_prompts):
        raise IndexError(f"No prompt at index {index}")
    return result.story_prompts[index]


def copy_all_text(result: StoryResult) -> str:
    """Hook and all prompts, one per line, with a blank line between sections."""
    return f"Hook:\n{result.hook}\n\nStory Prompts:\n" + "\n".join(result.story_prompts)


def present_result(result: StoryResult) -> Dict[str, Any]:
    """Display model for the result panel."""
    prompts: List[Dict[str, Any]] = [
        {"index": index, "number": index + 1, "text": text}
        for index, text in enumerate(result.story_prompts)
    ]
    return {
        "hook": result.hook,
        "story_prompts": prompts,
        "summary": f"Successfully generated {len(prompts)} prompts.",
        "copy_all_text": copy_all_text(result),
    }


class CopyAcknowledgements:
    """
    Per-item and bulk "copied" markers.

    Each marker is visible for `window` seconds after it is set and is
    independent of the other.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, window: float = COPY_ACK_SECONDS):
        self._clock = clock
        self.window = window
        self._item_index: Optional[int] = None
        self._item_at = 0.0
        self._all_at: Optional[float] = None

    def mark_item(self, index: int) -> None:
        self._item_index = index
        self._item_at = self._clock()

    def mark_all(self) -> None:
        self._all_at = self._clock()

    def clear(self) -> None:
        self._item_index = None
        self._all_at = None

    @property
    def copied_index(self) -> Optional[int]:
        if self._item_index is not None and self._clock() - self._item_at >= self.window:
            self._item_index = None
        return self._item_index

    @property
    def all_copied(self) -> bool:
        if self._all_at is not None and self._clock() - self._all_at >= self.window:
            self._all_at = None
        return self._all_at is not None

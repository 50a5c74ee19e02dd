"""
Story result model.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class StoryResult:
    """
    Hook plus ordered story prompts returned by the model.

    Immutable once received; a new request replaces it entirely.
    """
    hook: str
    story_prompts: Tuple[str, ...]

    @classmethod
    def create(cls, hook: str, story_prompts: Sequence[str]) -> "StoryResult":
        """Create a StoryResult, freezing the prompt sequence."""
        return cls(hook=hook, story_prompts=tuple(story_prompts))

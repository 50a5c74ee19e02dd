"""
Story generation package - prompt construction, model provider and client.
"""

from .errors import (
    GenerationError,
    TransportOrFormatError,
    SchemaViolationError,
    EmptyInputError,
)
from .models import StoryResult
from .prompt_builder import count_prompts, build_story_prompt
from .generation_client import GenerationClient, parse_story_response

__all__ = [
    "GenerationError",
    "TransportOrFormatError",
    "SchemaViolationError",
    "EmptyInputError",
    "StoryResult",
    "count_prompts",
    "build_story_prompt",
    "GenerationClient",
    "parse_story_response",
]

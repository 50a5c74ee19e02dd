"""
API Schemas package.

Pydantic models for request/response validation.
"""

from .story import (
    StoryGenerateRequest,
    StoryGenerateResponse,
    PromptCountRequest,
    PromptCountResponse,
)
from .session import (
    InputUpdateRequest,
    SubmitRequest,
    SessionStateResponse,
    CopyResponse,
)

__all__ = [
    "StoryGenerateRequest",
    "StoryGenerateResponse",
    "PromptCountRequest",
    "PromptCountResponse",
    "InputUpdateRequest",
    "SubmitRequest",
    "SessionStateResponse",
    "CopyResponse",
]

"""
Session (UI shell) schemas.

Snapshot of the single-page form state as rendered by the page.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class InputUpdateRequest(BaseModel):
    """New contents of the prompt textarea."""

    text: str = ""


class SubmitRequest(BaseModel):
    """Optional textarea contents to apply before submitting."""

    text: Optional[str] = None


class PresentedPrompt(BaseModel):
    index: int
    number: int
    text: str


class PresentedResult(BaseModel):
    hook: str
    story_prompts: List[PresentedPrompt] = Field(default_factory=list)
    summary: str
    copy_all_text: str


class SessionStateResponse(BaseModel):
    """Current state of the page for this browser session."""

    theme: str
    input: str
    phase: str
    is_loading: bool
    can_submit: bool
    error: Optional[str] = None
    result: Optional[PresentedResult] = None
    copied_index: Optional[int] = None
    all_copied: bool = False


class CopyResponse(BaseModel):
    """Text to place on the clipboard plus the updated state."""

    text: str
    state: SessionStateResponse

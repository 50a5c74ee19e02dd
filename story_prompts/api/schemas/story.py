"""
Story operation schemas.

Request/response models for the JSON story API.
"""

from typing import List

from pydantic import BaseModel, Field


class StoryGenerateRequest(BaseModel):
    """Request for story prompt generation."""

    prompts: str = Field(
        ...,
        description="Pasted story prompts, one per line. Blank lines are ignored when counting.",
        json_schema_extra={"examples": ["A puppy finds a map\nThe baby laughs at the moon\n"]}
    )


class StoryGenerateResponse(BaseModel):
    """Generated hook and story prompts."""

    hook: str
    story_prompts: List[str] = Field(default_factory=list)
    prompt_count: int = Field(description="Number of non-blank input lines requested")


class PromptCountRequest(BaseModel):
    """Request for counting non-blank prompt lines."""

    prompts: str


class PromptCountResponse(BaseModel):
    """Number of non-blank prompt lines."""

    prompt_count: int

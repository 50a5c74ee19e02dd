"""
Story router for direct (non-UI) generation.

Endpoints:
- POST /story/generate - Generate hook + story prompts (blocking)
- POST /story/count - Count non-blank prompt lines
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.story import (
    PromptCountRequest,
    PromptCountResponse,
    StoryGenerateRequest,
    StoryGenerateResponse,
)
from ..services.generation_service import get_generation_client
from ...story.errors import EmptyInputError, GenerationError
from ...story.generation_client import GenerationClient
from ...story.prompt_builder import count_prompts

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=StoryGenerateResponse)
async def generate_story(
    request: StoryGenerateRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """
    Generate a new hook and story prompts from pasted prompts.

    Returns 422 when the input has no non-blank lines and 502 when the
    model call or its response fails. The detail is the user-facing message.
    """
    try:
        result = await client.generate(request.prompts)
    except EmptyInputError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    except GenerationError as e:
        logger.warning(f"[StoryAPI] Generation failed: {type(e).__name__}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    return StoryGenerateResponse(
        hook=result.hook,
        story_prompts=list(result.story_prompts),
        prompt_count=count_prompts(request.prompts),
    )


@router.post("/count", response_model=PromptCountResponse)
async def count_story_prompts(request: PromptCountRequest):
    """Count the lines that are non-empty after trimming."""
    return PromptCountResponse(prompt_count=count_prompts(request.prompts))

"""
Generation client.

Sends the user's prompts to the model in a single schema-constrained
request and turns the reply into a StoryResult.

Failure modes:
- EmptyInputError: no non-blank lines, nothing is sent
- TransportOrFormatError: provider/network failure or unparseable JSON
- SchemaViolationError: JSON parsed but hook/storyPrompts missing or mistyped
"""

import json
import logging
from typing import Any

from .errors import EmptyInputError, SchemaViolationError, TransportOrFormatError
from .model_provider import ModelProvider
from .models import StoryResult
from .prompt_builder import RESPONSE_SCHEMA, build_story_prompt, count_prompts

logger = logging.getLogger("story_prompts")


def parse_story_response(text: str) -> StoryResult:
    """
    Parse and shape-validate the model's JSON text.

    Provider-side schema enforcement is best-effort, so the shape is always
    checked here as well.

    Args:
        text: Raw response text

    Returns:
        StoryResult

    Raises:
        TransportOrFormatError: Text is not valid JSON
        SchemaViolationError: hook is not a string or storyPrompts is not a list of strings
    """
    try:
        parsed = json.loads(text.strip())
    except json.JSONDecodeError as e:
        logger.error(f"[GenerationClient] Response is not valid JSON: {e}", exc_info=True)
        raise TransportOrFormatError() from e

    if not _has_valid_shape(parsed):
        logger.error(f"[GenerationClient] Invalid JSON structure: {text[:200]!r}")
        raise SchemaViolationError()

    return StoryResult.create(hook=parsed["hook"], story_prompts=parsed["storyPrompts"])


def _has_valid_shape(parsed: Any) -> bool:
    if not isinstance(parsed, dict):
        return False
    prompts = parsed.get("storyPrompts")
    return (
        isinstance(parsed.get("hook"), str)
        and isinstance(prompts, list)
        and all(isinstance(p, str) for p in prompts)
    )


class GenerationClient:
    """Turns raw pasted prompts into a StoryResult via one model call."""

    def __init__(self, provider: ModelProvider):
        self.provider = provider

    async def generate(self, raw_input: str) -> StoryResult:
        """
        Generate a new story from the user's pasted prompts.

        Exactly one provider request per call; no retry, no caching.

        Args:
            raw_input: Multi-line pasted prompts

        Returns:
            Fully populated StoryResult

        Raises:
            GenerationError: One of EmptyInputError, TransportOrFormatError,
                SchemaViolationError. The message is user-facing.
        """
        prompt_count = count_prompts(raw_input)
        if prompt_count == 0:
            logger.warning("[GenerationClient] Rejected input with no non-blank lines")
            raise EmptyInputError()

        prompt = build_story_prompt(raw_input)
        logger.info(f"[GenerationClient] Requesting {prompt_count} prompts from {self.provider.provider_name}")

        try:
            result = await self.provider.generate(prompt, RESPONSE_SCHEMA)
        except Exception as e:
            logger.error(f"[GenerationClient] Error generating story prompts: {e}", exc_info=True)
            raise TransportOrFormatError() from e

        story = parse_story_response(result.text)

        if len(story.story_prompts) != prompt_count:
            logger.warning(
                f"[GenerationClient] Model returned {len(story.story_prompts)} prompts, "
                f"expected {prompt_count}"
            )
        logger.info(f"[GenerationClient] Generated hook + {len(story.story_prompts)} prompts")

        return story

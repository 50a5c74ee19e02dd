"""
Model provider abstraction for story prompt generation.

Supports:
- Gemini (Google AI) with schema-constrained JSON output

Usage:
    provider = get_provider(settings)
    result = await provider.generate(prompt, RESPONSE_SCHEMA)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from ..infra.config import RESPONSE_MIME_TYPE, TEMPERATURE, Settings

logger = logging.getLogger("story_prompts")


@dataclass
class GenerationResult:
    """Raw result from text generation."""
    text: str
    usage: Optional[Dict[str, int]]
    provider: str
    model: str


class ModelProvider(ABC):
    """Abstract base class for model providers."""

    @abstractmethod
    async def generate(self, prompt: str, response_schema: Any) -> GenerationResult:
        """
        Generate JSON text constrained to response_schema.

        Args:
            prompt: Full instruction text
            response_schema: Declared output shape

        Returns:
            GenerationResult with generated text and metadata
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider name for metadata."""
        pass


class GeminiProvider(ModelProvider):
    """Gemini (Google AI) model provider."""

    def __init__(self, api_key: str, model_name: str, temperature: float = TEMPERATURE):
        self.model_name = model_name
        self.temperature = temperature
        self.client = genai.Client(api_key=api_key)

    @property
    def provider_name(self) -> str:
        return "gemini"

    async def generate(self, prompt: str, response_schema: Any) -> GenerationResult:
        """Generate using the Gemini async API. One request, no retry."""
        logger.info(f"[GeminiProvider] Generating with {self.model_name}")

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type=RESPONSE_MIME_TYPE,
                    response_schema=response_schema,
                    temperature=self.temperature,
                ),
            )

            text = response.text or ""

            usage = None
            if hasattr(response, 'usage_metadata') and response.usage_metadata:
                metadata = response.usage_metadata
                try:
                    usage = {
                        "input_tokens": metadata.prompt_token_count or 0,
                        "output_tokens": metadata.candidates_token_count or 0,
                        "total_tokens": metadata.total_token_count or 0,
                    }
                except (AttributeError, TypeError):
                    pass

            logger.info(f"[GeminiProvider] Generated {len(text)} chars")

            return GenerationResult(
                text=text,
                usage=usage,
                provider=self.provider_name,
                model=self.model_name
            )

        except Exception as e:
            logger.error(f"[GeminiProvider] Generation failed: {e}")
            raise


def get_provider(settings: Settings) -> ModelProvider:
    """
    Build the model provider for the given settings.

    Args:
        settings: Resolved service settings

    Returns:
        ModelProvider instance
    """
    return GeminiProvider(api_key=settings.gemini_api_key, model_name=settings.gemini_model)

"""
Generation client lifecycle.

The client is built once at FastAPI startup from the environment settings.
A missing GEMINI_API_KEY raises ConfigurationError there, which stops the
server from starting.
"""

import logging
from typing import Optional

from ...infra.config import load_settings
from ...story.generation_client import GenerationClient
from ...story.model_provider import get_provider

logger = logging.getLogger("story_prompts")

# Global generation client instance
_generation_client: Optional[GenerationClient] = None


def get_generation_client() -> GenerationClient:
    """
    Get the global generation client.

    Raises:
        RuntimeError: If called before startup_generation_client()
    """
    if _generation_client is None:
        raise RuntimeError("Generation client not started")
    return _generation_client


async def startup_generation_client() -> None:
    """Create the generation client. Called on FastAPI startup."""
    global _generation_client
    settings = load_settings()
    _generation_client = GenerationClient(get_provider(settings))
    logger.info(f"[GenerationService] Ready with model {settings.gemini_model}")


async def shutdown_generation_client() -> None:
    """Drop the generation client. Called on FastAPI shutdown."""
    global _generation_client
    _generation_client = None

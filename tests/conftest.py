"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from story_prompts.story.model_provider import GenerationResult, ModelProvider
from story_prompts.ui.session import reset_session_registry


class FakeProvider(ModelProvider):
    """Provider returning canned text (or raising) and recording prompts."""

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.prompts = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def generate(self, prompt, response_schema):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return GenerationResult(text=self.text, usage=None, provider="fake", model="fake-model")


@pytest.fixture
def fake_provider():
    """Provider returning a well-formed two-prompt story."""
    return FakeProvider('{"hook": "H", "storyPrompts": ["p1", "p2"]}')


@pytest.fixture
def mock_generation_client():
    """Generation client double with an AsyncMock generate()."""
    client = MagicMock()
    client.generate = AsyncMock()
    return client


@pytest.fixture(autouse=True, scope="function")
def reset_sessions():
    """Each test starts with an empty session registry."""
    reset_session_registry()
    yield
    reset_session_registry()

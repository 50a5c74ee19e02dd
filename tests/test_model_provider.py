"""Tests for model_provider module."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from story_prompts.infra.config import Settings
from story_prompts.story.model_provider import (
    GeminiProvider,
    GenerationResult,
    get_provider,
)


def _mock_response(text, usage=True):
    response = MagicMock()
    response.text = text
    if usage:
        response.usage_metadata = MagicMock(
            prompt_token_count=100,
            candidates_token_count=50,
            total_token_count=150,
        )
    else:
        response.usage_metadata = None
    return response


class TestGenerationResult:
    """Tests for GenerationResult dataclass."""

    def test_generation_result_creation(self):
        result = GenerationResult(
            text='{"hook": "H"}',
            usage={"input_tokens": 100, "output_tokens": 50},
            provider="gemini",
            model="gemini-2.5-flash"
        )
        assert result.text == '{"hook": "H"}'
        assert result.usage["input_tokens"] == 100


class TestGetProvider:
    """Tests for get_provider function."""

    def test_builds_gemini_provider_from_settings(self):
        with patch("story_prompts.story.model_provider.genai.Client") as mock_client_cls:
            provider = get_provider(Settings(gemini_api_key="test-key", gemini_model="gemini-test"))

        assert isinstance(provider, GeminiProvider)
        assert provider.model_name == "gemini-test"
        mock_client_cls.assert_called_once_with(api_key="test-key")


class TestGeminiProvider:
    """Tests for GeminiProvider class."""

    def test_provider_name(self):
        with patch("story_prompts.story.model_provider.genai.Client"):
            provider = GeminiProvider(api_key="test-key", model_name="gemini-test")
        assert provider.provider_name == "gemini"

    def test_generate_success(self):
        with patch("story_prompts.story.model_provider.genai.Client") as mock_client_cls:
            mock_client = MagicMock()
            mock_client.aio.models.generate_content = AsyncMock(
                return_value=_mock_response('{"hook": "H", "storyPrompts": []}')
            )
            mock_client_cls.return_value = mock_client

            provider = GeminiProvider(api_key="test-key", model_name="gemini-test")
            result = asyncio.run(provider.generate("the prompt", None))

        assert result.text == '{"hook": "H", "storyPrompts": []}'
        assert result.provider == "gemini"
        assert result.model == "gemini-test"
        assert result.usage == {"input_tokens": 100, "output_tokens": 50, "total_tokens": 150}

    def test_generate_request_parameters(self):
        with patch("story_prompts.story.model_provider.genai.Client") as mock_client_cls:
            mock_client = MagicMock()
            mock_client.aio.models.generate_content = AsyncMock(return_value=_mock_response("{}"))
            mock_client_cls.return_value = mock_client

            provider = GeminiProvider(api_key="test-key", model_name="gemini-test")
            asyncio.run(provider.generate("the prompt", None))

            kwargs = mock_client.aio.models.generate_content.call_args.kwargs

        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == "the prompt"
        assert kwargs["config"].temperature == 0.8
        assert kwargs["config"].response_mime_type == "application/json"

    def test_generate_without_usage(self):
        with patch("story_prompts.story.model_provider.genai.Client") as mock_client_cls:
            mock_client = MagicMock()
            mock_client.aio.models.generate_content = AsyncMock(
                return_value=_mock_response("{}", usage=False)
            )
            mock_client_cls.return_value = mock_client

            provider = GeminiProvider(api_key="test-key", model_name="gemini-test")
            result = asyncio.run(provider.generate("p", None))

        assert result.usage is None

    def test_generate_error_propagates(self):
        with patch("story_prompts.story.model_provider.genai.Client") as mock_client_cls:
            mock_client = MagicMock()
            mock_client.aio.models.generate_content = AsyncMock(side_effect=Exception("API Error"))
            mock_client_cls.return_value = mock_client

            provider = GeminiProvider(api_key="test-key", model_name="gemini-test")

            with pytest.raises(Exception) as exc_info:
                asyncio.run(provider.generate("p", None))

        assert "API Error" in str(exc_info.value)

"""
Tests for config module.
"""

import os
from unittest.mock import patch

import pytest

from story_prompts.infra.config import (
    DEFAULT_MODEL,
    ConfigurationError,
    Settings,
    load_settings,
)


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_missing_api_key_is_fatal(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                load_settings()

        assert "GEMINI_API_KEY" in str(exc_info.value)

    def test_blank_api_key_is_fatal(self):
        with patch.dict(os.environ, {"GEMINI_API_KEY": "   "}, clear=True):
            with pytest.raises(ConfigurationError):
                load_settings()

    def test_defaults(self):
        with patch.dict(os.environ, {"GEMINI_API_KEY": "test-key"}, clear=True):
            settings = load_settings()

        assert settings == Settings(gemini_api_key="test-key")
        assert settings.gemini_model == DEFAULT_MODEL
        assert settings.log_level == "INFO"
        assert settings.log_dir == "logs"

    def test_overrides(self):
        env = {
            "GEMINI_API_KEY": "test-key",
            "GEMINI_MODEL": "gemini-test",
            "LOG_LEVEL": "debug",
            "LOG_DIR": "/tmp/story-logs",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()

        assert settings.gemini_model == "gemini-test"
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == "/tmp/story-logs"

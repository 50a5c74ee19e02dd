"""
Configuration for the story prompt service.

Values come from the process environment (a local .env is loaded by the
entry points via python-dotenv). Only GEMINI_API_KEY is required; a missing
credential is fatal at startup rather than per request.
"""

import os
from dataclasses import dataclass

# Gemini settings
DEFAULT_MODEL = "gemini-2.5-flash"
TEMPERATURE = 0.8
RESPONSE_MIME_TYPE = "application/json"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"

# UI shell
THEME_COOKIE = "theme"
THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365
SESSION_COOKIE = "session_id"
SESSION_LIMIT = 1000
COPY_ACK_SECONDS = 2.0


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""
    pass


@dataclass(frozen=True)
class Settings:
    """Resolved service settings."""
    gemini_api_key: str
    gemini_model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: str = DEFAULT_LOG_DIR


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set
    """
    api_key = os.getenv("GEMINI_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError(
            "GEMINI_API_KEY environment variable not set. "
            "Set it in .env or environment."
        )

    return Settings(
        gemini_api_key=api_key,
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_dir=os.getenv("LOG_DIR", DEFAULT_LOG_DIR),
    )

"""
Story Prompt Generator - server entry point.

Loads .env, configures logging and runs the FastAPI app with uvicorn.

Usage:
    python main.py
    python main.py --host 0.0.0.0 --port 8080 --log-level DEBUG
"""

import argparse
import os

import uvicorn
from dotenv import load_dotenv

from story_prompts.infra.config import DEFAULT_LOG_DIR
from story_prompts.infra.logging_config import setup_logging

load_dotenv()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Story Prompt Generator server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: LOG_LEVEL env or INFO)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger = setup_logging(
        args.log_level,
        os.getenv("LOG_DIR", DEFAULT_LOG_DIR),
        redact=[os.getenv("GEMINI_API_KEY", "")],
    )
    logger.info(f"Starting server on {args.host}:{args.port}")

    uvicorn.run(
        "story_prompts.api.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()

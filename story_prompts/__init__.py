"""
Story Prompt Generator.

Turns a pasted batch of story-prompt lines into a cinematic hook plus a
consistent set of new story prompts using Google Gemini structured output.
"""

__version__ = "1.0.0"

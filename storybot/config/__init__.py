"""
Configuration module for the Children's Story Bot.

Re-exports all configuration so callers can import from ``storybot.config``.
"""

from .bot import get_bot_token, LOG_LEVEL, LOG_JSON
from .generation import (
    TEXT_STREAM_URL,
    TEXT_APP_ID,
    IMAGE_API_URL,
    IMAGE_API_KEY,
    MESSAGE_CHUNK_SIZE,
    DEFAULT_TITLE,
)

__all__ = [
    # Bot
    "get_bot_token",
    "LOG_LEVEL",
    "LOG_JSON",
    # Generation
    "TEXT_STREAM_URL",
    "TEXT_APP_ID",
    "IMAGE_API_URL",
    "IMAGE_API_KEY",
    "MESSAGE_CHUNK_SIZE",
    "DEFAULT_TITLE",
]

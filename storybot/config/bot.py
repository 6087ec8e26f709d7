"""
Bot configuration for the Children's Story Bot.

The Telegram token is the only required setting; it is read lazily so that
tests and tooling can import the package without one.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes")


def get_bot_token() -> str:
    """
    Get the Telegram bot token.

    Raises:
        ValueError: If BOT_TOKEN is not set.
    """
    token = os.getenv("BOT_TOKEN", "").strip()
    if not token:
        raise ValueError("No bot token found. Set BOT_TOKEN in .env")
    return token

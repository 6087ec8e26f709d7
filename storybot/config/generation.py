"""
Generation service configuration for the Children's Story Bot.

Endpoints default to the public picoapps backend.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Streaming text generation (WebSocket)
TEXT_STREAM_URL = os.getenv(
    "TEXT_STREAM_URL", "wss://backend.buildpicoapps.com/ask_ai_streaming"
)
TEXT_APP_ID = os.getenv("TEXT_APP_ID", "everybody-once")

# Image generation (HTTP POST)
IMAGE_API_URL = os.getenv(
    "IMAGE_API_URL", "https://backend.buildpicoapps.com/aero/run/image-generation-api"
)
IMAGE_API_KEY = os.getenv(
    "IMAGE_API_KEY",
    "v1-Z0FBQUFBQnBYMDEtM2VMU1Z1UDZsYnZKUDhUaVpKdzV0Ty1IeGJOWWx1bFJmZmR6YkExQmRSaHN2OHhtVnhUMVhTRmVmVy10blczOE1DWHpWajVWcjd2NkJJaVp3MEZ3elE9PQ==",
)

# Telegram rejects messages over 4096 characters
MESSAGE_CHUNK_SIZE = 4000

DEFAULT_TITLE = "A Wonderful Story"

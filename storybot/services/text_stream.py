"""Streaming text generation over WebSocket."""

import logging
from typing import Optional
from urllib.parse import quote, urlencode

from websockets import connect as ws_connect
from websockets.exceptions import ConnectionClosed, WebSocketException

from ..config.generation import TEXT_APP_ID, TEXT_STREAM_URL
from .errors import TextGenerationError

logger = logging.getLogger(__name__)

# The only close code that means the server finished the story
NORMAL_CLOSURE = 1000


class TextStreamClient:
    """Collects a streamed completion into a single string.

    The server pushes the story as a series of text frames and closes the
    socket when done. A clean close (code 1000) resolves with everything
    received; any other outcome raises TextGenerationError.
    """

    def __init__(self, url: str = TEXT_STREAM_URL, app_id: str = TEXT_APP_ID):
        self.url = url
        self.app_id = app_id

    def build_url(self, prompt: str) -> str:
        """Build the stream URL with the prompt percent-encoded as a query parameter."""
        params = urlencode({"app_id": self.app_id, "prompt": prompt}, quote_via=quote)
        return f"{self.url}?{params}"

    async def generate(self, prompt: str) -> str:
        """Stream a completion for ``prompt`` and return the full text."""
        try:
            # No connect deadline and no keepalive pings
            ws = await ws_connect(self.build_url(prompt), open_timeout=None, ping_interval=None)
        except (OSError, WebSocketException) as e:
            raise TextGenerationError(f"Failed to connect to text service: {e}") from e

        buffer: list[str] = []
        try:
            async for message in ws:
                if isinstance(message, bytes):
                    message = message.decode("utf-8")
                buffer.append(message)
        except ConnectionClosed as e:
            close_code = e.rcvd.code if e.rcvd else None
            raise TextGenerationError(
                f"Text stream closed with error (code {close_code})", close_code=close_code
            ) from e
        finally:
            await ws.close()

        close_code: Optional[int] = ws.close_code
        if close_code != NORMAL_CLOSURE:
            raise TextGenerationError(
                f"Text stream closed with error (code {close_code})", close_code=close_code
            )

        text = "".join(buffer)
        logger.debug(f"Received {len(buffer)} fragments ({len(text)} chars) from text service")
        return text

"""Unit tests for the streaming text generation client."""

from unittest.mock import patch
from urllib.parse import parse_qs, urlparse

import pytest
from websockets.exceptions import ConnectionClosedError, InvalidURI
from websockets.frames import Close

from storybot.services.errors import TextGenerationError
from storybot.services.text_stream import TextStreamClient


def create_mock_stream_ws(messages=None, close_code=1000, error=None):
    """Create a mock WebSocket that yields messages, then ends or raises."""
    messages = list(messages or [])

    class MockWebSocket:
        def __init__(self):
            self.close_code = close_code
            self.closed = False

        async def close(self):
            self.closed = True

        def __aiter__(self):
            return self

        async def __anext__(self):
            if messages:
                return messages.pop(0)
            if error is not None:
                raise error
            raise StopAsyncIteration

    return MockWebSocket()


class TestTextStreamClient:
    """Tests for TextStreamClient.generate."""

    @pytest.mark.asyncio
    async def test_accumulates_fragments_on_normal_close(self):
        mock_ws = create_mock_stream_ws(["<h1>Ti", "tle</h1>", b"<p>Body</p>"])

        async def mock_connect(*args, **kwargs):
            return mock_ws

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            text = await TextStreamClient().generate("a prompt")

        assert text == "<h1>Title</h1><p>Body</p>"
        assert mock_ws.closed is True

    @pytest.mark.asyncio
    async def test_abnormal_close_code_raises(self):
        mock_ws = create_mock_stream_ws(["partial"], close_code=1011)

        async def mock_connect(*args, **kwargs):
            return mock_ws

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            with pytest.raises(TextGenerationError) as exc_info:
                await TextStreamClient().generate("a prompt")

        assert exc_info.value.close_code == 1011

    @pytest.mark.asyncio
    async def test_going_away_close_is_not_success(self):
        """Only code 1000 counts as a finished story."""
        mock_ws = create_mock_stream_ws(["partial"], close_code=1001)

        async def mock_connect(*args, **kwargs):
            return mock_ws

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            with pytest.raises(TextGenerationError):
                await TextStreamClient().generate("a prompt")

    @pytest.mark.asyncio
    async def test_connection_closed_error_raises(self):
        error = ConnectionClosedError(Close(1006, ""), None)
        mock_ws = create_mock_stream_ws(["partial"], close_code=1006, error=error)

        async def mock_connect(*args, **kwargs):
            return mock_ws

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            with pytest.raises(TextGenerationError) as exc_info:
                await TextStreamClient().generate("a prompt")

        assert exc_info.value.close_code == 1006
        assert mock_ws.closed is True

    @pytest.mark.asyncio
    async def test_connect_failure_raises(self):
        async def mock_connect(*args, **kwargs):
            raise OSError("Connection refused")

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            with pytest.raises(TextGenerationError, match="Failed to connect"):
                await TextStreamClient().generate("a prompt")

    @pytest.mark.asyncio
    async def test_invalid_uri_raises(self):
        async def mock_connect(*args, **kwargs):
            raise InvalidURI("nope", "bad uri")

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            with pytest.raises(TextGenerationError):
                await TextStreamClient().generate("a prompt")

    @pytest.mark.asyncio
    async def test_connects_with_encoded_prompt(self):
        mock_ws = create_mock_stream_ws(["ok"])
        urls = []

        async def mock_connect(url, *args, **kwargs):
            urls.append(url)
            return mock_ws

        client = TextStreamClient(url="wss://example.test/stream", app_id="my-app")
        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            await client.generate("Tell a story & <p> tags")

        parsed = urlparse(urls[0])
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "wss://example.test/stream"
        assert "+" not in parsed.query
        query = parse_qs(parsed.query)
        assert query["app_id"] == ["my-app"]
        assert query["prompt"] == ["Tell a story & <p> tags"]

    @pytest.mark.asyncio
    async def test_connects_without_timeouts_or_pings(self):
        mock_ws = create_mock_stream_ws(["ok"])
        connect_kwargs = []

        async def mock_connect(url, *args, **kwargs):
            connect_kwargs.append(kwargs)
            return mock_ws

        with patch("storybot.services.text_stream.ws_connect", mock_connect):
            await TextStreamClient().generate("a prompt")

        assert connect_kwargs[0]["open_timeout"] is None
        assert connect_kwargs[0]["ping_interval"] is None

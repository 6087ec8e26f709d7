"""
Story generation flow.

Runs after the dialogue hands over a finished StoryRequest: fetch the story
text, format it, fetch an illustration, and deliver everything through a
StoryChannel. The flow owns its own error handling so it can run as a
detached task.
"""

import html
import logging
import time
from dataclasses import dataclass, field
from typing import Protocol

from ..core.formatter import format_story
from ..core.prompts import build_image_prompt, build_story_prompt
from ..core.types import StoryRequest
from ..logging import story_logger
from .image_api import ImageClient
from .text_stream import TextStreamClient

logger = logging.getLogger(__name__)

GENERATING_TEXT = "🌟 Generating your story... This might take a moment."
PAINTING_TEXT = "🎨 Painting a picture for your story..."
FAILURE_TEXT = "Sorry, something went wrong while generating the story. Please try again."


class StoryChannel(Protocol):
    """Where the generated story is delivered."""

    async def send_text(self, text: str, html: bool = False) -> None: ...

    async def send_photo(self, photo: str, caption: str) -> None: ...


@dataclass
class GenerationGateway:
    """The external text and image services used to produce a story."""

    text: TextStreamClient = field(default_factory=TextStreamClient)
    image: ImageClient = field(default_factory=ImageClient)


async def generate_story(
    request: StoryRequest,
    channel: StoryChannel,
    gateway: GenerationGateway,
    user_id: int = 0,
) -> None:
    """
    Generate a story for ``request`` and deliver it to ``channel``.

    Any failure after the initial notice is logged and reported to the user
    as a single apology. Nothing is retried.

    Args:
        request: Completed story request
        channel: Outbound message surface for this user
        gateway: Text and image service clients
        user_id: Used only for logging
    """
    start_time = time.time()
    story_logger.generation_started(user_id, len(request.children))

    await channel.send_text(GENERATING_TEXT)

    stage = "text"
    try:
        raw_story = await gateway.text.generate(build_story_prompt(request))
        story = format_story(raw_story)
        story_logger.stage_completed(user_id, "text", time.time() - start_time)

        stage = "image"
        await channel.send_text(PAINTING_TEXT)
        image = await gateway.image.generate(build_image_prompt(story.title, request))

        stage = "delivery"
        caption = f"<b>{html.escape(story.title)}</b>"
        if image.ok:
            await channel.send_photo(image.image_url, caption=caption)
        else:
            await channel.send_text(caption, html=True)

        for chunk in story.chunks():
            # Telegram rejects whitespace-only messages
            if chunk.strip():
                await channel.send_text(chunk)

        story_logger.generation_completed(user_id, time.time() - start_time)

    except Exception as e:
        story_logger.generation_failed(user_id, e, stage=stage)
        await channel.send_text(FAILURE_TEXT)

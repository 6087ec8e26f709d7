"""External generation services and the story generation flow."""

from .errors import GenerationError, ImageGenerationError, TextGenerationError
from .image_api import ImageClient, ImageResult
from .text_stream import TextStreamClient
from .story_generation import GenerationGateway, StoryChannel, generate_story

__all__ = [
    "GenerationError",
    "ImageGenerationError",
    "TextGenerationError",
    "ImageClient",
    "ImageResult",
    "TextStreamClient",
    "GenerationGateway",
    "StoryChannel",
    "generate_story",
]

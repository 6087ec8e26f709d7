"""Errors raised by the generation services."""

from typing import Optional


class GenerationError(Exception):
    """Base class for failures talking to a generation service."""


class TextGenerationError(GenerationError):
    """The text stream failed or closed abnormally."""

    def __init__(self, message: str, close_code: Optional[int] = None):
        super().__init__(message)
        self.close_code = close_code


class ImageGenerationError(GenerationError):
    """The image service could not be reached or returned an HTTP error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

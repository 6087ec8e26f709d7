"""Image generation over a single HTTP request."""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config.generation import IMAGE_API_KEY, IMAGE_API_URL
from .errors import ImageGenerationError

logger = logging.getLogger(__name__)


class ImageResult(BaseModel):
    """Response body from the image generation endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @property
    def ok(self) -> bool:
        return self.status == "success" and bool(self.image_url)


class ImageClient:
    """Requests one illustration per prompt.

    HTTP and network failures raise ImageGenerationError. A well-formed
    response whose status is not "success" is returned as a result with
    ``ok`` False so the caller can continue without a picture.
    """

    def __init__(self, url: str = IMAGE_API_URL, api_key: str = IMAGE_API_KEY):
        self.url = url
        self.api_key = api_key

    async def generate(self, prompt: str) -> ImageResult:
        try:
            # Image generation routinely takes longer than httpx's default timeout
            async with httpx.AsyncClient(timeout=None) as client:
                response = await client.post(
                    self.url,
                    params={"pk": self.api_key},
                    json={"prompt": prompt},
                )
        except httpx.RequestError as e:
            raise ImageGenerationError(f"Failed to connect to image service: {e}") from e

        if not response.is_success:
            raise ImageGenerationError(
                f"Image service returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = ImageResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ImageGenerationError(f"Invalid response from image service: {e}") from e

        if not result.ok:
            logger.warning(f"Image generation unsuccessful (status={result.status!r})")
        return result

from __future__ import annotations

"""OpenAI Images API client returning base64-encoded PNG payloads."""

from typing import Any

import openai
from loguru import logger

from image_generator.errors import UpstreamGenerationError
from image_generator.settings import Settings


class ImageGenerator:
    """Generate a single image per prompt.

    The client is injected so tests (and alternative OpenAI-compatible
    providers) can supply their own.
    """

    def __init__(self, client: Any, model: str = "dall-e-3", size: str = "1024x1024") -> None:
        self.client = client
        self.model = model
        self.size = size

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageGenerator":
        client = openai.AsyncOpenAI(api_key=settings.OPENAI_API_KEY, base_url=settings.OPENAI_BASE_URL)
        return cls(client, model=settings.IMAGE_MODEL, size=settings.IMAGE_SIZE)

    def _request_params(self, prompt: str) -> dict:
        params = {"model": self.model, "prompt": prompt, "size": self.size, "n": 1}
        # DALL·E models answer with a URL unless asked otherwise; gpt-image-* always return base64
        if self.model.startswith("dall-e"):
            params["response_format"] = "b64_json"
        return params

    async def generate_image(self, prompt: str) -> str:
        """Return the generated image for *prompt* as a base64 string."""
        logger.debug("🎨 Requesting image from {} ({})", self.model, self.size)
        try:
            response = await self.client.images.generate(**self._request_params(prompt))
        except openai.OpenAIError as exc:
            raise UpstreamGenerationError(
                f"Image generation failed: {exc}", data={"model": self.model}
            ) from exc

        images = getattr(response, "data", None) or []
        encoded = getattr(images[0], "b64_json", None) if images else None
        if not encoded:
            raise UpstreamGenerationError(
                "Image provider returned no image data", data={"model": self.model}
            )
        return encoded

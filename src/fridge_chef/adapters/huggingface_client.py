"""Hugging Face Inference API client for detection and captioning."""

from dataclasses import dataclass

import httpx

from fridge_chef.domain.errors import (
    UpstreamFormatError,
    UpstreamUnavailable,
    upstream_status_error,
)
from fridge_chef.services.images import detect_mime_type
from fridge_chef.services.scan import ImageCaptioner, ObjectDetector


@dataclass
class HttpxHuggingFaceClient(ObjectDetector, ImageCaptioner):
    """HTTPX-backed client calling hosted image models."""

    api_key: str
    base_url: str
    detection_model: str
    caption_model: str
    http_client: httpx.AsyncClient
    detection_timeout: float = 20
    caption_timeout: float = 20

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        *,
        api_key: str,
        base_url: str,
        detection_model: str,
        caption_model: str,
        detection_timeout: float = 20,
        caption_timeout: float = 20,
    ) -> "HttpxHuggingFaceClient":
        """Create a Hugging Face client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            detection_model=detection_model,
            caption_model=caption_model,
            http_client=httpx.AsyncClient(),
            detection_timeout=detection_timeout,
            caption_timeout=caption_timeout,
        )

    async def detect_objects(self, image_bytes: bytes) -> object:
        """Classify the image with the detection model."""
        return await self._infer(
            self.detection_model, image_bytes, timeout=self.detection_timeout
        )

    async def caption_image(self, image_bytes: bytes) -> object:
        """Describe the image with the captioning model."""
        return await self._infer(
            self.caption_model, image_bytes, timeout=self.caption_timeout
        )

    async def _infer(self, model: str, image_bytes: bytes, *, timeout: float) -> object:
        url = f"{self.base_url}/{model}"
        try:
            response = await self.http_client.post(
                url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": detect_mime_type(image_bytes),
                },
                content=image_bytes,
                timeout=timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise upstream_status_error(
                f"{model} returned HTTP {exc.response.status_code}",
                service=model,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(
                f"{model} request failed: {type(exc).__name__}", service=model
            ) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamFormatError(
                f"{model} returned a non-JSON body", service=model
            ) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from fridge_chef.domain.detection import InferenceThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    huggingface_api_key: str
    huggingface_base_url: str = "https://router.huggingface.co/hf-inference/models"
    detection_model: str = "microsoft/resnet-50"
    caption_model: str = "Salesforce/blip-image-captioning-base"
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    fridge_confidence_threshold: float = 0.25
    item_confidence_threshold: float = 0.15
    detection_timeout_seconds: float = 20
    caption_timeout_seconds: float = 20
    recipe_timeout_seconds: float = 60
    upstream_retry_attempts: int = 1
    upstream_retry_delay_seconds: float = 0.5
    max_image_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def thresholds(self) -> InferenceThresholds:
        """Build inference thresholds from the configured values."""
        return InferenceThresholds(
            fridge_confidence=self.fridge_confidence_threshold,
            item_confidence=self.item_confidence_threshold,
        )


def describe_key(value: str | None) -> str:
    """Report whether an API key is configured without exposing it."""
    if value is None or not value.strip():
        return "missing"
    return "configured"

"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fridge_chef.adapters.huggingface_client import HttpxHuggingFaceClient
from fridge_chef.adapters.openai_recipe_client import OpenAIRecipeClient
from fridge_chef.config import Settings
from fridge_chef.domain.vocabulary import DEFAULT_VOCABULARY, IngredientVocabulary
from fridge_chef.services.recipes import RecipeService
from fridge_chef.services.scan import FridgeScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    vocabulary: IngredientVocabulary
    scan_service: FridgeScanService
    recipe_service: RecipeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    huggingface_client = HttpxHuggingFaceClient.create(
        api_key=resolved_settings.huggingface_api_key,
        base_url=resolved_settings.huggingface_base_url,
        detection_model=resolved_settings.detection_model,
        caption_model=resolved_settings.caption_model,
        detection_timeout=resolved_settings.detection_timeout_seconds,
        caption_timeout=resolved_settings.caption_timeout_seconds,
    )
    scan_service = FridgeScanService(
        detector=huggingface_client,
        captioner=huggingface_client,
        vocabulary=DEFAULT_VOCABULARY,
        thresholds=resolved_settings.thresholds(),
        retry_attempts=resolved_settings.upstream_retry_attempts,
        retry_delay_seconds=resolved_settings.upstream_retry_delay_seconds,
    )
    openai_client = OpenAIRecipeClient.create(
        resolved_settings.openai_api_key,
        timeout=resolved_settings.recipe_timeout_seconds,
    )
    recipe_service = RecipeService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        retry_attempts=resolved_settings.upstream_retry_attempts,
        retry_delay_seconds=resolved_settings.upstream_retry_delay_seconds,
    )

    async def close_resources() -> None:
        await huggingface_client.close()
        await openai_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        vocabulary=DEFAULT_VOCABULARY,
        scan_service=scan_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )

"""Tests for container wiring and settings."""

import asyncio

from fridge_chef.config import Settings, describe_key
from fridge_chef.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.scan_service.thresholds.fridge_confidence == 0.25
    assert container.scan_service.thresholds.item_confidence == 0.15
    assert container.recipe_service.model == "gpt-4o-mini"
    assert container.scan_service.detector is container.scan_service.captioner
    asyncio.run(container.close_resources())


def test_settings_thresholds_are_configurable() -> None:
    settings = Settings(
        huggingface_api_key="hf-key",
        openai_api_key="openai-key",
        fridge_confidence_threshold=0.5,
        item_confidence_threshold=0.2,
    )

    thresholds = settings.thresholds()

    assert thresholds.fridge_confidence == 0.5
    assert thresholds.item_confidence == 0.2


def test_describe_key_hides_values() -> None:
    assert describe_key("sk-secret") == "configured"
    assert describe_key("  ") == "missing"
    assert describe_key(None) == "missing"

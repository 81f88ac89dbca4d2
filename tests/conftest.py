"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fridge_chef.config import Settings
from fridge_chef.containers import AppContainer
from fridge_chef.domain.errors import UpstreamUnavailable
from fridge_chef.domain.vocabulary import DEFAULT_VOCABULARY
from fridge_chef.services.recipes import RecipeClient, RecipeService
from fridge_chef.services.scan import FridgeScanService, ImageCaptioner, ObjectDetector

FRIDGE_JPEG = b"\xff\xd8\xff\xe0" + b"fake-fridge-photo"


@dataclass
class FakeDetector(ObjectDetector):
    """Fake detector returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: [
            {"label": "refrigerator, icebox", "score": 0.62},
            {"label": "pop bottle, soda bottle", "score": 0.21},
            {"label": "grocery store", "score": 0.05},
        ]
    )
    calls: int = 0

    async def detect_objects(self, image_bytes: bytes) -> object:
        self.calls += 1
        return self.payload


@dataclass
class FakeCaptioner(ImageCaptioner):
    """Fake captioner returning a fixed payload or raising an error."""

    payload: object = field(
        default_factory=lambda: [
            {"generated_text": "a refrigerator with milk and eggs"}
        ]
    )
    error: Exception | None = None
    calls: int = 0

    async def caption_image(self, image_bytes: bytes) -> object:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeRecipeClient(RecipeClient):
    """Fake recipe client returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: {
            "recipes": [
                {
                    "name": "Cheese Omelette",
                    "ingredients": ["3 eggs", "30 g cheese", "1 tbsp butter"],
                    "instructions": ["Whisk the eggs", "Cook with cheese"],
                    "missingIngredients": [],
                },
                {
                    "name": "Creamy Scrambled Eggs",
                    "ingredients": ["4 eggs", "50 ml milk", "salt"],
                    "instructions": ["Beat eggs with milk", "Stir over low heat"],
                    "missingIngredients": ["salt"],
                },
            ]
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> object:
        self.prompts.append(prompt)
        return self.payload


@dataclass
class FlakyDetector(ObjectDetector):
    """Detector that fails a fixed number of times before answering."""

    failures: int
    payload: object = field(
        default_factory=lambda: [{"label": "refrigerator", "score": 0.9}]
    )
    calls: int = 0

    async def detect_objects(self, image_bytes: bytes) -> object:
        self.calls += 1
        if self.calls <= self.failures:
            raise UpstreamUnavailable(
                "model is loading", service="detection", status_code=503
            )
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        huggingface_api_key="hf-key",
        openai_api_key="openai-key",
        upstream_retry_delay_seconds=0,
    )


@pytest.fixture
def detector() -> FakeDetector:
    return FakeDetector()


@pytest.fixture
def captioner() -> FakeCaptioner:
    return FakeCaptioner()


@pytest.fixture
def recipe_client() -> FakeRecipeClient:
    return FakeRecipeClient()


@pytest.fixture
def scan_service(
    settings: Settings, detector: FakeDetector, captioner: FakeCaptioner
) -> FridgeScanService:
    return FridgeScanService(
        detector=detector,
        captioner=captioner,
        thresholds=settings.thresholds(),
        retry_attempts=settings.upstream_retry_attempts,
        retry_delay_seconds=settings.upstream_retry_delay_seconds,
    )


@pytest.fixture
def container(
    settings: Settings,
    scan_service: FridgeScanService,
    recipe_client: FakeRecipeClient,
) -> AppContainer:
    recipe_service = RecipeService(
        client=recipe_client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        vocabulary=DEFAULT_VOCABULARY,
        scan_service=scan_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )

"""Refrigerator scan pipeline: detection, captioning and ingredient inference."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from fridge_chef.domain.detection import Detection, InferenceResult, InferenceThresholds
from fridge_chef.domain.errors import UpstreamError, UpstreamFormatError
from fridge_chef.domain.vocabulary import DEFAULT_VOCABULARY, IngredientVocabulary
from fridge_chef.services.inference import infer, scene_gate, top_detection
from fridge_chef.services.responses import assemble
from fridge_chef.services.retry import call_with_retry
from fridge_chef.services.suggestions import suggest

_logger = logging.getLogger(__name__)

_DETECTIONS = TypeAdapter(list[Detection])


class ObjectDetector(Protocol):
    """Interface for an image classification or object-detection model."""

    async def detect_objects(self, image_bytes: bytes) -> object:
        """Return the raw list of ``{label, score}`` hypotheses for an image."""


class ImageCaptioner(Protocol):
    """Interface for an image captioning model."""

    async def caption_image(self, image_bytes: bytes) -> object:
        """Return the raw captioning payload for an image."""


@dataclass
class FridgeScanService:
    """Turns an uploaded photo into detected ingredients and suggestions."""

    detector: ObjectDetector
    captioner: ImageCaptioner
    vocabulary: IngredientVocabulary = DEFAULT_VOCABULARY
    thresholds: InferenceThresholds = field(default_factory=InferenceThresholds)
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.5

    async def scan(self, image_bytes: bytes) -> InferenceResult:
        """Run the full pipeline for one image."""
        detections = await self.detect(image_bytes)
        gate = scene_gate(detections, self.thresholds.fridge_confidence)
        if gate is None:
            top = top_detection(detections)
            _logger.info(
                "Scene rejected: top=%s score=%s",
                top.label if top else None,
                top.score if top else None,
            )
            return assemble(False, top, (), (), vocabulary=self.vocabulary)

        caption = await self.caption_or_none(image_bytes)
        ingredients = infer(
            detections,
            caption,
            vocabulary=self.vocabulary,
            thresholds=self.thresholds,
        )
        _logger.info(
            "Scene accepted: gate=%s score=%.3f ingredients=%s",
            gate.label,
            gate.score,
            sorted(ingredients),
        )
        return assemble(
            True,
            gate,
            ingredients,
            suggest(ingredients, self.vocabulary),
            vocabulary=self.vocabulary,
        )

    async def detect(self, image_bytes: bytes) -> list[Detection]:
        """Call the detector and validate its payload."""
        payload = await call_with_retry(
            lambda: self.detector.detect_objects(image_bytes),
            action="detection",
            attempts=self.retry_attempts,
            delay_seconds=self.retry_delay_seconds,
        )
        return parse_detections(payload)

    async def caption_or_none(self, image_bytes: bytes) -> str | None:
        """Caption the image, degrading to ``None`` on any upstream failure."""
        try:
            payload = await call_with_retry(
                lambda: self.captioner.caption_image(image_bytes),
                action="captioning",
                attempts=self.retry_attempts,
                delay_seconds=self.retry_delay_seconds,
            )
            return parse_caption(payload)
        except UpstreamError as exc:
            _logger.warning(
                "Captioning failed, using detections only: %s: %s",
                type(exc).__name__,
                exc,
            )
            return None


def parse_detections(payload: object) -> list[Detection]:
    """Validate a detection payload of ``[{label, score}, ...]``."""
    if not isinstance(payload, list):
        raise UpstreamFormatError(
            "Unexpected response format from detection model: "
            f"{type(payload).__name__}",
            service="detection",
        )
    try:
        return _DETECTIONS.validate_python(payload)
    except ValidationError as exc:
        raise UpstreamFormatError(
            f"Invalid detection entries: {exc.error_count()} error(s)",
            service="detection",
        ) from exc


def parse_caption(payload: object) -> str:
    """Extract caption text from the shapes captioning models return."""
    first = payload[0] if isinstance(payload, list) and payload else payload
    if isinstance(first, str):
        text = first
    elif isinstance(first, dict) and isinstance(first.get("generated_text"), str):
        text = first["generated_text"]
    else:
        raise UpstreamFormatError(
            "Unexpected response format from captioning model",
            service="captioning",
        )
    return text.strip()

"""Models for detection results and per-request inference output."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Detection(BaseModel):
    """Single class hypothesis returned by the detection service."""

    model_config = ConfigDict(frozen=True)

    label: str
    score: float = Field(ge=0.0, le=1.0)


@dataclass(frozen=True)
class InferenceThresholds:
    """Confidence cut-offs used by the inference engine."""

    fridge_confidence: float = 0.25
    item_confidence: float = 0.15


@dataclass(frozen=True)
class DetectedObject:
    """Label and confidence reported back to the caller."""

    label: str
    confidence: float


@dataclass(frozen=True)
class InferenceResult:
    """Outcome of scanning one image."""

    is_food_or_fridge: bool
    ingredients: frozenset[str]
    suggestions: tuple[str, ...]
    message: str
    detected_object: DetectedObject | None

"""Pydantic models for the public JSON API."""

from pydantic import BaseModel, ConfigDict, Field

from fridge_chef.domain.detection import InferenceResult
from fridge_chef.domain.vocabulary import IngredientVocabulary


class DetectedObjectPayload(BaseModel):
    """Label and confidence of the object that decided the scan."""

    label: str
    confidence: float


class DetectIngredientsResponse(BaseModel):
    """Response body of the ingredient detection endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    is_food: bool = Field(alias="isFood")
    ingredients: list[str]
    suggested_ingredients: list[str] = Field(alias="suggestedIngredients")
    message: str | None = None
    error: str | None = None
    detected_object: DetectedObjectPayload | None = Field(
        default=None, alias="detectedObject"
    )

    @classmethod
    def from_result(
        cls, result: InferenceResult, vocabulary: IngredientVocabulary
    ) -> "DetectIngredientsResponse":
        """Convert a scan result; rejections carry their message in ``error``."""
        detected = (
            DetectedObjectPayload(
                label=result.detected_object.label,
                confidence=result.detected_object.confidence,
            )
            if result.detected_object
            else None
        )
        if not result.is_food_or_fridge:
            return cls(
                is_food=False,
                ingredients=[],
                suggested_ingredients=list(result.suggestions),
                error=result.message,
                detected_object=detected,
            )
        return cls(
            is_food=True,
            ingredients=vocabulary.ordered(result.ingredients),
            suggested_ingredients=list(result.suggestions),
            message=result.message,
            detected_object=detected,
        )

    @classmethod
    def failure(
        cls, error: str, vocabulary: IngredientVocabulary
    ) -> "DetectIngredientsResponse":
        """Build an error body that still offers the full vocabulary."""
        return cls(
            is_food=False,
            ingredients=[],
            suggested_ingredients=list(vocabulary.ingredients),
            error=error,
        )

    def to_json(self) -> dict[str, object]:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class GenerateRecipesRequest(BaseModel):
    """Request body of the recipe generation endpoint."""

    ingredients: list[str]

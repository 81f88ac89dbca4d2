"""Build the outward-facing result of an ingredient scan."""

from collections.abc import Iterable

from fridge_chef.domain.detection import DetectedObject, Detection, InferenceResult
from fridge_chef.domain.vocabulary import DEFAULT_VOCABULARY, IngredientVocabulary

DETECTED_MESSAGE = "Here are the ingredients we detected, plus some suggestions:"
PICK_COMMON_MESSAGE = (
    "We detected your refrigerator! Please select from these common ingredients:"
)
NOTHING_RECOGNIZED_MESSAGE = (
    "We could not recognize anything in this photo. "
    "Please upload a photo of food or your refrigerator."
)


def assemble(
    gate_passed: bool,
    detection: Detection | None,
    ingredients: Iterable[str],
    suggestions: Iterable[str],
    *,
    vocabulary: IngredientVocabulary = DEFAULT_VOCABULARY,
) -> InferenceResult:
    """Package a scan outcome.

    ``detection`` is the gating detection when the gate passed, otherwise the
    top-ranked detection (or ``None`` when the detector returned nothing).
    """
    detected_object = (
        DetectedObject(label=detection.label, confidence=detection.score)
        if detection is not None
        else None
    )
    if not gate_passed:
        return InferenceResult(
            is_food_or_fridge=False,
            ingredients=frozenset(),
            suggestions=vocabulary.ingredients,
            message=rejection_message(detection),
            detected_object=detected_object,
        )

    found = frozenset(ingredients)
    if not found:
        return InferenceResult(
            is_food_or_fridge=True,
            ingredients=found,
            suggestions=vocabulary.ingredients,
            message=PICK_COMMON_MESSAGE,
            detected_object=detected_object,
        )
    return InferenceResult(
        is_food_or_fridge=True,
        ingredients=found,
        suggestions=tuple(item for item in suggestions if item not in found),
        message=DETECTED_MESSAGE,
        detected_object=detected_object,
    )


def rejection_message(detection: Detection | None) -> str:
    """Explain why a photo was not accepted as a refrigerator scene."""
    if detection is None:
        return NOTHING_RECOGNIZED_MESSAGE
    return (
        f"This appears to be a photo of a {detection.label} "
        f"({detection.score * 100:.1f}% confidence). "
        "Please upload a photo of food or your refrigerator."
    )

"""Ingredient inference from detection labels and image captions."""

from collections.abc import Iterable, Iterator, Sequence

from fridge_chef.domain.detection import Detection, InferenceThresholds
from fridge_chef.domain.vocabulary import (
    DEFAULT_VOCABULARY,
    SCENE_WORDS,
    IngredientVocabulary,
)
from fridge_chef.services.normalizer import contains_phrase, normalize, same_word


def scene_gate(detections: Iterable[Detection], threshold: float) -> Detection | None:
    """Return the first refrigerator-like detection scoring above the threshold."""
    for detection in detections:
        if _mentions_scene(detection.label.lower()) and detection.score > threshold:
            return detection
    return None


def top_detection(detections: Iterable[Detection]) -> Detection | None:
    """Return the highest-scoring detection, if any."""
    return max(detections, key=lambda detection: detection.score, default=None)


def infer(
    detections: Sequence[Detection],
    caption: str | None,
    *,
    vocabulary: IngredientVocabulary = DEFAULT_VOCABULARY,
    thresholds: InferenceThresholds | None = None,
) -> frozenset[str]:
    """Infer a deduplicated ingredient set for a refrigerator photo.

    Returns an empty set when no detection passes the scene gate. Captions
    are optional; without one only detection labels are used.
    """
    limits = thresholds or InferenceThresholds()
    if scene_gate(detections, limits.fridge_confidence) is None:
        return frozenset()

    found: set[str] = set()
    for detection in detections:
        tokens = list(normalize(detection.label))
        if detection.score > limits.item_confidence:
            found.update(_direct_matches(tokens, vocabulary))
        # container expansion ignores the item threshold
        found.update(_container_contents(tokens, vocabulary))
    if caption:
        found.update(_mine_caption(caption, vocabulary))

    return frozenset(
        item.strip().lower() for item in found if not _mentions_scene(item)
    )


def _direct_matches(
    tokens: Sequence[str], vocabulary: IngredientVocabulary
) -> Iterator[str]:
    for entry in vocabulary.ingredients:
        if any(same_word(token, entry) or entry in token for token in tokens):
            yield entry


def _container_contents(
    tokens: Sequence[str], vocabulary: IngredientVocabulary
) -> Iterator[str]:
    for container in vocabulary.containers:
        if _has_word(tokens, container):
            yield from vocabulary.contents_of(container)


def _mine_caption(caption: str, vocabulary: IngredientVocabulary) -> Iterator[str]:
    tokens = list(normalize(caption))
    for brand, ingredient in vocabulary.brands.items():
        if contains_phrase(tokens, brand):
            yield ingredient
    for container in vocabulary.containers:
        if not _has_word(tokens, container):
            continue
        # the container word alone is not enough, the contents must be named too
        contents = vocabulary.contents_of(container)
        yield from (item for item in contents if _has_word(tokens, item))
    yield from (
        entry for entry in vocabulary.ingredients if _has_word(tokens, entry)
    )


def _has_word(tokens: Sequence[str], word: str) -> bool:
    return any(same_word(token, word) for token in tokens)


def _mentions_scene(text: str) -> bool:
    return any(word in text for word in SCENE_WORDS)

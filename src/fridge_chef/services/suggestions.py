"""Quick-add suggestions from the ingredient vocabulary."""

from collections.abc import Iterable

from fridge_chef.domain.vocabulary import DEFAULT_VOCABULARY, IngredientVocabulary


def suggest(
    detected: Iterable[str],
    vocabulary: IngredientVocabulary = DEFAULT_VOCABULARY,
) -> tuple[str, ...]:
    """Return vocabulary entries not already covered by a detected ingredient."""
    found = [item.lower() for item in detected]
    return tuple(
        entry
        for entry in vocabulary.ingredients
        if not any(entry in item for item in found)
    )

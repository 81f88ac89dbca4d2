"""Fixed ingredient vocabulary and association tables."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

SCENE_WORDS: tuple[str, ...] = ("refrigerator", "icebox", "fridge")


@dataclass(frozen=True, eq=False)
class IngredientVocabulary:
    """Canonical ingredient names plus container and brand associations."""

    ingredients: tuple[str, ...]
    containers: Mapping[str, tuple[str, ...]]
    brands: Mapping[str, str]

    def contents_of(self, container: str) -> tuple[str, ...]:
        """Return the ingredients plausibly held by a container."""
        return self.containers.get(container.strip().lower(), ())

    def ordered(self, items: Iterable[str]) -> list[str]:
        """Sort items by vocabulary position, unknown items alphabetically last."""
        position = {name: index for index, name in enumerate(self.ingredients)}
        return sorted(
            set(items),
            key=lambda item: (position.get(item, len(position)), item),
        )


DEFAULT_VOCABULARY = IngredientVocabulary(
    ingredients=(
        "milk",
        "eggs",
        "cheese",
        "yogurt",
        "juice",
        "water",
        "soda",
        "lettuce",
        "tomatoes",
        "carrots",
        "apples",
        "oranges",
        "chicken",
        "beef",
        "butter",
        "condiments",
    ),
    containers=MappingProxyType(
        {
            "bottle": ("juice", "water", "soda", "tea"),
            "carton": ("milk", "juice"),
            "jar": ("condiments",),
            "container": ("leftovers", "yogurt"),
            "bowl": ("leftovers", "fruit"),
            "fruit": ("apples", "oranges"),
            "vegetable": ("lettuce", "tomatoes", "carrots"),
        }
    ),
    brands=MappingProxyType(
        {
            "trader joe": "milk",
            "organic": "milk",
            "gold peak": "tea",
        }
    ),
)

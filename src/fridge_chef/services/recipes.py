"""Recipe generation service using LLMs."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from fridge_chef.domain.errors import InputError, UpstreamFormatError
from fridge_chef.domain.recipes import Recipe, RecipeList
from fridge_chef.services.retry import call_with_retry

_logger = logging.getLogger(__name__)

RECIPE_COUNT = 2

_STRING_LIST: dict[str, object] = {"type": "array", "items": {"type": "string"}}

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "ingredients": _STRING_LIST,
                    "instructions": _STRING_LIST,
                    "missingIngredients": _STRING_LIST,
                },
                "required": [
                    "name",
                    "ingredients",
                    "instructions",
                    "missingIngredients",
                ],
                "additionalProperties": False,
            },
        }
    },
    "required": ["recipes"],
    "additionalProperties": False,
}


class RecipeClient(Protocol):
    """Interface for LLM recipe generation."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> object:
        """Return structured recipe data."""


@dataclass
class RecipeService:
    """Service that prepares recipe prompts and validates results."""

    client: RecipeClient
    model: str
    reasoning_effort: str | None
    store: bool
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.5

    async def generate(self, ingredients: Iterable[str]) -> list[Recipe]:
        """Generate recipes that use most of the given ingredients."""
        cleaned = clean_ingredients(ingredients)
        if not cleaned:
            raise InputError("At least one ingredient is required")
        raw = await call_with_retry(
            lambda: self.client.generate(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                schema=RECIPE_SCHEMA,
                prompt=build_prompt(cleaned),
            ),
            action="recipe generation",
            attempts=self.retry_attempts,
            delay_seconds=self.retry_delay_seconds,
        )
        recipes = _parse_recipes(raw)
        if len(recipes) != RECIPE_COUNT:
            _logger.info(
                "Recipe model returned %s recipes, expected %s",
                len(recipes),
                RECIPE_COUNT,
            )
        return recipes


def clean_ingredients(ingredients: Iterable[str]) -> list[str]:
    """Trim, drop blanks and de-duplicate ingredients, keeping first-seen order."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for ingredient in ingredients:
        value = ingredient.strip()
        key = value.lower()
        if not value or key in seen:
            continue
        seen.add(key)
        cleaned.append(value)
    return cleaned


def build_prompt(ingredients: list[str]) -> str:
    """Render the fixed recipe prompt for an ingredient list."""
    return (
        f"Generate {RECIPE_COUNT} possible recipes using most of these ingredients: "
        f"{', '.join(ingredients)}.\n"
        "For each recipe, include:\n"
        "1. Recipe name\n"
        "2. Complete list of required ingredients (including quantities)\n"
        "3. Step-by-step instructions\n"
        "4. List any ingredients that weren't in the original list "
        "(missing ingredients)\n"
        f'Return a JSON object with a "recipes" array of {RECIPE_COUNT} recipes, '
        "each containing name, ingredients, instructions and missingIngredients."
    )


def _parse_recipes(raw: object) -> list[Recipe]:
    payload = {"recipes": raw} if isinstance(raw, list) else raw
    try:
        recipes = RecipeList.model_validate(payload).recipes
    except ValidationError as exc:
        _logger.error("Invalid recipe payload: %s", exc)
        raise UpstreamFormatError(
            "Invalid response structure from recipe model", service="recipes"
        ) from exc
    if not recipes:
        raise UpstreamFormatError("Recipe model returned no recipes", service="recipes")
    return recipes

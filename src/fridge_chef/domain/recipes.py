"""Models for generated recipes."""

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """Single generated recipe."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    ingredients: list[str]
    instructions: list[str]
    missing_ingredients: list[str] = Field(
        default_factory=list, alias="missingIngredients"
    )


class RecipeList(BaseModel):
    """Structured output for recipe generation."""

    recipes: list[Recipe]

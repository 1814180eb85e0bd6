"""Plain-text renderings of a recipe for download and clipboard use."""
from __future__ import annotations

from typing import List, Sequence, Union

from .models import Recipe
from .utils import slugify_title

EXPORT_EXTENSION = ".txt"
EXPORT_MIME_TYPE = "text/plain"


def _numbered(items: Sequence[str]) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


def to_plain_text_document(recipe: Recipe) -> str:
    """Render the downloadable document.

    Optional sections (tips, pairing, nutrition) are left out entirely when
    the recipe does not have them.
    """
    sections: List[str] = [
        f"{recipe.title}\n{'=' * len(recipe.title)}",
        f"Cooking Time: {recipe.cooking_time}\nServings: {recipe.servings}",
        f"INGREDIENTS:\n{_numbered(recipe.ingredients)}",
        f"STEPS:\n{_numbered(recipe.steps)}",
    ]
    if recipe.tips:
        sections.append(f"CHEF'S TIPS:\n{recipe.tips}")
    if recipe.pairing:
        sections.append(f"WINE PAIRING:\n{recipe.pairing}")
    if recipe.nutrition:
        nutrition = recipe.nutrition
        sections.append(
            "NUTRITION (per serving):\n"
            f"Calories: {nutrition.calories}\n"
            f"Protein: {nutrition.protein}\n"
            f"Fat: {nutrition.fat}\n"
            f"Carbs: {nutrition.carbs}"
        )
    return "\n\n".join(sections)


def to_clipboard_summary(recipe: Recipe) -> str:
    ingredients = "\n".join(recipe.ingredients)
    steps = "\n".join(recipe.steps)
    return (
        f"{recipe.title}\n\n"
        f"Cooking Time: {recipe.cooking_time}\nServings: {recipe.servings}\n\n"
        f"Ingredients:\n{ingredients}\n\n"
        f"Steps:\n{steps}"
    )


def export_file_name(recipe: Union[Recipe, str]) -> str:
    title = recipe.title if isinstance(recipe, Recipe) else recipe
    return f"{slugify_title(title)}{EXPORT_EXTENSION}"


__all__ = [
    "EXPORT_EXTENSION",
    "EXPORT_MIME_TYPE",
    "export_file_name",
    "to_clipboard_summary",
    "to_plain_text_document",
]

"""Prompt templates shared across the application."""
from __future__ import annotations

from typing import Dict, List

from .models import GenerationRequest

SYSTEM_PROMPT = """\
You are an expert chef and recipe creator. Generate creative, delicious, and practical recipes based on the ingredients provided. Always respond with ONLY valid JSON matching this exact structure, with no prose before or after it:

{
  "title": "Recipe Name",
  "cookingTime": "X minutes",
  "servings": number,
  "ingredients": ["ingredient 1 with quantity", "ingredient 2 with quantity"],
  "steps": ["Step 1", "Step 2"],
  "tips": "Chef's tips and suggestions",
  "nutrition": {
    "calories": "X kcal",
    "protein": "Xg",
    "fat": "Xg",
    "carbs": "Xg"
  },
  "pairing": "Wine or beverage pairing suggestion"
}

Make the recipe realistic, achievable, and delicious. Include specific quantities for all ingredients."""

USER_PROMPT_TEMPLATE = """\
Create a recipe for {servings} servings using these ingredients: {ingredients}.
Dietary preference: {dietary}.

Requirements:
- Use the provided ingredients creatively
- Adjust the recipe to match the {dietary} dietary preference
- Provide realistic cooking times
- Include specific quantities for all ingredients
- Make sure nutritional info matches the dietary preference
- Return ONLY the JSON object, no additional text"""


def build_user_prompt(request: GenerationRequest) -> str:
    return USER_PROMPT_TEMPLATE.format(
        servings=request.servings,
        ingredients=", ".join(request.ingredients),
        dietary=request.dietary_preference.prompt_phrase,
    )


def build_messages(request: GenerationRequest) -> List[Dict[str, str]]:
    """Return the system + user conversation sent to the provider."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(request)},
    ]


__all__ = [
    "SYSTEM_PROMPT",
    "USER_PROMPT_TEMPLATE",
    "build_messages",
    "build_user_prompt",
]

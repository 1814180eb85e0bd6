"""Deterministic demo generator used when no provider should be called."""
from __future__ import annotations

from ..logging_config import get_logger
from ..models import DietaryPreference, GenerationRequest, GenerationResult, Nutrition, Recipe

logger = get_logger(__name__)

DEMO_STEPS = (
    "Preheat your oven to 375°F (190°C).",
    "Season the main protein with herbs and spices.",
    "Heat oil in a pan over medium-high heat.",
    "Sear the protein for 3-4 minutes on each side until golden.",
    "Transfer to the oven and bake for 15 minutes.",
    "Let rest for 5 minutes before serving.",
)


class MockRecipeGenerator:
    """Always returns the same demo recipe shaped by the request."""

    def generate(self, request: GenerationRequest) -> GenerationResult:
        logger.info("Returning demo recipe for %s ingredient(s)", len(request.ingredients))
        is_keto = request.dietary_preference is DietaryPreference.KETO
        recipe = Recipe(
            title="Mediterranean Herb Chicken",
            cooking_time="25 minutes",
            servings=request.servings,
            ingredients=tuple(
                f"{index % 3 + 1} {ingredient}"
                for index, ingredient in enumerate(request.ingredients)
            ),
            steps=DEMO_STEPS,
            tips=(
                "For extra flavor, marinate the ingredients for 30 minutes before cooking. "
                "Serve with fresh herbs and a squeeze of lemon."
            ),
            nutrition=Nutrition(
                calories="320 kcal",
                protein="38g",
                fat="12g",
                carbs="3g" if is_keto else "15g",
            ),
            pairing="A crisp Sauvignon Blanc or light Pinot Grigio",
        )
        return GenerationResult.success(recipe)


__all__ = ["DEMO_STEPS", "MockRecipeGenerator"]

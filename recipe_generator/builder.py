"""Collects and validates the user's ingredients and preferences."""
from __future__ import annotations

from typing import Any, List, Tuple

from .errors import DuplicateIngredient, EmptyIngredient, EmptyIngredientList
from .logging_config import get_logger
from .models import DietaryPreference, GenerationRequest, coerce_servings

logger = get_logger(__name__)

DEFAULT_SERVINGS = 2


class RecipeRequestBuilder:
    """Mutable form state that turns into an immutable ``GenerationRequest``."""

    def __init__(self) -> None:
        self._ingredients: List[str] = []
        self.dietary_preference = DietaryPreference.NONE
        self.servings = DEFAULT_SERVINGS

    @property
    def ingredients(self) -> Tuple[str, ...]:
        return tuple(self._ingredients)

    def add_ingredient(self, raw: str) -> str:
        """Add a trimmed ingredient and return it.

        Raises ``EmptyIngredient`` for blank input and ``DuplicateIngredient``
        when the trimmed value is already in the list (case-sensitive).
        """
        trimmed = (raw or "").strip()
        if not trimmed:
            raise EmptyIngredient()
        if trimmed in self._ingredients:
            logger.info("Rejected duplicate ingredient: %s", trimmed)
            raise DuplicateIngredient(trimmed)

        self._ingredients.append(trimmed)
        logger.debug("Added ingredient %s (%s total)", trimmed, len(self._ingredients))
        return trimmed

    def remove_ingredient(self, name: str) -> None:
        """Remove an ingredient; removing one that is not listed does nothing."""
        if name in self._ingredients:
            self._ingredients.remove(name)
            logger.debug("Removed ingredient %s", name)

    def set_servings(self, value: Any) -> int:
        """Set the serving count, falling back to 1 for unusable input."""
        self.servings = coerce_servings(value)
        return self.servings

    def increment_servings(self) -> int:
        return self.set_servings(self.servings + 1)

    def decrement_servings(self) -> int:
        return self.set_servings(self.servings - 1)

    def set_dietary(self, value: Any) -> DietaryPreference:
        """Set the dietary preference. Unknown values raise and leave it unchanged."""
        self.dietary_preference = DietaryPreference.parse(value)
        return self.dietary_preference

    def submit(self) -> GenerationRequest:
        """Freeze the form into a request; raises ``EmptyIngredientList`` when empty."""
        if not self._ingredients:
            logger.warning("Submission attempted with no ingredients")
            raise EmptyIngredientList()

        request = GenerationRequest(
            ingredients=tuple(self._ingredients),
            dietary_preference=self.dietary_preference,
            servings=self.servings,
        )
        logger.info(
            "Built generation request: %s ingredient(s), dietary=%s, servings=%s",
            len(request.ingredients),
            request.dietary_preference.value,
            request.servings,
        )
        return request

    def reset(self) -> None:
        """Clear ingredients and restore the default preference and servings."""
        self._ingredients.clear()
        self.dietary_preference = DietaryPreference.NONE
        self.servings = DEFAULT_SERVINGS


__all__ = ["DEFAULT_SERVINGS", "RecipeRequestBuilder"]

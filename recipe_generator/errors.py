"""Exception types shared by the request builder, gateway and UI."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ConfigurationError(RuntimeError):
    """Raised when a required environment setting is missing."""


class ValidationError(ValueError):
    """Client-side input problem. Never reaches the network."""


class EmptyIngredient(ValidationError):
    def __init__(self) -> None:
        super().__init__("Ingredient cannot be empty")


class DuplicateIngredient(ValidationError):
    def __init__(self, ingredient: str) -> None:
        super().__init__("This ingredient is already added")
        self.ingredient = ingredient


class EmptyIngredientList(ValidationError):
    def __init__(self) -> None:
        super().__init__("Please add at least one ingredient")


class InvalidDietaryPreference(ValidationError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown dietary preference: {value!r}")
        self.value = value


class RecipeSchemaError(ValueError):
    """Raised when provider output does not match the recipe shape."""


class GenerationErrorKind(str, Enum):
    NO_INGREDIENTS = "no_ingredients"
    SERVICE_UNAVAILABLE = "service_unavailable"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXHAUSTED = "quota_exhausted"
    UPSTREAM_FAILURE = "upstream_failure"
    MALFORMED_RESPONSE = "malformed_response"


HTTP_STATUS_BY_KIND = {
    GenerationErrorKind.NO_INGREDIENTS: 400,
    GenerationErrorKind.SERVICE_UNAVAILABLE: 500,
    GenerationErrorKind.RATE_LIMITED: 429,
    GenerationErrorKind.QUOTA_EXHAUSTED: 402,
    GenerationErrorKind.UPSTREAM_FAILURE: 500,
    GenerationErrorKind.MALFORMED_RESPONSE: 500,
}

DEFAULT_MESSAGES = {
    GenerationErrorKind.NO_INGREDIENTS: "No ingredients provided",
    GenerationErrorKind.SERVICE_UNAVAILABLE: "AI service not configured",
    GenerationErrorKind.RATE_LIMITED: "Rate limit exceeded. Please try again in a moment.",
    GenerationErrorKind.QUOTA_EXHAUSTED: "AI service credits exhausted. Please contact support.",
    GenerationErrorKind.UPSTREAM_FAILURE: "Failed to generate recipe",
    GenerationErrorKind.MALFORMED_RESPONSE: "Failed to parse recipe data",
}


class GenerationError(Exception):
    """A failed generation, tagged with the reason it failed.

    ``message`` is safe to show to the end user; ``detail`` holds whatever
    diagnostic context was available (status codes, raw provider text).
    """

    def __init__(
        self,
        kind: GenerationErrorKind,
        message: Optional[str] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        self.detail = detail
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def __repr__(self) -> str:
        return f"GenerationError({self.kind.value!r}, {self.message!r})"


__all__ = [
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "DuplicateIngredient",
    "EmptyIngredient",
    "EmptyIngredientList",
    "GenerationError",
    "GenerationErrorKind",
    "HTTP_STATUS_BY_KIND",
    "InvalidDietaryPreference",
    "RecipeSchemaError",
    "ValidationError",
]

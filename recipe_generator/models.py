"""Dataclasses and type helpers used across the project."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from .errors import EmptyIngredientList, GenerationError, InvalidDietaryPreference, RecipeSchemaError


class DietaryPreference(str, Enum):
    NONE = "none"
    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    KETO = "keto"
    GLUTEN_FREE = "gluten-free"
    PESCATARIAN = "pescatarian"

    @property
    def label(self) -> str:
        return _DIETARY_LABELS[self]

    @property
    def prompt_phrase(self) -> str:
        if self is DietaryPreference.NONE:
            return "no dietary restrictions"
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "DietaryPreference":
        """Return the matching member or raise ``InvalidDietaryPreference``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidDietaryPreference(value) from exc


_DIETARY_LABELS = {
    DietaryPreference.NONE: "No Restriction",
    DietaryPreference.VEGAN: "Vegan",
    DietaryPreference.VEGETARIAN: "Vegetarian",
    DietaryPreference.KETO: "Keto",
    DietaryPreference.GLUTEN_FREE: "Gluten-Free",
    DietaryPreference.PESCATARIAN: "Pescatarian",
}


def coerce_servings(value: Any) -> int:
    """Coerce user input to a serving count of at least 1."""
    if isinstance(value, bool):
        return 1
    try:
        servings = int(value)
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, servings)


@dataclass(frozen=True)
class GenerationRequest:
    ingredients: Tuple[str, ...]
    dietary_preference: DietaryPreference = DietaryPreference.NONE
    servings: int = 2

    def __post_init__(self) -> None:
        # Accept any iterable of strings but store an immutable tuple.
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        if not self.ingredients:
            raise EmptyIngredientList()
        object.__setattr__(
            self, "dietary_preference", DietaryPreference.parse(self.dietary_preference)
        )
        object.__setattr__(self, "servings", coerce_servings(self.servings))

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body accepted by the HTTP gateway."""
        return {
            "ingredients": list(self.ingredients),
            "dietary": self.dietary_preference.value,
            "servings": self.servings,
        }


@dataclass(frozen=True)
class Nutrition:
    calories: str
    protein: str
    fat: str
    carbs: str

    FIELDS = ("calories", "protein", "fat", "carbs")

    @classmethod
    def from_dict(cls, data: Any) -> "Nutrition":
        if not isinstance(data, dict):
            raise RecipeSchemaError("nutrition must be an object")
        missing = [name for name in cls.FIELDS if data.get(name) in (None, "")]
        if missing:
            raise RecipeSchemaError(f"nutrition is missing: {', '.join(missing)}")
        return cls(**{name: str(data[name]).strip() for name in cls.FIELDS})

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.FIELDS}


def _string_list(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key)
    if not isinstance(value, list):
        raise RecipeSchemaError(f"'{key}' must be a list")
    items = tuple(str(item).strip() for item in value if str(item).strip())
    if not items:
        raise RecipeSchemaError(f"'{key}' must not be empty")
    return items


def _optional_text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Recipe:
    title: str
    cooking_time: str
    servings: int
    ingredients: Tuple[str, ...]
    steps: Tuple[str, ...]
    tips: Optional[str] = None
    nutrition: Optional[Nutrition] = None
    pairing: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, default_servings: int = 1) -> "Recipe":
        """Validate a decoded provider payload and build a recipe from it.

        Raises ``RecipeSchemaError`` when a required field is missing or has
        the wrong shape. ``default_servings`` is used when the payload has no
        usable serving count.
        """
        if not isinstance(data, dict):
            raise RecipeSchemaError("recipe must be a JSON object")

        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            raise RecipeSchemaError("'title' must be a non-empty string")

        ingredients = _string_list(data, "ingredients")
        steps = _string_list(data, "steps")

        servings = data.get("servings")
        if isinstance(servings, bool) or not isinstance(servings, (int, float, str)):
            servings = default_servings
        else:
            try:
                servings = int(servings)
            except (ValueError, OverflowError):
                servings = default_servings
        if servings < 1:
            servings = max(1, default_servings)

        nutrition = data.get("nutrition")
        return cls(
            title=title.strip(),
            cooking_time=str(data.get("cookingTime") or "").strip(),
            servings=servings,
            ingredients=ingredients,
            steps=steps,
            tips=_optional_text(data, "tips"),
            nutrition=Nutrition.from_dict(nutrition) if nutrition is not None else None,
            pairing=_optional_text(data, "pairing"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire shape, omitting absent optional fields."""
        payload: Dict[str, Any] = {
            "title": self.title,
            "cookingTime": self.cooking_time,
            "servings": self.servings,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
        }
        if self.tips is not None:
            payload["tips"] = self.tips
        if self.nutrition is not None:
            payload["nutrition"] = self.nutrition.to_dict()
        if self.pairing is not None:
            payload["pairing"] = self.pairing
        return payload


@dataclass(frozen=True)
class GenerationResult:
    recipe: Optional[Recipe] = None
    error: Optional[GenerationError] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if (self.recipe is None) == (self.error is None):
            raise ValueError("GenerationResult needs exactly one of recipe or error")

    @property
    def ok(self) -> bool:
        return self.recipe is not None

    @classmethod
    def success(cls, recipe: Recipe) -> "GenerationResult":
        return cls(recipe=recipe)

    @classmethod
    def failure(cls, error: GenerationError) -> "GenerationResult":
        return cls(error=error)


def dedupe_ingredients(raw: Iterable[Any]) -> Tuple[str, ...]:
    """Trim, drop blanks and remove exact duplicates while keeping order."""
    seen = []
    for item in raw:
        if not isinstance(item, str):
            continue
        trimmed = item.strip()
        if trimmed and trimmed not in seen:
            seen.append(trimmed)
    return tuple(seen)


__all__ = [
    "DietaryPreference",
    "GenerationRequest",
    "GenerationResult",
    "Nutrition",
    "Recipe",
    "coerce_servings",
    "dedupe_ingredients",
]

"""
Tests for the recipe request builder.

Covers ingredient trimming and de-duplication, serving clamping, dietary
validation and the empty-list guard on submit.
"""

from unittest.mock import MagicMock

import pytest

from recipe_generator.builder import DEFAULT_SERVINGS, RecipeRequestBuilder
from recipe_generator.errors import (
    DuplicateIngredient,
    EmptyIngredient,
    EmptyIngredientList,
    InvalidDietaryPreference,
)
from recipe_generator.models import DietaryPreference, GenerationRequest


@pytest.fixture
def builder():
    return RecipeRequestBuilder()


class TestIngredients:
    def test_add_trims_whitespace(self, builder):
        assert builder.add_ingredient("  chicken  ") == "chicken"
        assert builder.ingredients == ("chicken",)

    def test_rejects_blank_input(self, builder):
        with pytest.raises(EmptyIngredient):
            builder.add_ingredient("   ")
        with pytest.raises(EmptyIngredient):
            builder.add_ingredient("")
        assert builder.ingredients == ()

    def test_rejects_exact_duplicate(self, builder):
        builder.add_ingredient("garlic")
        with pytest.raises(DuplicateIngredient):
            builder.add_ingredient("garlic")
        assert builder.ingredients == ("garlic",)

    def test_duplicate_detected_after_trimming(self, builder):
        builder.add_ingredient("  chicken  ")
        with pytest.raises(DuplicateIngredient):
            builder.add_ingredient("chicken")

    def test_duplicates_are_case_sensitive(self, builder):
        builder.add_ingredient("Basil")
        builder.add_ingredient("basil")
        assert builder.ingredients == ("Basil", "basil")

    def test_insertion_order_is_kept(self, builder):
        for name in ["rice", "egg", "scallion"]:
            builder.add_ingredient(name)
        assert builder.ingredients == ("rice", "egg", "scallion")

    def test_remove_is_idempotent(self, builder):
        builder.add_ingredient("tofu")
        builder.remove_ingredient("tofu")
        builder.remove_ingredient("tofu")
        builder.remove_ingredient("never added")
        assert builder.ingredients == ()


class TestServings:
    def test_default(self, builder):
        assert builder.servings == DEFAULT_SERVINGS

    @pytest.mark.parametrize(
        "value, expected",
        [(4, 4), ("6", 6), (0, 1), (-3, 1), ("abc", 1), (None, 1), ("", 1), (float("inf"), 1)],
    )
    def test_set_servings_coerces_and_clamps(self, builder, value, expected):
        assert builder.set_servings(value) == expected
        assert builder.servings == expected

    def test_decrement_never_goes_below_one(self, builder):
        builder.set_servings(1)
        assert builder.decrement_servings() == 1

    def test_increment(self, builder):
        assert builder.increment_servings() == DEFAULT_SERVINGS + 1


class TestDietary:
    def test_accepts_enum_and_string(self, builder):
        assert builder.set_dietary(DietaryPreference.KETO) is DietaryPreference.KETO
        assert builder.set_dietary("gluten-free") is DietaryPreference.GLUTEN_FREE

    def test_unknown_value_is_rejected_and_keeps_previous(self, builder):
        builder.set_dietary("vegan")
        with pytest.raises(InvalidDietaryPreference):
            builder.set_dietary("carnivore")
        assert builder.dietary_preference is DietaryPreference.VEGAN


class TestSubmit:
    def test_submit_builds_request(self, builder):
        builder.add_ingredient("salmon")
        builder.add_ingredient("dill")
        builder.set_dietary("pescatarian")
        builder.set_servings(3)

        request = builder.submit()

        assert isinstance(request, GenerationRequest)
        assert request.ingredients == ("salmon", "dill")
        assert request.dietary_preference is DietaryPreference.PESCATARIAN
        assert request.servings == 3

    def test_submit_with_no_ingredients_fails_without_network(self, builder):
        generator = MagicMock()
        with pytest.raises(EmptyIngredientList):
            generator.generate(builder.submit())
        generator.generate.assert_not_called()

    def test_later_changes_do_not_affect_submitted_request(self, builder):
        builder.add_ingredient("beans")
        request = builder.submit()
        builder.add_ingredient("corn")
        assert request.ingredients == ("beans",)

    def test_reset_restores_defaults(self, builder):
        builder.add_ingredient("beans")
        builder.set_dietary("vegan")
        builder.set_servings(8)

        builder.reset()

        assert builder.ingredients == ()
        assert builder.dietary_preference is DietaryPreference.NONE
        assert builder.servings == DEFAULT_SERVINGS

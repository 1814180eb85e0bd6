"""Tests for configuration, generator selection and the demo generator."""

import dataclasses

import pytest

from recipe_generator.config import get_openai_client, get_settings
from recipe_generator.errors import ConfigurationError
from recipe_generator.generators import get_recipe_generator
from recipe_generator.models import DietaryPreference, GenerationRequest
from recipe_generator.services.gateway_client import RemoteRecipeGenerator
from recipe_generator.services.mock_generation import DEMO_STEPS, MockRecipeGenerator
from recipe_generator.services.recipe_generation import ProviderRecipeGenerator

ENV_VARS = [
    "RECIPE_AI_API_KEY",
    "RECIPE_AI_BASE_URL",
    "RECIPE_AI_MODEL",
    "RECIPE_AI_TEMPERATURE",
    "RECIPE_AI_TIMEOUT_SECONDS",
    "RECIPE_AI_TRANSIENT_RETRIES",
    "RECIPE_GENERATOR_MODE",
    "RECIPE_GATEWAY_URL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = get_settings()
        assert settings.api_key is None
        assert settings.model == "google/gemini-2.5-flash"
        assert settings.temperature == 0.8
        assert settings.timeout_seconds == 30.0
        assert settings.transient_retries == 0
        assert settings.generator_mode == "provider"

    def test_overrides(self, clean_env):
        clean_env.setenv("RECIPE_AI_API_KEY", "secret")
        clean_env.setenv("RECIPE_AI_TEMPERATURE", "0.2")
        clean_env.setenv("RECIPE_AI_TRANSIENT_RETRIES", "1")
        clean_env.setenv("RECIPE_GATEWAY_URL", "https://recipes.example.com/")

        settings = get_settings()

        assert settings.api_key == "secret"
        assert settings.temperature == 0.2
        assert settings.transient_retries == 1
        assert settings.gateway_url == "https://recipes.example.com"

    def test_invalid_numbers_fall_back(self, clean_env):
        clean_env.setenv("RECIPE_AI_TIMEOUT_SECONDS", "soon")
        assert get_settings().timeout_seconds == 30.0

    def test_unknown_mode_is_configuration_error(self, clean_env):
        clean_env.setenv("RECIPE_GENERATOR_MODE", "magic")
        with pytest.raises(ConfigurationError):
            get_settings()


class TestOpenAIClient:
    def test_missing_key_raises(self, clean_env):
        with pytest.raises(ConfigurationError):
            get_openai_client()

    def test_client_disables_sdk_retries(self, clean_env):
        clean_env.setenv("RECIPE_AI_API_KEY", "secret")
        clean_env.setenv("RECIPE_AI_BASE_URL", "https://provider.test/v1")

        client = get_openai_client()

        assert client.max_retries == 0
        assert str(client.base_url).startswith("https://provider.test/v1")
        assert get_openai_client() is client


class TestGeneratorFactory:
    @pytest.mark.parametrize(
        "mode, expected",
        [
            ("provider", ProviderRecipeGenerator),
            ("remote", RemoteRecipeGenerator),
            ("mock", MockRecipeGenerator),
        ],
    )
    def test_mode_selects_generator(self, settings, mode, expected):
        generator = get_recipe_generator(dataclasses.replace(settings, generator_mode=mode))
        assert isinstance(generator, expected)


class TestMockRecipeGenerator:
    def test_is_deterministic(self, generation_request):
        generator = MockRecipeGenerator()
        first = generator.generate(generation_request)
        second = generator.generate(generation_request)
        assert first.recipe == second.recipe

    def test_shapes_recipe_from_request(self, generation_request):
        recipe = MockRecipeGenerator().generate(generation_request).recipe

        assert recipe.title == "Mediterranean Herb Chicken"
        assert recipe.servings == 4
        assert recipe.ingredients == ("1 chicken", "2 garlic", "3 lemon")
        assert recipe.steps == DEMO_STEPS
        assert recipe.nutrition.carbs == "15g"

    def test_keto_lowers_carbs(self):
        request = GenerationRequest(ingredients=("steak",), dietary_preference=DietaryPreference.KETO)
        assert MockRecipeGenerator().generate(request).recipe.nutrition.carbs == "3g"

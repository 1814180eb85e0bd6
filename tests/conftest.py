"""Shared fixtures for the recipe generator test suite."""

import json
import os

# Keep test runs from writing log files; must happen before the package is imported.
os.environ.setdefault("RECIPE_LOG_DIR", "")

from unittest.mock import MagicMock
from types import SimpleNamespace

import httpx
import openai
import pytest

from recipe_generator.config import Settings, get_openai_client
from recipe_generator.models import DietaryPreference, GenerationRequest

PROVIDER_URL = "https://provider.test/v1/chat/completions"

FULL_RECIPE = {
    "title": "Lemon Garlic Chicken",
    "cookingTime": "35 minutes",
    "servings": 4,
    "ingredients": ["500g chicken thighs", "3 cloves garlic", "1 lemon"],
    "steps": [
        "Marinate the chicken with garlic and lemon.",
        "Roast at 200°C for 30 minutes.",
    ],
    "tips": "Let the chicken rest before slicing.",
    "nutrition": {"calories": "410 kcal", "protein": "42g", "fat": "18g", "carbs": "6g"},
    "pairing": "A chilled Chardonnay",
}

MINIMAL_RECIPE = {
    "title": "X",
    "cookingTime": "10 min",
    "servings": 2,
    "ingredients": ["1 egg"],
    "steps": ["Boil egg"],
}


@pytest.fixture
def settings():
    return Settings(
        api_key="test-key",
        base_url="https://provider.test/v1",
        model="test-model",
        temperature=0.8,
        timeout_seconds=30.0,
        transient_retries=0,
        generator_mode="provider",
        gateway_url="http://gateway.test",
    )


@pytest.fixture
def generation_request():
    return GenerationRequest(
        ingredients=("chicken", "garlic", "lemon"),
        dietary_preference=DietaryPreference.NONE,
        servings=4,
    )


@pytest.fixture(autouse=True)
def clear_client_cache():
    get_openai_client.cache_clear()
    yield
    get_openai_client.cache_clear()


def completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(content=None, error=None):
    client = MagicMock()
    if error is not None:
        client.chat.completions.create.side_effect = error
    else:
        client.chat.completions.create.return_value = completion(content)
    return client


def recipe_json(data=None):
    return json.dumps(FULL_RECIPE if data is None else data)


def status_error(status):
    request = httpx.Request("POST", PROVIDER_URL)
    response = httpx.Response(status, request=request, json={"error": {"message": "boom"}})
    error_class = {
        401: openai.AuthenticationError,
        429: openai.RateLimitError,
    }.get(status, openai.APIStatusError)
    return error_class("boom", response=response, body=None)


def timeout_error():
    return openai.APITimeoutError(request=httpx.Request("POST", PROVIDER_URL))


def connection_error():
    return openai.APIConnectionError(request=httpx.Request("POST", PROVIDER_URL))

"""Recipe generation backed by an OpenAI-compatible chat completion API."""
from __future__ import annotations

import json
import time
from typing import Any, Optional

import openai

from ..config import Settings, get_openai_client, get_settings
from ..errors import ConfigurationError, GenerationError, GenerationErrorKind, RecipeSchemaError
from ..logging_config import get_logger
from ..models import GenerationRequest, GenerationResult, Recipe
from ..prompts import build_messages
from ..utils import strip_markdown_fences

logger = get_logger(__name__)

_CREDENTIAL_STATUSES = (401, 403)


def _status_error(exc: openai.APIStatusError) -> GenerationError:
    status = exc.status_code
    detail = f"HTTP {status}: {exc.message}"
    if status == 429:
        return GenerationError(GenerationErrorKind.RATE_LIMITED, detail=detail)
    if status == 402:
        return GenerationError(GenerationErrorKind.QUOTA_EXHAUSTED, detail=detail)
    if status in _CREDENTIAL_STATUSES:
        return GenerationError(GenerationErrorKind.SERVICE_UNAVAILABLE, detail=detail)
    return GenerationError(GenerationErrorKind.UPSTREAM_FAILURE, detail=detail)


def call_provider(request: GenerationRequest, client: Any, settings: Settings) -> str:
    """Send the prompt to the provider and return the raw completion text.

    Raises ``GenerationError`` for every transport or provider failure.
    """
    messages = build_messages(request)
    attempts = 1 + settings.transient_retries

    attempt = 0
    while True:
        attempt += 1
        start_time = time.time()
        logger.info(
            "Sending recipe prompt to %s (attempt %s/%s)", settings.model, attempt, attempts
        )
        try:
            response = client.chat.completions.create(
                model=settings.model,
                messages=messages,
                temperature=settings.temperature,
            )
        except openai.APITimeoutError as exc:
            logger.error("Provider timed out after %.2f seconds", time.time() - start_time)
            raise GenerationError(
                GenerationErrorKind.UPSTREAM_FAILURE, detail=f"timeout: {exc}"
            ) from exc
        except openai.APIConnectionError as exc:
            logger.warning("Provider connection failed: %s", exc)
            if attempt < attempts:
                continue
            raise GenerationError(
                GenerationErrorKind.UPSTREAM_FAILURE, detail=f"connection error: {exc}"
            ) from exc
        except openai.APIStatusError as exc:
            logger.error("AI gateway error: %s %s", exc.status_code, exc.message)
            raise _status_error(exc) from exc

        logger.info("Received provider response in %.2f seconds", time.time() - start_time)
        return _completion_text(response)


def _completion_text(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    content = None
    if choices:
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
    if not content or not content.strip():
        logger.error("No content in AI response")
        raise GenerationError(
            GenerationErrorKind.UPSTREAM_FAILURE, detail="empty completion content"
        )
    return content


def parse_recipe_text(text: str, default_servings: int = 1) -> Recipe:
    """Decode the provider's (optionally fenced) JSON into a ``Recipe``.

    Raises ``GenerationError`` with ``MALFORMED_RESPONSE`` on any decode or
    schema failure. Never returns a partially populated recipe.
    """
    cleaned = strip_markdown_fences(text)
    try:
        data = json.loads(cleaned)
        recipe = Recipe.from_dict(data, default_servings=default_servings)
    except (json.JSONDecodeError, RecipeSchemaError) as exc:
        logger.error("Failed to parse AI response as recipe JSON: %s", exc)
        logger.error("Raw response: %s", text)
        raise GenerationError(
            GenerationErrorKind.MALFORMED_RESPONSE, detail=str(exc)
        ) from exc

    logger.info("Successfully generated recipe: %s", recipe.title)
    return recipe


def generate_recipe(
    request: GenerationRequest,
    client: Optional[Any] = None,
    settings: Optional[Settings] = None,
) -> GenerationResult:
    """Generate one recipe for ``request``. Failures come back in the result."""
    logger.info(
        "Generating recipe for: ingredients=%s dietary=%s servings=%s",
        list(request.ingredients),
        request.dietary_preference.value,
        request.servings,
    )
    try:
        settings = settings or get_settings()
        client = client or get_openai_client()
        raw_text = call_provider(request, client, settings)
        recipe = parse_recipe_text(raw_text, default_servings=request.servings)
    except ConfigurationError as exc:
        return GenerationResult.failure(
            GenerationError(GenerationErrorKind.SERVICE_UNAVAILABLE, detail=str(exc))
        )
    except GenerationError as exc:
        logger.warning("Recipe generation failed (%s): %s", exc.kind.value, exc.detail)
        return GenerationResult.failure(exc)

    return GenerationResult.success(recipe)


class ProviderRecipeGenerator:
    """``RecipeGenerator`` that talks to the configured provider directly."""

    def __init__(self, client: Optional[Any] = None, settings: Optional[Settings] = None) -> None:
        self._client = client
        self._settings = settings

    def generate(self, request: GenerationRequest) -> GenerationResult:
        return generate_recipe(request, client=self._client, settings=self._settings)


__all__ = [
    "ProviderRecipeGenerator",
    "call_provider",
    "generate_recipe",
    "parse_recipe_text",
]

"""
FastAPI application exposing the recipe generation gateway over HTTP.

Endpoints:
- POST /generate-recipe: Generate a recipe from ingredients, dietary preference and servings
- OPTIONS /generate-recipe: CORS preflight
- GET /health: Liveness probe

Responses are ``{"recipe": {...}}`` on success and ``{"error": "..."}`` otherwise,
with status 400 (no ingredients), 429 (rate limited), 402 (quota exhausted) or
500 (anything else). Every response carries permissive CORS headers so a
browser front end on another origin can call the gateway directly.

Run the API with:
    uvicorn recipe_generator.api:app --reload
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from .errors import (
    ConfigurationError,
    GenerationError,
    GenerationErrorKind,
    InvalidDietaryPreference,
)
from .generators import RecipeGenerator, get_recipe_generator
from .logging_config import get_logger
from .models import (
    DietaryPreference,
    GenerationRequest,
    coerce_servings,
    dedupe_ingredients,
)

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

app = FastAPI(
    title="AI Recipe Generator API",
    description="Turns a list of ingredients into a structured recipe using an LLM provider",
    version="1.0.0",
)


def get_generator() -> RecipeGenerator:
    """FastAPI dependency returning the configured generator."""
    return get_recipe_generator()


def _json_response(payload: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(payload, status_code=status_code, headers=CORS_HEADERS)


def _error_response(error: GenerationError) -> JSONResponse:
    return _json_response({"error": error.message}, status_code=error.http_status)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error while handling %s: %s", request.url.path, exc)
    return _error_response(GenerationError(GenerationErrorKind.SERVICE_UNAVAILABLE))


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.options("/generate-recipe")
def generate_recipe_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


def parse_generation_body(body: Any) -> GenerationRequest:
    """
    Build a ``GenerationRequest`` from the inbound JSON body.

    Ingredients are trimmed and de-duplicated, an unknown dietary value falls
    back to ``none`` and servings are clamped to at least 1.

    Raises:
        GenerationError: NO_INGREDIENTS when the body holds no usable ingredient
    """
    if not isinstance(body, dict):
        raise GenerationError(
            GenerationErrorKind.NO_INGREDIENTS, "Request body must be a JSON object"
        )

    raw_ingredients = body.get("ingredients")
    ingredients = dedupe_ingredients(raw_ingredients if isinstance(raw_ingredients, list) else [])
    if not ingredients:
        raise GenerationError(GenerationErrorKind.NO_INGREDIENTS)

    try:
        dietary = DietaryPreference.parse(body.get("dietary") or DietaryPreference.NONE.value)
    except InvalidDietaryPreference as exc:
        logger.warning("%s, falling back to none", exc)
        dietary = DietaryPreference.NONE

    return GenerationRequest(
        ingredients=ingredients,
        dietary_preference=dietary,
        servings=coerce_servings(body.get("servings", 2)),
    )


@app.post("/generate-recipe")
async def generate_recipe_endpoint(
    request: Request,
    generator: RecipeGenerator = Depends(get_generator),
) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError:
        logger.warning("Rejected request with a body that is not JSON")
        return _error_response(
            GenerationError(GenerationErrorKind.NO_INGREDIENTS, "Request body must be valid JSON")
        )

    try:
        generation_request = parse_generation_body(body)
        result = await run_in_threadpool(generator.generate, generation_request)
    except GenerationError as exc:
        logger.warning("Rejected generation request: %s", exc.message)
        return _error_response(exc)
    except Exception as exc:  # noqa: BLE001 - HTTP surface
        logger.error("Error in generate-recipe endpoint: %s", exc, exc_info=True)
        return _error_response(GenerationError(GenerationErrorKind.UPSTREAM_FAILURE, detail=str(exc)))

    if not result.ok:
        return _error_response(result.error)
    return _json_response({"recipe": result.recipe.to_dict()})


__all__ = ["CORS_HEADERS", "app", "get_generator", "parse_generation_body"]

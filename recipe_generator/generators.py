"""The generation contract shared by the provider, remote and demo generators."""
from __future__ import annotations

from typing import Optional, Protocol

from .config import Settings, get_settings
from .logging_config import get_logger
from .models import GenerationRequest, GenerationResult
from .services.gateway_client import RemoteRecipeGenerator
from .services.mock_generation import MockRecipeGenerator
from .services.recipe_generation import ProviderRecipeGenerator

logger = get_logger(__name__)


class RecipeGenerator(Protocol):
    def generate(self, request: GenerationRequest) -> GenerationResult:
        ...


def get_recipe_generator(settings: Optional[Settings] = None) -> RecipeGenerator:
    """Pick the generator named by ``RECIPE_GENERATOR_MODE``."""
    settings = settings or get_settings()
    logger.debug("Using %s recipe generator", settings.generator_mode)
    if settings.generator_mode == "mock":
        return MockRecipeGenerator()
    if settings.generator_mode == "remote":
        return RemoteRecipeGenerator(settings=settings)
    return ProviderRecipeGenerator(settings=settings)


__all__ = ["RecipeGenerator", "get_recipe_generator"]

"""Configuration helpers for environment-dependent services."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from openai import OpenAI  # type: ignore

from .errors import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)

# Existing environment variables take precedence over the .env file.
load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=False)

DEFAULT_BASE_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.8
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_GATEWAY_URL = "http://localhost:8000"

GENERATOR_MODES = ("provider", "remote", "mock")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    base_url: str
    model: str
    temperature: float
    timeout_seconds: float
    transient_retries: int
    generator_mode: str
    gateway_url: str


def get_settings() -> Settings:
    """Read the current settings from the environment."""
    mode = os.getenv("RECIPE_GENERATOR_MODE", "provider").strip().lower()
    if mode not in GENERATOR_MODES:
        message = (
            f"RECIPE_GENERATOR_MODE must be one of {', '.join(GENERATOR_MODES)}, got '{mode}'."
        )
        logger.error(message)
        raise ConfigurationError(message)

    return Settings(
        api_key=os.getenv("RECIPE_AI_API_KEY") or None,
        base_url=os.getenv("RECIPE_AI_BASE_URL", DEFAULT_BASE_URL),
        model=os.getenv("RECIPE_AI_MODEL", DEFAULT_MODEL),
        temperature=_env_float("RECIPE_AI_TEMPERATURE", DEFAULT_TEMPERATURE),
        timeout_seconds=_env_float("RECIPE_AI_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        transient_retries=_env_int("RECIPE_AI_TRANSIENT_RETRIES", 0),
        generator_mode=mode,
        gateway_url=os.getenv("RECIPE_GATEWAY_URL", DEFAULT_GATEWAY_URL).rstrip("/"),
    )


@lru_cache(maxsize=1)
def get_openai_client() -> OpenAI:
    """Instantiate (and cache) an OpenAI-compatible client with environment credentials."""
    settings = get_settings()
    if not settings.api_key:
        message = "RECIPE_AI_API_KEY environment variable is not set."
        logger.error(message)
        raise ConfigurationError(message)

    logger.debug("Creating OpenAI client for %s", settings.base_url)
    # Retries are disabled so every generation issues exactly one request.
    return OpenAI(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
        max_retries=0,
    )


__all__ = [
    "GENERATOR_MODES",
    "Settings",
    "get_openai_client",
    "get_settings",
]

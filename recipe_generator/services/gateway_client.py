"""HTTP client for a deployed recipe generation gateway."""
from __future__ import annotations

import time
from typing import Optional

import requests

from ..config import Settings, get_settings
from ..errors import GenerationError, GenerationErrorKind, RecipeSchemaError
from ..logging_config import get_logger
from ..models import GenerationRequest, GenerationResult, Recipe

logger = get_logger(__name__)

GENERATE_PATH = "/generate-recipe"

_KIND_BY_STATUS = {
    400: GenerationErrorKind.NO_INGREDIENTS,
    402: GenerationErrorKind.QUOTA_EXHAUSTED,
    429: GenerationErrorKind.RATE_LIMITED,
}


def _error_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class RemoteRecipeGenerator:
    """``RecipeGenerator`` that posts the request to the gateway's HTTP endpoint."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self._settings.gateway_url}{GENERATE_PATH}"

    def generate(self, request: GenerationRequest) -> GenerationResult:
        try:
            return GenerationResult.success(self._post(request))
        except GenerationError as exc:
            logger.warning("Remote generation failed (%s): %s", exc.kind.value, exc.message)
            return GenerationResult.failure(exc)

    def _post(self, request: GenerationRequest) -> Recipe:
        logger.info("Posting generation request to %s", self.endpoint)
        start_time = time.time()
        try:
            response = self._session.post(
                self.endpoint,
                json=request.to_payload(),
                timeout=self._settings.timeout_seconds,
            )
        except requests.exceptions.Timeout as exc:
            raise GenerationError(
                GenerationErrorKind.UPSTREAM_FAILURE, detail=f"timeout: {exc}"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise GenerationError(
                GenerationErrorKind.SERVICE_UNAVAILABLE,
                "Recipe service is unreachable. Please try again later.",
                detail=str(exc),
            ) from exc

        logger.info(
            "Gateway answered HTTP %s in %.2f seconds",
            response.status_code,
            time.time() - start_time,
        )
        if response.status_code != 200:
            kind = _KIND_BY_STATUS.get(response.status_code, GenerationErrorKind.UPSTREAM_FAILURE)
            raise GenerationError(
                kind,
                _error_message(response),
                detail=f"HTTP {response.status_code}",
            )

        try:
            body = response.json()
            return Recipe.from_dict(body.get("recipe"), default_servings=request.servings)
        except (RecipeSchemaError, ValueError, AttributeError) as exc:
            raise GenerationError(
                GenerationErrorKind.MALFORMED_RESPONSE, detail=str(exc)
            ) from exc


__all__ = ["GENERATE_PATH", "RemoteRecipeGenerator"]

"""Explicit UI state for one Streamlit session."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import streamlit as st

from .builder import RecipeRequestBuilder
from .logging_config import get_logger
from .models import GenerationResult, Recipe

logger = get_logger(__name__)


class SessionStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    DISPLAYING = "displaying"


class InvalidTransition(RuntimeError):
    pass


@dataclass
class RecipeSession:
    """Idle -> Generating -> Displaying (or back to Idle on failure)."""

    status: SessionStatus = SessionStatus.IDLE
    recipe: Optional[Recipe] = None
    last_error: Optional[str] = None

    @property
    def is_generating(self) -> bool:
        return self.status is SessionStatus.GENERATING

    def _require(self, expected: SessionStatus, action: str) -> None:
        if self.status is not expected:
            raise InvalidTransition(f"Cannot {action} while {self.status.value}")

    def start_generation(self) -> None:
        self._require(SessionStatus.IDLE, "start a generation")
        self.status = SessionStatus.GENERATING
        self.recipe = None
        self.last_error = None
        logger.debug("Session moved to generating")

    def complete(self, result: GenerationResult) -> None:
        self._require(SessionStatus.GENERATING, "complete a generation")
        if result.ok:
            self.status = SessionStatus.DISPLAYING
            self.recipe = result.recipe
        else:
            self.status = SessionStatus.IDLE
            self.recipe = None
            self.last_error = result.error.message
        logger.debug("Session moved to %s", self.status.value)

    def abandon(self) -> None:
        """Drop an in-flight generation without recording a result."""
        if self.status is SessionStatus.GENERATING:
            self.status = SessionStatus.IDLE
            logger.info("In-flight generation abandoned")

    def reset(self) -> None:
        self._require(SessionStatus.DISPLAYING, "reset")
        self.status = SessionStatus.IDLE
        self.recipe = None
        self.last_error = None


SESSION_DEFAULTS = {
    "recipe_session": RecipeSession,
    "request_builder": RecipeRequestBuilder,
}


def initialize_session_state() -> None:
    """Ensure Streamlit session state contains the expected keys."""
    for key, factory in SESSION_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = factory()


def get_session() -> RecipeSession:
    return st.session_state["recipe_session"]


def get_builder() -> RecipeRequestBuilder:
    return st.session_state["request_builder"]


__all__ = [
    "InvalidTransition",
    "RecipeSession",
    "SESSION_DEFAULTS",
    "SessionStatus",
    "get_builder",
    "get_session",
    "initialize_session_state",
]

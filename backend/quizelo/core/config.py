"""
Centralized application configuration.

Uses pydantic BaseSettings for automatic env-var loading and validation.
Import the singleton ``settings`` instance throughout the app.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, validated from environment variables."""

    # ── Environment ────────────────────────────────────────
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False

    # ── CORS ──────────────────────────────────────────────
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v):
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v

    # ── Segmind (question generation upstream) ────────────
    SEGMIND_API_KEY: str = ""
    SEGMIND_API_URL: str = "https://api.segmind.com/v1/claude-4-sonnet"
    LLM_TIMEOUT: int = 120

    # ── LLM Generation Control ───────────────────────────
    LLM_TEMPERATURE_CREATIVE: float = 0.9  # high for question variety
    LLM_MAX_TOKENS: int = 4000

    # ── Quiz ──────────────────────────────────────────────
    QUIZ_QUESTION_COUNT: int = 10
    QUIZ_MAX_ANSWER_SHARE: float = 0.4
    QUESTION_CACHE_CAPACITY: int = 100
    QUESTION_CACHE_RECALL: int = 10
    PROMPT_PREVIOUS_QUESTIONS: int = 5

    @field_validator("QUESTION_CACHE_CAPACITY", "QUIZ_QUESTION_COUNT", mode="after")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v

    @field_validator("QUESTION_CACHE_RECALL", "PROMPT_PREVIOUS_QUESTIONS", mode="after")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"must be >= 0, got {v}")
        return v

    @field_validator("QUIZ_MAX_ANSWER_SHARE", mode="after")
    @classmethod
    def _share_range(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError(f"QUIZ_MAX_ANSWER_SHARE must be in (0, 1], got {v}")
        return v

    @model_validator(mode="after")
    def _warn_missing_credentials(self):
        """Missing key is reported per request, not at startup."""
        if not self.SEGMIND_API_KEY:
            logging.getLogger("config").warning(
                "SEGMIND_API_KEY is empty; question generation will fail until it is set"
            )
        return self

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()

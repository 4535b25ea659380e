"""Application settings management leveraging pydantic v2."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("ENV", "development") in {"development", "dev", "local"}:
    from dotenv import load_dotenv

    load_dotenv(override=False)


class AppSettings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    app_name: str = Field(
        default="MirrorMind",
        validation_alias=AliasChoices("APP_NAME", "MIRRORMIND_APP_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "MIRRORMIND_ENVIRONMENT"),
    )
    huggingface_api_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "HUGGINGFACE_API_TOKEN", "MIRRORMIND_HUGGINGFACE_API_TOKEN"
        ),
    )
    google_ai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_AI_API_KEY", "MIRRORMIND_GOOGLE_AI_API_KEY"),
    )
    # Remote inference still needs a token; this only lets operators switch it off.
    use_remote_inference: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "USE_REMOTE_INFERENCE", "MIRRORMIND_USE_REMOTE_INFERENCE"
        ),
    )
    huggingface_base_url: str = Field(
        default="https://router.huggingface.co/hf-inference/models/",
        validation_alias=AliasChoices(
            "HUGGINGFACE_BASE_URL", "MIRRORMIND_HUGGINGFACE_BASE_URL"
        ),
    )
    summarization_model: str = Field(
        default="facebook/bart-large-cnn",
        validation_alias=AliasChoices(
            "SUMMARIZATION_MODEL", "MIRRORMIND_SUMMARIZATION_MODEL"
        ),
    )
    sentiment_model: str = Field(
        default="distilbert-base-uncased-finetuned-sst-2-english",
        validation_alias=AliasChoices("SENTIMENT_MODEL", "MIRRORMIND_SENTIMENT_MODEL"),
    )
    generation_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models",
        validation_alias=AliasChoices(
            "GENERATION_BASE_URL", "MIRRORMIND_GENERATION_BASE_URL"
        ),
    )
    generation_model: str = Field(
        default="gemini-pro",
        validation_alias=AliasChoices("GENERATION_MODEL", "MIRRORMIND_GENERATION_MODEL"),
    )
    remote_input_limit: int = Field(
        default=1024,
        validation_alias=AliasChoices(
            "REMOTE_INPUT_LIMIT", "MIRRORMIND_REMOTE_INPUT_LIMIT"
        ),
    )
    min_remote_summary_length: int = Field(
        default=50,
        validation_alias=AliasChoices(
            "MIN_REMOTE_SUMMARY_LENGTH", "MIRRORMIND_MIN_REMOTE_SUMMARY_LENGTH"
        ),
    )
    remote_timeout: float = Field(
        default=60.0,
        validation_alias=AliasChoices("REMOTE_TIMEOUT", "MIRRORMIND_REMOTE_TIMEOUT"),
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "MIRRORMIND_CORS_ORIGINS"),
    )

    model_config = SettingsConfigDict(
        env_file=(".env", "mirrormind/.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def remote_inference_available(self) -> bool:
        """True when remote inference is enabled and a token is configured."""

        return self.use_remote_inference and bool(self.huggingface_api_token)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load environment variables and return a cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "get_settings"]

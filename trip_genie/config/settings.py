from __future__ import annotations

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
        env_prefix="TRIPGENIE_"
    )


    # ------------------------------------------------------------------
    # Text generation service
    # ------------------------------------------------------------------
    GEMINI_API_KEY: Optional[SecretStr] = Field(
        default=None,
        description="API key for the Gemini generateContent endpoint.",
    )

    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini REST API.",
    )

    GEMINI_MODEL: str = Field(
        default="gemini-1.5-flash",
        description="Model name used in the generateContent path.",
    )

    GEMINI_TIMEOUT: int = Field(
        default=60,
        description="Request timeout in seconds for a single generation call.",
    )

    # ------------------------------------------------------------------
    # Generation parameters
    # ------------------------------------------------------------------
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_k: int = Field(default=40, ge=1)
    top_p: float = Field(default=0.95, ge=0.0, le=1.0)
    max_output_tokens: int = Field(
        default=8192,
        ge=1,
        description="Upper bound on generated tokens for a travel plan.",
    )

    # ------------------------------------------------------------------
    # Web API
    # ------------------------------------------------------------------
    API_KEY: Optional[SecretStr] = Field(
        default=None,
        description="API key for header-based auth. If None, auth is disabled.",
    )

    RATE_LIMIT_MAX_REQUESTS: int = Field(
        default=60,
        description="Requests allowed per client within one rate-limit window.",
    )

    RATE_LIMIT_WINDOW_SECONDS: float = Field(
        default=60.0,
        description="Length of the rate-limit window in seconds.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Default log level for the CLI and web app.",
    )

    @property
    def gemini_api_key(self) -> Optional[str]:
        """
        Plain-text API key, or None when unset or blank.
        """
        if self.GEMINI_API_KEY is None:
            return None
        value = self.GEMINI_API_KEY.get_secret_value().strip()
        return value or None


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so we only construct Settings once.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()

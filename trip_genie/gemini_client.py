# trip_genie/gemini_client.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from trip_genie.config.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class GeminiClientConfig:
    """
    Configuration for talking to the Gemini generateContent endpoint.
    """

    api_key: Optional[str]
    base_url: str
    model: str
    timeout: int = 60
    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 8192

    @classmethod
    def from_env(cls) -> "GeminiClientConfig":
        """
        Build configuration from environment variables and global settings.

        Priority for api_key:
        - TRIPGENIE_GEMINI_API_KEY
        - GEMINI_API_KEY
        - settings.GEMINI_API_KEY
        """
        api_key = (
            os.getenv("TRIPGENIE_GEMINI_API_KEY")
            or os.getenv("GEMINI_API_KEY")
            or settings.gemini_api_key
        )

        return cls(
            api_key=api_key,
            base_url=settings.GEMINI_BASE_URL.rstrip("/"),
            model=settings.GEMINI_MODEL,
            timeout=settings.GEMINI_TIMEOUT,
            temperature=settings.temperature,
            top_k=settings.top_k,
            top_p=settings.top_p,
            max_output_tokens=settings.max_output_tokens,
        )


class GeminiClientError(RuntimeError):
    """
    Error raised when a generation request fails.

    The message is user-facing; status_code and url are for logs.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


def _error_message(resp: requests.Response) -> str:
    """
    Pull `error.message` out of an error body, if there is one.
    """
    try:
        body = resp.json()
    except ValueError:
        return "Unknown error"

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return "Unknown error"


class GeminiClient:
    """
    Minimal HTTP client for Gemini text generation.

    Methods:
        - is_configured() -> bool
        - build_payload(prompt) -> dict
        - generate(prompt) -> str
    """

    def __init__(
        self,
        config: Optional[GeminiClientConfig] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        if config is None:
            config = GeminiClientConfig.from_env()

        if api_key is not None:
            config.api_key = api_key
        if base_url is not None:
            config.base_url = base_url.rstrip("/")
        if timeout is not None:
            config.timeout = timeout

        self.config = config

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url}/models/{self.config.model}:generateContent"

    def is_configured(self) -> bool:
        return bool(self.config.api_key)

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                    ]
                }
            ],
            "generationConfig": {
                "temperature": self.config.temperature,
                "topK": self.config.top_k,
                "topP": self.config.top_p,
                "maxOutputTokens": self.config.max_output_tokens,
            },
        }

    # ------------------------------------------------------------------
    # Core prompt -> text call
    # ------------------------------------------------------------------
    def generate(self, prompt: str) -> str:
        """
        Send a prompt to generateContent and return the first candidate's text.
        """
        if not self.is_configured():
            raise GeminiClientError(
                "Gemini API key is not configured. "
                "Set TRIPGENIE_GEMINI_API_KEY or GEMINI_API_KEY."
            )

        url = self.endpoint
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": str(self.config.api_key),
        }

        try:
            resp = requests.post(
                url,
                headers=headers,
                json=self.build_payload(prompt),
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise GeminiClientError(f"Error: {exc}", url=url) from exc

        if not resp.ok:
            message = _error_message(resp)
            logger.error("Gemini API error %s: %s", resp.status_code, message)
            raise GeminiClientError(
                f"API error: {message}",
                status_code=resp.status_code,
                url=url,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise GeminiClientError(
                "Error: response was not valid JSON",
                status_code=resp.status_code,
                url=url,
            ) from exc

        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates:
            raise GeminiClientError(
                "No response generated, please try again",
                status_code=resp.status_code,
                url=url,
            )

        try:
            text = candidates[0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise GeminiClientError(
                "Error: unexpected response format from Gemini",
                status_code=resp.status_code,
                url=url,
            ) from exc

        return str(text)

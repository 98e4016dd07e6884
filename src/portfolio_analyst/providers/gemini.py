"""Gemini content generation via the google-genai client."""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types as genai_types

from portfolio_analyst.domain import ProviderId

from .base import LLMProvider
from .exceptions import ProviderConfigurationError, ProviderRequestError

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"


class GeminiProvider(LLMProvider):
    """Send prompts to a Gemini model and return the reply text."""

    provider_id = ProviderId.GEMINI

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str = DEFAULT_GEMINI_MODEL,
        request_timeout: float = 120.0,
        client: Any | None = None,
    ) -> None:
        if client is None and not api_key:
            raise ProviderConfigurationError("GeminiProvider requires a valid API key")
        self.model = model
        self._api_key = api_key
        self._request_timeout = request_timeout
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            # Google genai SDK expects timeout in milliseconds, not seconds
            timeout_ms = int(self._request_timeout * 1000)
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=genai_types.HttpOptions(timeout=timeout_ms),
            )
        return self._client

    async def generate_content(self, prompt: str) -> str:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as exc:
            logger.warning("Gemini request failed for model %s: %s", self.model, exc)
            raise ProviderRequestError(f"Gemini request failed: {exc}") from exc
        return response.text or ""


__all__ = ["DEFAULT_GEMINI_MODEL", "GeminiProvider"]

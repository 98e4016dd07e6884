"""Anthropic content generation via the Messages API."""

from __future__ import annotations

import logging
from typing import Any

from portfolio_analyst.domain import ProviderId

from .base import LLMProvider
from .exceptions import ProviderConfigurationError, ProviderRequestError

logger = logging.getLogger(__name__)

DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"


class AnthropicProvider(LLMProvider):
    """Call the Anthropic API directly via the Python SDK."""

    provider_id = ProviderId.ANTHROPIC

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        max_tokens: int = 8192,
        request_timeout: float = 120.0,
        client: Any | None = None,
    ) -> None:
        if client is None and not api_key:
            raise ProviderConfigurationError("ANTHROPIC_API_KEY not found in environment")
        self.model = model
        self.max_tokens = max_tokens
        self._api_key = api_key
        self._request_timeout = request_timeout
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            try:
                from anthropic import AsyncAnthropic
            except ImportError as exc:
                raise ProviderConfigurationError(
                    "anthropic package not installed. Install with: pip install anthropic"
                ) from exc
            self._client = AsyncAnthropic(api_key=self._api_key, timeout=self._request_timeout)
        return self._client

    async def generate_content(self, prompt: str) -> str:
        client = self._get_client()
        try:
            message = await client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            logger.warning("Anthropic request failed for model %s: %s", self.model, exc)
            raise ProviderRequestError(f"Anthropic request failed: {exc}") from exc

        result_text = ""
        for block in message.content:
            if hasattr(block, "text"):
                result_text += block.text
        return result_text


__all__ = ["DEFAULT_ANTHROPIC_MODEL", "AnthropicProvider"]

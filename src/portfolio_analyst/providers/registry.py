"""Provider registry mapping identifiers to adapter factories."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from portfolio_analyst.config import AppSettings
from portfolio_analyst.domain import ProviderId

from .anthropic import AnthropicProvider
from .base import LLMProvider
from .exceptions import UnsupportedProviderError
from .gemini import GeminiProvider

ProviderFactory = Callable[[AppSettings], LLMProvider]


def _build_gemini(settings: AppSettings) -> LLMProvider:
    return GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        request_timeout=settings.request_timeout,
    )


def _build_anthropic(settings: AppSettings) -> LLMProvider:
    return AnthropicProvider(
        api_key=settings.anthropic_api_key,
        model=settings.anthropic_model,
        request_timeout=settings.request_timeout,
    )


@dataclass(slots=True)
class ProviderRegistry:
    """Runtime registry mapping provider identifiers to factories."""

    _factories: dict[ProviderId, ProviderFactory] = field(default_factory=dict)

    def register(
        self, provider_id: ProviderId, factory: ProviderFactory, *, override: bool = False
    ) -> None:
        if not override and provider_id in self._factories:
            msg = f"Provider {provider_id} already registered"
            raise ValueError(msg)
        self._factories[provider_id] = factory

    def get(self, provider_id: ProviderId) -> ProviderFactory:
        try:
            return self._factories[provider_id]
        except KeyError as exc:
            msg = f"Unknown provider {provider_id}"
            raise UnsupportedProviderError(msg) from exc

    def available(self) -> Iterable[ProviderId]:
        return tuple(self._factories)

    def build(self, provider_id: ProviderId, settings: AppSettings) -> LLMProvider:
        return self.get(provider_id)(settings)


registry = ProviderRegistry()
registry.register(ProviderId.GEMINI, _build_gemini)
registry.register(ProviderId.ANTHROPIC, _build_anthropic)


def build_provider(settings: AppSettings, provider_id: ProviderId | None = None) -> LLMProvider:
    """Construct the requested provider, defaulting to the configured one."""

    return registry.build(provider_id or settings.default_provider, settings)


__all__ = ["ProviderFactory", "ProviderRegistry", "build_provider", "registry"]

"""Provider layer public exports."""

from .anthropic import DEFAULT_ANTHROPIC_MODEL, AnthropicProvider
from .base import LLMProvider
from .exceptions import (
    ProviderConfigurationError,
    ProviderError,
    ProviderRequestError,
    UnsupportedProviderError,
)
from .gemini import DEFAULT_GEMINI_MODEL, GeminiProvider
from .registry import ProviderFactory, ProviderRegistry, build_provider, registry

__all__ = [
    "DEFAULT_ANTHROPIC_MODEL",
    "DEFAULT_GEMINI_MODEL",
    "AnthropicProvider",
    "GeminiProvider",
    "LLMProvider",
    "ProviderConfigurationError",
    "ProviderError",
    "ProviderFactory",
    "ProviderRegistry",
    "ProviderRequestError",
    "UnsupportedProviderError",
    "build_provider",
    "registry",
]

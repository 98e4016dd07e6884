"""Provider integration-specific exceptions."""

from __future__ import annotations


class ProviderError(RuntimeError):
    """Base class for language-model provider failures."""


class ProviderConfigurationError(ProviderError):
    """Raised when a provider cannot be constructed from the given settings."""


class ProviderRequestError(ProviderError):
    """Raised when a content generation call fails."""


class UnsupportedProviderError(ProviderError):
    """Raised when an unknown provider identifier is requested."""

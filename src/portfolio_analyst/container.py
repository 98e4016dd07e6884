"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from portfolio_analyst.config import AppSettings
from portfolio_analyst.domain import ProviderId
from portfolio_analyst.orchestration import AnalysisOrchestrator
from portfolio_analyst.providers import LLMProvider, ProviderRegistry, registry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates lazily constructed services with shared configuration."""

    settings: AppSettings
    provider_registry: ProviderRegistry
    _orchestrators: dict[ProviderId, AnalysisOrchestrator] = field(default_factory=dict)

    def provider(self, provider_id: ProviderId | None = None) -> LLMProvider:
        """Build the requested provider, defaulting to the configured one."""

        resolved = provider_id or self.settings.default_provider
        return self.provider_registry.build(resolved, self.settings)

    def orchestrator(self, provider_id: ProviderId | None = None) -> AnalysisOrchestrator:
        """Return a cached orchestrator bound to the requested provider."""

        resolved = provider_id or self.settings.default_provider
        if resolved not in self._orchestrators:
            self._orchestrators[resolved] = AnalysisOrchestrator(
                self.provider(resolved),
                logger=logger,
            )
        return self._orchestrators[resolved]


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    return ServiceContainer(settings=resolved_settings, provider_registry=registry)


__all__ = ["ServiceContainer", "build_container"]

"""Provider contract consumed by the analysis orchestrator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from portfolio_analyst.domain import ProviderId


@runtime_checkable
class LLMProvider(Protocol):
    """Generates free-form text for a single prompt."""

    provider_id: ProviderId
    model: str

    async def generate_content(self, prompt: str) -> str: ...

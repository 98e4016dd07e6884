"""Analysis orchestration service."""

from __future__ import annotations

import logging
import time

from portfolio_analyst.domain import AIAnalysisResult, AnalysisRequest
from portfolio_analyst.parsing import HeuristicResponseParser, ResponseParser
from portfolio_analyst.providers import LLMProvider

from .exceptions import AnalysisGenerationError
from .prompt_builder import build_analysis_prompt


class AnalysisOrchestrator:
    """Runs prompt rendering, model generation and reply parsing for one request.

    Generation failures are the only fatal path: they surface as
    :class:`AnalysisGenerationError` chained to the provider exception, and no
    partial result is produced. Parsing never fails.
    """

    def __init__(
        self,
        provider: LLMProvider,
        *,
        parser: ResponseParser | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._provider = provider
        self._parser = parser or HeuristicResponseParser()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    async def generate_analysis(self, request: AnalysisRequest) -> AIAnalysisResult:
        prompt = build_analysis_prompt(request)
        self._logger.debug(
            "Requesting analysis of portfolio %r from %s (%d prompt chars)",
            request.portfolio.name,
            self._provider.provider_id,
            len(prompt),
        )

        started = time.perf_counter()
        try:
            text = await self._provider.generate_content(prompt)
        except Exception as exc:
            self._logger.error(
                "Analysis generation failed for portfolio %r via %s",
                request.portfolio.name,
                self._provider.provider_id,
                exc_info=True,
            )
            raise AnalysisGenerationError() from exc
        elapsed = time.perf_counter() - started

        self._logger.info(
            "Generated analysis for portfolio %r via %s in %.2fs (%d reply chars)",
            request.portfolio.name,
            self._provider.provider_id,
            elapsed,
            len(text or ""),
        )
        return self._parser.parse(text or "", request)


__all__ = ["AnalysisOrchestrator"]

"""Total parser turning a model reply into an :class:`AIAnalysisResult`."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from portfolio_analyst.domain import AIAnalysisResult, AnalysisRequest
from portfolio_analyst.domain import defaults

from .market import extract_market_conditions
from .performance import extract_performance_analysis
from .recommendations import extract_recommendations
from .risk import extract_risk_assessment
from .sections import Section, extract_sections

logger = logging.getLogger(__name__)


def parse_analysis_response(text: str | None, request: AnalysisRequest) -> AIAnalysisResult:
    """Parse ``text`` into a fully populated result.

    Never raises on reply content: every field missing from the reply is
    filled with its documented default, and exactly one recommendation is
    produced per quote in ``request``.
    """

    raw = text or ""
    sections = extract_sections(raw)
    return AIAnalysisResult(
        summary=sections.get(Section.EXECUTIVE_SUMMARY) or defaults.DEFAULT_SUMMARY,
        detailed_analysis=(
            sections.get(Section.DETAILED_ANALYSIS) or defaults.DEFAULT_DETAILED_ANALYSIS
        ),
        recommendations=extract_recommendations(raw, request.stock_quotes),
        risk_assessment=extract_risk_assessment(raw),
        market_conditions=extract_market_conditions(raw),
        performance_analysis=extract_performance_analysis(raw),
    )


@runtime_checkable
class ResponseParser(Protocol):
    """Turns raw provider text into the canonical analysis result."""

    def parse(self, text: str, request: AnalysisRequest) -> AIAnalysisResult: ...


class HeuristicResponseParser(ResponseParser):
    """Anchor-header and keyword based parser for free-form replies."""

    def parse(self, text: str, request: AnalysisRequest) -> AIAnalysisResult:
        present = extract_sections(text or "")
        missing = [section.value for section in Section if section not in present]
        if missing:
            logger.debug("Model reply is missing sections: %s", ", ".join(missing))
        return parse_analysis_response(text, request)


__all__ = ["HeuristicResponseParser", "ResponseParser", "parse_analysis_response"]

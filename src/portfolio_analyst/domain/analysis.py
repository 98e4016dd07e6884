"""Structured result produced by the analysis pipeline."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from . import defaults
from .base import DomainModel, Percentage, Score
from .enums import Action, MarketOutlook, MarketTrend, RiskLevel, TimeHorizon, VolatilityLevel


class Recommendation(DomainModel):
    """Per-symbol trade recommendation."""

    symbol: str = Field(min_length=1)
    company_name: str = Field(min_length=1)
    action: Action = defaults.DEFAULT_ACTION
    confidence: Score = defaults.DEFAULT_CONFIDENCE
    target_price: Decimal
    current_price: Decimal
    reasoning: str = Field(default=defaults.DEFAULT_REASONING, min_length=1)
    risk_level: RiskLevel = defaults.DEFAULT_RISK_LEVEL
    time_horizon: TimeHorizon = defaults.DEFAULT_TIME_HORIZON
    allocation_percentage: Percentage | None = None


class RiskAssessment(DomainModel):
    """Portfolio-level risk grades and mitigation advice."""

    overall_risk: RiskLevel = defaults.DEFAULT_OVERALL_RISK
    diversification_risk: Score = defaults.DEFAULT_DIVERSIFICATION_RISK
    concentration_risk: Score = defaults.DEFAULT_CONCENTRATION_RISK
    market_risk: Score = defaults.DEFAULT_MARKET_RISK
    recommendations: tuple[str, ...] = Field(
        default=defaults.DEFAULT_RISK_RECOMMENDATIONS, min_length=1
    )


class MarketConditionsResult(DomainModel):
    """Market regime as read from the model reply."""

    overall: MarketOutlook = defaults.DEFAULT_MARKET_OUTLOOK
    volatility: VolatilityLevel = defaults.DEFAULT_VOLATILITY
    trend: MarketTrend = defaults.DEFAULT_TREND
    sentiment: str = Field(default=defaults.DEFAULT_SENTIMENT, min_length=1)


class PerformanceAnalysis(DomainModel):
    """Narrative performance commentary."""

    return_analysis: str = Field(default=defaults.DEFAULT_RETURN_ANALYSIS, min_length=1)
    benchmark_comparison: str = Field(
        default=defaults.DEFAULT_BENCHMARK_COMPARISON, min_length=1
    )
    risk_adjusted_returns: str = Field(
        default=defaults.DEFAULT_RISK_ADJUSTED_RETURNS, min_length=1
    )


class AIAnalysisResult(DomainModel):
    """Complete, always-populated output of one analysis run."""

    summary: str = Field(default=defaults.DEFAULT_SUMMARY, min_length=1)
    detailed_analysis: str = Field(default=defaults.DEFAULT_DETAILED_ANALYSIS, min_length=1)
    recommendations: tuple[Recommendation, ...] = ()
    risk_assessment: RiskAssessment = Field(default_factory=RiskAssessment)
    market_conditions: MarketConditionsResult = Field(default_factory=MarketConditionsResult)
    performance_analysis: PerformanceAnalysis = Field(default_factory=PerformanceAnalysis)


__all__ = [
    "AIAnalysisResult",
    "MarketConditionsResult",
    "PerformanceAnalysis",
    "Recommendation",
    "RiskAssessment",
]

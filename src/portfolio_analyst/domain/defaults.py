"""Fallback values used when a model reply omits or garbles a field."""

from __future__ import annotations

from .enums import Action, MarketOutlook, MarketTrend, RiskLevel, TimeHorizon, VolatilityLevel

DEFAULT_SUMMARY = "Analysis summary not available"
DEFAULT_DETAILED_ANALYSIS = "Detailed analysis not available"

DEFAULT_ACTION = Action.HOLD
DEFAULT_CONFIDENCE = 75
DEFAULT_REASONING = "Based on current market conditions and technical analysis"
DEFAULT_RISK_LEVEL = RiskLevel.MEDIUM
DEFAULT_TIME_HORIZON = TimeHorizon.MEDIUM

DEFAULT_OVERALL_RISK = RiskLevel.MEDIUM
DEFAULT_DIVERSIFICATION_RISK = 60
DEFAULT_CONCENTRATION_RISK = 40
DEFAULT_MARKET_RISK = 50
DEFAULT_RISK_RECOMMENDATIONS: tuple[str, ...] = (
    "Consider diversifying across sectors",
    "Monitor position sizes",
)

DEFAULT_MARKET_OUTLOOK = MarketOutlook.NEUTRAL
DEFAULT_VOLATILITY = VolatilityLevel.MEDIUM
DEFAULT_TREND = MarketTrend.SIDEWAYS
DEFAULT_SENTIMENT = "Mixed market sentiment with cautious optimism"

DEFAULT_RETURN_ANALYSIS = (
    "Portfolio showing moderate performance relative to investment timeline"
)
DEFAULT_BENCHMARK_COMPARISON = "Performance in line with major market indices"
DEFAULT_RISK_ADJUSTED_RETURNS = (
    "Risk-adjusted returns are acceptable given current market conditions"
)

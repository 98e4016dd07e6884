"""Enumerations used across the portfolio analyst domain layer."""

from __future__ import annotations

from enum import StrEnum


class ProviderId(StrEnum):
    """Identifiers for supported language-model providers."""

    GEMINI = "gemini"
    ANTHROPIC = "anthropic"


class Action(StrEnum):
    """Recommended trade action for a holding."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class RiskLevel(StrEnum):
    """Qualitative risk grade."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeHorizon(StrEnum):
    """Investment horizon attached to a recommendation."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class MarketOutlook(StrEnum):
    """Overall market direction."""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class VolatilityLevel(StrEnum):
    """Market volatility regime."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MarketTrend(StrEnum):
    """Prevailing price trend."""

    UPWARD = "upward"
    DOWNWARD = "downward"
    SIDEWAYS = "sideways"


__all__ = [
    "Action",
    "MarketOutlook",
    "MarketTrend",
    "ProviderId",
    "RiskLevel",
    "TimeHorizon",
    "VolatilityLevel",
]

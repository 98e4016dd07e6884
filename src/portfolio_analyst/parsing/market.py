"""Market-conditions extraction from the MARKET CONDITIONS ANALYSIS section."""

from __future__ import annotations

import re

from portfolio_analyst.domain import (
    MarketConditionsResult,
    MarketOutlook,
    MarketTrend,
    VolatilityLevel,
)
from portfolio_analyst.domain import defaults

from .sections import Section, section_content

_OUTLOOK_LABEL_RE = re.compile(r"\boverall\b[^:\n]*:\s*(bullish|bearish|neutral)\b", re.IGNORECASE)
_OUTLOOK_KEYWORDS: tuple[tuple[MarketOutlook, re.Pattern[str]], ...] = (
    (MarketOutlook.BULLISH, re.compile(r"\b(?:bullish|positive|optimistic)\b", re.IGNORECASE)),
    (MarketOutlook.BEARISH, re.compile(r"\b(?:bearish|negative|pessimistic)\b", re.IGNORECASE)),
)

_VOLATILITY_LABEL_RE = re.compile(
    r"\bvolatility\s*:\s*(low|stable|calm|medium|moderate|high|extreme|elevated)\b",
    re.IGNORECASE,
)
_VOLATILITY_WORDS: dict[str, VolatilityLevel] = {
    "low": VolatilityLevel.LOW,
    "stable": VolatilityLevel.LOW,
    "calm": VolatilityLevel.LOW,
    "medium": VolatilityLevel.MEDIUM,
    "moderate": VolatilityLevel.MEDIUM,
    "high": VolatilityLevel.HIGH,
    "extreme": VolatilityLevel.HIGH,
    "elevated": VolatilityLevel.HIGH,
}
_VOLATILITY_PHRASES: tuple[tuple[VolatilityLevel, re.Pattern[str]], ...] = (
    (VolatilityLevel.LOW, re.compile(r"\b(?:low|stable|calm)\s+volatility\b", re.IGNORECASE)),
    (
        VolatilityLevel.HIGH,
        re.compile(r"\b(?:high|extreme|elevated)\s+volatility\b", re.IGNORECASE),
    ),
)

_TREND_LABEL_RE = re.compile(
    r"\btrend\s*:\s*(upward|rising|ascending|downward|falling|descending|sideways|lateral|flat)\b",
    re.IGNORECASE,
)
_TREND_WORDS: dict[str, MarketTrend] = {
    "upward": MarketTrend.UPWARD,
    "rising": MarketTrend.UPWARD,
    "ascending": MarketTrend.UPWARD,
    "downward": MarketTrend.DOWNWARD,
    "falling": MarketTrend.DOWNWARD,
    "descending": MarketTrend.DOWNWARD,
    "sideways": MarketTrend.SIDEWAYS,
    "lateral": MarketTrend.SIDEWAYS,
    "flat": MarketTrend.SIDEWAYS,
}
_TREND_PHRASES: tuple[tuple[MarketTrend, re.Pattern[str]], ...] = (
    (MarketTrend.UPWARD, re.compile(r"\b(?:upward|rising|ascending)\s+trend\b", re.IGNORECASE)),
    (
        MarketTrend.DOWNWARD,
        re.compile(r"\b(?:downward|falling|descending)\s+trend\b", re.IGNORECASE),
    ),
    (
        MarketTrend.SIDEWAYS,
        re.compile(r"\b(?:sideways|lateral|flat|consolidating)\s+trend\b", re.IGNORECASE),
    ),
)

_SENTIMENT_RE = re.compile(r"\bsentiment\s*:\s*([^.\n]+)", re.IGNORECASE)


def extract_market_outlook(content: str) -> MarketOutlook | None:
    match = _OUTLOOK_LABEL_RE.search(content)
    if match is not None:
        return MarketOutlook(match.group(1).lower())
    for outlook, pattern in _OUTLOOK_KEYWORDS:
        if pattern.search(content):
            return outlook
    return None


def extract_volatility(content: str) -> VolatilityLevel | None:
    match = _VOLATILITY_LABEL_RE.search(content)
    if match is not None:
        return _VOLATILITY_WORDS[match.group(1).lower()]
    for level, pattern in _VOLATILITY_PHRASES:
        if pattern.search(content):
            return level
    return None


def extract_trend(content: str) -> MarketTrend | None:
    match = _TREND_LABEL_RE.search(content)
    if match is not None:
        return _TREND_WORDS[match.group(1).lower()]
    for trend, pattern in _TREND_PHRASES:
        if pattern.search(content):
            return trend
    return None


def extract_sentiment(content: str) -> str | None:
    match = _SENTIMENT_RE.search(content)
    if match is None:
        return None
    sentiment = match.group(1).strip()
    return sentiment or None


def extract_market_conditions(text: str) -> MarketConditionsResult:
    """Read the market regime from the reply's market-conditions section."""

    content = section_content(text, Section.MARKET_CONDITIONS)
    return MarketConditionsResult(
        overall=extract_market_outlook(content) or defaults.DEFAULT_MARKET_OUTLOOK,
        volatility=extract_volatility(content) or defaults.DEFAULT_VOLATILITY,
        trend=extract_trend(content) or defaults.DEFAULT_TREND,
        sentiment=extract_sentiment(content) or defaults.DEFAULT_SENTIMENT,
    )


__all__ = [
    "extract_market_conditions",
    "extract_market_outlook",
    "extract_sentiment",
    "extract_trend",
    "extract_volatility",
]

from __future__ import annotations

import pytest

from conftest import render_reply
from portfolio_analyst.domain import MarketOutlook, MarketTrend, VolatilityLevel
from portfolio_analyst.domain import defaults
from portfolio_analyst.parsing.market import (
    extract_market_conditions,
    extract_market_outlook,
    extract_sentiment,
    extract_trend,
    extract_volatility,
)


def test_well_formed_market_section() -> None:
    market = extract_market_conditions(render_reply())

    assert market.overall is MarketOutlook.BEARISH
    assert market.volatility is VolatilityLevel.HIGH
    assert market.trend is MarketTrend.DOWNWARD
    assert market.sentiment == "Cautious market sentiment due to global uncertainties"


def test_missing_section_uses_defaults() -> None:
    market = extract_market_conditions("The market is bullish with an upward trend.")

    assert market.overall is MarketOutlook.NEUTRAL
    assert market.volatility is VolatilityLevel.MEDIUM
    assert market.trend is MarketTrend.SIDEWAYS
    assert market.sentiment == defaults.DEFAULT_SENTIMENT


def test_labelled_outlook_wins_over_keywords() -> None:
    content = "Despite positive earnings, overall market: neutral"

    assert extract_market_outlook(content) is MarketOutlook.NEUTRAL


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("Investors remain optimistic", MarketOutlook.BULLISH),
        ("A pessimistic tone dominates", MarketOutlook.BEARISH),
        ("Nothing notable", None),
    ],
)
def test_outlook_keywords(content: str, expected: MarketOutlook | None) -> None:
    assert extract_market_outlook(content) is expected


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("Volatility: elevated", VolatilityLevel.HIGH),
        ("We see calm volatility", VolatilityLevel.LOW),
        ("Volatility: moderate", VolatilityLevel.MEDIUM),
        ("volatile sessions", None),
    ],
)
def test_volatility(content: str, expected: VolatilityLevel | None) -> None:
    assert extract_volatility(content) is expected


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("Trend: rising", MarketTrend.UPWARD),
        ("a consolidating trend", MarketTrend.SIDEWAYS),
        ("the falling trend continues", MarketTrend.DOWNWARD),
        ("trending topics", None),
    ],
)
def test_trend(content: str, expected: MarketTrend | None) -> None:
    assert extract_trend(content) is expected


def test_sentiment_stops_at_sentence_end() -> None:
    assert extract_sentiment("Sentiment: risk-on mood. Other text") == "risk-on mood"
    assert extract_sentiment("sentiment is upbeat") is None


def test_market_section_alias_is_read() -> None:
    text = "MARKET CONDITIONS:\nOverall: bullish\nVolatility: low\nTrend: sideways"

    market = extract_market_conditions(text)

    assert market.overall is MarketOutlook.BULLISH
    assert market.volatility is VolatilityLevel.LOW
    assert market.trend is MarketTrend.SIDEWAYS

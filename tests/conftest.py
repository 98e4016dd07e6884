from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from portfolio_analyst.domain import (  # noqa: E402
    AnalysisRequest,
    Holding,
    MacdValues,
    MarketConditionsInput,
    MarketOutlook,
    MarketTrend,
    PerformanceMetrics,
    PortfolioSnapshot,
    StockQuote,
    TechnicalIndicators,
    UserProfile,
    VolatilityLevel,
)


def make_request(*quotes: StockQuote, **overrides: object) -> AnalysisRequest:
    """Build a minimal request around the given quotes."""

    fields: dict[str, object] = {
        "portfolio": PortfolioSnapshot(name="Test Portfolio"),
        "stock_quotes": quotes,
    }
    fields.update(overrides)
    return AnalysisRequest(**fields)  # type: ignore[arg-type]


@pytest.fixture
def reliance_quote() -> StockQuote:
    return StockQuote(
        symbol="RELIANCE.NSE",
        company_name="Reliance Industries Limited",
        price=Decimal("2750.50"),
        change=Decimal("25.30"),
        change_percent=0.93,
        volume=1_250_000,
        market_cap=Decimal("1850000000000"),
        pe_ratio=28.5,
        dividend_yield=0.35,
        high_52_week=Decimal("3000.00"),
        low_52_week=Decimal("2200.00"),
        average_volume=1_500_000,
    )


@pytest.fixture
def reliance_indicators() -> TechnicalIndicators:
    return TechnicalIndicators(
        symbol="RELIANCE.NSE",
        rsi=65.5,
        macd=MacdValues(macd=15.2, signal=12.8, histogram=2.4),
        sma20=2680.50,
        sma50=2620.30,
        sma200=2580.75,
        ema12=2720.80,
        ema26=2650.40,
        volume=1_250_000,
        average_volume=1_500_000,
        price_change_24h=25.30,
        price_change_percentage_24h=0.93,
    )


@pytest.fixture
def analysis_request(
    reliance_quote: StockQuote, reliance_indicators: TechnicalIndicators
) -> AnalysisRequest:
    portfolio = PortfolioSnapshot(
        name="Test Portfolio",
        total_value=Decimal("300000"),
        total_cost=Decimal("270000"),
        total_gain_loss=Decimal("30000"),
        total_gain_loss_percentage=11.11,
        cash=Decimal("25000"),
        holdings=(
            Holding(
                symbol="RELIANCE.NSE",
                company_name="Reliance Industries",
                shares=Decimal("100"),
                average_cost=Decimal("2500"),
                current_price=Decimal("2750"),
                market_value=Decimal("275000"),
                gain_loss=Decimal("25000"),
                gain_loss_percentage=10.0,
            ),
        ),
        performance_metrics=PerformanceMetrics(yearly_return=25.0, sharpe_ratio=1.8),
    )
    return AnalysisRequest(
        portfolio=portfolio,
        user=UserProfile(
            name="Test Investor",
            role="investor",
            risk_tolerance="medium",
            investment_goals=("growth", "income"),
        ),
        stock_quotes=(reliance_quote,),
        technical_indicators=(reliance_indicators,),
        market_conditions=MarketConditionsInput(
            overall=MarketOutlook.BULLISH,
            volatility=VolatilityLevel.MEDIUM,
            trend=MarketTrend.UPWARD,
        ),
    )


WELL_FORMED_SECTIONS: dict[str, str] = {
    "EXECUTIVE SUMMARY:": (
        "The portfolio shows strong performance with a 25% gain and good diversification."
    ),
    "DETAILED ANALYSIS:": (
        "The portfolio demonstrates solid fundamentals with Reliance Industries as a core holding."
    ),
    "INDIVIDUAL STOCK RECOMMENDATIONS:": (
        "RELIANCE.NSE: Buy - Confidence: 88% - Reason: refining margins are expanding. "
        "Moderate risk, long-term hold candidate.\n"
        "TCS.NSE: Sell - Confidence: 62% - because valuation looks stretched. "
        "High risk over the short term."
    ),
    "RISK ASSESSMENT:": (
        "Overall Risk: High\n"
        "Diversification Risk: 45%\n"
        "Concentration Risk: 70%\n"
        "Market Risk: 35%\n"
        "- Trim the largest position below 20% of assets\n"
        "- Add exposure to defensive sectors"
    ),
    "MARKET CONDITIONS ANALYSIS:": (
        "Overall: Bearish\n"
        "Volatility: High\n"
        "Trend: Downward\n"
        "Sentiment: Cautious market sentiment due to global uncertainties."
    ),
    "PERFORMANCE ANALYSIS:": (
        "Return analysis: the portfolio returned 25% over the year.\n"
        "It outperformed its benchmark, the Nifty 50, by 5%.\n"
        "Risk-adjusted returns are excellent with a Sharpe ratio of 1.8."
    ),
}


def render_reply(order: list[str] | None = None) -> str:
    headers = order or list(WELL_FORMED_SECTIONS)
    return "\n\n".join(f"{header}\n{WELL_FORMED_SECTIONS[header]}" for header in headers)

"""Input models describing the context handed to an analysis run."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from .base import DomainModel
from .enums import MarketOutlook, MarketTrend, VolatilityLevel


class Holding(DomainModel):
    """A single position held in the portfolio."""

    symbol: str = Field(min_length=1)
    company_name: str = ""
    shares: Decimal = Decimal("0")
    average_cost: Decimal = Decimal("0")
    current_price: Decimal = Decimal("0")
    market_value: Decimal = Decimal("0")
    gain_loss: Decimal = Decimal("0")
    gain_loss_percentage: float = 0.0


class PerformanceMetrics(DomainModel):
    """Trailing return and risk statistics for a portfolio."""

    daily_return: float | None = None
    weekly_return: float | None = None
    monthly_return: float | None = None
    yearly_return: float | None = None
    volatility: float | None = None
    sharpe_ratio: float | None = None


class PortfolioSnapshot(DomainModel):
    """Point-in-time totals and holdings of the analysed portfolio."""

    name: str
    total_value: Decimal = Decimal("0")
    total_cost: Decimal = Decimal("0")
    total_gain_loss: Decimal = Decimal("0")
    total_gain_loss_percentage: float = 0.0
    cash: Decimal = Decimal("0")
    holdings: tuple[Holding, ...] = ()
    performance_metrics: PerformanceMetrics | None = None


class UserProfile(DomainModel):
    """Investor profile used to tailor the analysis."""

    name: str = ""
    role: str = "investor"
    risk_tolerance: str = "medium"
    investment_goals: tuple[str, ...] = ()


class StockQuote(DomainModel):
    """Latest market quote for a requested symbol."""

    symbol: str = Field(min_length=1)
    price: Decimal
    company_name: str | None = None
    change: Decimal | None = None
    change_percent: float | None = None
    volume: int | None = None
    market_cap: Decimal | None = None
    pe_ratio: float | None = None
    dividend_yield: float | None = None
    high_52_week: Decimal | None = None
    low_52_week: Decimal | None = None
    average_volume: int | None = None


class MacdValues(DomainModel):
    macd: float
    signal: float
    histogram: float


class TechnicalIndicators(DomainModel):
    """Precomputed technical indicator readings for a symbol."""

    symbol: str = Field(min_length=1)
    rsi: float
    macd: MacdValues
    sma20: float
    sma50: float
    sma200: float
    ema12: float
    ema26: float
    volume: int = 0
    average_volume: int = 0
    price_change_24h: float = 0.0
    price_change_percentage_24h: float = 0.0


class MarketConditionsInput(DomainModel):
    """Caller-supplied view of the current market regime."""

    overall: MarketOutlook
    volatility: VolatilityLevel
    trend: MarketTrend


class AnalysisRequest(DomainModel):
    """Everything the pipeline needs to analyse one portfolio."""

    portfolio: PortfolioSnapshot
    user: UserProfile = Field(default_factory=UserProfile)
    stock_quotes: tuple[StockQuote, ...] = ()
    technical_indicators: tuple[TechnicalIndicators, ...] = ()
    market_conditions: MarketConditionsInput | None = None

    def quote_for(self, symbol: str) -> StockQuote | None:
        """Return the quote matching ``symbol`` if one was supplied."""

        for quote in self.stock_quotes:
            if quote.symbol == symbol:
                return quote
        return None


__all__ = [
    "AnalysisRequest",
    "Holding",
    "MacdValues",
    "MarketConditionsInput",
    "PerformanceMetrics",
    "PortfolioSnapshot",
    "StockQuote",
    "TechnicalIndicators",
    "UserProfile",
]

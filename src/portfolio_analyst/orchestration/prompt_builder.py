"""Utilities for rendering an analysis request into a provider-ready prompt."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from portfolio_analyst.domain import (
    AnalysisRequest,
    Holding,
    MarketConditionsInput,
    PerformanceMetrics,
    PortfolioSnapshot,
    StockQuote,
    TechnicalIndicators,
    UserProfile,
)
from portfolio_analyst.parsing.sections import Section

NOT_PROVIDED = "Not provided"

PREAMBLE = (
    "You are a professional financial analyst providing comprehensive portfolio analysis. "
    "Analyze the following portfolio and provide detailed recommendations."
)

REQUIREMENTS_BLOCK = (
    "ANALYSIS REQUIREMENTS:\n"
    "1. Provide a comprehensive analysis considering the user's risk tolerance and "
    "investment goals\n"
    "2. Generate specific buy/sell/hold recommendations for each holding\n"
    "3. Assess portfolio diversification and concentration risks\n"
    "4. Evaluate performance against market benchmarks\n"
    "5. Consider technical indicators in your recommendations\n"
    "6. Provide risk-adjusted return analysis\n"
    "7. Suggest portfolio rebalancing if needed"
)

_SECTION_GUIDANCE: dict[Section, str] = {
    Section.EXECUTIVE_SUMMARY: (
        "[Provide a 2-3 paragraph summary of the portfolio's current state and key "
        "recommendations]"
    ),
    Section.DETAILED_ANALYSIS: (
        "[Provide in-depth analysis of portfolio performance, risk factors, and market "
        "positioning]"
    ),
    Section.STOCK_RECOMMENDATIONS: (
        "[For each holding, start a new line with the ticker symbol followed by a colon, then "
        "give the action (buy/sell/hold), confidence level (0-100), reasoning, risk level "
        "(low/medium/high risk) and time horizon (short/medium/long term)]"
    ),
    Section.RISK_ASSESSMENT: (
        "[State the overall risk (low/medium/high), diversification risk, concentration risk "
        "and market risk as scores from 0-100, then list specific recommendations as bullet "
        "points]"
    ),
    Section.MARKET_CONDITIONS: (
        "[Give the overall market (bullish/bearish/neutral), volatility (low/medium/high), "
        "trend (upward/downward/sideways) and a 'Sentiment:' line describing the impact on "
        "the portfolio]"
    ),
    Section.PERFORMANCE_ANALYSIS: (
        "[Analyze returns, benchmark comparison, and risk-adjusted performance metrics]"
    ),
}


def _response_format_block() -> str:
    lines = [
        "RESPONSE FORMAT:",
        "Structure your response as a detailed financial analysis report using exactly these "
        "section headers, copied verbatim (uppercase, followed by a colon). The sections may "
        "appear in any order:",
    ]
    for section in Section:
        lines.extend(["", section.header, _SECTION_GUIDANCE[section]])
    lines.extend(
        [
            "",
            "Please provide specific, actionable recommendations based on the data provided. "
            "Consider both fundamental and technical analysis in your recommendations.",
        ]
    )
    return "\n".join(lines)


def _fmt_money(value: Decimal | None) -> str:
    if value is None:
        return "n/a"
    return f"${value:,.2f}"


def _fmt_number(value: float | Decimal | None, *, digits: int = 2, suffix: str = "") -> str:
    if value is None:
        return "n/a"
    return f"{value:,.{digits}f}{suffix}"


def interpret_rsi(rsi: float) -> str:
    """Qualitative label appended to an RSI reading."""

    if rsi > 70:
        return "(Overbought)"
    if rsi < 30:
        return "(Oversold)"
    return "(Neutral)"


def portfolio_weight(market_value: Decimal, total_value: Decimal) -> Decimal | None:
    """Share of the portfolio held in a position, in percent."""

    if total_value == 0:
        return None
    return market_value / total_value * 100


def _user_profile_block(user: UserProfile) -> str:
    goals = ", ".join(user.investment_goals) if user.investment_goals else NOT_PROVIDED
    return "\n".join(
        [
            "USER PROFILE:",
            f"Name: {user.name or NOT_PROVIDED}",
            f"Role: {user.role}",
            f"Risk Tolerance: {user.risk_tolerance}",
            f"Investment Goals: {goals}",
        ]
    )


def _performance_lines(metrics: PerformanceMetrics | None) -> list[str]:
    if metrics is None:
        return []
    lines = ["Performance Metrics:"]
    for label, value, suffix in (
        ("Daily Return", metrics.daily_return, "%"),
        ("Weekly Return", metrics.weekly_return, "%"),
        ("Monthly Return", metrics.monthly_return, "%"),
        ("Yearly Return", metrics.yearly_return, "%"),
        ("Volatility", metrics.volatility, "%"),
        ("Sharpe Ratio", metrics.sharpe_ratio, ""),
    ):
        if value is not None:
            lines.append(f"- {label}: {_fmt_number(value, suffix=suffix)}")
    return lines if len(lines) > 1 else []


def _format_holding(
    index: int,
    holding: Holding,
    portfolio: PortfolioSnapshot,
    quote: StockQuote | None,
) -> str:
    weight = portfolio_weight(holding.market_value, portfolio.total_value)
    title = f"{index}. {holding.symbol}"
    if holding.company_name:
        title += f" - {holding.company_name}"
    lines = [
        title,
        f"   - Shares: {holding.shares:,}",
        f"   - Average Cost: {_fmt_money(holding.average_cost)}",
        f"   - Current Price: {_fmt_money(holding.current_price)}",
        f"   - Market Value: {_fmt_money(holding.market_value)}",
        f"   - Gain/Loss: {_fmt_money(holding.gain_loss)} "
        f"({_fmt_number(holding.gain_loss_percentage, suffix='%')})",
        f"   - Portfolio Weight: {_fmt_number(weight, suffix='%')}",
    ]
    if quote is not None:
        if quote.low_52_week is not None and quote.high_52_week is not None:
            lines.append(
                f"   - 52-Week Range: {_fmt_money(quote.low_52_week)} - "
                f"{_fmt_money(quote.high_52_week)}"
            )
        if quote.pe_ratio is not None:
            lines.append(f"   - P/E Ratio: {_fmt_number(quote.pe_ratio)}")
    return "\n".join(lines)


def _portfolio_summary_block(
    portfolio: PortfolioSnapshot, quotes: Iterable[StockQuote]
) -> str:
    quotes_by_symbol = {quote.symbol: quote for quote in quotes}
    lines = [
        "PORTFOLIO SUMMARY:",
        f"Portfolio Name: {portfolio.name}",
        f"Total Value: {_fmt_money(portfolio.total_value)}",
        f"Total Cost: {_fmt_money(portfolio.total_cost)}",
        f"Total Gain/Loss: {_fmt_money(portfolio.total_gain_loss)} "
        f"({_fmt_number(portfolio.total_gain_loss_percentage, suffix='%')})",
        f"Cash Position: {_fmt_money(portfolio.cash)}",
        f"Number of Holdings: {len(portfolio.holdings)}",
    ]
    lines.extend(_performance_lines(portfolio.performance_metrics))
    lines.extend(["", "HOLDINGS:"])
    if not portfolio.holdings:
        lines.append("- No holdings.")
    for index, holding in enumerate(portfolio.holdings, start=1):
        lines.append(
            _format_holding(index, holding, portfolio, quotes_by_symbol.get(holding.symbol))
        )
    return "\n".join(lines)


def _format_indicator(indicator: TechnicalIndicators) -> str:
    if indicator.average_volume:
        volume_ratio = _fmt_number(
            indicator.volume / indicator.average_volume * 100, digits=0, suffix="%"
        )
    else:
        volume_ratio = "n/a"
    macd = indicator.macd
    return "\n".join(
        [
            f"{indicator.symbol}:",
            f"- RSI: {indicator.rsi:.2f} {interpret_rsi(indicator.rsi)}",
            f"- MACD: {macd.macd:.2f} (Signal: {macd.signal:.2f}, "
            f"Histogram: {macd.histogram:.2f})",
            f"- SMA 20: ${indicator.sma20:,.2f}",
            f"- SMA 50: ${indicator.sma50:,.2f}",
            f"- SMA 200: ${indicator.sma200:,.2f}",
            f"- EMA 12: ${indicator.ema12:,.2f}",
            f"- EMA 26: ${indicator.ema26:,.2f}",
            f"- Volume vs Average: {volume_ratio}",
            f"- 24h Change: {indicator.price_change_percentage_24h:.2f}%",
        ]
    )


def _technical_block(indicators: Iterable[TechnicalIndicators]) -> str:
    entries = [_format_indicator(indicator) for indicator in indicators]
    if not entries:
        return "TECHNICAL INDICATORS:\n" + NOT_PROVIDED
    return "TECHNICAL INDICATORS:\n" + "\n\n".join(entries)


def _market_conditions_block(conditions: MarketConditionsInput | None) -> str:
    if conditions is None:
        return "MARKET CONDITIONS:\n" + NOT_PROVIDED
    return "\n".join(
        [
            "MARKET CONDITIONS:",
            f"- Overall Market: {conditions.overall.value}",
            f"- Volatility: {conditions.volatility.value}",
            f"- Trend: {conditions.trend.value}",
        ]
    )


def build_analysis_prompt(request: AnalysisRequest) -> str:
    """Compose the full analysis prompt for a request."""

    prompt_sections = [
        PREAMBLE,
        _user_profile_block(request.user),
        _portfolio_summary_block(request.portfolio, request.stock_quotes),
        _technical_block(request.technical_indicators),
        _market_conditions_block(request.market_conditions),
        REQUIREMENTS_BLOCK,
        _response_format_block(),
    ]
    return "\n\n".join(prompt_sections) + "\n"


__all__ = ["build_analysis_prompt", "interpret_rsi", "portfolio_weight"]

"""Per-symbol recommendation extraction from free-form model replies."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from decimal import Decimal

from portfolio_analyst.domain import (
    Action,
    Recommendation,
    RiskLevel,
    StockQuote,
    TimeHorizon,
    clamp_digits,
)
from portfolio_analyst.domain import defaults

from .sections import Section, extract_sections, header_starts

_ACTION_PATTERNS: tuple[tuple[Action, re.Pattern[str]], ...] = (
    (Action.BUY, re.compile(r"\b(?:buy|purchase|acquire)\b", re.IGNORECASE)),
    (Action.SELL, re.compile(r"\b(?:sell|dispose|exit)\b", re.IGNORECASE)),
    (Action.HOLD, re.compile(r"\b(?:hold|maintain|keep)\b", re.IGNORECASE)),
)

_CONFIDENCE_RE = re.compile(r"\bconfidence\b[^\d\n.]*([0-9]+)", re.IGNORECASE)
_REASONING_RE = re.compile(
    r"\b(?:reason(?:ing|s)?|rationale|because)\b[\s:\-]*((?:[^.]|\.(?=\d))+)", re.IGNORECASE
)
_ALLOCATION_RE = re.compile(r"\ballocation\b[^\d\n]*?(\d+(?:\.\d+)?)", re.IGNORECASE)

_RISK_PHRASES: tuple[tuple[RiskLevel, re.Pattern[str]], ...] = (
    (RiskLevel.LOW, re.compile(r"\b(?:low|minimal|conservative)\s+risk\b", re.IGNORECASE)),
    (RiskLevel.HIGH, re.compile(r"\b(?:high|significant|aggressive)\s+risk\b", re.IGNORECASE)),
    (RiskLevel.MEDIUM, re.compile(r"\b(?:medium|moderate|balanced)\s+risk\b", re.IGNORECASE)),
)
_RISK_LABEL_RE = re.compile(
    r"\brisk(?:\s+level)?\s*[:\-]\s*"
    r"(low|minimal|conservative|medium|moderate|balanced|high|significant|aggressive)\b",
    re.IGNORECASE,
)
_RISK_WORDS: dict[str, RiskLevel] = {
    "low": RiskLevel.LOW,
    "minimal": RiskLevel.LOW,
    "conservative": RiskLevel.LOW,
    "medium": RiskLevel.MEDIUM,
    "moderate": RiskLevel.MEDIUM,
    "balanced": RiskLevel.MEDIUM,
    "high": RiskLevel.HIGH,
    "significant": RiskLevel.HIGH,
    "aggressive": RiskLevel.HIGH,
}

_HORIZON_PHRASES: tuple[tuple[TimeHorizon, re.Pattern[str]], ...] = (
    (TimeHorizon.SHORT, re.compile(r"\b(?:short|immediate|near)[\s-]?term\b", re.IGNORECASE)),
    (TimeHorizon.LONG, re.compile(r"\b(?:long|extended)[\s-]?term\b", re.IGNORECASE)),
    (TimeHorizon.MEDIUM, re.compile(r"\b(?:medium|mid)[\s-]?term\b", re.IGNORECASE)),
)
_HORIZON_LABEL_RE = re.compile(
    r"\b(?:time\s+)?horizon\s*[:\-]\s*(short|medium|mid|long)\b", re.IGNORECASE
)
_HORIZON_WORDS: dict[str, TimeHorizon] = {
    "short": TimeHorizon.SHORT,
    "medium": TimeHorizon.MEDIUM,
    "mid": TimeHorizon.MEDIUM,
    "long": TimeHorizon.LONG,
}

_TARGET_MULTIPLIERS: dict[Action, Decimal] = {
    Action.BUY: Decimal("1.15"),
    Action.SELL: Decimal("0.95"),
}
_DEFAULT_TARGET_MULTIPLIER = Decimal("1.05")


def _mention_re(symbol: str) -> re.Pattern[str]:
    return re.compile(re.escape(symbol), re.IGNORECASE)


def extract_stock_span(text: str, symbol: str, other_symbols: Iterable[str] = ()) -> str:
    """Return the slice of ``text`` that talks about ``symbol``.

    The stock recommendations section is searched first; when it does not
    mention the symbol the whole reply is used. The span starts right after the
    first mention and stops at the next header or at the next mention of any
    other requested symbol. Symbols are matched as plain case-insensitive
    substrings, so a symbol embedded in another ("TCS" in "TCS.NSE") is not
    told apart.
    """

    region = text
    recommendations_body = extract_sections(text).get(Section.STOCK_RECOMMENDATIONS)
    if recommendations_body and _mention_re(symbol).search(recommendations_body):
        region = recommendations_body

    mention = _mention_re(symbol).search(region)
    if mention is None:
        return ""

    start = mention.end()
    end = len(region)
    for offset in header_starts(region):
        if offset >= start:
            end = offset
            break
    for other in other_symbols:
        if other.casefold() == symbol.casefold():
            continue
        other_mention = _mention_re(other).search(region, start, end)
        if other_mention is not None:
            end = other_mention.start()
    return region[start:end]


def extract_action(span: str) -> Action | None:
    for action, pattern in _ACTION_PATTERNS:
        if pattern.search(span):
            return action
    return None


def extract_confidence(span: str) -> int | None:
    match = _CONFIDENCE_RE.search(span)
    if match is None:
        return None
    return clamp_digits(match.group(1))


def extract_reasoning(span: str) -> str | None:
    match = _REASONING_RE.search(span)
    if match is None:
        return None
    reasoning = match.group(1).strip()
    return reasoning or None


def extract_risk_level(span: str) -> RiskLevel | None:
    for level, pattern in _RISK_PHRASES:
        if pattern.search(span):
            return level
    match = _RISK_LABEL_RE.search(span)
    if match is not None:
        return _RISK_WORDS[match.group(1).lower()]
    return None


def extract_time_horizon(span: str) -> TimeHorizon | None:
    for horizon, pattern in _HORIZON_PHRASES:
        if pattern.search(span):
            return horizon
    match = _HORIZON_LABEL_RE.search(span)
    if match is not None:
        return _HORIZON_WORDS[match.group(1).lower()]
    return None


def extract_allocation(span: str) -> float | None:
    match = _ALLOCATION_RE.search(span)
    if match is None:
        return None
    return max(0.0, min(100.0, float(match.group(1))))


def calculate_target_price(current_price: Decimal, action: Action) -> Decimal:
    """Derive the target price from the action alone."""

    return current_price * _TARGET_MULTIPLIERS.get(action, _DEFAULT_TARGET_MULTIPLIER)


def build_recommendation(
    quote: StockQuote,
    text: str,
    other_symbols: Iterable[str] = (),
) -> Recommendation:
    span = extract_stock_span(text, quote.symbol, other_symbols)
    action = extract_action(span) or defaults.DEFAULT_ACTION
    confidence = extract_confidence(span)
    return Recommendation(
        symbol=quote.symbol,
        company_name=quote.company_name or quote.symbol,
        action=action,
        confidence=defaults.DEFAULT_CONFIDENCE if confidence is None else confidence,
        target_price=calculate_target_price(quote.price, action),
        current_price=quote.price,
        reasoning=extract_reasoning(span) or defaults.DEFAULT_REASONING,
        risk_level=extract_risk_level(span) or defaults.DEFAULT_RISK_LEVEL,
        time_horizon=extract_time_horizon(span) or defaults.DEFAULT_TIME_HORIZON,
        allocation_percentage=extract_allocation(span),
    )


def extract_recommendations(
    text: str, quotes: Sequence[StockQuote]
) -> tuple[Recommendation, ...]:
    """Build exactly one recommendation per quote, in quote order."""

    symbols = [quote.symbol for quote in quotes]
    return tuple(build_recommendation(quote, text, symbols) for quote in quotes)


__all__ = [
    "build_recommendation",
    "calculate_target_price",
    "extract_action",
    "extract_allocation",
    "extract_confidence",
    "extract_reasoning",
    "extract_recommendations",
    "extract_risk_level",
    "extract_stock_span",
    "extract_time_horizon",
]

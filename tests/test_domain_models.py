from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from portfolio_analyst.domain import (
    AIAnalysisResult,
    AnalysisRequest,
    PortfolioSnapshot,
    Recommendation,
    RiskAssessment,
    StockQuote,
    clamp_digits,
    clamp_score,
)


def test_result_defaults_are_fully_populated() -> None:
    result = AIAnalysisResult()

    assert result.summary == "Analysis summary not available"
    assert result.recommendations == ()
    assert result.risk_assessment.diversification_risk == 60
    assert result.risk_assessment.concentration_risk == 40
    assert result.risk_assessment.market_risk == 50
    assert len(result.risk_assessment.recommendations) == 2
    assert result.market_conditions.sentiment


def test_scores_reject_out_of_range_values() -> None:
    with pytest.raises(ValidationError):
        RiskAssessment(market_risk=101)
    with pytest.raises(ValidationError):
        Recommendation(
            symbol="ABC",
            company_name="ABC",
            confidence=-1,
            target_price=Decimal("1"),
            current_price=Decimal("1"),
        )


def test_models_are_immutable_and_strict() -> None:
    quote = StockQuote(symbol="ABC", price=Decimal("10"))

    with pytest.raises(ValidationError):
        quote.price = Decimal("11")  # type: ignore[misc]
    with pytest.raises(ValidationError):
        StockQuote(symbol="ABC", price=Decimal("10"), exchange="NSE")  # type: ignore[call-arg]


def test_risk_recommendations_cannot_be_empty() -> None:
    with pytest.raises(ValidationError):
        RiskAssessment(recommendations=())


def test_request_quote_lookup() -> None:
    quote = StockQuote(symbol="ABC", price=Decimal("10"))
    request = AnalysisRequest(portfolio=PortfolioSnapshot(name="P"), stock_quotes=(quote,))

    assert request.quote_for("ABC") is quote
    assert request.quote_for("XYZ") is None


def test_request_round_trips_through_json() -> None:
    request = AnalysisRequest(
        portfolio=PortfolioSnapshot(name="P", total_value=Decimal("1234.56")),
        stock_quotes=(StockQuote(symbol="ABC", price=Decimal("10.25")),),
    )

    assert AnalysisRequest.model_validate_json(request.model_dump_json()) == request


@pytest.mark.parametrize(("raw", "expected"), [(-20, 0), (0, 0), (55, 55), (100, 100), (999, 100)])
def test_clamp_score(raw: int, expected: int) -> None:
    assert clamp_score(raw) == expected


@pytest.mark.parametrize(
    ("digits", "expected"),
    [("0", 0), ("000", 0), ("042", 42), ("101", 100), ("0000099", 99), ("9" * 5000, 100)],
)
def test_clamp_digits(digits: str, expected: int) -> None:
    assert clamp_digits(digits) == expected

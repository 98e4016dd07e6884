"""Risk assessment extraction from the RISK ASSESSMENT section."""

from __future__ import annotations

import re

from portfolio_analyst.domain import RiskAssessment, RiskLevel, clamp_digits
from portfolio_analyst.domain import defaults

from .sections import Section, section_content

_LEVEL_WORDS: dict[str, RiskLevel] = {
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

_OVERALL_RE = re.compile(
    r"\boverall\b[^.\n]*?\b(" + "|".join(_LEVEL_WORDS) + r")\b",
    re.IGNORECASE,
)
_BULLET_RE = re.compile(r"^[-•*]\s*")
_MIN_RECOMMENDATION_LENGTH = 10


def _score_after(content: str, keyword: str) -> int | None:
    """Return the first integer following ``keyword`` on the same line.

    A bare number opening the following line also counts ("Market Risk:\\n35").
    """

    match = re.search(rf"\b{keyword}[^\d\n]*(?:\n[ \t]*)?([0-9]+)", content, re.IGNORECASE)
    if match is None:
        return None
    return clamp_digits(match.group(1))


def extract_overall_risk(content: str) -> RiskLevel | None:
    match = _OVERALL_RE.search(content)
    if match is None:
        return None
    return _LEVEL_WORDS[match.group(1).lower()]


def extract_risk_recommendations(content: str) -> tuple[str, ...]:
    """Collect bullet or "recommend" lines, falling back to canned advice."""

    recommendations: list[str] = []
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not (_BULLET_RE.match(line) or "recommend" in line.lower()):
            continue
        cleaned = _BULLET_RE.sub("", line, count=1).strip()
        if len(cleaned) > _MIN_RECOMMENDATION_LENGTH:
            recommendations.append(cleaned)
    return tuple(recommendations) or defaults.DEFAULT_RISK_RECOMMENDATIONS


def extract_risk_assessment(text: str) -> RiskAssessment:
    """Read risk grades from the reply's RISK ASSESSMENT section."""

    content = section_content(text, Section.RISK_ASSESSMENT)
    diversification = _score_after(content, "diversification")
    concentration = _score_after(content, "concentration")
    market = _score_after(content, "market")
    return RiskAssessment(
        overall_risk=extract_overall_risk(content) or defaults.DEFAULT_OVERALL_RISK,
        diversification_risk=(
            defaults.DEFAULT_DIVERSIFICATION_RISK if diversification is None else diversification
        ),
        concentration_risk=(
            defaults.DEFAULT_CONCENTRATION_RISK if concentration is None else concentration
        ),
        market_risk=defaults.DEFAULT_MARKET_RISK if market is None else market,
        recommendations=extract_risk_recommendations(content),
    )


__all__ = [
    "extract_overall_risk",
    "extract_risk_assessment",
    "extract_risk_recommendations",
]

"""Performance commentary extraction from the PERFORMANCE ANALYSIS section."""

from __future__ import annotations

import re

from portfolio_analyst.domain import PerformanceAnalysis
from portfolio_analyst.domain import defaults

from .sections import Section, section_content

# Any character that does not end a sentence; a period followed by a digit is a decimal point.
_SENTENCE_CHAR = r"(?:[^.!?\n]|\.(?=\d))"


def extract_sentence(content: str, keyword: str) -> str | None:
    """Return the first sentence or line of ``content`` containing ``keyword``."""

    pattern = rf"{_SENTENCE_CHAR}*{keyword}{_SENTENCE_CHAR}*[.!?]?"
    match = re.search(pattern, content, re.IGNORECASE)
    if match is None:
        return None
    sentence = match.group(0).strip()
    return sentence or None


def extract_performance_analysis(text: str) -> PerformanceAnalysis:
    content = section_content(text, Section.PERFORMANCE_ANALYSIS)
    return PerformanceAnalysis(
        return_analysis=extract_sentence(content, r"\breturn")
        or defaults.DEFAULT_RETURN_ANALYSIS,
        benchmark_comparison=extract_sentence(content, r"\bbenchmark")
        or defaults.DEFAULT_BENCHMARK_COMPARISON,
        risk_adjusted_returns=extract_sentence(content, r"\brisk[\s-]adjusted")
        or defaults.DEFAULT_RISK_ADJUSTED_RETURNS,
    )


__all__ = ["extract_performance_analysis", "extract_sentence"]

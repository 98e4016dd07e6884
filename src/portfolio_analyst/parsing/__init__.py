"""Extraction pipeline for free-form model replies."""

from .market import extract_market_conditions
from .performance import extract_performance_analysis
from .recommendations import calculate_target_price, extract_recommendations, extract_stock_span
from .response_parser import HeuristicResponseParser, ResponseParser, parse_analysis_response
from .risk import extract_risk_assessment
from .sections import ANCHOR_HEADERS, Section, extract_sections

__all__ = [
    "ANCHOR_HEADERS",
    "HeuristicResponseParser",
    "ResponseParser",
    "Section",
    "calculate_target_price",
    "extract_market_conditions",
    "extract_performance_analysis",
    "extract_recommendations",
    "extract_risk_assessment",
    "extract_sections",
    "extract_stock_span",
    "parse_analysis_response",
]

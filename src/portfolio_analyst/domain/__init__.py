"""Domain models for the portfolio analysis pipeline."""

from .analysis import (
    AIAnalysisResult,
    MarketConditionsResult,
    PerformanceAnalysis,
    Recommendation,
    RiskAssessment,
)
from .base import DomainModel, Percentage, Score, clamp_digits, clamp_score
from .enums import (
    Action,
    MarketOutlook,
    MarketTrend,
    ProviderId,
    RiskLevel,
    TimeHorizon,
    VolatilityLevel,
)
from .request import (
    AnalysisRequest,
    Holding,
    MacdValues,
    MarketConditionsInput,
    PerformanceMetrics,
    PortfolioSnapshot,
    StockQuote,
    TechnicalIndicators,
    UserProfile,
)

__all__ = [
    "AIAnalysisResult",
    "Action",
    "AnalysisRequest",
    "DomainModel",
    "Holding",
    "MacdValues",
    "MarketConditionsInput",
    "MarketConditionsResult",
    "MarketOutlook",
    "MarketTrend",
    "Percentage",
    "PerformanceAnalysis",
    "PerformanceMetrics",
    "PortfolioSnapshot",
    "ProviderId",
    "Recommendation",
    "RiskAssessment",
    "RiskLevel",
    "Score",
    "StockQuote",
    "TechnicalIndicators",
    "TimeHorizon",
    "UserProfile",
    "VolatilityLevel",
    "clamp_digits",
    "clamp_score",
]

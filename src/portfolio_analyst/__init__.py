"""AI portfolio analysis pipeline: prompt rendering, generation and reply parsing."""

from .domain import AIAnalysisResult, AnalysisRequest
from .orchestration import AnalysisGenerationError, AnalysisOrchestrator, build_analysis_prompt
from .parsing import parse_analysis_response

__all__ = [
    "AIAnalysisResult",
    "AnalysisGenerationError",
    "AnalysisOrchestrator",
    "AnalysisRequest",
    "build_analysis_prompt",
    "parse_analysis_response",
]

"""Orchestration layer exports."""

from .analysis_orchestrator import AnalysisOrchestrator
from .exceptions import AnalysisError, AnalysisGenerationError
from .prompt_builder import build_analysis_prompt

__all__ = [
    "AnalysisError",
    "AnalysisGenerationError",
    "AnalysisOrchestrator",
    "build_analysis_prompt",
]

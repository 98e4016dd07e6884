"""Exceptions raised by the analysis orchestration layer."""

from __future__ import annotations


class AnalysisError(RuntimeError):
    """Base class for analysis pipeline failures."""


class AnalysisGenerationError(AnalysisError):
    """Raised when the language model could not produce a reply."""

    def __init__(self, message: str = "Failed to generate portfolio analysis") -> None:
        super().__init__(message)

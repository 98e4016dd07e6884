"""Core base classes and shared field types for domain models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


# Integer score bounded to the closed 0-100 range used by confidence and risk fields.
Score = Annotated[int, Field(ge=0, le=100)]

# Percentage of a portfolio, bounded like Score but allowing fractional values.
Percentage = Annotated[float, Field(ge=0, le=100)]


def clamp_score(value: int) -> int:
    """Clamp an extracted integer into the 0-100 score range."""

    return max(0, min(100, value))


def clamp_digits(digits: str) -> int:
    """Clamp a run of ASCII digits into the score range.

    Runs with more than three significant digits are saturated before
    conversion, so arbitrarily long numbers never reach ``int``.
    """

    significant = digits.lstrip("0")
    if len(significant) > 3:
        return 100
    return clamp_score(int(significant or "0"))


__all__ = ["DomainModel", "Percentage", "Score", "clamp_digits", "clamp_score"]

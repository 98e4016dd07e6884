"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from portfolio_analyst.domain import ProviderId


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    default_provider: ProviderId = ProviderId.GEMINI
    log_level: str = "INFO"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    anthropic_api_key: str | None = None
    anthropic_model: str = "claude-sonnet-4-5-20250929"
    request_timeout: float = 120.0

    @classmethod
    def from_env(cls) -> AppSettings:
        raw_provider = os.getenv("PORTFOLIO_ANALYST_PROVIDER", cls.default_provider.value)
        try:
            provider = ProviderId(raw_provider.strip().lower())
        except ValueError as exc:
            choices = ", ".join(p.value for p in ProviderId)
            raise ValueError(
                f"PORTFOLIO_ANALYST_PROVIDER must be one of: {choices} (got {raw_provider!r})"
            ) from exc
        return cls(
            environment=os.getenv("PORTFOLIO_ANALYST_ENV", cls.environment),
            default_provider=provider,
            log_level=os.getenv("PORTFOLIO_ANALYST_LOG_LEVEL", cls.log_level).upper(),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", cls.gemini_model),
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            anthropic_model=os.getenv("ANTHROPIC_MODEL", cls.anthropic_model),
            request_timeout=_env_float("PORTFOLIO_ANALYST_REQUEST_TIMEOUT", cls.request_timeout),
        )


__all__ = ["AppSettings"]

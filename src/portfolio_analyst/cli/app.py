"""Typer CLI wiring portfolio analyst services."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from portfolio_analyst.domain import AIAnalysisResult, AnalysisRequest, ProviderId
from portfolio_analyst.orchestration import AnalysisGenerationError, build_analysis_prompt
from portfolio_analyst.parsing import parse_analysis_response
from portfolio_analyst.providers import ProviderError

from .deps import get_container

app = typer.Typer(help="Portfolio analyst command-line interface")


def _configure_logging() -> None:
    level = get_container().settings.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_request(path: Path) -> AnalysisRequest:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"Unable to read request file {path}: {exc}")
        raise typer.Exit(code=1) from exc
    try:
        return AnalysisRequest.model_validate_json(raw)
    except ValidationError as exc:
        typer.echo(f"Invalid analysis request in {path}:\n{exc}")
        raise typer.Exit(code=1) from exc


def _parse_provider(value: str | None) -> ProviderId | None:
    if value is None:
        return None
    try:
        return ProviderId(value.lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in ProviderId)
        raise typer.BadParameter(f"provider must be one of: {choices}") from exc


def _emit(result: AIAnalysisResult, output: Path | None) -> None:
    payload = result.model_dump_json(indent=2)
    if output is None:
        typer.echo(payload)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    typer.echo(f"Wrote analysis to {output}")


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Provider:\t" + settings.default_provider.value)
    typer.echo("Gemini model:\t" + settings.gemini_model)
    typer.echo("Gemini key:\t" + ("set" if settings.gemini_api_key else "unset"))
    typer.echo("Anthropic model:\t" + settings.anthropic_model)
    typer.echo("Anthropic key:\t" + ("set" if settings.anthropic_api_key else "unset"))
    typer.echo(f"Request timeout:\t{settings.request_timeout:g}s")


@app.command("build-prompt")
def build_prompt(request_path: Path) -> None:
    """Render the prompt that would be sent for a request file."""

    request = _load_request(request_path)
    typer.echo(build_analysis_prompt(request))


@app.command("parse-reply")
def parse_reply(
    request_path: Path,
    reply_path: Path,
    output: Path | None = typer.Option(None, help="Write the result JSON to this path"),
) -> None:
    """Parse a saved model reply into a structured analysis."""

    request = _load_request(request_path)
    try:
        text = reply_path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"Unable to read reply file {reply_path}: {exc}")
        raise typer.Exit(code=1) from exc
    _emit(parse_analysis_response(text, request), output)


@app.command("analyze")
def analyze(
    request_path: Path,
    provider: str | None = typer.Option(None, help="Override the configured provider id"),
    output: Path | None = typer.Option(None, help="Write the result JSON to this path"),
) -> None:
    """Run the full analysis pipeline against a language-model provider."""

    provider_id = _parse_provider(provider)
    request = _load_request(request_path)
    _configure_logging()

    try:
        orchestrator = get_container().orchestrator(provider_id)
    except ProviderError as exc:
        typer.echo(f"Provider unavailable: {exc}")
        raise typer.Exit(code=1) from exc

    try:
        result = asyncio.run(orchestrator.generate_analysis(request))
    except AnalysisGenerationError as exc:
        typer.echo(f"{exc}: {exc.__cause__}")
        raise typer.Exit(code=1) from exc

    _emit(result, output)

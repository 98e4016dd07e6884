from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import import_module
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import render_reply
from portfolio_analyst.config import AppSettings
from portfolio_analyst.domain import AnalysisRequest, ProviderId
from portfolio_analyst.orchestration import AnalysisOrchestrator
from portfolio_analyst.providers import ProviderConfigurationError, ProviderRequestError

app_module = import_module("portfolio_analyst.cli.app")
from portfolio_analyst.cli.app import app  # noqa: E402
from portfolio_analyst.cli.deps import reset_container  # noqa: E402


def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTFOLIO_ANALYST_ENV", "test")
    monkeypatch.setenv("PORTFOLIO_ANALYST_PROVIDER", "anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    reset_container()


def _write_request(tmp_path: Path, request: AnalysisRequest) -> Path:
    path = tmp_path / "request.json"
    path.write_text(request.model_dump_json(), encoding="utf-8")
    return path


class CliStubProvider:
    model = "stub"

    def __init__(self, provider_id: ProviderId, *, reply: str = "", fail: bool = False) -> None:
        self.provider_id = provider_id
        self.reply = reply
        self.fail = fail

    async def generate_content(self, prompt: str) -> str:
        if self.fail:
            raise ProviderRequestError("upstream timeout")
        return self.reply


@dataclass
class StubContainer:
    reply: str = ""
    fail: bool = False
    unavailable: bool = False
    settings: AppSettings = field(default_factory=AppSettings)
    requested: list[ProviderId | None] = field(default_factory=list)

    def orchestrator(self, provider_id: ProviderId | None = None) -> AnalysisOrchestrator:
        self.requested.append(provider_id)
        if self.unavailable:
            raise ProviderConfigurationError("GeminiProvider requires a valid API key")
        resolved = provider_id or self.settings.default_provider
        return AnalysisOrchestrator(CliStubProvider(resolved, reply=self.reply, fail=self.fail))


def test_cli_show_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    _env(monkeypatch)
    runner = CliRunner()

    result = runner.invoke(app, ["show-settings"])

    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout
    assert "Provider:\tanthropic" in result.stdout
    assert "Anthropic key:\tset" in result.stdout
    assert "Gemini key:\tunset" in result.stdout
    reset_container()


def test_cli_build_prompt(tmp_path: Path, analysis_request: AnalysisRequest) -> None:
    request_path = _write_request(tmp_path, analysis_request)
    runner = CliRunner()

    result = runner.invoke(app, ["build-prompt", str(request_path)])

    assert result.exit_code == 0
    assert "PORTFOLIO SUMMARY:" in result.stdout
    assert "1. RELIANCE.NSE - Reliance Industries" in result.stdout


def test_cli_rejects_invalid_request_file(tmp_path: Path) -> None:
    request_path = tmp_path / "request.json"
    request_path.write_text(json.dumps({"portfolio": {}}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["build-prompt", str(request_path)])

    assert result.exit_code == 1
    assert "Invalid analysis request" in result.stdout


def test_cli_parse_reply_writes_output(tmp_path: Path, analysis_request: AnalysisRequest) -> None:
    request_path = _write_request(tmp_path, analysis_request)
    reply_path = tmp_path / "reply.txt"
    reply_path.write_text(render_reply(), encoding="utf-8")
    output = tmp_path / "out" / "analysis.json"
    runner = CliRunner()

    result = runner.invoke(
        app, ["parse-reply", str(request_path), str(reply_path), "--output", str(output)]
    )

    assert result.exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["recommendations"][0]["action"] == "buy"
    assert payload["market_conditions"]["overall"] == "bearish"


def test_cli_analyze_writes_result(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, analysis_request: AnalysisRequest
) -> None:
    container = StubContainer(reply=render_reply())
    monkeypatch.setattr(app_module, "get_container", lambda: container)
    request_path = _write_request(tmp_path, analysis_request)
    output = tmp_path / "analysis.json"
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["analyze", str(request_path), "--provider", "Gemini", "--output", str(output)],
    )

    assert result.exit_code == 0
    assert f"Wrote analysis to {output}" in result.stdout
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["recommendations"][0]["confidence"] == 88
    assert container.requested == [ProviderId.GEMINI]


def test_cli_analyze_reports_generation_failure(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, analysis_request: AnalysisRequest
) -> None:
    monkeypatch.setattr(app_module, "get_container", lambda: StubContainer(fail=True))
    request_path = _write_request(tmp_path, analysis_request)
    runner = CliRunner()

    result = runner.invoke(app, ["analyze", str(request_path)])

    assert result.exit_code == 1
    assert "Failed to generate portfolio analysis: upstream timeout" in result.stdout


def test_cli_analyze_reports_unavailable_provider(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, analysis_request: AnalysisRequest
) -> None:
    monkeypatch.setattr(app_module, "get_container", lambda: StubContainer(unavailable=True))
    request_path = _write_request(tmp_path, analysis_request)
    runner = CliRunner()

    result = runner.invoke(app, ["analyze", str(request_path)])

    assert result.exit_code == 1
    assert "Provider unavailable" in result.stdout


def test_cli_analyze_rejects_unknown_provider(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app, ["analyze", str(tmp_path / "missing.json"), "--provider", "openai"]
    )

    assert result.exit_code == 2

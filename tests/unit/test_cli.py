"""Tests for the relay CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from src.cli import cli
from src.models import ResultEnvelope

QUIET = ["--log-level", "CRITICAL"]


def _write_payload(tmp_path: Path, payload: object) -> str:
    p = tmp_path / "payload.json"
    p.write_text(json.dumps(payload))
    return str(p)


def test_dry_run_prints_selected_issues(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {"tickets": [f"T-{i}" for i in range(8)]})
    runner = CliRunner()
    result = runner.invoke(cli, [*QUIET, "send", payload, "--dry-run", "--seed", "3"])
    assert result.exit_code == 0
    out = json.loads(result.output)
    assert len(out["issues"]) == 5


def test_dry_run_seed_is_deterministic(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {"tickets": list(range(20))})
    runner = CliRunner()
    first = runner.invoke(cli, [*QUIET, "send", payload, "--dry-run", "--seed", "9"])
    second = runner.invoke(cli, [*QUIET, "send", payload, "--dry-run", "--seed", "9"])
    assert first.output == second.output


def test_dry_run_reports_invalid_payload(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {"tickets": []})
    runner = CliRunner()
    result = runner.invoke(cli, [*QUIET, "send", payload, "--dry-run"])
    assert result.exit_code != 0
    assert "Missing or invalid 'tickets' field" in result.output


def test_send_reads_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [*QUIET, "send", "-", "--dry-run"], input='{"tickets": ["A"]}')
    assert result.exit_code == 0
    assert json.loads(result.output) == {"issues": ["A"]}


def test_send_prints_envelope(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {"tickets": ["A"]})
    runner = CliRunner()
    with patch("src.cli.TicketRelay.handle", new_callable=AsyncMock) as mock_handle:
        mock_handle.return_value = ResultEnvelope.sent({"ok": True})
        result = runner.invoke(cli, [*QUIET, "send", payload])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "status": "success",
        "message": "Data sent to Jira",
        "response": {"ok": True},
    }


def test_send_exits_nonzero_on_error_envelope(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {"tickets": ["A"]})
    runner = CliRunner()
    with patch("src.cli.TicketRelay.handle", new_callable=AsyncMock) as mock_handle:
        mock_handle.return_value = ResultEnvelope.request_failed("Connection refused")
        result = runner.invoke(cli, [*QUIET, "send", payload])
    assert result.exit_code == 1
    assert json.loads(result.output)["error"] == "Connection refused"


def test_serve_runs_uvicorn_factory() -> None:
    runner = CliRunner()
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(cli, [*QUIET, "serve", "--port", "9000"])
    assert result.exit_code == 0
    mock_run.assert_called_once_with(
        "src.proxy.app:create_app_from_env", factory=True, host="0.0.0.0", port=9000,
    )

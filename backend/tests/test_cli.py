"""CLI tests against a stubbed backend."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from sheetmark.cli import main as cli

runner = CliRunner()


class _FakeResponse:
    def __init__(self, payload: dict[str, Any], status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.ok = status_code < 400
        self.text = str(payload)

    def json(self) -> dict[str, Any]:
        return self._payload


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    recorded: list[dict[str, Any]] = []

    def fake_request(method: str, url: str, **kwargs: Any) -> _FakeResponse:
        recorded.append({"method": method, "url": url, **kwargs})
        return _FakeResponse({"status": "ok", "details": "Counting rows 1 → 3 • Checked: 0"})

    monkeypatch.setattr(cli.requests, "request", fake_request)
    monkeypatch.setenv("SHMK_HOST", "http://sheetmark.test")
    return recorded


def test_import_sends_file_bytes(tmp_path: Path, calls: list[dict[str, Any]]) -> None:
    sheet = tmp_path / "leads.csv"
    sheet.write_bytes(b"1,alice\n")
    result = runner.invoke(cli.app, ["import", str(sheet)])
    assert result.exit_code == 0, result.output
    assert calls[0]["url"] == "http://sheetmark.test/import"
    assert calls[0]["params"] == {"name": "leads.csv"}
    assert calls[0]["data"] == b"1,alice\n"


def test_mark_uses_zero_based_index(calls: list[dict[str, Any]]) -> None:
    result = runner.invoke(cli.app, ["mark", "3", "--messaged", "--bookmark", "START"])
    assert result.exit_code == 0, result.output
    assert calls[0]["method"] == "PATCH"
    assert calls[0]["url"].endswith("/rows/2")
    assert calls[0]["json"] == {"messaged": True, "bookmark": "start"}


def test_mark_without_changes_fails(calls: list[dict[str, Any]]) -> None:
    result = runner.invoke(cli.app, ["mark", "3"])
    assert result.exit_code == 2
    assert calls == []


def test_clear_prompts_before_sending(calls: list[dict[str, Any]]) -> None:
    result = runner.invoke(cli.app, ["clear-annotations"], input="n\n")
    assert result.exit_code == 0, result.output
    assert calls[0]["params"] == {"confirm": "false"}

    result = runner.invoke(cli.app, ["remove", "--yes"])
    assert calls[1]["method"] == "DELETE"
    assert calls[1]["params"] == {"confirm": "true"}


def test_summary_prints_details(calls: list[dict[str, Any]]) -> None:
    result = runner.invoke(cli.app, ["summary"])
    assert result.exit_code == 0
    assert "Counting rows 1 → 3" in result.output

"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from sheetmark.core.config import Settings


def test_yaml_sections_map_to_fields(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHMK_DB_PATH", raising=False)
    config = tmp_path / "config.yaml"
    config.write_text(
        "storage:\n  backend: memory\n  db_path: ~/marks.db\npagination:\n  page_size: 50\n",
        encoding="utf-8",
    )
    settings = Settings.from_yaml(config)
    assert settings.storage_backend == "memory"
    assert settings.page_size == 50
    assert settings.db_path == Path("~/marks.db").expanduser()
    assert settings.max_page_buttons == 9


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("pagination:\n  page_size: 50\n", encoding="utf-8")
    monkeypatch.setenv("SHMK_PAGE_SIZE", "25")
    assert Settings.from_yaml(config).page_size == 25

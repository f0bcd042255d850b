from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from typer.testing import CliRunner

from gl_parser.core.models import Token
from gl_parser.core.scanner import scan

SESSION_LOG = (
    "Bench Press @90kg 5/5/5 \n"
    " Squats @100kg 3*10 @140lbs 10 \n"
    " Dumbbell-Rows @20 8/8/"
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "missing.toml"
    monkeypatch.setenv("GL_CONFIG_FILE", str(path))
    monkeypatch.delenv("GL_WEIGHT_UNIT", raising=False)
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def session_log() -> str:
    return SESSION_LOG


@pytest.fixture()
def tokenize():
    def _tokenize(source: str) -> List[Token]:
        tokens, _ = scan(source)
        return tokens

    return _tokenize


@pytest.fixture()
def write_temp_file(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write

"""Pytest fixtures and utilities for flexjson tests."""

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def settings_path(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Point FLEXJSON_CONFIG at a (not yet existing) file in a temp dir.

    Keeps tests from reading the real ~/.config/flexjson settings.
    """
    path = tmp_path / "settings" / "config.jsonc"
    monkeypatch.setenv("FLEXJSON_CONFIG", str(path))
    yield path


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner for testing."""
    return CliRunner()


@pytest.fixture
def write_file(tmp_path: Path):
    """Factory writing UTF-8 text to a file in the temp dir."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write

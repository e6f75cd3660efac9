"""Shared fixtures for CLI tests.

Every invocation runs against a temporary configuration file and a
temporary Claude directory, and the ``uvx`` lookup is pinned so results
do not depend on the host.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def claude_dir(tmp_path: Path) -> Path:
    return tmp_path / "claude-home"


@pytest.fixture
def cli_env(config_file: Path, claude_dir: Path) -> dict[str, str | None]:
    """Environment pointing the CLI at the temporary files."""
    return {
        "SUPERCLAUDE_CONFIG": str(config_file),
        "CLAUDE_DIR": str(claude_dir),
        "DEFAULT_PROVIDER": None,
        "HOT_RELOAD_ENABLED": None,
        "ZAI_API_KEY": "secret123",
    }


@pytest.fixture(autouse=True)
def uvx_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend ``uvx`` is not installed."""
    monkeypatch.setattr(shutil, "which", lambda tool: None)

"""Filesystem locations used by the bootstrapper.

The configuration file lives in the working directory unless
``SUPERCLAUDE_CONFIG`` points elsewhere. Claude Code's directory is
``~/.claude`` unless ``CLAUDE_DIR`` overrides it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

CONFIG_FILENAME = "superclaude.config.json"
SETTINGS_FILENAME = "settings.json"
BACKUP_DIRNAME = "config-backups"


def resolve_config_path(env: Mapping[str, str]) -> Path:
    """Return the configuration file path for this invocation."""
    override = env.get("SUPERCLAUDE_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.cwd() / CONFIG_FILENAME


def resolve_claude_dir(env: Mapping[str, str]) -> Path:
    """Return Claude Code's settings directory."""
    override = env.get("CLAUDE_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".claude"


def settings_path(claude_dir: Path) -> Path:
    return claude_dir / SETTINGS_FILENAME


def backup_dir(claude_dir: Path) -> Path:
    return claude_dir / BACKUP_DIRNAME

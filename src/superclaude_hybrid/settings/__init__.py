"""Derivation and persistence of Claude Code's ``settings.json``."""

from __future__ import annotations

from superclaude_hybrid.settings.derivation import (
    TOKEN_PROVIDER,
    derive_settings,
    resolve_provider,
)
from superclaude_hybrid.settings.writer import (
    SettingsWriter,
    WriteOutcome,
    backup_filename,
)

__all__ = [
    "SettingsWriter",
    "TOKEN_PROVIDER",
    "WriteOutcome",
    "backup_filename",
    "derive_settings",
    "resolve_provider",
]

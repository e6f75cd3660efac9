"""SuperClaude Hybrid exception hierarchy.

All public exceptions inherit from SuperClaudeError, giving callers a single
base class to catch when they want to handle any bootstrapper failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class SuperClaudeError(Exception):
    """Base exception for all SuperClaude Hybrid errors."""


class ConfigLoadError(SuperClaudeError):
    """Raised when the configuration file cannot be loaded.

    Covers a missing or unreadable file, malformed JSON, and sections
    whose shape does not match the configuration schema. Always fatal
    for the CLI.
    """

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        super().__init__(f"{path}: {reason}" if path else reason)
        self.reason = reason
        self.path = path


class ProbeError(SuperClaudeError):
    """Raised when the executable lookup itself fails.

    A tool that is simply absent is not an error; this covers the lookup
    mechanism raising. The detector downgrades the affected server to a
    failed status and moves on.
    """


class MissingProviderConfigError(SuperClaudeError):
    """Raised when the selected provider has no usable sub-configuration."""

    def __init__(self, provider: str, detail: str | None = None) -> None:
        message = f"No configuration for provider '{provider}' in core.provider"
        if detail:
            message = f"Provider '{provider}' is incomplete: {detail}"
        super().__init__(message)
        self.provider = provider


class SettingsError(SuperClaudeError):
    """Base class for failures while persisting the derived settings."""


class BackupError(SettingsError):
    """Raised when the existing settings file cannot be backed up.

    The new settings are never written after a failed backup.
    """


class WriteError(SettingsError):
    """Raised when the derived settings cannot be written to disk."""

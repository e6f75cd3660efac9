"""``superclaude-hybrid save-config`` -- Write Claude Code settings.

Derives ``settings.json`` from the configuration and the environment,
backs up any existing file into ``config-backups/`` and writes the new
settings. No MCP detection is performed.

Exit Codes:
    0 -- Settings written.
    1 -- Provider not configured, or the backup/write failed.
"""

from __future__ import annotations

import sys

import click

from superclaude_hybrid.cli.output import print_save_outcome
from superclaude_hybrid.exceptions import MissingProviderConfigError, SettingsError
from superclaude_hybrid.orchestrator import Bootstrapper


@click.command("save-config")
@click.pass_obj
def save_config_command(bootstrapper: Bootstrapper) -> None:
    """Save configuration to Claude Code settings."""
    try:
        outcome = bootstrapper.save_settings()
    except (MissingProviderConfigError, SettingsError) as exc:
        click.echo(f"❌ Failed to save settings: {exc}", err=True)
        sys.exit(1)
    print_save_outcome(outcome)

"""``superclaude-hybrid hot-reload`` -- Reload configuration and re-detect.

Only acts when ``HOT_RELOAD_ENABLED=true``; otherwise it reports that hot
reload is disabled. Nothing is written to disk.

Exit Codes:
    0 -- Reloaded, or hot reload disabled.
    1 -- The configuration could not be reloaded.
"""

from __future__ import annotations

import sys

import click

from superclaude_hybrid.cli.output import print_servers
from superclaude_hybrid.exceptions import ConfigLoadError
from superclaude_hybrid.orchestrator import Bootstrapper


@click.command("hot-reload")
@click.pass_obj
def hot_reload_command(bootstrapper: Bootstrapper) -> None:
    """Reload configuration (if hot-reload enabled)."""
    if not bootstrapper.hot_reload_enabled:
        click.echo("Hot reload disabled (set HOT_RELOAD_ENABLED=true to enable).")
        return

    click.echo("🔄 Hot reloading configuration...")
    try:
        servers = bootstrapper.hot_reload()
    except ConfigLoadError as exc:
        click.echo(f"❌ Failed to load configuration: {exc}", err=True)
        sys.exit(1)
    print_servers(servers or [])
    click.echo("✓ Configuration reloaded")

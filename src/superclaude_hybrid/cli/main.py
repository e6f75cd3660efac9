"""SuperClaude Hybrid CLI -- Configuration loader for Claude Code.

Entry point for the ``superclaude-hybrid`` command-line tool. Takes a
single positional command:

Commands:
    init         -- Create ~/.claude if needed, detect MCP servers,
                    register plugins and print a summary.
    status       -- Same report as init, without creating anything.
    save-config  -- Write the derived settings.json (with backup).
    hot-reload   -- Reload the configuration and re-detect servers
                    (requires HOT_RELOAD_ENABLED=true).

Usage::

    superclaude-hybrid init
    superclaude-hybrid save-config
    CLAUDE_DIR=/tmp/claude superclaude-hybrid status

Exit Codes:
    1 -- Configuration could not be loaded, or the command is missing or
         unknown. Individual commands document their own codes.
"""

from __future__ import annotations

import os

import click

from superclaude_hybrid.cli.init_cmd import init_command, status_command
from superclaude_hybrid.cli.reload_cmd import hot_reload_command
from superclaude_hybrid.cli.save_cmd import save_config_command
from superclaude_hybrid.config import ConfigStore, resolve_claude_dir, resolve_config_path
from superclaude_hybrid.exceptions import ConfigLoadError
from superclaude_hybrid.orchestrator import Bootstrapper

USAGE = """SuperClaude Hybrid Configuration Loader

Usage: superclaude-hybrid <command>

Commands:
  init         - Initialize and detect all components
  status       - Show current status and detected servers
  save-config  - Save configuration to Claude Code settings
  hot-reload   - Reload configuration (if hot-reload enabled)"""


class _UsageGroup(click.Group):
    """Group that prints the usage text and exits 1 on unknown commands.

    Unknown options before the command are treated the same way. Anything
    after the command name is ignored.
    """

    def add_command(self, cmd: click.Command, name: str | None = None) -> None:
        cmd.context_settings.setdefault("ignore_unknown_options", True)
        cmd.context_settings.setdefault("allow_extra_args", True)
        super().add_command(cmd, name)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(USAGE)
            ctx.exit(1)

    def resolve_command(
        self, ctx: click.Context, args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            click.echo(USAGE)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(cls=_UsageGroup, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """SuperClaude Hybrid: configuration loader and bootstrapper.

    Loads superclaude.config.json (or $SUPERCLAUDE_CONFIG), detects MCP
    servers, registers plugins and writes Claude Code's settings.json.
    """
    if ctx.invoked_subcommand is None:
        click.echo(USAGE)
        ctx.exit(1)

    store = ConfigStore(resolve_config_path(os.environ))
    try:
        store.load()
    except ConfigLoadError as exc:
        click.echo(f"❌ Failed to load configuration: {exc}", err=True)
        ctx.exit(1)
    click.echo(f"✓ Configuration loaded from {store.path.name}")

    ctx.obj = Bootstrapper(store, resolve_claude_dir(os.environ), env=os.environ)


cli.add_command(init_command)
cli.add_command(status_command)
cli.add_command(save_config_command)
cli.add_command(hot_reload_command)

"""``superclaude-hybrid init`` and ``status`` -- Detect and report components.

``init`` creates Claude Code's directory when missing, detects MCP
servers, registers plugins, lists behavioral modes and prints a summary.
``status`` prints the same report but never touches the filesystem.

Exit Codes:
    0 -- Report printed, or a pipeline failure was reported.
"""

from __future__ import annotations

import logging

import click

from superclaude_hybrid.cli.output import print_report
from superclaude_hybrid.exceptions import SuperClaudeError
from superclaude_hybrid.orchestrator import Bootstrapper

logger = logging.getLogger(__name__)


def _run_report(bootstrapper: Bootstrapper, *, create_claude_dir: bool) -> None:
    """Run the detection pipeline and print the report.

    Failures are reported rather than raised; there is no retry.
    """
    try:
        report = bootstrapper.initialize(create_claude_dir=create_claude_dir)
    except (SuperClaudeError, OSError) as exc:
        logger.debug("Initialization failed", exc_info=True)
        click.echo(f"❌ Initialization failed: {exc}", err=True)
        return
    print_report(report)


@click.command("init")
@click.pass_obj
def init_command(bootstrapper: Bootstrapper) -> None:
    """Initialize and detect all components."""
    click.echo("🚀 Initializing SuperClaude Hybrid...")
    _run_report(bootstrapper, create_claude_dir=True)


@click.command("status")
@click.pass_obj
def status_command(bootstrapper: Bootstrapper) -> None:
    """Show current status and detected servers."""
    click.echo("🔎 SuperClaude Hybrid status")
    _run_report(bootstrapper, create_claude_dir=False)

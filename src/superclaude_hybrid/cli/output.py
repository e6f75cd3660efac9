"""Rich output formatting helpers for the SuperClaude Hybrid CLI.

Renders the ``init``/``status`` report, hot-reload detection results and
settings-save confirmations with consistent status coloring:

    available = green, missing dependency = yellow,
    unknown = dim, probe failure = bold red
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from superclaude_hybrid.discovery import DetectionResult, ServerStatus
from superclaude_hybrid.orchestrator import InitReport
from superclaude_hybrid.settings import WriteOutcome

_STATUS_STYLES: dict[ServerStatus, str] = {
    ServerStatus.AVAILABLE: "green",
    ServerStatus.MISSING_DEPENDENCY: "yellow",
    ServerStatus.UNKNOWN: "dim",
    ServerStatus.PROBE_FAILED: "bold red",
}

console = Console()


def status_style(status: ServerStatus) -> str:
    """Return the Rich style string for a server status."""
    return _STATUS_STYLES.get(status, "white")


def status_icon(result: DetectionResult) -> str:
    return "✓" if result.is_available else "⚠"


def print_servers(servers: list[DetectionResult]) -> None:
    """Print one row per detected MCP server.

    Args:
        servers: Detection results, in detection order.
    """
    if not servers:
        console.print("   [dim]No MCP servers declared.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("", justify="center")
    table.add_column("Server", style="bold")
    table.add_column("Status")
    table.add_column("Detail", style="dim")
    for result in servers:
        if result.error:
            detail = result.error
        elif result.missing_tool:
            detail = f"'{result.missing_tool}' not on PATH"
        else:
            detail = result.declaration.command
        table.add_row(
            status_icon(result),
            result.name,
            Text(result.label, style=status_style(result.status)),
            detail,
        )
    console.print(table)


def print_report(report: InitReport) -> None:
    """Print the full ``init``/``status`` report.

    Args:
        report: Output of ``Bootstrapper.initialize``.
    """
    if report.claude_dir_created:
        console.print(f"[yellow]⚠  Claude directory not found: {escape(str(report.claude_dir))}[/yellow]")
        console.print("   Created directory.")
    elif not report.claude_dir_exists:
        console.print(
            f"[yellow]⚠  Claude directory not found: {escape(str(report.claude_dir))}[/yellow]"
            " (run 'init' to create it)"
        )

    console.print("\n📡 Detecting MCP servers...")
    print_servers(report.servers)

    console.print("\n🔌 Registering plugins...")
    if not report.plugins:
        console.print("   [dim]No plugins enabled.[/dim]")
    for plugin in report.plugins:
        console.print(f"   [green]✓[/green] {escape(plugin.name)} ({len(plugin.commands)} commands)")

    console.print("\n🎯 Behavioral modes:")
    if not report.modes:
        console.print("   [dim]No behavioral modes enabled.[/dim]")
    for mode in report.modes:
        console.print(f"   [green]✓[/green] {escape(mode.name)}: {escape(mode.description)}")

    summary = "\n".join([
        f"Active MCP Servers: [bold]{report.active_server_count}[/bold]",
        f"Active Plugins:     [bold]{len(report.plugins)}[/bold]",
        f"Provider:           [bold]{escape(report.provider)}[/bold]",
        f"Safe Mode:          {'enabled' if report.safe_mode else 'disabled'}",
    ])
    console.print()
    console.print(Panel(summary, title="✅ SuperClaude Hybrid initialized", expand=False))


def print_save_outcome(outcome: WriteOutcome) -> None:
    """Print where settings (and their backup) were written."""
    if outcome.backup is not None:
        console.print(f"[green]✓[/green] Backed up existing settings to: {escape(str(outcome.backup))}")
    console.print(f"[green]✓[/green] Configuration saved to: {escape(str(outcome.target))}")

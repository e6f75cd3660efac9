"""SuperClaude Hybrid: configuration loader and bootstrapper for Claude Code.

Reads ``superclaude.config.json``, detects which declared MCP servers can be
launched on this host, registers enabled plugins and behavioral modes, and
writes the derived ``settings.json`` consumed by Claude Code.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

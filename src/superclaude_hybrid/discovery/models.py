"""Data models for the discovery module.

``DetectionResult`` is produced once per enabled server per detection pass.
Its ``status`` is a structured variant rather than a free-form string; the
``label`` property renders the short status strings shown to users and
kept in ``to_dict()`` output (``available``, ``uv_not_found``, ``unknown``,
``error``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from superclaude_hybrid.config.models import ServerDeclaration


class ServerStatus(Enum):
    """Availability of a declared MCP server on this host."""

    AVAILABLE = "available"
    MISSING_DEPENDENCY = "missing_dependency"
    UNKNOWN = "unknown"
    PROBE_FAILED = "error"


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of detecting one declared server.

    Attributes:
        name: Server name (the key under ``mcp_servers``).
        declaration: The declaration as loaded; never modified.
        status: Structured availability status.
        launcher: Name of the matched launcher family, if any.
        missing_tool: Executable that was not found
            (``MISSING_DEPENDENCY`` only).
        error: Failure message (``PROBE_FAILED`` only).
    """

    name: str
    declaration: ServerDeclaration
    status: ServerStatus
    launcher: str | None = None
    missing_tool: str | None = None
    error: str | None = None

    @property
    def is_available(self) -> bool:
        return self.status is ServerStatus.AVAILABLE

    @property
    def label(self) -> str:
        """Short status string, e.g. ``available`` or ``uv_not_found``."""
        if self.status is ServerStatus.MISSING_DEPENDENCY:
            return f"{self.launcher or self.missing_tool}_not_found"
        return self.status.value

    def to_dict(self) -> dict[str, Any]:
        """Render as ``{name, **declared fields, status, error?}``."""
        out: dict[str, Any] = {"name": self.name, **self.declaration.to_dict()}
        out["status"] = self.label
        if self.error is not None:
            out["error"] = self.error
        return out

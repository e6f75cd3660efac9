"""MCP server availability detection.

Public API::

    from superclaude_hybrid.discovery import CapabilityDetector

    detector = CapabilityDetector()
    for result in detector.detect(config.mcp_servers):
        print(f"{result.name}: {result.label}")
"""

from __future__ import annotations

from superclaude_hybrid.discovery.detector import CapabilityDetector, which_probe
from superclaude_hybrid.discovery.launchers import (
    DEFAULT_LAUNCHERS,
    LauncherFamily,
    match_launcher,
)
from superclaude_hybrid.discovery.models import DetectionResult, ServerStatus

__all__ = [
    "CapabilityDetector",
    "DEFAULT_LAUNCHERS",
    "DetectionResult",
    "LauncherFamily",
    "ServerStatus",
    "match_launcher",
    "which_probe",
]

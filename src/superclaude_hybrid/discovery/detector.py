"""Capability detector for declared MCP servers.

For every enabled server declaration the detector decides whether the
server can be launched on this host, based on its launcher family (see
``launchers.py``):

    1. ``enabled: false`` -- omitted from the output entirely.
    2. Family without a probe tool (``npx``) -- available, nothing probed.
    3. Family with a probe tool (``uvx``) -- available iff the tool is on
       ``PATH``; otherwise a missing dependency.
    4. No family matched -- unknown, nothing probed.
    5. Any exception while evaluating one declaration -- probe failed,
       with the message attached. The remaining servers are still detected.

Results are never cached: each ``detect()`` call probes again.
"""

from __future__ import annotations

import logging
import shutil
from typing import Callable, Mapping

from superclaude_hybrid.config.models import ServerDeclaration
from superclaude_hybrid.discovery.launchers import (
    DEFAULT_LAUNCHERS,
    LauncherFamily,
    match_launcher,
)
from superclaude_hybrid.discovery.models import DetectionResult, ServerStatus
from superclaude_hybrid.exceptions import ProbeError

logger = logging.getLogger(__name__)

Probe = Callable[[str], bool]


def which_probe(tool: str) -> bool:
    """Return True if ``tool`` resolves on the executable search path.

    Raises:
        ProbeError: If the lookup itself fails.
    """
    try:
        return shutil.which(tool) is not None
    except OSError as exc:
        raise ProbeError(f"lookup of '{tool}' failed: {exc}") from exc


class CapabilityDetector:
    """Determines an availability status for each declared MCP server.

    Usage::

        detector = CapabilityDetector()
        for result in detector.detect(config.mcp_servers):
            print(result.name, result.label)

    Args:
        launchers: Launcher families, matched in order.
        probe: Callable answering "is this executable installed?". Tests
            substitute a fake to avoid depending on the host.
    """

    def __init__(
        self,
        launchers: tuple[LauncherFamily, ...] = DEFAULT_LAUNCHERS,
        probe: Probe = which_probe,
    ) -> None:
        self.launchers = launchers
        self._probe = probe

    def detect(self, servers: Mapping[str, ServerDeclaration]) -> list[DetectionResult]:
        """Detect every enabled server, in mapping order.

        Args:
            servers: Server name to declaration.

        Returns:
            One ``DetectionResult`` per enabled declaration.
        """
        results: list[DetectionResult] = []
        for name, declaration in servers.items():
            if declaration.enabled is False:
                continue
            try:
                result = self._evaluate(name, declaration)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Detection failed for MCP server %s: %s", name, exc)
                result = DetectionResult(
                    name=name,
                    declaration=declaration,
                    status=ServerStatus.PROBE_FAILED,
                    error=str(exc),
                )
            results.append(result)
        return results

    def _evaluate(self, name: str, declaration: ServerDeclaration) -> DetectionResult:
        family = match_launcher(declaration.command, self.launchers)
        if family is None:
            return DetectionResult(name=name, declaration=declaration, status=ServerStatus.UNKNOWN)

        if family.probe_tool is None:
            return DetectionResult(
                name=name, declaration=declaration,
                status=ServerStatus.AVAILABLE, launcher=family.name,
            )

        found = self._probe(family.probe_tool)
        logger.debug("Probe %s for %s: %s", family.probe_tool, name, found)
        if found:
            return DetectionResult(
                name=name, declaration=declaration,
                status=ServerStatus.AVAILABLE, launcher=family.name,
            )
        return DetectionResult(
            name=name, declaration=declaration,
            status=ServerStatus.MISSING_DEPENDENCY,
            launcher=family.name, missing_tool=family.probe_tool,
        )

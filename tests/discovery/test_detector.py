"""Tests for ``CapabilityDetector`` against fabricated declarations.

A fake probe replaces the ``PATH`` lookup, so results never depend on
what is installed on the machine running the tests.
"""

from __future__ import annotations

import shutil

import pytest

from superclaude_hybrid.config import Configuration, ServerDeclaration
from superclaude_hybrid.discovery import (
    CapabilityDetector,
    LauncherFamily,
    ServerStatus,
    which_probe,
)
from superclaude_hybrid.exceptions import ProbeError


class RecordingProbe:
    """Probe double that records every tool it is asked about."""

    def __init__(self, found: bool = True) -> None:
        self.found = found
        self.calls: list[str] = []

    def __call__(self, tool: str) -> bool:
        self.calls.append(tool)
        return self.found


def _servers(**commands: str) -> dict[str, ServerDeclaration]:
    return {name: ServerDeclaration(command=cmd) for name, cmd in commands.items()}


# ---------------------------------------------------------------------------
# Detection policy
# ---------------------------------------------------------------------------


class TestDetectionPolicy:
    """One test per detection rule."""

    def test_disabled_server_is_omitted(self) -> None:
        servers = {
            "on": ServerDeclaration(command="npx on"),
            "off": ServerDeclaration(command="npx off", enabled=False),
        }
        results = CapabilityDetector(probe=RecordingProbe()).detect(servers)
        assert [r.name for r in results] == ["on"]

    def test_npx_is_available_without_probe(self) -> None:
        probe = RecordingProbe(found=False)
        results = CapabilityDetector(probe=probe).detect(_servers(docs="npx -y @upstash/context7-mcp"))
        assert results[0].status is ServerStatus.AVAILABLE
        assert results[0].launcher == "npm"
        assert probe.calls == []

    def test_uvx_available_when_tool_found(self) -> None:
        probe = RecordingProbe(found=True)
        results = CapabilityDetector(probe=probe).detect(_servers(serena="uvx serena start"))
        assert results[0].status is ServerStatus.AVAILABLE
        assert results[0].label == "available"
        assert probe.calls == ["uvx"]

    def test_uvx_missing_dependency_when_tool_absent(self) -> None:
        results = CapabilityDetector(probe=RecordingProbe(found=False)).detect(
            _servers(serena="uvx serena start")
        )
        result = results[0]
        assert result.status is ServerStatus.MISSING_DEPENDENCY
        assert result.missing_tool == "uvx"
        assert result.label == "uv_not_found"
        assert not result.is_available

    def test_other_command_is_unknown(self) -> None:
        probe = RecordingProbe()
        results = CapabilityDetector(probe=probe).detect(_servers(local="node ./server.js"))
        assert results[0].status is ServerStatus.UNKNOWN
        assert results[0].label == "unknown"
        assert probe.calls == []

    def test_empty_command_is_unknown(self) -> None:
        results = CapabilityDetector(probe=RecordingProbe()).detect({"x": ServerDeclaration()})
        assert results[0].status is ServerStatus.UNKNOWN

    def test_npx_takes_precedence_over_uvx(self) -> None:
        probe = RecordingProbe(found=False)
        results = CapabilityDetector(probe=probe).detect(_servers(both="npx wrapper -- uvx tool"))
        assert results[0].status is ServerStatus.AVAILABLE
        assert probe.calls == []


# ---------------------------------------------------------------------------
# Failure isolation
# ---------------------------------------------------------------------------


class TestFailureIsolation:
    """A failing declaration must not abort the batch."""

    def test_probe_error_becomes_failed_status(self) -> None:
        def broken(tool: str) -> bool:
            raise ProbeError(f"lookup of '{tool}' failed")

        servers = _servers(first="uvx one", second="npx two", third="uvx three")
        results = CapabilityDetector(probe=broken).detect(servers)

        assert [r.name for r in results] == ["first", "second", "third"]
        assert results[0].status is ServerStatus.PROBE_FAILED
        assert results[0].label == "error"
        assert results[0].error == "lookup of 'uvx' failed"
        assert results[1].status is ServerStatus.AVAILABLE
        assert results[2].status is ServerStatus.PROBE_FAILED

    def test_unexpected_exception_is_contained(self) -> None:
        def crash(tool: str) -> bool:
            raise RuntimeError("boom")

        results = CapabilityDetector(probe=crash).detect(_servers(s="uvx s", t="node t"))
        assert results[0].error == "boom"
        assert results[1].status is ServerStatus.UNKNOWN


# ---------------------------------------------------------------------------
# Ordering, caching, extensibility
# ---------------------------------------------------------------------------


class TestDetectorBehaviour:

    def test_preserves_mapping_order(self, full_config: Configuration) -> None:
        results = CapabilityDetector(probe=RecordingProbe()).detect(full_config.mcp_servers)
        assert [r.name for r in results] == ["a", "b", "custom"]

    def test_no_caching_between_calls(self) -> None:
        probe = RecordingProbe(found=True)
        detector = CapabilityDetector(probe=probe)
        servers = _servers(s="uvx s")
        assert detector.detect(servers)[0].is_available
        probe.found = False
        assert detector.detect(servers)[0].label == "uv_not_found"
        assert probe.calls == ["uvx", "uvx"]

    def test_custom_launcher_family(self) -> None:
        launchers = (LauncherFamily(name="docker", token="docker run", probe_tool="docker"),)
        detector = CapabilityDetector(launchers=launchers, probe=RecordingProbe(found=False))
        result = detector.detect(_servers(db="docker run postgres-mcp"))[0]
        assert result.status is ServerStatus.MISSING_DEPENDENCY
        assert result.label == "docker_not_found"

    def test_declaration_is_not_modified(self) -> None:
        decl = ServerDeclaration(command="uvx s")
        result = CapabilityDetector(probe=RecordingProbe(found=False)).detect({"s": decl})[0]
        assert result.declaration is decl
        assert decl.to_dict() == {"command": "uvx s", "enabled": True}

    def test_to_dict_shape(self) -> None:
        def broken(tool: str) -> bool:
            raise ProbeError("nope")

        servers = {"s": ServerDeclaration.from_dict({"command": "uvx s", "note": "x"})}
        result = CapabilityDetector(probe=broken).detect(servers)[0]
        assert result.to_dict() == {
            "name": "s",
            "command": "uvx s",
            "enabled": True,
            "note": "x",
            "status": "error",
            "error": "nope",
        }


# ---------------------------------------------------------------------------
# which_probe
# ---------------------------------------------------------------------------


class TestWhichProbe:

    def test_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(shutil, "which", lambda tool: f"/usr/bin/{tool}")
        assert which_probe("uvx") is True

    def test_not_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(shutil, "which", lambda tool: None)
        assert which_probe("uvx") is False

    def test_lookup_failure_raises_probe_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(tool: str) -> str:
            raise PermissionError("denied")

        monkeypatch.setattr(shutil, "which", fail)
        with pytest.raises(ProbeError, match="uvx"):
            which_probe("uvx")

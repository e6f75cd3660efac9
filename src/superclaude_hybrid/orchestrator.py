"""Bootstrapper: sequences the components behind each CLI command.

``initialize()`` powers ``init`` and ``status``: it detects MCP servers,
registers plugins and collects active behavioral modes into an
``InitReport``. ``save_settings()`` derives and writes Claude Code's
settings without any detection. ``hot_reload()`` re-reads the
configuration and re-runs detection when ``HOT_RELOAD_ENABLED=true``.

Every method reads ``store.config`` afresh, so a reload is picked up by
all later calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from superclaude_hybrid.config.paths import backup_dir, settings_path
from superclaude_hybrid.config.store import ConfigStore
from superclaude_hybrid.discovery import CapabilityDetector, DetectionResult
from superclaude_hybrid.plugins import (
    ActiveMode,
    PluginRegistrar,
    RegisteredPlugin,
    active_modes,
)
from superclaude_hybrid.settings import (
    SettingsWriter,
    WriteOutcome,
    derive_settings,
    resolve_provider,
)

logger = logging.getLogger(__name__)


@dataclass
class InitReport:
    """Everything the ``init``/``status`` report displays.

    Attributes:
        servers: Detection results for enabled MCP servers.
        plugins: Registered (enabled) plugins.
        modes: Enabled behavioral modes.
        provider: Effective provider identity.
        safe_mode: Value of ``core.safe_mode``.
        claude_dir: Claude Code's settings directory.
        claude_dir_exists: Whether that directory exists after the run.
        claude_dir_created: Whether this run created it.
    """

    servers: list[DetectionResult] = field(default_factory=list)
    plugins: list[RegisteredPlugin] = field(default_factory=list)
    modes: list[ActiveMode] = field(default_factory=list)
    provider: str = ""
    safe_mode: bool = False
    claude_dir: Path | None = None
    claude_dir_exists: bool = False
    claude_dir_created: bool = False

    @property
    def active_server_count(self) -> int:
        return sum(1 for s in self.servers if s.is_available)


class Bootstrapper:
    """Runs the detection, registration and settings pipelines.

    Args:
        store: Configuration store (already loaded or loaded lazily).
        claude_dir: Claude Code's settings directory.
        env: Environment snapshot for provider selection and flags.
        detector: MCP server detector; replaceable in tests.
        registrar: Plugin registrar.
        writer: Settings writer; defaults to one backing up into
            ``<claude_dir>/config-backups``.
    """

    def __init__(
        self,
        store: ConfigStore,
        claude_dir: Path,
        *,
        env: Mapping[str, str],
        detector: CapabilityDetector | None = None,
        registrar: PluginRegistrar | None = None,
        writer: SettingsWriter | None = None,
    ) -> None:
        self.store = store
        self.claude_dir = claude_dir
        self.env = env
        self.detector = detector or CapabilityDetector()
        self.registrar = registrar or PluginRegistrar()
        self.writer = writer or SettingsWriter(backup_dir(claude_dir))

    def initialize(self, *, create_claude_dir: bool = True) -> InitReport:
        """Detect servers, register plugins and collect active modes.

        Args:
            create_claude_dir: Create the Claude directory when missing.
                ``status`` passes False to stay read-only.

        Returns:
            The populated ``InitReport``.
        """
        config = self.store.config
        created = False
        if create_claude_dir and not self.claude_dir.exists():
            logger.info("Creating Claude directory %s", self.claude_dir)
            self.claude_dir.mkdir(parents=True, exist_ok=True)
            created = True

        return InitReport(
            servers=self.detector.detect(config.mcp_servers),
            plugins=self.registrar.register(config.plugins),
            modes=active_modes(config.behavioral_modes),
            provider=resolve_provider(config, self.env),
            safe_mode=config.core.safe_mode,
            claude_dir=self.claude_dir,
            claude_dir_exists=self.claude_dir.is_dir(),
            claude_dir_created=created,
        )

    def save_settings(self) -> WriteOutcome:
        """Derive settings and write them to ``<claude_dir>/settings.json``.

        Raises:
            MissingProviderConfigError: If the provider is not configured.
            BackupError: If the previous settings cannot be backed up.
            WriteError: If the new settings cannot be written.
        """
        settings = derive_settings(self.store.config, self.env)
        return self.writer.write(settings, settings_path(self.claude_dir))

    @property
    def hot_reload_enabled(self) -> bool:
        return self.env.get("HOT_RELOAD_ENABLED") == "true"

    def hot_reload(self) -> list[DetectionResult] | None:
        """Reload the configuration and re-run detection.

        Returns:
            Fresh detection results, or None when hot reload is disabled.

        Raises:
            ConfigLoadError: If the configuration can no longer be loaded.
        """
        if not self.hot_reload_enabled:
            logger.debug("Hot reload disabled; HOT_RELOAD_ENABLED is not 'true'")
            return None
        config = self.store.reload()
        return self.detector.detect(config.mcp_servers)

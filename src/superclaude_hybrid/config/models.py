"""Data models for ``superclaude.config.json``.

The raw JSON document is normalized once, at load time, into frozen
dataclasses. Optional fields receive their defaults here (``enabled``
defaults to True for servers, ``commands`` to an empty tuple, ``settings``
to an empty mapping) so that no consumer has to re-apply them.

Expected document shape:

.. code-block:: json

    {
      "core": {
        "provider": {
          "default": "glm",
          "glm": {"base_url": "https://...", "models": {"opus": "..."}},
          "claude": {}
        },
        "timeout_ms": 3000000,
        "safe_mode": true
      },
      "mcp_servers": {"context7": {"command": "npx -y @upstash/context7-mcp"}},
      "plugins": {"git-workflow": {"enabled": true, "commands": ["/commit"]}},
      "behavioral_modes": {"brainstorming": {"enabled": true, "description": "..."}}
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from superclaude_hybrid.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _section(data: Mapping[str, Any], key: str, *, where: str) -> Mapping[str, Any]:
    """Return ``data[key]`` as a mapping, treating absence as empty."""
    value = data.get(key)
    if value is None:
        return _EMPTY
    if not isinstance(value, Mapping):
        raise ConfigLoadError(f"'{where}' must be an object")
    return value


def _entry(value: Any, *, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigLoadError(f"'{where}' must be an object")
    return value


def _declared(value: Any, *, where: str) -> Mapping[str, Any]:
    """Return a declaration entry, or an empty one if it is not an object.

    A single malformed entry must not prevent the rest of the document
    from loading; it normalizes to the declaration defaults instead.
    """
    if isinstance(value, Mapping):
        return value
    logger.warning("Ignoring fields of '%s': expected an object, got %s", where, type(value).__name__)
    return _EMPTY


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ServerDeclaration:
    """A declared MCP server.

    Attributes:
        command: Invocation template, e.g. ``"npx -y @upstash/context7-mcp"``.
        enabled: False only when the config says so explicitly.
        extra: Any other declared fields, kept verbatim for reporting.
    """

    command: str = ""
    enabled: bool = True
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ServerDeclaration:
        command = data.get("command")
        extra = {k: v for k, v in data.items() if k not in ("command", "enabled")}
        return cls(
            command=command if isinstance(command, str) else "",
            enabled=data.get("enabled") is not False,
            extra=MappingProxyType(extra),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the declared fields as a plain dict."""
        return {"command": self.command, "enabled": self.enabled, **self.extra}


@dataclass(frozen=True)
class PluginDeclaration:
    """A declared plugin. Only ``enabled is True`` activates it."""

    enabled: bool = False
    commands: tuple[str, ...] = ()
    settings: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, where: str = "plugin") -> PluginDeclaration:
        commands = data.get("commands") or []
        settings = data.get("settings") or {}
        if not isinstance(commands, list):
            logger.warning("Ignoring '%s.commands': expected an array", where)
            commands = []
        if not isinstance(settings, Mapping):
            logger.warning("Ignoring '%s.settings': expected an object", where)
            settings = {}
        return cls(
            enabled=data.get("enabled") is True,
            commands=tuple(str(c) for c in commands),
            settings=MappingProxyType(dict(settings)),
        )


@dataclass(frozen=True)
class ModeDeclaration:
    """A behavioral mode toggle with a human-readable description."""

    enabled: bool = False
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModeDeclaration:
        description = data.get("description")
        return cls(
            enabled=bool(data.get("enabled")),
            description=description if isinstance(description, str) else "",
        )


# ---------------------------------------------------------------------------
# Core section
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProviderConfig:
    """Sub-configuration of one upstream provider.

    Attributes:
        name: Provider identity (the key under ``core.provider``).
        base_url: API base URL, required only by token-based providers.
        models: Tier name (``opus``/``sonnet``/``haiku``) to model identifier.
    """

    name: str
    base_url: str | None = None
    models: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> ProviderConfig:
        base_url = data.get("base_url")
        models = data.get("models") or {}
        if not isinstance(models, Mapping):
            raise ConfigLoadError(f"'core.provider.{name}.models' must be an object")
        return cls(
            name=name,
            base_url=base_url if isinstance(base_url, str) else None,
            models=MappingProxyType({str(k): v for k, v in models.items()}),
        )


@dataclass(frozen=True)
class CoreConfig:
    """The ``core`` section: provider selection, timeout, safe mode."""

    default_provider: str = ""
    providers: Mapping[str, ProviderConfig] = field(default_factory=dict)
    timeout_ms: int | float = 0
    safe_mode: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CoreConfig:
        provider_section = _section(data, "provider", where="core.provider")
        default = provider_section.get("default")
        providers: dict[str, ProviderConfig] = {}
        for name, value in provider_section.items():
            if name == "default":
                continue
            value = _entry(value, where=f"core.provider.{name}")
            providers[name] = ProviderConfig.from_dict(name, value)

        timeout = data.get("timeout_ms", 0)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigLoadError("'core.timeout_ms' must be a number")
        # Integral values render without a decimal point; others verbatim.
        if isinstance(timeout, float) and timeout.is_integer():
            timeout = int(timeout)

        return cls(
            default_provider=default if isinstance(default, str) else "",
            providers=MappingProxyType(providers),
            timeout_ms=timeout,
            safe_mode=bool(data.get("safe_mode", False)),
        )


# ---------------------------------------------------------------------------
# Configuration root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Configuration:
    """The whole configuration document, normalized.

    Attributes:
        core: Provider selection, timeout and safe-mode flag.
        mcp_servers: Server name to declaration, in document order.
        plugins: Plugin name to declaration, in document order.
        behavioral_modes: Mode name to declaration, in document order.
        raw: The parsed JSON document as loaded.
        source: File the configuration was read from, if any.
    """

    core: CoreConfig
    mcp_servers: Mapping[str, ServerDeclaration] = field(default_factory=dict)
    plugins: Mapping[str, PluginDeclaration] = field(default_factory=dict)
    behavioral_modes: Mapping[str, ModeDeclaration] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: Path | None = None) -> Configuration:
        """Build a Configuration from a parsed JSON document.

        Args:
            data: The JSON root object.
            source: Optional path the document came from.

        Returns:
            The normalized configuration.

        Raises:
            ConfigLoadError: If a section or provider entry has the wrong
                shape. Malformed server, plugin and mode entries fall back
                to their defaults instead.
        """
        if not isinstance(data, Mapping):
            raise ConfigLoadError("configuration root must be a JSON object", path=source)

        servers = {
            name: ServerDeclaration.from_dict(_declared(value, where=f"mcp_servers.{name}"))
            for name, value in _section(data, "mcp_servers", where="mcp_servers").items()
        }
        plugins = {
            name: PluginDeclaration.from_dict(
                _declared(value, where=f"plugins.{name}"), where=f"plugins.{name}",
            )
            for name, value in _section(data, "plugins", where="plugins").items()
        }
        modes = {
            name: ModeDeclaration.from_dict(_declared(value, where=f"behavioral_modes.{name}"))
            for name, value in _section(data, "behavioral_modes", where="behavioral_modes").items()
        }
        return cls(
            core=CoreConfig.from_dict(_section(data, "core", where="core")),
            mcp_servers=MappingProxyType(servers),
            plugins=MappingProxyType(plugins),
            behavioral_modes=MappingProxyType(modes),
            raw=MappingProxyType(dict(data)),
            source=source,
        )

"""Plugin registrar: selects the plugins a configuration enables.

A plugin is registered only when its declaration says ``enabled: true``;
absent or false means off. Registration is a pure projection of the
configuration, so registering twice yields identical output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from superclaude_hybrid.config.models import PluginDeclaration


@dataclass(frozen=True)
class RegisteredPlugin:
    """An enabled plugin with its slash commands and settings."""

    name: str
    commands: tuple[str, ...] = ()
    settings: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "commands": list(self.commands),
            "settings": dict(self.settings),
        }


class PluginRegistrar:
    """Projects enabled plugin declarations to ``RegisteredPlugin`` entries."""

    def register(self, plugins: Mapping[str, PluginDeclaration]) -> list[RegisteredPlugin]:
        """Return the enabled plugins, in mapping order.

        Args:
            plugins: Plugin name to declaration.

        Returns:
            One ``RegisteredPlugin`` per declaration with ``enabled is True``.
        """
        return [
            RegisteredPlugin(
                name=name,
                commands=tuple(plugin.commands),
                settings=dict(plugin.settings),
            )
            for name, plugin in plugins.items()
            if plugin.enabled is True
        ]

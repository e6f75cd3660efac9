"""Plugin registration and behavioral mode selection."""

from __future__ import annotations

from superclaude_hybrid.plugins.modes import ActiveMode, active_modes
from superclaude_hybrid.plugins.registrar import PluginRegistrar, RegisteredPlugin

__all__ = [
    "ActiveMode",
    "PluginRegistrar",
    "RegisteredPlugin",
    "active_modes",
]

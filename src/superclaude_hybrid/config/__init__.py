"""Configuration loading for ``superclaude.config.json``.

Public API::

    from superclaude_hybrid.config import ConfigStore

    store = ConfigStore(resolve_config_path(os.environ))
    config = store.load()
    print(config.core.default_provider)
"""

from __future__ import annotations

from superclaude_hybrid.config.models import (
    Configuration,
    CoreConfig,
    ModeDeclaration,
    PluginDeclaration,
    ProviderConfig,
    ServerDeclaration,
)
from superclaude_hybrid.config.paths import (
    CONFIG_FILENAME,
    backup_dir,
    resolve_claude_dir,
    resolve_config_path,
    settings_path,
)
from superclaude_hybrid.config.store import ConfigStore, load_config_file

__all__ = [
    "CONFIG_FILENAME",
    "ConfigStore",
    "Configuration",
    "CoreConfig",
    "ModeDeclaration",
    "PluginDeclaration",
    "ProviderConfig",
    "ServerDeclaration",
    "backup_dir",
    "load_config_file",
    "resolve_claude_dir",
    "resolve_config_path",
    "settings_path",
]

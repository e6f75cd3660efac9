"""Configuration store: loads ``superclaude.config.json`` from disk.

The store holds exactly one ``Configuration`` at a time. ``reload()``
re-reads the file and replaces the held value wholesale; there is no
merging with the previous document, so callers must re-read
``store.config`` after a reload.

A ``.env`` file next to the configuration file is loaded first (without
overriding variables already set), so secrets such as ``ZAI_API_KEY``
never need to appear in the JSON document.
"""

from __future__ import annotations

import json
import logging
from json import JSONDecodeError
from pathlib import Path

from dotenv import load_dotenv

from superclaude_hybrid.config.models import Configuration
from superclaude_hybrid.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)


def load_config_file(path: Path) -> Configuration:
    """Read and normalize a configuration file.

    Args:
        path: JSON file to read.

    Returns:
        The normalized ``Configuration``.

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not valid JSON,
            or does not match the configuration schema.
    """
    if not path.is_file():
        raise ConfigLoadError("configuration file not found", path=path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"cannot read file: {exc}", path=path) from exc

    try:
        data = json.loads(text)
    except JSONDecodeError as exc:
        raise ConfigLoadError(
            f"invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}",
            path=path,
        ) from exc

    try:
        return Configuration.from_dict(data, source=path)
    except ConfigLoadError as exc:
        if exc.path is not None:
            raise
        raise ConfigLoadError(exc.reason, path=path) from exc


class ConfigStore:
    """Owns the configuration for one process.

    Usage::

        store = ConfigStore(Path("superclaude.config.json"))
        config = store.load()
        ...
        config = store.reload()
    """

    def __init__(self, path: Path, *, load_dotenv_file: bool = True) -> None:
        self.path = path
        self._load_dotenv_file = load_dotenv_file
        self._config: Configuration | None = None

    @property
    def config(self) -> Configuration:
        """The currently held configuration, loaded on first access."""
        if self._config is None:
            return self.load()
        return self._config

    def load(self) -> Configuration:
        """Load the configuration file and hold the result.

        Raises:
            ConfigLoadError: On any read, parse or schema failure. The
                previously held configuration (if any) is left untouched.
        """
        if self._load_dotenv_file:
            dotenv_path = self.path.parent / ".env"
            if dotenv_path.is_file():
                load_dotenv(dotenv_path, override=False)
        config = load_config_file(self.path)
        self._config = config
        logger.debug("Loaded configuration from %s", self.path)
        return config

    def reload(self) -> Configuration:
        """Re-read the file, replacing the held configuration entirely."""
        return self.load()

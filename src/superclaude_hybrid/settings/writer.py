"""Settings writer with timestamped backups.

Before overwriting ``settings.json`` the writer copies the current file,
byte for byte, into the backup directory as
``settings_<timestamp>.json``. If the backup fails the new settings are
not written. Backups are never pruned.
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from superclaude_hybrid.exceptions import BackupError, WriteError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def backup_filename(moment: datetime) -> str:
    """Return the backup filename for ``moment``.

    The timestamp is ISO-8601 UTC with milliseconds, with ``:`` and ``.``
    replaced by ``-``: ``settings_2026-10-18T09-05-01-250Z.json``.
    """
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    stamp = stamp.replace("+00:00", "Z").replace(":", "-").replace(".", "-")
    return f"settings_{stamp}.json"


@dataclass(frozen=True)
class WriteOutcome:
    """Paths touched by one ``SettingsWriter.write`` call."""

    target: Path
    backup: Path | None = None


class SettingsWriter:
    """Persists derived settings, backing up any previous file first.

    Args:
        backup_dir: Directory receiving backups; created on demand.
        clock: Returns the current time; injectable for tests.
    """

    def __init__(self, backup_dir: Path, *, clock: Callable[[], datetime] = utc_now) -> None:
        self.backup_dir = backup_dir
        self._clock = clock

    def write(self, settings: dict[str, Any], target_path: Path) -> WriteOutcome:
        """Write ``settings`` as 2-space indented JSON to ``target_path``.

        Args:
            settings: JSON-serializable settings object.
            target_path: File to overwrite.

        Returns:
            The written target and the backup path, if one was made.

        Raises:
            BackupError: If the existing file could not be backed up.
            WriteError: If the new settings could not be written.
        """
        backup = self._backup(target_path) if target_path.exists() else None

        try:
            text = json.dumps(settings, indent=2)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise WriteError(f"Cannot write settings to {target_path}: {exc}") from exc

        logger.debug("Wrote settings to %s", target_path)
        return WriteOutcome(target=target_path, backup=backup)

    def _backup(self, target_path: Path) -> Path:
        backup_path = self.backup_dir / backup_filename(self._clock())
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(target_path, backup_path)
        except OSError as exc:
            raise BackupError(f"Cannot back up {target_path} to {backup_path}: {exc}") from exc
        logger.debug("Backed up %s to %s", target_path, backup_path)
        return backup_path

"""Behavioral modes: named toggles surfaced in the status report only."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from superclaude_hybrid.config.models import ModeDeclaration


@dataclass(frozen=True)
class ActiveMode:
    name: str
    description: str


def active_modes(modes: Mapping[str, ModeDeclaration]) -> list[ActiveMode]:
    """Return the enabled modes in configuration order."""
    return [
        ActiveMode(name=name, description=mode.description)
        for name, mode in modes.items()
        if mode.enabled
    ]

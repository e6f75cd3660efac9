"""Shared fixtures for superclaude_hybrid tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from superclaude_hybrid.config import Configuration

_SCENARIO: dict[str, Any] = {
    "core": {
        "provider": {
            "default": "glm",
            "glm": {
                "base_url": "https://api.example.test",
                "models": {"opus": "o", "sonnet": "s", "haiku": "h"},
            },
        },
        "timeout_ms": 5000,
        "safe_mode": True,
    },
    "mcp_servers": {
        "a": {"command": "npx foo", "enabled": True},
        "b": {"command": "uvx bar"},
    },
    "plugins": {"p": {"enabled": True, "commands": ["x"]}},
    "behavioral_modes": {},
}


@pytest.fixture
def scenario_data() -> dict[str, Any]:
    """The reference configuration document (glm provider, two servers)."""
    return copy.deepcopy(_SCENARIO)


@pytest.fixture
def full_data(scenario_data: dict[str, Any]) -> dict[str, Any]:
    """Reference document extended with an account provider, modes and more plugins."""
    scenario_data["core"]["provider"]["claude"] = {}
    scenario_data["mcp_servers"]["off"] = {"command": "npx disabled", "enabled": False}
    scenario_data["mcp_servers"]["custom"] = {"command": "node ./server.js"}
    scenario_data["plugins"]["idle"] = {"enabled": False, "commands": ["/idle"]}
    scenario_data["plugins"]["bare"] = {"enabled": True}
    scenario_data["behavioral_modes"] = {
        "brainstorming": {"enabled": True, "description": "Collaborative discovery"},
        "token-efficiency": {"enabled": False, "description": "Compressed output"},
    }
    return scenario_data


@pytest.fixture
def scenario_config(scenario_data: dict[str, Any]) -> Configuration:
    return Configuration.from_dict(scenario_data)


@pytest.fixture
def full_config(full_data: dict[str, Any]) -> Configuration:
    return Configuration.from_dict(full_data)


@pytest.fixture
def config_file(tmp_path: Path, full_data: dict[str, Any]) -> Path:
    """Write the extended document to ``superclaude.config.json``."""
    path = tmp_path / "superclaude.config.json"
    path.write_text(json.dumps(full_data), encoding="utf-8")
    return path

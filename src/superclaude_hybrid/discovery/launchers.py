"""Static registry of MCP server launcher families.

A launcher family is recognized by a token in a server's ``command``
string. Each ``LauncherFamily`` records whether launching it needs a tool
that must already be installed on the host:

- ``npm`` (``npx``): packages are fetched on demand over the network, so
  the presence of the token is enough and nothing is probed.
- ``uv`` (``uvx``): requires the ``uvx`` executable on ``PATH``.

Families are matched in registry order and the first whose token occurs
in the command wins. Adding a family here is all the detector needs to
support a new launcher.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LauncherFamily:
    """Describes how servers started by one launcher are detected.

    Attributes:
        name: Family identifier, used in status labels (``uv_not_found``).
        token: Substring of the server command that selects this family.
        probe_tool: Executable that must be on ``PATH``, or None when the
            family needs no local tool.
    """

    name: str
    token: str
    probe_tool: str | None = None

    def matches(self, command: str) -> bool:
        return self.token in command


DEFAULT_LAUNCHERS: tuple[LauncherFamily, ...] = (
    LauncherFamily(name="npm", token="npx"),
    LauncherFamily(name="uv", token="uvx", probe_tool="uvx"),
)


def match_launcher(
    command: str,
    launchers: tuple[LauncherFamily, ...] = DEFAULT_LAUNCHERS,
) -> LauncherFamily | None:
    """Return the first launcher family whose token occurs in ``command``."""
    if not command:
        return None
    for family in launchers:
        if family.matches(command):
            return family
    return None

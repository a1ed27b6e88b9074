"""Data models: Monitor, LogicalGroup, Mode, JoinPosition."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


# Connector families of laptop panels, or the phrase gdctl uses in descriptions
_BUILTIN_RE = re.compile(r"\b(?:eDP|LVDS|DSI)|\bbuilt-?in\b", re.IGNORECASE)


def is_builtin_name(text: str) -> bool:
    """True if a connector id or description names a built-in panel."""
    return bool(text) and _BUILTIN_RE.search(text) is not None


# ── Enums ────────────────────────────────────────────────────────────────

class Mode(str, Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"
    JOIN_BUILTIN = "join-builtin"
    JOIN_EXTERNAL = "join-external"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        labels = {
            "builtin": "Built-in only",
            "external": "External only",
            "join-builtin": "Join (built-in primary)",
            "join-external": "Join (external primary)",
            "unknown": "Unknown",
        }
        return labels[self.value]

    @property
    def is_join(self) -> bool:
        return self in (Mode.JOIN_BUILTIN, Mode.JOIN_EXTERNAL)

    @classmethod
    def coerce(cls, value: object) -> Mode:
        """Return the matching Mode, or UNKNOWN for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class JoinPosition(str, Enum):
    LEFT = "Left"
    RIGHT = "Right"
    ABOVE = "Above"
    BELOW = "Below"

    @property
    def flag(self) -> str:
        """gdctl placement flag, relative to the preceding logical monitor."""
        flags = {
            "Left": "--left-of",
            "Right": "--right-of",
            "Above": "--above",
            "Below": "--below",
        }
        return flags[self.value]

    @classmethod
    def coerce(cls, value: object) -> JoinPosition:
        """Return the matching position, falling back to RIGHT."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RIGHT


# ── Monitor ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Monitor:
    id: str                     # connector, e.g. "eDP-1", "HDMI-1"
    description: str = ""       # e.g. "Built-in display", "LG Electronics 27\""
    is_builtin: bool = False

    @classmethod
    def from_entry(cls, connector: str, description: str = "") -> Monitor:
        """Create from a ``Monitor <id> (<description>)`` entry."""
        description = description.strip()
        return cls(
            id=connector,
            description=description,
            is_builtin=is_builtin_name(description) or is_builtin_name(connector),
        )


# ── LogicalGroup ─────────────────────────────────────────────────────────

@dataclass
class LogicalGroup:
    monitor_ids: list[str] = field(default_factory=list)
    is_primary: bool = False
    is_builtin: bool = False

    def add(self, monitor_id: str, builtin_ids: set[str]) -> None:
        self.monitor_ids.append(monitor_id)
        if monitor_id in builtin_ids:
            self.is_builtin = True

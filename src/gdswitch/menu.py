"""Declarative menu model: which entries exist and which are checked."""

from __future__ import annotations

from dataclasses import dataclass

from .models import JoinPosition, Mode

SECTION_MODE = "mode"
SECTION_POSITION = "position"

# Order shown to the user
SWITCHABLE_MODES = (
    Mode.JOIN_EXTERNAL,
    Mode.JOIN_BUILTIN,
    Mode.EXTERNAL,
    Mode.BUILTIN,
)


@dataclass(frozen=True)
class MenuEntry:
    key: str        # Mode or JoinPosition value
    label: str
    section: str    # SECTION_MODE or SECTION_POSITION
    checked: bool = False


def render_menu(current_mode: Mode | str, join_position: JoinPosition | str) -> list[MenuEntry]:
    """Return the menu entries for the given state.

    At most one mode is checked (none for an unknown arrangement); exactly
    one join position is checked.
    """
    mode = Mode.coerce(current_mode)
    position = JoinPosition.coerce(join_position)

    entries = [
        MenuEntry(m.value, m.label, SECTION_MODE, m == mode)
        for m in SWITCHABLE_MODES
    ]
    entries += [
        MenuEntry(p.value, p.value, SECTION_POSITION, p == position)
        for p in JoinPosition
    ]
    return entries

"""Parse ``gdctl show`` output into monitors and the current arrangement mode.

The output is a tree drawn with box-drawing glyphs::

    Monitors:
    ├──Monitor eDP-1 (Built-in display)
    │   ├──Vendor: BOE
    │   ...
    └──Monitor HDMI-1 (LG Electronics 27")
        ...

    Logical monitors:
    ├──Logical monitor #1
    │   ├──Position: (0, 0)
    │   ├──Primary: yes
    │   └──Monitors: (1)
    │       └──eDP-1 (Built-in display)
    └──Logical monitor #2
        ├──Primary: no
        └──Monitors: (1)
            └──HDMI-1 (LG Electronics 27")

gdctl does not promise a stable format, so nothing here raises on odd
input: missing sections degrade to an empty monitor list and/or
``Mode.UNKNOWN``.
"""

from __future__ import annotations

import logging
import re

from .models import LogicalGroup, Mode, Monitor

log = logging.getLogger(__name__)

# Section headers sit at column 0; nested "Monitors:" lines always carry a prefix
_MONITORS_HEADER_RE = re.compile(r"^Monitors:", re.IGNORECASE)
_LOGICAL_HEADER_RE = re.compile(r"^Logical monitors:", re.IGNORECASE)

_PREFIX_RE = re.compile(r"^[\s\u2500-\u257f]*")
_ID = r"[^\s():]+"  # connector id, e.g. "eDP-1", "DP-1.1"
_MONITOR_RE = re.compile(rf"^Monitor\s+({_ID})(?:\s*\((.*)\))?", re.IGNORECASE)
_LOGICAL_RE = re.compile(r"^Logical monitor\b", re.IGNORECASE)
_PRIMARY_RE = re.compile(r"Primary:\s*yes", re.IGNORECASE)
_MEMBERS_RE = re.compile(r"^Monitors:", re.IGNORECASE)
_ENTRY_RE = re.compile(rf"^({_ID})(?:\s*\(.*)?\s*$")


def _strip_tree(line: str) -> tuple[int, str]:
    """Split a line into (depth, text) where depth is the glyph/space prefix length."""
    prefix = _PREFIX_RE.match(line).group(0)
    return len(prefix), line[len(prefix):].strip()


def _section(lines: list[str], header: re.Pattern[str]) -> list[str] | None:
    """Return the lines following *header* up to the first blank line.

    Returns None when the header does not occur at all.
    """
    for i, line in enumerate(lines):
        if header.match(line):
            block: list[str] = []
            for body in lines[i + 1:]:
                if not body.strip():
                    break
                block.append(body)
            return block
    return None


def parse_monitors(block: list[str]) -> list[Monitor]:
    """Collect ``Monitor <id> (<description>)`` entries, first occurrence wins."""
    monitors: list[Monitor] = []
    seen: set[str] = set()
    for line in block:
        _, text = _strip_tree(line)
        m = _MONITOR_RE.match(text)
        if not m:
            continue
        connector = m.group(1)
        if connector in seen:
            log.debug("Dropping duplicate monitor entry %s", connector)
            continue
        seen.add(connector)
        monitors.append(Monitor.from_entry(connector, m.group(2) or ""))
    return monitors


def parse_logical_groups(block: list[str], monitors: list[Monitor]) -> list[LogicalGroup]:
    """Build the logical monitor groups of a ``Logical monitors:`` block."""
    builtin_ids = {m.id for m in monitors if m.is_builtin}
    groups: list[LogicalGroup] = []
    current: LogicalGroup | None = None
    members_depth: int | None = None  # depth of the open "Monitors:" line

    for line in block:
        depth, text = _strip_tree(line)

        if _LOGICAL_RE.match(text):
            if current is not None:
                groups.append(current)
            current = LogicalGroup()
            members_depth = None
            continue

        if current is None:
            continue

        if members_depth is not None:
            if depth > members_depth:
                m = _ENTRY_RE.match(text)
                if m:
                    current.add(m.group(1), builtin_ids)
                continue
            members_depth = None

        if _PRIMARY_RE.search(text):
            current.is_primary = True
        elif _MEMBERS_RE.match(text):
            members_depth = depth

    if current is not None:
        groups.append(current)
    return groups


def classify_groups(groups: list[LogicalGroup]) -> Mode:
    """Map the logical monitor groups onto an arrangement mode."""
    if not groups:
        return Mode.UNKNOWN
    if len(groups) == 1:
        return Mode.BUILTIN if groups[0].is_builtin else Mode.EXTERNAL
    for group in groups:
        if group.is_primary:
            return Mode.JOIN_BUILTIN if group.is_builtin else Mode.JOIN_EXTERNAL
    return Mode.UNKNOWN


def parse_show(raw_text: str) -> tuple[list[Monitor], Mode]:
    """Parse ``gdctl show`` text into (monitors, current mode)."""
    lines = (raw_text or "").splitlines()

    monitor_block = _section(lines, _MONITORS_HEADER_RE)
    if monitor_block is None:
        log.debug("No Monitors section in gdctl output")
        return [], Mode.UNKNOWN
    monitors = parse_monitors(monitor_block)

    logical_block = _section(lines, _LOGICAL_HEADER_RE)
    if logical_block is None:
        log.debug("No Logical monitors section in gdctl output")
        return monitors, Mode.UNKNOWN

    groups = parse_logical_groups(logical_block, monitors)
    mode = classify_groups(groups)
    log.debug("Parsed %d monitor(s), %d logical group(s): %s",
              len(monitors), len(groups), mode.value)
    return monitors, mode

"""Build ``gdctl set`` arguments for an arrangement mode."""

from __future__ import annotations

import logging
import shlex

from .models import JoinPosition, Mode, Monitor

log = logging.getLogger(__name__)


def _resolve(mode: Mode, builtin_ids: list[str], external_ids: list[str]) -> tuple[list[str], str | None]:
    """Return (ordered monitor ids, primary id) for *mode*; primary is None if unsatisfiable."""
    if mode == Mode.BUILTIN:
        return builtin_ids, next(iter(builtin_ids), None)
    if mode == Mode.EXTERNAL:
        return external_ids, next(iter(external_ids), None)
    if mode == Mode.JOIN_BUILTIN:
        return builtin_ids + external_ids, next(iter(builtin_ids), None)
    if mode == Mode.JOIN_EXTERNAL:
        return builtin_ids + external_ids, next(iter(external_ids), None)
    return [], None


def plan(
    mode: Mode | str,
    monitors: list[Monitor],
    join_position: JoinPosition | str = JoinPosition.RIGHT,
) -> list[str] | None:
    """Return the ``gdctl set`` arguments that switch to *mode*.

    Every monitor of the resolved list becomes its own logical monitor.  In
    join modes each one after the first is placed relative to the previous
    one using *join_position* (unrecognised values act as ``Right``).  The
    primary gets ``--primary`` after its declaration and placement.

    Returns None when *mode* is unknown or no monitor can serve as its
    primary; the caller reports that instead of running gdctl.
    """
    mode = Mode.coerce(mode)
    builtin_ids = [m.id for m in monitors if m.is_builtin]
    external_ids = [m.id for m in monitors if not m.is_builtin]

    ordered, primary = _resolve(mode, builtin_ids, external_ids)
    if primary is None:
        log.debug("No eligible monitors for mode %s", mode.value)
        return None

    flag = JoinPosition.coerce(join_position).flag
    primary_index = ordered.index(primary)
    args: list[str] = []
    prev: str | None = None
    for i, monitor_id in enumerate(ordered):
        args += ["--logical-monitor", "--monitor", monitor_id]
        if mode.is_join and prev is not None:
            args += [flag, prev]
        if i == primary_index:
            args.append("--primary")
        prev = monitor_id

    log.debug("Planned %s: %s", mode.value, describe_plan(args))
    return args


def describe_plan(args: list[str], binary: str = "gdctl") -> str:
    """Render *args* as a shell-quoted ``gdctl set`` command line."""
    return shlex.join([binary, "set", *args])

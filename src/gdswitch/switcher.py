"""Detect the current arrangement and switch between modes."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from .gdctl import GdctlClient, GdctlError
from .models import JoinPosition, Mode, Monitor
from .parser import parse_show
from .planner import describe_plan, plan
from .utils import load_join_position

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwitchResult:
    applied: bool
    message: str
    mode: Mode = Mode.UNKNOWN   # arrangement reported by gdctl afterwards


class DisplaySwitcher:
    """Glue between gdctl, the show-output parser and the mode planner."""

    def __init__(
        self,
        client: GdctlClient | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._client = client or GdctlClient.from_settings()
        self._notify = notify
        self._lock = threading.Lock()  # one gdctl set at a time

    @property
    def client(self) -> GdctlClient:
        return self._client

    def detect(self) -> tuple[list[Monitor], Mode]:
        """Query gdctl and return (monitors, current mode). Raises GdctlError."""
        return parse_show(self._client.show())

    def current_mode(self) -> Mode:
        """Return the current mode, UNKNOWN if gdctl cannot be queried."""
        try:
            return self.detect()[1]
        except GdctlError as e:
            log.error("Detect mode failed: %s", e)
            return Mode.UNKNOWN

    def plan(self, mode: Mode | str, join_position: JoinPosition | str | None = None) -> list[str] | None:
        """Return the gdctl arguments for *mode* without applying them. Raises GdctlError."""
        if join_position is None:
            join_position = load_join_position()
        monitors, _ = self.detect()
        return plan(mode, monitors, join_position)

    def switch(self, mode: Mode | str, join_position: JoinPosition | str | None = None) -> SwitchResult:
        """Switch to *mode* and confirm by querying gdctl again.

        Never raises for gdctl failures; the outcome is in the result
        message, which is also passed to the notifier.
        """
        mode = Mode.coerce(mode)
        if join_position is None:
            join_position = load_join_position()

        with self._lock:
            try:
                monitors, before = self.detect()
                args = plan(mode, monitors, join_position)
                if args is None:
                    log.info("No monitors available for mode %s", mode.value)
                    return self._finish(False, f"Cannot apply mode '{mode.value}'.", before)

                log.info("Switching %s -> %s: %s", before.value, mode.value,
                         describe_plan(args, self._client.binary))
                self._client.apply(args)
            except GdctlError as e:
                log.error("Switch to %s failed: %s", mode.value, e)
                return self._finish(False, f"Error: {e}", Mode.UNKNOWN)

            # gdctl set succeeded; from here on the switch counts as applied
            try:
                _, after = self.detect()
            except GdctlError as e:
                log.warning("Switched to %s but could not confirm: %s", mode.value, e)
                return self._finish(
                    True,
                    f"Switched to {mode.label}, but the current mode could not be confirmed: {e}",
                    Mode.UNKNOWN,
                )

        if after != mode:
            log.warning("Requested %s but gdctl reports %s", mode.value, after.value)
            return self._finish(
                True, f"Switched to {mode.label}, but gdctl reports {after.label}.", after,
            )
        return self._finish(True, f"Switched to {mode.label}.", after)

    def _finish(self, applied: bool, message: str, mode: Mode) -> SwitchResult:
        if self._notify is not None:
            self._notify(message)
        else:
            log.info(message)
        return SwitchResult(applied, message, mode)

"""Run blocking gdctl work off the GTK main loop, one job at a time."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

log = logging.getLogger(__name__)


class JobRunner:
    """Start a job on a worker thread and hand its result back via *schedule*.

    *schedule* is ``GLib.idle_add`` in the GUI: it is called from the worker
    thread as ``schedule(func, *args)`` and must run ``func`` on the main loop.
    """

    def __init__(self, schedule: Callable[..., Any]) -> None:
        self._schedule = schedule
        self._busy = False
        self._thread: threading.Thread | None = None

    @property
    def busy(self) -> bool:
        return self._busy

    def start(self, work: Callable[[], Any], done: Callable[[Any], None]) -> bool:
        """Run *work* and pass its result to *done*; None if *work* raised.

        Returns False, without starting anything, while a previous job runs.
        """
        if self._busy:
            return False
        self._busy = True

        def _run() -> None:
            result = None
            try:
                result = work()
            except Exception as e:
                log.error("Background job failed: %s", e)
            finally:
                self._schedule(self._finish, done, result)

        self._thread = threading.Thread(target=_run, daemon=True, name="gdctl")
        self._thread.start()
        return True

    def join(self, timeout: float | None = None) -> None:
        """Wait for the current worker thread."""
        if self._thread is not None:
            self._thread.join(timeout)

    def _finish(self, done: Callable[[Any], None], result: Any) -> bool:
        self._busy = False
        done(result)
        return False

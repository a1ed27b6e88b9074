"""gdctl communication via subprocess."""

from __future__ import annotations

import logging
import shutil
import subprocess

from .utils import DEFAULT_GDCTL, DEFAULT_GDCTL_TIMEOUT, gdctl_path, gdctl_timeout, load_app_settings

log = logging.getLogger(__name__)


class GdctlError(RuntimeError):
    """gdctl could not be run, timed out, or exited non-zero."""


class GdctlClient:
    """Run the Mutter ``gdctl`` tool to read and change the display layout."""

    def __init__(self, binary: str = DEFAULT_GDCTL, timeout: float = DEFAULT_GDCTL_TIMEOUT) -> None:
        self._binary = binary
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: dict | None = None) -> GdctlClient:
        """Create a client using ``gdctl_path``/``gdctl_timeout`` from settings."""
        if settings is None:
            settings = load_app_settings()
        return cls(gdctl_path(settings), gdctl_timeout(settings))

    @property
    def binary(self) -> str:
        return self._binary

    @property
    def timeout(self) -> float:
        return self._timeout

    def is_available(self) -> bool:
        """Return True if the gdctl executable can be found."""
        return shutil.which(self._binary) is not None

    def _run(self, args: list[str]) -> str:
        """Run gdctl with *args* and return stdout."""
        cmd = [self._binary, *args]
        log.debug("Running %s", cmd)
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=True,
            )
        except FileNotFoundError as e:
            raise GdctlError(f"{self._binary} not found") from e
        except subprocess.TimeoutExpired as e:
            raise GdctlError(f"{self._binary} {args[0]} timed out after {self._timeout:g}s") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise GdctlError(f"{self._binary} {args[0]} failed: {detail}") from e
        except OSError as e:
            raise GdctlError(f"Cannot run {self._binary}: {e}") from e
        return proc.stdout

    def show(self) -> str:
        """Return the text of ``gdctl show --verbose``."""
        return self._run(["show", "--verbose"])

    def apply(self, args: list[str]) -> None:
        """Run ``gdctl set`` with *args*, passed through verbatim."""
        self._run(["set", *args])

"""Utility helpers: XDG paths, JSON file I/O, app settings."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .models import JoinPosition


APP_ID = "io.github.gdswitch"

DEFAULT_GDCTL = "gdctl"
DEFAULT_GDCTL_TIMEOUT = 10.0  # seconds


def config_dir() -> Path:
    """Return ~/.config/gdswitch, creating it if needed."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    d = base / "gdswitch"
    d.mkdir(parents=True, exist_ok=True)
    return d


def read_json(path: Path) -> dict | list | None:
    """Read and parse a JSON file, returning None on failure."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None


def write_json(path: Path, data: dict | list) -> None:
    """Write data as formatted JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def _settings_path() -> Path:
    """Return the path to the global app settings file."""
    return config_dir() / "settings.json"


def load_app_settings() -> dict:
    """Load global application settings ({} when missing or corrupt)."""
    data = read_json(_settings_path())
    return data if isinstance(data, dict) else {}


def save_app_settings(settings: dict) -> None:
    """Save global application settings."""
    write_json(_settings_path(), settings)


def load_join_position() -> JoinPosition:
    """Return the stored join position, RIGHT when absent or invalid."""
    return JoinPosition.coerce(load_app_settings().get("join_position"))


def save_join_position(position: JoinPosition | str) -> JoinPosition:
    """Store the join position, keeping other settings. Returns the stored value."""
    position = JoinPosition.coerce(position)
    settings = load_app_settings()
    settings["join_position"] = position.value
    save_app_settings(settings)
    return position


def gdctl_path(settings: dict | None = None) -> str:
    """Return the configured gdctl executable."""
    if settings is None:
        settings = load_app_settings()
    value = settings.get("gdctl_path")
    return value if isinstance(value, str) and value else DEFAULT_GDCTL


def gdctl_timeout(settings: dict | None = None) -> float:
    """Return the configured gdctl timeout in seconds."""
    if settings is None:
        settings = load_app_settings()
    value = settings.get("gdctl_timeout", DEFAULT_GDCTL_TIMEOUT)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_GDCTL_TIMEOUT
    return float(value)

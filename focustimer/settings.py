"""Application settings with JSON persistence.

Settings are stored at:
    ~/.config/FocusTimer/settings.json   (or $FOCUSTIMER_HOME/settings.json)

Only preferences live here.  A running session is never written to disk.

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.durations import (
    BREAK_MAX, BREAK_MIN, BREAK_STEP, DEFAULT_BREAK_MINUTES, DEFAULT_FOCUS_MINUTES,
    FOCUS_MAX, FOCUS_MIN, FOCUS_STEP, DurationConfig, clamp, snap,
)

logger = logging.getLogger(__name__)


APP_SUPPORT_DIR = Path(
    os.environ.get("FOCUSTIMER_HOME")
    or Path.home() / ".config" / "FocusTimer"
)
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 420
    window_height: int = 360

    def duration_config(self) -> DurationConfig:
        """A fresh ``DurationConfig`` seeded from these settings (snapped to the step grid)."""
        return DurationConfig(self.focus_minutes, self.break_minutes)

    def remember_durations(self, config: DurationConfig) -> None:
        self.focus_minutes = config.focus_minutes
        self.break_minutes = config.break_minutes


def _sanitize(settings: Settings) -> Settings:
    settings.focus_minutes = snap(settings.focus_minutes, FOCUS_MIN, FOCUS_MAX, FOCUS_STEP)
    settings.break_minutes = snap(settings.break_minutes, BREAK_MIN, BREAK_MAX, BREAK_STEP)
    settings.sound_volume = clamp(settings.sound_volume, 0, 100)
    return settings


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return _sanitize(Settings(**filtered))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )

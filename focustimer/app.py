"""Main application window for FocusTimer."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow

from .audio.sounds import SoundManager
from .settings import Settings, load_settings, save_settings
from .timer.clock import TickClock
from .timer.engine import TimerEngine
from .timer.phase import SessionPhase, TimerStatus
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class FocusTimerApp(QMainWindow):
    """Owns the one engine, its clock, the sound sink and the settings."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        settings_path: Path | None = None,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__()
        self._settings_path = settings_path
        self._settings = settings if settings is not None else load_settings(settings_path)

        self.setWindowTitle("FocusTimer")
        self.setStyleSheet(build_stylesheet())
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.window_x is not None and self._settings.window_y is not None:
            self.move(self._settings.window_x, self._settings.window_y)

        # ── core ──────────────────────────────────────────────────────
        self.engine = TimerEngine(self._settings.duration_config(), parent=self)
        self.clock = TickClock(self.engine, parent=self)

        # ── notification sink ─────────────────────────────────────────
        self.sounds = SoundManager(self, sounds_dir=sounds_dir)
        self.sounds.set_volume(self._settings.sound_volume)
        self.sounds.set_enabled(self._settings.sound_enabled)
        self.engine.phase_completed.connect(self._on_phase_completed)
        self.engine.status_changed.connect(self._on_status_changed)
        self._last_status: TimerStatus = self.engine.status

        self.timer_widget = TimerWidget(self.engine, self)
        self.setCentralWidget(self.timer_widget)

    @property
    def settings(self) -> Settings:
        return self._settings

    # ── slots ─────────────────────────────────────────────────────────

    def _on_phase_completed(self, previous: SessionPhase, upcoming: SessionPhase) -> None:
        logger.info("phase complete: %s -> %s", previous.label, upcoming.label)
        self.sounds.on_phase_completed(previous, upcoming)
        self.setWindowTitle(f"FocusTimer — {upcoming.label}")

    def _on_status_changed(self, status: TimerStatus) -> None:
        if self._last_status is TimerStatus.IDLE and status is TimerStatus.RUNNING:
            self.sounds.play("session_start")
        if status is TimerStatus.IDLE:
            self.setWindowTitle("FocusTimer")
        self._last_status = status

    # ── shutdown ──────────────────────────────────────────────────────

    def save_settings(self) -> None:
        self._settings.remember_durations(self.engine.config)
        geo = self.geometry()
        self._settings.window_x = geo.x()
        self._settings.window_y = geo.y()
        self._settings.window_width = geo.width()
        self._settings.window_height = geo.height()
        try:
            save_settings(self._settings, self._settings_path)
        except OSError as exc:
            logger.warning("could not save settings: %s", exc)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self.save_settings()
        super().closeEvent(event)

"""Main timer card.

Layout (top → bottom):
    - DurationButtons (focus / break lengths)
    - TimerControls (play/pause, stop, skip)
    - ClockData (title, time left, paused marker, progress bar)
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QProgressBar, QPushButton, QVBoxLayout, QWidget,
)

from ..timer.engine import TimerEngine
from ..timer.errors import InvalidTransition
from ..timer.phase import TimerStatus
from .duration_buttons import DurationButtons
from .styles import progress_chunk_style

logger = logging.getLogger(__name__)


def _guarded(action: Callable[[], None]) -> Callable[[], None]:
    """Wrap an engine control so a stray click is logged, not fatal."""

    def run() -> None:
        try:
            action()
        except InvalidTransition as exc:
            logger.warning("ignored control: %s", exc)

    return run


class TimerControls(QWidget):
    """Play/pause, stop and skip buttons."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(12)
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.play_pause_btn = QPushButton("Start", self)
        self.play_pause_btn.setObjectName("primaryButton")
        self.stop_btn = QPushButton("Stop", self)
        self.stop_btn.setObjectName("dangerButton")
        self.skip_btn = QPushButton("Skip", self)

        row.addWidget(self.play_pause_btn)
        row.addWidget(self.stop_btn)
        row.addWidget(self.skip_btn)

        self.play_pause_btn.clicked.connect(_guarded(engine.toggle_running))
        self.stop_btn.clicked.connect(_guarded(engine.stop))
        self.skip_btn.clicked.connect(_guarded(engine.skip))
        engine.status_changed.connect(self._on_status_changed)
        self._on_status_changed(engine.status)

    def _on_status_changed(self, status: TimerStatus) -> None:
        if status is TimerStatus.RUNNING:
            self.play_pause_btn.setText("Pause")
        elif status is TimerStatus.PAUSED:
            self.play_pause_btn.setText("Resume")
        else:
            self.play_pause_btn.setText("Start")

        # Stop/Skip need a session
        has_session = status is not TimerStatus.IDLE
        self.stop_btn.setEnabled(has_session)
        self.skip_btn.setEnabled(has_session)


class ClockData(QWidget):
    """Session title, remaining time and progress.  Hidden while idle."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.title_label = QLabel(self)
        self.title_label.setObjectName("sessionTitle")
        self.sub_title_label = QLabel(self)
        self.sub_title_label.setObjectName("sessionSubTitle")
        self.paused_label = QLabel("Paused", self)
        self.paused_label.setObjectName("pausedLabel")

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)

        layout.addWidget(self.title_label)
        layout.addWidget(self.sub_title_label)
        layout.addWidget(self.paused_label)
        layout.addWidget(self.progress_bar)

        engine.status_changed.connect(self.refresh)
        engine.ticked.connect(self.refresh)
        self.refresh()

    def refresh(self, *_args: object) -> None:
        session = self._engine.session
        self.setVisible(session is not None)
        if session is None:
            self.progress_bar.setValue(0)
            return

        paused = self._engine.status is TimerStatus.PAUSED
        self.title_label.setText(self._engine.session_title())
        self.sub_title_label.setText(f"{self._engine.remaining_display()} remaining")
        self.paused_label.setVisible(paused)
        self.progress_bar.setValue(int(self._engine.progress_percent()))
        self.progress_bar.setStyleSheet(progress_chunk_style(session.phase, paused))


class TimerWidget(QWidget):
    """The whole timer card."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(16)

        self.durations = DurationButtons(engine, card)
        self.controls = TimerControls(engine, card)
        self.clock_data = ClockData(engine, card)

        layout.addWidget(self.durations)
        layout.addWidget(self.controls)
        layout.addWidget(self.clock_data)
        layout.addStretch(1)

    @property
    def engine(self) -> TimerEngine:
        return self._engine

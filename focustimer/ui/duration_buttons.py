"""Focus/break length controls.

Two rows of ``- value +``.  The buttons are disabled while a session
exists; edits would only apply to the next phase anyway.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from ..timer.durations import DurationConfig
from ..timer.engine import TimerEngine
from ..timer.phase import TimerStatus


class DurationButtons(QWidget):

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._config: DurationConfig = engine.config
        self._build_ui()
        self._connect_signals()
        self._refresh_labels(self._config.focus_minutes, self._config.break_minutes)
        self._on_status_changed(engine.status)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(8)

        self.focus_label = QLabel(self)
        self.decrease_focus_btn = QPushButton("−", self)
        self.increase_focus_btn = QPushButton("+", self)
        root.addLayout(self._row(self.focus_label, self.decrease_focus_btn, self.increase_focus_btn))

        self.break_label = QLabel(self)
        self.decrease_break_btn = QPushButton("−", self)
        self.increase_break_btn = QPushButton("+", self)
        root.addLayout(self._row(self.break_label, self.decrease_break_btn, self.increase_break_btn))

    @staticmethod
    def _row(label: QLabel, minus: QPushButton, plus: QPushButton) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(6)
        label.setAlignment(Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft)
        row.addWidget(label, 1)
        row.addWidget(minus)
        row.addWidget(plus)
        return row

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self.increase_focus_btn.clicked.connect(self._config.increase_focus)
        self.decrease_focus_btn.clicked.connect(self._config.decrease_focus)
        self.increase_break_btn.clicked.connect(self._config.increase_break)
        self.decrease_break_btn.clicked.connect(self._config.decrease_break)
        config, listener = self._config, self._refresh_labels
        config.subscribe(listener)
        self.destroyed.connect(lambda *_: config.unsubscribe(listener))
        self._engine.status_changed.connect(self._on_status_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh_labels(self, focus_minutes: int, break_minutes: int) -> None:
        self.focus_label.setText(f"Focus Duration: {focus_minutes:02d}:00")
        self.break_label.setText(f"Break Duration: {break_minutes:02d}:00")

    def _on_status_changed(self, status: TimerStatus) -> None:
        editable = status is TimerStatus.IDLE
        for btn in (
            self.increase_focus_btn, self.decrease_focus_btn,
            self.increase_break_btn, self.decrease_break_btn,
        ):
            btn.setEnabled(editable)

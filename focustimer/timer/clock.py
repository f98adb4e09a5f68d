"""One-second clock source that drives a ``TimerEngine``.

The underlying ``QTimer`` runs exactly while the engine is RUNNING.  It is
started and stopped from ``status_changed`` over a direct connection, so
``pause()`` and ``stop()`` have halted it by the time they return.

A timeout already queued when the engine left RUNNING is dropped instead of
being forwarded, so it can never mutate a paused or stopped engine.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt, QTimer

from .engine import TimerEngine
from .phase import TimerStatus

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickClock(QObject):
    """Repeating timer bound to one engine."""

    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._stale_ticks: int = 0

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

        engine.status_changed.connect(
            self._on_status_changed, type=Qt.ConnectionType.DirectConnection
        )
        self._on_status_changed(engine.status)

    @property
    def active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def stale_ticks(self) -> int:
        """How many timeouts were dropped because the engine was not running."""
        return self._stale_ticks

    # ── slots ─────────────────────────────────────────────────────────

    def _on_status_changed(self, status: TimerStatus) -> None:
        if status is TimerStatus.RUNNING:
            if not self._qt_timer.isActive():
                self._qt_timer.start()
        else:
            self._qt_timer.stop()

    def _on_timeout(self) -> None:
        if self._engine.status is not TimerStatus.RUNNING:
            self._stale_ticks += 1
            logger.debug("dropped stale tick (engine %s)", self._engine.status.value)
            return
        self._engine.tick()

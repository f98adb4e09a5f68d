"""Timer state machine for FocusTimer.

States
------
IDLE      No session.  Waiting for the user to start.
RUNNING   A session exists and the clock is ticking it down.
PAUSED    A session exists but is frozen.

Transitions
-----------
IDLE → RUNNING                 (start: new Focusing session)
RUNNING → PAUSED               (pause)
PAUSED → RUNNING               (resume)
RUNNING | PAUSED → IDLE        (stop: session discarded)
RUNNING → RUNNING              (tick; at 0 the phase flips)
RUNNING | PAUSED → same        (skip: phase flips now)

Anything else raises ``InvalidTransition`` and leaves the engine as it was.

The engine never schedules itself.  A host clock (see ``clock.TickClock``)
calls :meth:`TimerEngine.tick` once per second while the status is RUNNING.
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from .durations import DurationConfig
from .errors import InvalidTransition
from .phase import Session, SessionPhase, TimerStatus

logger = logging.getLogger(__name__)

PhaseCompleteHook = Callable[[SessionPhase, SessionPhase], None]


# ── pure helpers ──────────────────────────────────────────────────────────


def other_phase(current: Session, config: DurationConfig) -> Session:
    """The session that follows *current*, sized from *config* right now.

    Focusing → On Break (break length), On Break → Focusing (focus length).
    """
    if current.phase is SessionPhase.FOCUSING:
        nxt = SessionPhase.ON_BREAK
    else:
        nxt = SessionPhase.FOCUSING
    return Session.fresh(nxt, config.get(nxt))


def format_seconds(seconds: int) -> str:
    """``MM:SS``, zero padded.  1505 → ``"25:05"``."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def progress_of(session: Session) -> float:
    """Elapsed share of *session* as a percentage in [0, 100]."""
    total = session.duration_seconds
    if total <= 0:
        return 100.0
    pct = 100 - (session.time_remaining / total) * 100
    return max(0.0, min(100.0, pct))


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Pomodoro state machine.

    Signals
    -------
    status_changed(status: TimerStatus)
        Emitted on every status change (start, pause, resume, stop).
    ticked(remaining_seconds: int)
        Emitted after every accepted tick, including the one that flips
        the phase (then it carries the new session's full length).
    phase_completed(previous: SessionPhase, next: SessionPhase)
        Emitted exactly once per phase transition, after the new session
        is installed.  Hosts use it to ring a bell.
    """

    status_changed = pyqtSignal(object)
    ticked = pyqtSignal(int)
    phase_completed = pyqtSignal(object, object)

    def __init__(
        self,
        config: DurationConfig | None = None,
        parent: QObject | None = None,
        *,
        on_phase_complete: PhaseCompleteHook | None = None,
    ) -> None:
        super().__init__(parent)
        self._config: DurationConfig = config if config is not None else DurationConfig()
        self._session: Session | None = None
        self._running: bool = False
        self._on_phase_complete = on_phase_complete

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def config(self) -> DurationConfig:
        return self._config

    @property
    def status(self) -> TimerStatus:
        if self._session is None:
            return TimerStatus.IDLE
        if self._running:
            return TimerStatus.RUNNING
        return TimerStatus.PAUSED

    @property
    def session(self) -> Session | None:
        """The active session, or ``None`` while idle."""
        return self._session

    @property
    def is_running(self) -> bool:
        return self.status is TimerStatus.RUNNING

    # ── derived display values ────────────────────────────────────────

    def remaining_display(self) -> str | None:
        if self._session is None:
            return None
        return format_seconds(self._session.time_remaining)

    def total_display_minutes(self) -> int | None:
        """Configured length of the current phase (not the time left)."""
        if self._session is None:
            return None
        return self._session.duration_minutes

    def progress_percent(self) -> float | None:
        if self._session is None:
            return None
        return progress_of(self._session)

    def session_title(self) -> str | None:
        """E.g. ``"Focusing for 25 minutes"``."""
        if self._session is None:
            return None
        return f"{self._session.phase.label} for {self._session.duration_minutes} minutes"

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin a fresh Focusing session.  Only valid from IDLE."""
        self._require("start", TimerStatus.IDLE)
        self._session = Session.fresh(
            SessionPhase.FOCUSING, self._config.focus_minutes
        )
        self._running = True
        logger.debug("started %s", self._session)
        self._emit_status()

    def pause(self) -> None:
        self._require("pause", TimerStatus.RUNNING)
        self._running = False
        logger.debug("paused with %ds left", self._session.time_remaining)
        self._emit_status()

    def resume(self) -> None:
        self._require("resume", TimerStatus.PAUSED)
        self._running = True
        logger.debug("resumed with %ds left", self._session.time_remaining)
        self._emit_status()

    def toggle_running(self) -> None:
        """Play/pause button: start, pause or resume depending on status."""
        status = self.status
        if status is TimerStatus.IDLE:
            self.start()
        elif status is TimerStatus.RUNNING:
            self.pause()
        else:
            self.resume()

    def stop(self) -> None:
        """Discard the session and return to IDLE."""
        self._require("stop", TimerStatus.RUNNING, TimerStatus.PAUSED)
        self._session = None
        self._running = False
        logger.debug("stopped")
        self._emit_status()

    def skip(self) -> None:
        """Finish the current phase now.  RUNNING/PAUSED status is kept."""
        self._require("skip", TimerStatus.RUNNING, TimerStatus.PAUSED)
        self._complete_phase()
        self._emit_ticked()

    def tick(self) -> None:
        """Advance the countdown by one second.  Only valid while RUNNING.

        A tick that finds the session already at zero completes the phase
        and installs the opposite one.
        """
        self._require("tick", TimerStatus.RUNNING)
        if self._session.expired:
            self._complete_phase()
        else:
            self._session = self._session.ticked()
        self._emit_ticked()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _complete_phase(self) -> None:
        """Install the next session, then notify the sink.

        The sink runs against the new session, so a stop or skip it issues
        is final and a raising hook cannot fire the same transition twice.
        """
        finished = self._session
        self._session = other_phase(finished, self._config)
        logger.info("%s complete, %s next", finished.phase.label, self._session.phase.label)

        upcoming = self._session.phase
        self.phase_completed.emit(finished.phase, upcoming)
        if self._on_phase_complete is not None:
            self._on_phase_complete(finished.phase, upcoming)

    def _emit_ticked(self) -> None:
        if self._session is not None:
            self.ticked.emit(self._session.time_remaining)

    def _require(self, action: str, *allowed: TimerStatus) -> None:
        status = self.status
        if status not in allowed:
            raise InvalidTransition(action, status)

    def _emit_status(self) -> None:
        self.status_changed.emit(self.status)

"""User-adjustable phase lengths.

The focus length moves in 5-minute steps between 5 and 60 minutes, the
break length in 1-minute steps between 1 and 15.  Hitting a bound is a
silent no-op, never an error.

A ``DurationConfig`` is only *read* when the engine builds a new session,
so edits made while a session is running take effect from the next phase
onwards.
"""

from __future__ import annotations

import logging
from typing import Callable

from .errors import ConfigOutOfBounds
from .phase import SessionPhase

logger = logging.getLogger(__name__)


# ── bounds ────────────────────────────────────────────────────────────────

FOCUS_MIN, FOCUS_MAX, FOCUS_STEP = 5, 60, 5
BREAK_MIN, BREAK_MAX, BREAK_STEP = 1, 15, 1

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(int(value), upper))


def snap(value: int, lower: int, upper: int, step: int) -> int:
    """Clamp *value* into range and round it to the nearest step from *lower*."""
    steps = round((clamp(value, lower, upper) - lower) / step)
    return clamp(lower + steps * step, lower, upper)


class DurationConfig:
    """Focus and break lengths in minutes, each held inside its bounds.

    Listeners registered with :meth:`subscribe` are called as
    ``listener(focus_minutes, break_minutes)`` after a value actually
    changes.
    """

    def __init__(
        self,
        focus_minutes: int = DEFAULT_FOCUS_MINUTES,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
    ) -> None:
        self._focus: int = snap(focus_minutes, FOCUS_MIN, FOCUS_MAX, FOCUS_STEP)
        self._break: int = snap(break_minutes, BREAK_MIN, BREAK_MAX, BREAK_STEP)
        self._listeners: list[Callable[[int, int], None]] = []

    def __repr__(self) -> str:
        return f"DurationConfig(focus_minutes={self._focus}, break_minutes={self._break})"

    # ── reads ─────────────────────────────────────────────────────────

    @property
    def focus_minutes(self) -> int:
        return self._focus

    @property
    def break_minutes(self) -> int:
        return self._break

    def get(self, phase: SessionPhase) -> int:
        """Configured minutes for *phase*."""
        if phase is SessionPhase.FOCUSING:
            return self._focus
        return self._break

    # ── stepped controls ──────────────────────────────────────────────

    def increase_focus(self) -> int:
        return self._update_focus(self._focus + FOCUS_STEP)

    def decrease_focus(self) -> int:
        return self._update_focus(self._focus - FOCUS_STEP)

    def increase_break(self) -> int:
        return self._update_break(self._break + BREAK_STEP)

    def decrease_break(self) -> int:
        return self._update_break(self._break - BREAK_STEP)

    # ── explicit setters (settings load, CLI) ─────────────────────────

    def set_focus(self, minutes: int) -> int:
        """Set the focus length exactly.

        Raises ``ConfigOutOfBounds`` for values off the 5-minute grid or
        outside [5, 60].
        """
        _check("focus_minutes", minutes, FOCUS_MIN, FOCUS_MAX, FOCUS_STEP)
        return self._update_focus(minutes)

    def set_break(self, minutes: int) -> int:
        _check("break_minutes", minutes, BREAK_MIN, BREAK_MAX, BREAK_STEP)
        return self._update_break(minutes)

    # ── listeners ─────────────────────────────────────────────────────

    def subscribe(self, listener: Callable[[int, int], None]) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[int, int], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── internal ──────────────────────────────────────────────────────

    def _update_focus(self, minutes: int) -> int:
        new_value = clamp(minutes, FOCUS_MIN, FOCUS_MAX)
        if new_value != self._focus:
            self._focus = new_value
            logger.debug("focus length set to %d min", new_value)
            self._notify()
        return self._focus

    def _update_break(self, minutes: int) -> int:
        new_value = clamp(minutes, BREAK_MIN, BREAK_MAX)
        if new_value != self._break:
            self._break = new_value
            logger.debug("break length set to %d min", new_value)
            self._notify()
        return self._break

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._focus, self._break)


def _check(name: str, value: int, lower: int, upper: int, step: int) -> None:
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not lower <= value <= upper
        or (value - lower) % step
    ):
        raise ConfigOutOfBounds(name, value, lower, upper, step)

"""Timer package."""

from .phase import Session, SessionPhase, TimerStatus
from .errors import TimerError, InvalidTransition, ConfigOutOfBounds
from .durations import (
    DurationConfig,
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_BREAK_MINUTES,
)
from .engine import TimerEngine, other_phase, format_seconds
from .clock import TickClock, TICK_INTERVAL_MS

__all__ = [
    "Session",
    "SessionPhase",
    "TimerStatus",
    "TimerError",
    "InvalidTransition",
    "ConfigOutOfBounds",
    "DurationConfig",
    "DEFAULT_FOCUS_MINUTES",
    "DEFAULT_BREAK_MINUTES",
    "TimerEngine",
    "other_phase",
    "format_seconds",
    "TickClock",
    "TICK_INTERVAL_MS",
]

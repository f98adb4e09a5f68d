"""Value types shared by the timer core."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SessionPhase(Enum):
    FOCUSING = "Focusing"
    ON_BREAK = "On Break"

    @property
    def label(self) -> str:
        return self.value


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class Session:
    """One countdown: which phase, how long it was set for, what is left.

    ``duration_minutes`` is a snapshot of the configured length taken when
    the session was built, so later config edits never reach it.
    """

    phase: SessionPhase
    time_remaining: int
    duration_minutes: int

    def __post_init__(self) -> None:
        if self.time_remaining < 0:
            raise ValueError("time_remaining cannot be negative")
        if self.time_remaining > self.duration_seconds:
            raise ValueError("time_remaining exceeds the session duration")

    @classmethod
    def fresh(cls, phase: SessionPhase, minutes: int) -> "Session":
        """A full-length session for *phase*."""
        return cls(phase=phase, time_remaining=minutes * 60, duration_minutes=minutes)

    @property
    def duration_seconds(self) -> int:
        return self.duration_minutes * 60

    @property
    def expired(self) -> bool:
        return self.time_remaining == 0

    def ticked(self) -> "Session":
        """The same session one second later, floored at zero."""
        return replace(self, time_remaining=max(0, self.time_remaining - 1))

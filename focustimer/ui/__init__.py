"""UI package."""

from .timer_widget import TimerWidget, TimerControls, ClockData
from .duration_buttons import DurationButtons

__all__ = [
    "TimerWidget",
    "TimerControls",
    "ClockData",
    "DurationButtons",
]

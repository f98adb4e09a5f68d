"""FocusTimer: a Pomodoro focus/break countdown."""

__version__ = "0.1.0"

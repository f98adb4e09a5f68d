"""Exceptions raised by the timer core."""

from __future__ import annotations


class TimerError(Exception):
    """Base class for every error raised by the timer core."""


class InvalidTransition(TimerError):
    """A control was invoked from a status that does not allow it.

    The engine's state is unchanged when this is raised.
    """

    def __init__(self, action: str, status: object) -> None:
        self.action = action
        self.status = status
        label = getattr(status, "value", status)
        super().__init__(f"cannot {action} while {label}")


class ConfigOutOfBounds(TimerError, ValueError):
    """An explicit duration was outside its allowed range or step grid.

    The increment/decrement controls never raise this; they clamp.
    """

    def __init__(self, name: str, value: int, lower: int, upper: int, step: int) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be in [{lower}, {upper}] in steps of {step}, got {value!r}"
        )

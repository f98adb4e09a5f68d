"""Shared pytest fixtures for FocusTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from focustimer.timer.durations import DurationConfig
from focustimer.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv[:1])
    yield app


@pytest.fixture
def config():
    """Default durations: 25 min focus, 5 min break."""
    return DurationConfig()


@pytest.fixture
def engine(qapp, config):
    """Fresh idle TimerEngine bound to the ``config`` fixture."""
    return TimerEngine(config)


@pytest.fixture
def running(engine):
    """Engine that has just started its first Focusing session."""
    engine.start()
    return engine

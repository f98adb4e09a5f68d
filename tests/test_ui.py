"""Widget tests: controls follow engine status, the clock card shows the
derived display values, and the main window wires the bell."""

from __future__ import annotations

import logging

import pytest
from PyQt6 import sip

from focustimer.app import FocusTimerApp
from focustimer.settings import Settings, load_settings
from focustimer.timer.phase import SessionPhase, TimerStatus
from focustimer.ui.duration_buttons import DurationButtons
from focustimer.ui.timer_widget import ClockData, TimerControls, TimerWidget, _guarded

from helpers import run_out


# ═══════════════════════════════════════════════════════════════════════
#  DURATION BUTTONS
# ═══════════════════════════════════════════════════════════════════════


class TestDurationButtons:

    def test_labels_show_defaults(self, engine):
        w = DurationButtons(engine)
        assert w.focus_label.text() == "Focus Duration: 25:00"
        assert w.break_label.text() == "Break Duration: 05:00"

    def test_clicks_adjust_config(self, engine):
        w = DurationButtons(engine)
        w.increase_focus_btn.click()
        w.decrease_break_btn.click()
        assert engine.config.focus_minutes == 30
        assert engine.config.break_minutes == 4
        assert w.focus_label.text() == "Focus Duration: 30:00"
        assert w.break_label.text() == "Break Duration: 04:00"

    def test_disabled_while_session_exists(self, engine):
        w = DurationButtons(engine)
        engine.start()
        assert not w.increase_focus_btn.isEnabled()
        engine.pause()
        assert not w.decrease_break_btn.isEnabled()
        engine.stop()
        assert w.increase_focus_btn.isEnabled()

    def test_destroyed_widget_stops_listening(self, engine):
        w = DurationButtons(engine)
        assert len(engine.config._listeners) == 1
        sip.delete(w)
        assert engine.config._listeners == []
        assert engine.config.increase_focus() == 30
        engine.start()

    def test_rebuilt_widgets_do_not_pile_up_listeners(self, engine):
        for _ in range(3):
            sip.delete(DurationButtons(engine))
        w = DurationButtons(engine)
        assert len(engine.config._listeners) == 1
        w.increase_break_btn.click()
        assert w.break_label.text() == "Break Duration: 06:00"


# ═══════════════════════════════════════════════════════════════════════
#  TIMER CONTROLS
# ═══════════════════════════════════════════════════════════════════════


class TestTimerControls:

    def test_idle_controls(self, engine):
        w = TimerControls(engine)
        assert w.play_pause_btn.text() == "Start"
        assert not w.stop_btn.isEnabled()
        assert not w.skip_btn.isEnabled()

    def test_play_pause_cycle(self, engine):
        w = TimerControls(engine)
        w.play_pause_btn.click()
        assert engine.status == TimerStatus.RUNNING
        assert w.play_pause_btn.text() == "Pause"
        assert w.stop_btn.isEnabled()

        w.play_pause_btn.click()
        assert engine.status == TimerStatus.PAUSED
        assert w.play_pause_btn.text() == "Resume"

        w.play_pause_btn.click()
        assert engine.status == TimerStatus.RUNNING

    def test_stop_button(self, engine):
        w = TimerControls(engine)
        w.play_pause_btn.click()
        w.stop_btn.click()
        assert engine.status == TimerStatus.IDLE
        assert w.play_pause_btn.text() == "Start"

    def test_skip_button(self, engine):
        w = TimerControls(engine)
        w.play_pause_btn.click()
        w.skip_btn.click()
        assert engine.session.phase == SessionPhase.ON_BREAK

    def test_guard_logs_invalid_transition(self, engine, caplog):
        with caplog.at_level(logging.WARNING):
            _guarded(engine.stop)()
        assert engine.status == TimerStatus.IDLE
        assert "cannot stop while idle" in caplog.text


# ═══════════════════════════════════════════════════════════════════════
#  CLOCK DATA
# ═══════════════════════════════════════════════════════════════════════


class TestClockData:

    def test_hidden_while_idle(self, engine):
        w = ClockData(engine)
        assert w.isHidden()

    def test_shows_title_and_remaining(self, engine):
        w = ClockData(engine)
        engine.start()
        assert not w.isHidden()
        assert w.title_label.text() == "Focusing for 25 minutes"
        assert w.sub_title_label.text() == "25:00 remaining"
        assert w.progress_bar.value() == 0
        assert w.paused_label.isHidden()

    def test_updates_on_tick(self, engine):
        w = ClockData(engine)
        engine.start()
        for _ in range(750):
            engine.tick()
        assert w.sub_title_label.text() == "12:30 remaining"
        assert w.progress_bar.value() == 50

    def test_paused_marker(self, engine):
        w = ClockData(engine)
        engine.start()
        engine.pause()
        assert not w.paused_label.isHidden()

    def test_break_title_after_flip(self, engine):
        w = ClockData(engine)
        engine.start()
        run_out(engine)
        engine.tick()
        assert w.title_label.text() == "On Break for 5 minutes"
        assert w.sub_title_label.text() == "05:00 remaining"

    def test_hidden_again_after_stop(self, engine):
        w = ClockData(engine)
        engine.start()
        engine.stop()
        assert w.isHidden()


def test_timer_widget_composes_parts(engine):
    w = TimerWidget(engine)
    assert w.engine is engine
    assert isinstance(w.durations, DurationButtons)
    assert isinstance(w.controls, TimerControls)
    assert isinstance(w.clock_data, ClockData)


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp, tmp_path):
    w = FocusTimerApp(
        Settings(focus_minutes=30, break_minutes=3, sound_enabled=False),
        settings_path=tmp_path / "settings.json",
        sounds_dir=tmp_path / "sounds",
    )
    yield w
    w.deleteLater()


class TestMainWindow:

    def test_engine_seeded_from_settings(self, window):
        assert window.engine.config.focus_minutes == 30
        assert window.engine.config.break_minutes == 3

    def test_clock_follows_engine(self, window):
        window.engine.start()
        assert window.clock.active
        window.engine.stop()
        assert not window.clock.active

    def test_phase_completion_plays_bell_and_logs(self, window, monkeypatch, caplog):
        played = []
        monkeypatch.setattr(window.sounds, "play", played.append)
        window.engine.start()
        with caplog.at_level(logging.INFO):
            window.engine.skip()
        assert "phase_complete" in played
        assert "phase complete: Focusing -> On Break" in caplog.text
        assert window.windowTitle().endswith("On Break")

    def test_start_plays_chime(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window.sounds, "play", played.append)
        window.engine.start()
        window.engine.pause()
        window.engine.resume()
        assert played == ["session_start"]

    def test_save_settings_remembers_durations(self, window, tmp_path):
        window.engine.config.increase_focus()
        window.save_settings()
        saved = load_settings(tmp_path / "settings.json")
        assert saved.focus_minutes == 35
        assert saved.break_minutes == 3

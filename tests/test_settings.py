"""Tests for Settings defaults and JSON persistence."""

from __future__ import annotations

import json

from focustimer.settings import Settings, load_settings, save_settings


class TestSettingsDefaults:
    def test_focus_minutes(self):
        assert Settings().focus_minutes == 25

    def test_break_minutes(self):
        assert Settings().break_minutes == 5

    def test_sound_enabled(self):
        assert Settings().sound_enabled is True

    def test_volume_default(self):
        assert Settings().sound_volume == 70

    def test_duration_config_from_settings(self):
        cfg = Settings(focus_minutes=40, break_minutes=10).duration_config()
        assert (cfg.focus_minutes, cfg.break_minutes) == (40, 10)

    def test_duration_config_is_fresh_each_time(self):
        s = Settings()
        assert s.duration_config() is not s.duration_config()

    def test_remember_durations(self):
        s = Settings()
        cfg = s.duration_config()
        cfg.increase_focus()
        cfg.increase_break()
        s.remember_durations(cfg)
        assert (s.focus_minutes, s.break_minutes) == (30, 6)


class TestSettingsPersistence:
    def test_round_trip(self, tmp_path):
        """save → load produces identical settings."""
        path = tmp_path / "settings.json"
        original = Settings(focus_minutes=30, break_minutes=7, sound_volume=42)
        save_settings(original, path)
        assert load_settings(path) == original

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "settings.json"
        save_settings(Settings(), path)
        assert path.exists()

    def test_module_default_path(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        monkeypatch.setattr("focustimer.settings.SETTINGS_PATH", path)
        save_settings(Settings(focus_minutes=50))
        assert load_settings().focus_minutes == 50

    def test_missing_file_returns_defaults(self, tmp_path):
        s = load_settings(tmp_path / "nonexistent.json")
        assert s == Settings()

    def test_invalid_json_returns_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("NOT VALID JSON", encoding="utf-8")
        s = load_settings(path)
        assert s == Settings()
        assert "ignoring unreadable settings file" in caplog.text

    def test_non_object_json_returns_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_extra_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        data = {"focus_minutes": 45, "unknown_future_key": True}
        path.write_text(json.dumps(data), encoding="utf-8")
        s = load_settings(path)
        assert s.focus_minutes == 45
        assert not hasattr(s, "unknown_future_key")

    def test_out_of_range_values_clamped(self, tmp_path):
        path = tmp_path / "settings.json"
        data = {"focus_minutes": 300, "break_minutes": 0, "sound_volume": 150}
        path.write_text(json.dumps(data), encoding="utf-8")
        s = load_settings(path)
        assert (s.focus_minutes, s.break_minutes, s.sound_volume) == (60, 1, 100)

    def test_off_grid_focus_snaps_to_step(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"focus_minutes": 23}), encoding="utf-8")
        s = load_settings(path)
        assert s.focus_minutes == 25
        cfg = s.duration_config()
        assert cfg.increase_focus() == 30

    def test_no_timer_state_persisted(self, tmp_path):
        path = tmp_path / "settings.json"
        save_settings(Settings(), path)
        keys = set(json.loads(path.read_text(encoding="utf-8")))
        assert not keys & {"session", "time_remaining", "phase", "status"}

"""Tests for lootclock.core.config – environment driven settings."""

from __future__ import annotations

from pathlib import Path

from lootclock.core.config import DEFAULT_TICK_MS, DEFAULT_USERNAME, AppConfig


class TestFromEnv:
    def test_defaults(self):
        config = AppConfig.from_env({})
        assert config.tick_interval_ms == DEFAULT_TICK_MS
        assert config.username == DEFAULT_USERNAME
        assert config.rewards_path is None

    def test_tick_override(self):
        assert AppConfig.from_env({"LOOTCLOCK_TICK_MS": "50"}).tick_interval_ms == 50

    def test_bad_tick_falls_back(self):
        assert AppConfig.from_env({"LOOTCLOCK_TICK_MS": "fast"}).tick_interval_ms == DEFAULT_TICK_MS

    def test_non_positive_tick_falls_back(self):
        assert AppConfig.from_env({"LOOTCLOCK_TICK_MS": "0"}).tick_interval_ms == DEFAULT_TICK_MS

    def test_username(self):
        assert AppConfig.from_env({"LOOTCLOCK_USERNAME": " @someone "}).username == "@someone"

    def test_blank_username(self):
        assert AppConfig.from_env({"LOOTCLOCK_USERNAME": "  "}).username == DEFAULT_USERNAME

    def test_rewards_path(self, tmp_path: Path):
        path = tmp_path / "rewards.yaml"
        assert AppConfig.from_env({"LOOTCLOCK_REWARDS": str(path)}).rewards_path == path

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("LOOTCLOCK_TICK_MS", "250")
        assert AppConfig.from_env().tick_interval_ms == 250

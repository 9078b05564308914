"""Tests for environment-driven parser settings."""

import pytest

from aikit.config import ParserSettings, load_settings
from aikit.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("AIKIT_STRICT_DECODE", "AIKIT_LOG_PREVIEW_CHARS", "AIKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings == ParserSettings()
        assert settings.strict is False
        assert settings.log_preview_chars == 200
        assert settings.log_level == "INFO"

    @pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("off", False)])
    def test_strict_from_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("AIKIT_STRICT_DECODE", raw)
        assert load_settings().strict is expected

    def test_bad_bool(self, monkeypatch):
        monkeypatch.setenv("AIKIT_STRICT_DECODE", "maybe")
        with pytest.raises(ConfigError, match="AIKIT_STRICT_DECODE"):
            load_settings()

    def test_preview_chars(self, monkeypatch):
        monkeypatch.setenv("AIKIT_LOG_PREVIEW_CHARS", "50")
        assert load_settings().log_preview_chars == 50

    def test_negative_preview_chars(self, monkeypatch):
        monkeypatch.setenv("AIKIT_LOG_PREVIEW_CHARS", "-5")
        with pytest.raises(ConfigError):
            load_settings()

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("AIKIT_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("AIKIT_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigError):
            load_settings()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("AIKIT_STRICT_DECODE", "true")
        assert load_settings({"strict": False}).strict is False

"""Unit tests for AppSettings and sub-configs."""

from config import AppSettings, LoggingSettings, TurnstileSettings


class TestTurnstileSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "TURNSTILE_ENABLE",
            "TURNSTILE_SITE_KEY",
            "TURNSTILE_SECRET_KEY",
            "TURNSTILE_LANGUAGE",
        ):
            monkeypatch.delenv(var, raising=False)
        s = TurnstileSettings()
        assert s.turnstile_enable is False
        assert s.turnstile_site_key == ""
        assert s.turnstile_secret_key == ""
        assert s.turnstile_language == ""
        assert s.turnstile_timeout_seconds == 5.0

    def test_loads_from_env(self, monkeypatch):
        monkeypatch.setenv("TURNSTILE_ENABLE", "true")
        monkeypatch.setenv("TURNSTILE_SITE_KEY", "0x4AAA")
        monkeypatch.setenv("TURNSTILE_SECRET_KEY", "0x4BBB")
        monkeypatch.setenv("TURNSTILE_LANGUAGE", "de")
        s = TurnstileSettings()
        assert s.turnstile_enable is True
        assert s.turnstile_site_key == "0x4AAA"
        assert s.turnstile_secret_key == "0x4BBB"
        assert s.turnstile_language == "de"
        assert s.is_configured is True

    def test_not_configured_without_secret(self):
        s = TurnstileSettings(
            turnstile_enable=True, turnstile_site_key="SK", turnstile_secret_key=""
        )
        assert s.is_configured is False

    def test_not_configured_when_disabled(self):
        s = TurnstileSettings(
            turnstile_enable=False, turnstile_site_key="SK", turnstile_secret_key="SC"
        )
        assert s.is_configured is False


class TestAppSettings:
    def test_sub_configs_populated(self):
        s = AppSettings()
        assert isinstance(s.turnstile, TurnstileSettings)
        assert isinstance(s.logging, LoggingSettings)
        assert s.sentry is not None

    def test_explicit_sub_config_kept(self, turnstile_settings):
        s = AppSettings(turnstile=turnstile_settings)
        assert s.turnstile.turnstile_site_key == "SK"

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        assert AppSettings().is_production is True

    def test_default_language(self, monkeypatch):
        monkeypatch.delenv("MESSAGE_LANGUAGE", raising=False)
        assert AppSettings().message_language == "english"

"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

The Turnstile options mirror the admin panel fields exposed by
TurnstileVerification.settings(), so TURNSTILE_SITE_KEY etc. map 1:1 to
the keys the host stores.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TurnstileSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    turnstile_enable: bool = False
    turnstile_site_key: str = ""
    turnstile_secret_key: str = ""
    # ISO language code; empty means let the widget detect it ("auto")
    turnstile_language: str = ""

    # Applied by the HTTP client; a timeout counts as a transport failure
    turnstile_timeout_seconds: float = 5.0

    @property
    def is_configured(self) -> bool:
        return bool(
            self.turnstile_enable
            and self.turnstile_site_key
            and self.turnstile_secret_key
        )


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class SentrySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sentry_dsn: str = ""
    sentry_send_pii: bool = False
    sentry_traces_sample_rate: float = 0.1


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    app_name: str = "turnstile-verification"
    # Language of the message table used for user-facing error text
    message_language: str = "english"

    # OpenAPI docs URL (None disables the docs UI in production)
    docs_url: Optional[str] = "/docs"

    # Sub-configs (composed via model_validator below)
    turnstile: Optional[TurnstileSettings] = None
    logging: Optional[LoggingSettings] = None
    sentry: Optional[SentrySettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.turnstile is None:
            self.turnstile = TurnstileSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        if self.sentry is None:
            self.sentry = SentrySettings()

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"

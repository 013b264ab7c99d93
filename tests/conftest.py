"""
Shared test configuration.

pydantic-settings never reads a real .env file here; tests control config
through explicit constructor kwargs or monkeypatch.setenv(). The outbound
siteverify call is replaced by FakeTransport.
"""

import pytest

from config import TurnstileSettings


class FakeTransport:
    """Records form posts and replays a canned body (None = transport failure)."""

    def __init__(self, body=None):
        self.body = body
        self.calls = []

    def post_form(self, url, data):
        self.calls.append((url, dict(data)))
        return self.body


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def turnstile_settings():
    return TurnstileSettings(
        turnstile_enable=True,
        turnstile_site_key="SK",
        turnstile_secret_key="SC",
        turnstile_language="",
    )

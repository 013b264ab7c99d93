"""
Unit tests for the shared/ utility modules.

Covers:
- shared.ip_utils        (get_client_ip)
- shared.logging_config  (redact_sensitive_fields, hash_ip)
"""

from __future__ import annotations

import hashlib
from unittest.mock import MagicMock

import pytest

from shared import logging_config
from shared.ip_utils import get_client_ip
from shared.logging import hash_ip, log_with_context, get_logger
from shared.logging_config import redact_sensitive_fields


def _make_request(headers: dict, client_host: str = "10.0.0.1") -> MagicMock:
    req = MagicMock()
    req.headers = headers
    req.client = MagicMock(host=client_host)
    return req


# ---------------------------------------------------------------------------
# shared.ip_utils
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "headers, client_host, expected_ip",
    [
        (
            {"CF-Connecting-IP": "1.2.3.4", "X-Real-IP": "9.9.9.9"},
            "10.0.0.1",
            "1.2.3.4",
        ),
        ({"True-Client-IP": "5.6.7.8"}, "10.0.0.1", "5.6.7.8"),
        ({"X-Forwarded-For": "11.22.33.44, 99.99.99.99"}, "10.0.0.1", "11.22.33.44"),
        ({"X-Real-IP": "55.66.77.88"}, "10.0.0.1", "55.66.77.88"),
        ({"CF-Connecting-IP": " , "}, "10.0.0.1", "10.0.0.1"),
        ({}, "192.168.1.50", "192.168.1.50"),
    ],
    ids=[
        "cloudflare",
        "true_client_ip",
        "x_forwarded_for_multi",
        "x_real_ip",
        "blank_header_skipped",
        "fallback",
    ],
)
def test_get_client_ip(headers, client_host, expected_ip):
    assert get_client_ip(_make_request(headers, client_host)) == expected_ip


def test_get_client_ip_no_client_returns_empty():
    req = MagicMock()
    req.headers = {}
    req.client = None
    assert get_client_ip(req) == ""


# ---------------------------------------------------------------------------
# shared.logging_config
# ---------------------------------------------------------------------------


class TestRedactSensitiveFields:
    def test_redacts_secrets_and_tokens(self):
        event = redact_sensitive_fields(
            None,
            "info",
            {
                "event": "turnstile_post",
                "secret": "SC",
                "turnstile_secret_key": "SC",
                "response": "tok",
                "challenge_token": "tok",
                "ip_hash": "abc",
            },
        )
        assert event["secret"] == "***REDACTED***"
        assert event["turnstile_secret_key"] == "***REDACTED***"
        assert event["response"] == "***REDACTED***"
        assert event["challenge_token"] == "***REDACTED***"
        assert event["ip_hash"] == "abc"
        assert event["event"] == "turnstile_post"

    def test_leaves_error_codes(self):
        event = redact_sensitive_fields(
            None, "warning", {"event": "x", "error_codes": ["invalid-input-response"]}
        )
        assert event["error_codes"] == ["invalid-input-response"]


class TestHashIp:
    def test_passthrough_in_development(self, monkeypatch):
        monkeypatch.setattr(logging_config, "IS_PRODUCTION", False)
        assert hash_ip("1.2.3.4") == "1.2.3.4"

    def test_hashed_in_production(self, monkeypatch):
        monkeypatch.setattr(logging_config, "IS_PRODUCTION", True)
        expected = hashlib.sha256(b"1.2.3.4").hexdigest()[:16]
        assert hash_ip("1.2.3.4") == expected

    def test_none_passthrough(self):
        assert hash_ip(None) is None


def test_log_with_context_binds():
    log = log_with_context(get_logger("test"), control="Turnstile")
    assert log is not None

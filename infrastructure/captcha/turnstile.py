"""Cloudflare Turnstile implementation of VerificationControl.

The challenge itself runs in the browser: show_verification() wires up the
widget script, and do_test() forwards the token the widget posted back to
Cloudflare's siteverify endpoint.
"""

from __future__ import annotations

import json
from typing import Optional

from config import TurnstileSettings
from infrastructure.captcha.messages import get_text
from infrastructure.captcha.protocol import FormTransport
from schemas.models.verification import (
    FAILED_VERIFICATION,
    MISSING_INPUT,
    WRONG_CAPTCHA_VERIFICATION,
    PageAssets,
    RenderContext,
    RequestContext,
    SettingField,
    TestOutcome,
    VerificationResult,
)
from shared.logging import get_logger, hash_ip

log = get_logger(__name__)

TURNSTILE_VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"
TURNSTILE_SCRIPT_URL = (
    "https://challenges.cloudflare.com/turnstile/v0/api.js?onload=_turnstileCb"
)
RESPONSE_FIELD = "cf-turnstile-response"
TEMPLATE_NAME = "Turnstile"
WIDGET_ANCHOR = "#TurnstileControl"
WIDGET_THEME = "light"
WIDGET_ACTION = "register"


class TurnstileVerification:
    def __init__(self, settings: TurnstileSettings, transport: FormTransport) -> None:
        self._settings = settings
        self._transport = transport
        self._site_key = settings.turnstile_site_key or ""
        self._secret_key = settings.turnstile_secret_key or ""

    @property
    def language(self) -> str:
        return self._settings.turnstile_language or "auto"

    def show_verification(
        self,
        is_new: bool,
        force_refresh: bool = True,
        page: Optional[PageAssets] = None,
    ) -> bool:
        show = self._settings.is_configured
        if show and page is not None:
            # api.js invokes _turnstileCb once loaded
            page.html_headers.append(
                f'<script src="{TURNSTILE_SCRIPT_URL}" defer></script>'
            )
            page.inline_javascript.append(self._render_callback())
        return show

    def _render_callback(self) -> str:
        params = {
            "sitekey": self._site_key,
            "theme": WIDGET_THEME,
            "language": self.language,
            "action": WIDGET_ACTION,
        }
        body = ",\n".join(
            f"\t\t\t{name}: {json.dumps(value)}" for name, value in params.items()
        )
        return (
            "function _turnstileCb() {\n"
            f"\t\tturnstile.render({json.dumps(WIDGET_ANCHOR)}, {{\n"
            f"{body}\n"
            "\t\t});\n"
            "\t};"
        )

    def create_test(self, refresh: bool = True) -> None:
        # The widget script builds the challenge and posts the token back
        return None

    def prepare_context(self) -> RenderContext:
        return RenderContext(template=TEMPLATE_NAME, values={"site_key": self._site_key})

    def do_test(self, request: RequestContext) -> TestOutcome:
        token = request.form.get(RESPONSE_FIELD)
        if token is None or not token.strip():
            return WRONG_CAPTCHA_VERIFICATION

        result = self.verify_response(token, request.remote_ip)
        if result.success is True:
            return True

        return result.first_error_code() or WRONG_CAPTCHA_VERIFICATION

    def has_visible_template(self) -> bool:
        return True

    def settings(self, language: str = "english") -> list[SettingField]:
        return [
            SettingField(type="title", name="turnstile_verification"),
            SettingField(type="desc", name="turnstile_desc"),
            SettingField(type="check", name="turnstile_enable"),
            SettingField(type="text", name="turnstile_site_key", size=40),
            SettingField(type="text", name="turnstile_secret_key", size=40),
            SettingField(
                type="text",
                name="turnstile_language",
                size=6,
                postinput=get_text("turnstile_language_desc", language),
            ),
        ]

    def verify_response(self, token: str, remote_ip: str = "") -> VerificationResult:
        """Ask siteverify whether `token` is a passed challenge.

        Never raises: an empty token, a transport failure and a rejected
        token all come back as success=False with an explanatory code.
        """
        if not token:
            return VerificationResult(success=False, error_codes=MISSING_INPUT)

        body = self._transport.post_form(
            TURNSTILE_VERIFY_URL,
            {
                "secret": self._secret_key,
                "remoteip": remote_ip,
                "response": token,
            },
        )
        if body is None:
            log.error("turnstile_transport_failed", ip_hash=hash_ip(remote_ip))
            return VerificationResult(success=False, error_codes=FAILED_VERIFICATION)

        try:
            answers = json.loads(body)
        except ValueError:
            log.warning("turnstile_invalid_json", response_text=body[:200])
            answers = None

        if isinstance(answers, dict) and answers.get("success") is True:
            log.info("turnstile_verified", ip_hash=hash_ip(remote_ip))
            return VerificationResult(success=True)

        error_codes = answers.get("error-codes") if isinstance(answers, dict) else None
        log.warning(
            "turnstile_verification_failed",
            error_codes=error_codes,
            ip_hash=hash_ip(remote_ip),
        )
        return VerificationResult(success=False, error_codes=error_codes)

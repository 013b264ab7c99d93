"""
FastAPI dependency providers.

These are the seam between a host application and the verification
control: the host's form routes declare Depends(require_verification) and
receive a VerificationFailedError (rendered by errors.py) when the
submitted challenge does not pass.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool

from config import AppSettings
from errors import VerificationFailedError
from infrastructure.captcha.messages import error_message
from infrastructure.captcha.protocol import VerificationControl
from infrastructure.captcha.registry import TURNSTILE, create_control
from infrastructure.captcha.turnstile import RESPONSE_FIELD
from infrastructure.http_client import HttpClient
from schemas.models.verification import RequestContext
from shared.ip_utils import get_client_ip
from shared.logging import get_logger, hash_ip, log_with_context

log = get_logger(__name__)


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_http_client(request: Request) -> HttpClient:
    """Return the shared HttpClient opened in the app lifespan."""
    return request.app.state.http_client


def get_verification_control(
    settings: AppSettings = Depends(get_settings),
    http_client: HttpClient = Depends(get_http_client),
) -> VerificationControl:
    return create_control(TURNSTILE, settings.turnstile, http_client)


async def get_request_context(request: Request) -> RequestContext:
    """Snapshot the client IP and the submitted form fields."""
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}
    return RequestContext(remote_ip=get_client_ip(request), form=fields)


async def require_verification(
    settings: AppSettings = Depends(get_settings),
    control: VerificationControl = Depends(get_verification_control),
    context: RequestContext = Depends(get_request_context),
) -> None:
    """Reject the request unless the submitted challenge passed.

    A control that is not shown (disabled or missing keys) is not enforced.
    """
    if not control.show_verification(is_new=False):
        return

    # do_test blocks on the siteverify round trip
    outcome = await run_in_threadpool(control.do_test, context)
    if outcome is True:
        return

    log_with_context(log, control=TURNSTILE, ip_hash=hash_ip(context.remote_ip)).info(
        "verification_rejected", reason=outcome
    )
    raise VerificationFailedError(
        error_message(outcome, settings.message_language),
        field=RESPONSE_FIELD,
        details={"reason": outcome},
    )

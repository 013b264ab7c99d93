"""
Render-time bindings for the verification widget.

GET /verification — whether a challenge is shown, plus the script tags,
inline callback and anchor markup the host page has to embed.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_verification_control
from infrastructure.captcha.protocol import VerificationControl
from infrastructure.captcha.rendering import render_control
from schemas.models.verification import PageAssets

router = APIRouter(tags=["verification"])


@router.get("/verification")
def verification_widget(
    control: VerificationControl = Depends(get_verification_control),
) -> dict:
    page = PageAssets()
    enabled = control.show_verification(is_new=True, page=page)
    if not enabled:
        return {"enabled": False, "html_headers": [], "inline_javascript": [], "markup": ""}

    control.create_test()
    return {
        "enabled": True,
        "html_headers": page.html_headers,
        "inline_javascript": page.inline_javascript,
        "markup": render_control(control.prepare_context()),
    }

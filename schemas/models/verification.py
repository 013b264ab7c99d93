"""
Value types exchanged between the host and a verification control.

RenderContext    — what prepare_context() hands to the template layer
SettingField     — one row of the admin settings panel layout
VerificationResult — outcome of a single siteverify round trip
RequestContext   — the per-submission inputs the host passes explicitly
PageAssets       — collector for script tags and inline JS emitted on render
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

# Error codes synthesized locally. Remote codes (e.g. "invalid-input-response")
# are passed through verbatim.
MISSING_INPUT = "missing-input"
FAILED_VERIFICATION = "failed-verification"
WRONG_CAPTCHA_VERIFICATION = "wrong_captcha_verification"

# do_test() returns True on success, otherwise an error code
TestOutcome = Union[bool, str]


class RenderContext(BaseModel):
    """Template name plus the values it may render. Public values only."""

    model_config = ConfigDict(frozen=True)

    template: str
    values: dict[str, str]


class SettingField(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str  # title, desc, check, text
    name: str
    size: Optional[int] = None
    postinput: Optional[str] = None


class VerificationResult(BaseModel):
    """
    success is True only when the remote answered with a literal JSON true.

    error_codes is whatever explains the failure: a single local code string,
    or the remote "error-codes" value untouched (usually a list, possibly None).
    """

    success: bool
    error_codes: Optional[Any] = None

    def first_error_code(self) -> Optional[str]:
        codes = self.error_codes
        if isinstance(codes, str):
            return codes or None
        if isinstance(codes, list) and codes:
            return str(codes[0])
        return None


@dataclass(frozen=True)
class RequestContext:
    remote_ip: str = ""
    form: Mapping[str, str] = field(default_factory=dict)


@dataclass
class PageAssets:
    html_headers: list[str] = field(default_factory=list)
    inline_javascript: list[str] = field(default_factory=list)

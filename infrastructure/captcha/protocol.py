"""Verification control protocols — the host depends on these, not on Turnstile."""

from typing import Mapping, Optional, Protocol

from schemas.models.verification import (
    PageAssets,
    RenderContext,
    RequestContext,
    SettingField,
    TestOutcome,
)


class FormTransport(Protocol):
    def post_form(self, url: str, data: Mapping[str, str]) -> Optional[str]: ...


class VerificationControl(Protocol):
    def show_verification(
        self,
        is_new: bool,
        force_refresh: bool = True,
        page: Optional[PageAssets] = None,
    ) -> bool: ...

    def create_test(self, refresh: bool = True) -> None: ...

    def prepare_context(self) -> RenderContext: ...

    def do_test(self, request: RequestContext) -> TestOutcome: ...

    def has_visible_template(self) -> bool: ...

    def settings(self, language: str = "english") -> list[SettingField]: ...

"""Registration of the Turnstile control with the host's list of verification methods."""

from __future__ import annotations

from config import TurnstileSettings
from errors import ConfigurationError
from infrastructure.captcha.protocol import FormTransport, VerificationControl
from infrastructure.captcha.turnstile import TurnstileVerification
from shared.logging import get_logger

log = get_logger(__name__)

TURNSTILE = "Turnstile"

CONTROLS: dict[str, type] = {
    TURNSTILE: TurnstileVerification,
}


def register_turnstile(known_verifications: list[str]) -> None:
    """Add Turnstile to the host's known verification methods exactly once."""
    while TURNSTILE in known_verifications:
        known_verifications.remove(TURNSTILE)
    known_verifications.append(TURNSTILE)


def create_control(
    name: str, settings: TurnstileSettings, transport: FormTransport
) -> VerificationControl:
    control_cls = CONTROLS.get(name)
    if control_cls is None:
        log.error("verification_control_unknown", control=name)
        raise ConfigurationError(
            f"Unknown verification control {name!r}", details={"control": name}
        )
    return control_cls(settings, transport)

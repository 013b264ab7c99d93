"""User-facing text for the Turnstile control, keyed by language then message key.

The host resolves an error code returned by do_test() through
error_message(); settings labels use the bare keys.
"""

from __future__ import annotations

from schemas.models.verification import WRONG_CAPTCHA_VERIFICATION

DEFAULT_LANGUAGE = "english"

TXT: dict[str, dict[str, str]] = {
    "english": {
        "turnstile_desc": (
            "To enable Turnstile on your forum you must sign up for an API key "
            "pair for your site. "
            '<a href="https://www.cloudflare.com/products/turnstile/">Sign up Here</a>'
        ),
        "turnstile_language": (
            "Enter language code, leave empty to for automatic detection"
        ),
        "turnstile_language_desc": (
            'Find <a href="https://developers.cloudflare.com/turnstile/reference/'
            'supported-languages/">language codes here</a>'
        ),
        "turnstile_enable": "Enable Turnstile verification",
        "turnstile_verification": "Turnstile Validation",
        "turnstile_site_key": "Turnstile Site Key",
        "turnstile_secret_key": "Turnstile Secret Key",
        "error_failed-verification": "You failed Cloudflare Site verification.",
        "error_missing-input": "The verification failed to POST",
        "error_wrong_captcha_verification": (
            "You failed Cloudflare Captcha verification, please try again."
        ),
        "error_invalid-input-response": (
            "You failed Cloudflare Captcha verification, The response parameter "
            "was invalid or has expired"
        ),
    },
}


def get_text(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look a key up in `language`, then English, then return the key itself."""
    table = TXT.get(language, {})
    if key in table:
        return table[key]
    return TXT[DEFAULT_LANGUAGE].get(key, key)


def error_message(code: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Map a verification error code to the text shown to the user.

    Codes without their own entry (most remote codes) fall back to the
    generic "please try again" message.
    """
    key = f"error_{code}"
    if key in TXT.get(language, {}) or key in TXT[DEFAULT_LANGUAGE]:
        return get_text(key, language)
    return get_text(f"error_{WRONG_CAPTCHA_VERIFICATION}", language)

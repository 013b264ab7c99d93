"""Jinja2 rendering of the markup a control's prepare_context() points at."""

import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

from errors import ConfigurationError
from schemas.models.verification import RenderContext

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

# prepare_context() template name -> file under templates/
TEMPLATE_FILES = {
    "Turnstile": "turnstile.html",
}

_jinja = Environment(
    loader=FileSystemLoader(_TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_control(context: RenderContext) -> str:
    filename = TEMPLATE_FILES.get(context.template)
    if filename is None:
        raise ConfigurationError(
            f"No template registered for verification control {context.template!r}",
            details={"template": context.template},
        )
    return _jinja.get_template(filename).render(**context.values).strip()

"""Async template rendering on top of a Jinja2 environment."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from pokedex_i18n.config import SUPPORTED_LANGUAGES, TEMPLATES_DIR
from pokedex_i18n.i18n import get_locale, setup_jinja2_i18n


def _finalize(value: Any) -> Any:
    # Missing translations come through as None; render them as nothing.
    return "" if value is None else value


class TemplateRenderer:
    """Render a named template with a data mapping into an HTML string."""

    def __init__(self, directory: Path = TEMPLATES_DIR) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(["html"]),
            enable_async=True,
            finalize=_finalize,
        )
        self.env.globals["current_locale"] = get_locale
        self.env.globals["languages"] = SUPPORTED_LANGUAGES
        setup_jinja2_i18n(self.env)

    async def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        template = self.env.get_template(template_id)
        return await template.render_async(**data)

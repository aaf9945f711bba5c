"""
Template rendering utilities
"""
import re
from pathlib import Path

import minify_html
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_newline = re.compile(r"\r\n|\n\r|\r|\n")


def nl2br(value) -> Markup:
    """Escape text and convert its newlines to `<br>` elements"""
    if value is None:
        return Markup("")
    return Markup("<br>\n").join(escape(line) for line in _newline.split(str(value)))


jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)
jinja_env.filters["nl2br"] = nl2br


def render_template(template_name: str, **context) -> str:
    """Render template with context"""
    return jinja_env.get_template(template_name).render(**context)


def render_minified(template_name: str, **context) -> str:
    """Render an HTML template and minify the result"""
    html = render_template(template_name, **context)
    return minify_html.minify(html, minify_css=True, keep_closing_tags=True)

"""Template filters registered with the site environment."""

from datetime import date, datetime

import csscompressor
from jinja2 import Environment
from markupsafe import Markup
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from src.site.computed import computed_data

MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def content_date(value: date | datetime) -> str:
    """Format a date as ``Month D, YYYY``."""
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def cssmin(code: str) -> str:
    """Minify a CSS string."""
    return csscompressor.compress(str(code))


def highlight(code: str, language: str = "text") -> Markup:
    """Highlight a code block as HTML with Pygments CSS classes.

    Unknown languages are rendered as plain text.
    """
    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = HtmlFormatter(cssclass=f"highlight language-{language}")
    return Markup(pygments_highlight(code, lexer, formatter))


def highlight_css(style: str = "default") -> str:
    """Stylesheet for the classes emitted by :func:`highlight`."""
    return HtmlFormatter(style=style).get_style_defs(".highlight")


def configure_environment(env: Environment) -> Environment:
    """Register the site filters and computed globals on an environment."""
    env.filters["contentDate"] = content_date
    env.filters["cssmin"] = cssmin
    env.filters["highlight"] = highlight
    env.globals["computed_data"] = computed_data
    env.globals["highlight_css"] = highlight_css
    return env

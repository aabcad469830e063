"""HTML document for Open Graph preview images."""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from src.og.fonts import FontSet

TEMPLATE_NAME = "og_image.html"
DEFAULT_BYLINE = "By Kirils L @kirjai"
CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 630


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Jinja2 environment for the preview template.

    Autoescaping is off: titles are trusted and interpolated verbatim.
    """
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render(
    title: str,
    image_data_uri: str,
    fonts: FontSet,
    byline: str = DEFAULT_BYLINE,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> str:
    """Render the self-contained preview document for one post.

    Args:
        title: Post title, inserted as-is
        image_data_uri: ``data:`` URI of the image shown in the left panel
        fonts: Encoded fonts to inline as ``@font-face`` rules
        byline: Text shown under the title
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        Complete HTML document
    """
    template = get_environment().get_template(TEMPLATE_NAME)
    return template.render(
        title=title,
        image_data_uri=image_data_uri,
        fonts=fonts,
        byline=byline,
        width=width,
        height=height,
    )

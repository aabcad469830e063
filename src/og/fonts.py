"""Font loading for the Open Graph image template."""

import base64
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BODY_FONT_FILE = "Karla-Regular.woff2"
HEADER_FONT_FILE = "Spectral-Regular.woff2"


class FontNotFoundError(FileNotFoundError):
    """Raised when a font required by the preview template is missing."""


@dataclass(frozen=True)
class FontSet:
    """Base64-encoded fonts inlined into the preview HTML."""

    karla: str
    spectral: str


def _encode_font(path: Path) -> str:
    if not path.is_file():
        raise FontNotFoundError(f"Font file not found: {path}")
    return base64.b64encode(path.read_bytes()).decode("ascii")


def load_fonts(fonts_dir: Path) -> FontSet:
    """Read and encode the body and header fonts.

    Args:
        fonts_dir: Directory containing the woff2 font files

    Returns:
        FontSet with both fonts encoded as base64

    Raises:
        FontNotFoundError: If either font file is missing
    """
    fonts = FontSet(
        karla=_encode_font(fonts_dir / BODY_FONT_FILE),
        spectral=_encode_font(fonts_dir / HEADER_FONT_FILE),
    )
    logger.debug(f"Loaded fonts from {fonts_dir}")
    return fonts

"""Inline image encoding."""

import base64
import mimetypes
from pathlib import Path


def encode_image(path: Path) -> str:
    """Encode an image file as a ``data:`` URI.

    Raises:
        FileNotFoundError: If the image does not exist
    """
    mime_type, _ = mimetypes.guess_type(path.name)
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type or 'image/png'};base64,{data}"

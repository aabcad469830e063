"""Tests for font loading."""

import base64
from pathlib import Path

import pytest

from src.og.fonts import BODY_FONT_FILE, FontNotFoundError, FontSet, load_fonts


class TestLoadFonts:
    """Tests for load_fonts()."""

    def test_encodes_both_fonts(self, fonts_dir: Path):
        """Test that both fonts are read and base64-encoded."""
        fonts = load_fonts(fonts_dir)

        assert isinstance(fonts, FontSet)
        assert base64.b64decode(fonts.karla) == b"karla-font-bytes"
        assert base64.b64decode(fonts.spectral) == b"spectral-font-bytes"

    def test_missing_font_raises(self, fonts_dir: Path):
        """Test that a missing font file is an error."""
        (fonts_dir / BODY_FONT_FILE).unlink()

        with pytest.raises(FontNotFoundError, match=BODY_FONT_FILE):
            load_fonts(fonts_dir)

    def test_missing_directory_raises(self, tmp_path: Path):
        """Test that a missing fonts directory is an error."""
        with pytest.raises(FileNotFoundError):
            load_fonts(tmp_path / "nope")

    def test_reload_picks_up_changes(self, fonts_dir: Path):
        """Test that a new load reflects a changed font file."""
        first = load_fonts(fonts_dir)
        (fonts_dir / BODY_FONT_FILE).write_bytes(b"changed")
        second = load_fonts(fonts_dir)

        assert first.karla != second.karla
        assert first.spectral == second.spectral

    def test_font_set_is_immutable(self, fonts_dir: Path):
        """Test that a loaded font set cannot be modified."""
        fonts = load_fonts(fonts_dir)

        with pytest.raises(AttributeError):
            fonts.karla = "other"  # type: ignore[misc]

"""Shared fixtures for Open Graph image tests."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import LoggingConfig, PathsConfig, Settings
from src.og.fonts import BODY_FONT_FILE, HEADER_FONT_FILE, FontSet


@pytest.fixture
def fonts_dir(tmp_path: Path) -> Path:
    """Directory holding two fake woff2 fonts."""
    directory = tmp_path / "src" / "assets" / "fonts"
    directory.mkdir(parents=True)
    (directory / BODY_FONT_FILE).write_bytes(b"karla-font-bytes")
    (directory / HEADER_FONT_FILE).write_bytes(b"spectral-font-bytes")
    return directory


@pytest.fixture
def settings(tmp_path: Path, fonts_dir: Path) -> Settings:
    """Settings rooted at a temporary project directory."""
    (tmp_path / "src" / "assets" / "avatar.png").write_bytes(b"\x89PNG fake")
    return Settings(
        paths=PathsConfig(root=tmp_path),
        logging=LoggingConfig(log_dir=tmp_path / "logs"),
    )


@pytest.fixture
def fonts() -> FontSet:
    return FontSet(karla="S0FSTEE=", spectral="U1BFQ1RSQUw=")


class FakeBrowser:
    """Stand-in for a Playwright browser that records the pages it opens."""

    def __init__(self) -> None:
        self.pages: list[MagicMock] = []
        self.close = AsyncMock()
        self.new_page = AsyncMock(side_effect=self._new_page)

    async def _new_page(self) -> MagicMock:
        page = MagicMock()
        page.set_viewport_size = AsyncMock()
        page.set_content = AsyncMock()
        page.close = AsyncMock()

        async def screenshot(path: str) -> None:
            Path(path).write_bytes(b"\x89PNG screenshot")

        page.screenshot = AsyncMock(side_effect=screenshot)
        self.pages.append(page)
        return page


@pytest.fixture
def fake_browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def mock_playwright(fake_browser: FakeBrowser) -> MagicMock:
    """An ``async_playwright`` replacement whose chromium launches ``fake_browser``."""
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=fake_browser)

    factory = MagicMock()
    factory.return_value.__aenter__ = AsyncMock(return_value=playwright)
    factory.return_value.__aexit__ = AsyncMock(return_value=False)
    return factory

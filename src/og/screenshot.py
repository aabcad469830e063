"""Capture Open Graph preview images with a headless browser.

Requires playwright: pip install playwright && playwright install chromium
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from pathlib import Path

from playwright.async_api import Browser, Page, async_playwright

from src.config import ScreenshotConfig, Settings, get_settings
from src.errors.logger import StructuredLogger
from src.models.post import Post, coerce_post
from src.og.fonts import FontSet, load_fonts
from src.og.image import encode_image
from src.og.template import render

logger = logging.getLogger(__name__)

ERROR_LOGGER_NAME = "blog_og"


@asynccontextmanager
async def open_page(browser: Browser) -> AsyncIterator[Page]:
    """Open a page that is closed when the block exits, even on failure."""
    page = await browser.new_page()
    try:
        yield page
    finally:
        await page.close()


def _log_structured_failure(
    error: Exception, post: Post, output_path: Path, settings: Settings
) -> None:
    """Record a capture failure in the structured log.

    Must be called from the handler of ``error``. A failure to write the record
    is reported on the module logger so it never replaces ``error``.
    """
    try:
        error_logger = StructuredLogger(ERROR_LOGGER_NAME, config=settings)
        error_logger.log_error(
            error_logger.create_error_from_exception(error, slug=post.slug, path=str(output_path))
        )
    except Exception as log_error:
        logger.warning(f"Could not write structured log for {post.slug}: {log_error}")


async def capture_post(
    browser: Browser,
    html: str,
    output_path: Path,
    config: ScreenshotConfig,
) -> Path:
    """Render one document in a fresh page and save its screenshot.

    Args:
        browser: Running browser instance
        html: Complete HTML document to render
        output_path: PNG destination, overwritten if present
        config: Viewport and load-state settings

    Returns:
        The path the screenshot was written to
    """
    async with open_page(browser) as page:
        await page.set_viewport_size({"width": config.width, "height": config.height})
        await page.set_content(html, wait_until=config.wait_until)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(output_path))
    return output_path


async def capture(
    posts: Iterable[Post | tuple[str, str]],
    *,
    settings: Settings | None = None,
    fonts: FontSet | None = None,
    image_data_uri: str | None = None,
) -> list[Path]:
    """Write one preview image per post to ``<assets>/<slug>/og_image.png``.

    Posts are processed one at a time in a single browser. The first failure
    is logged and re-raised, abandoning the rest of the batch.

    Args:
        posts: Posts or ``(slug, title)`` pairs
        settings: Settings to use (defaults to the global settings)
        fonts: Pre-loaded fonts (loaded from the fonts directory if omitted)
        image_data_uri: Pre-encoded panel image (read from the avatar if omitted)

    Returns:
        Written image paths in input order
    """
    settings = settings or get_settings()
    paths = settings.paths
    config = settings.screenshot

    batch = [coerce_post(post) for post in posts]
    fonts = fonts or load_fonts(paths.resolve(paths.fonts_dir))
    image_data_uri = image_data_uri or encode_image(paths.resolve(paths.avatar))
    assets_dir = paths.resolve(paths.assets_dir)

    written: list[Path] = []
    logger.info(f"Taking {len(batch)} screenshots...")

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=config.headless)

        for post in batch:
            output_path = post.og_image_path(assets_dir)
            html = render(
                post.title,
                image_data_uri,
                fonts,
                byline=config.byline,
                width=config.width,
                height=config.height,
            )
            try:
                await capture_post(browser, html, output_path, config)
            except Exception as e:
                logger.error(f"Failed to capture {post.slug}: {e}")
                _log_structured_failure(e, post, output_path, settings)
                raise

            logger.info(f"Saved {output_path}")
            written.append(output_path)

        if config.headless:
            await browser.close()

    return written


def capture_sync(
    posts: Iterable[Post | tuple[str, str]],
    *,
    settings: Settings | None = None,
    fonts: FontSet | None = None,
    image_data_uri: str | None = None,
) -> list[Path]:
    """Blocking wrapper around :func:`capture`."""
    return asyncio.run(
        capture(posts, settings=settings, fonts=fonts, image_data_uri=image_data_uri)
    )

#!/usr/bin/env python
"""Generate Open Graph preview images for every post in a posts file."""

import asyncio
import logging
import sys
from pathlib import Path

from src.config import get_settings
from src.models.post import load_posts
from src.og.screenshot import capture

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_POSTS_FILE = Path("posts.json")


async def generate_images(posts_file: Path = DEFAULT_POSTS_FILE) -> list[Path]:
    """Capture preview images for the posts listed in ``posts_file``.

    Args:
        posts_file: JSON file with posts or ``[slug, title]`` pairs

    Returns:
        Paths of the written images
    """
    posts = load_posts(posts_file)
    if not posts:
        logger.warning(f"No posts found in {posts_file}")
        return []

    written = await capture(posts, settings=get_settings())
    logger.info(f"✅ Generated {len(written)} preview images")
    return written


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the script."""
    args = sys.argv[1:] if argv is None else argv
    posts_file = Path(args[0]) if args else DEFAULT_POSTS_FILE

    try:
        asyncio.run(generate_images(posts_file))
    except KeyboardInterrupt:
        logger.info("Image generation cancelled by user")
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

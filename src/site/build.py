#!/usr/bin/env python
"""Build the blog index page and feed from a posts file."""

import logging
import sys
from pathlib import Path

from src.config import get_settings
from src.models.post import load_posts
from src.site.generator import StaticSiteGenerator

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_POSTS_FILE = Path("posts.json")


def build_site(posts_file: Path = DEFAULT_POSTS_FILE, output_dir: Path | None = None) -> Path:
    """Build the site for the posts in ``posts_file``.

    Args:
        posts_file: JSON file with the posts
        output_dir: Output directory (defaults to the configured one)

    Returns:
        The output directory
    """
    posts = load_posts(posts_file)
    generator = StaticSiteGenerator(posts, output_dir=output_dir, settings=get_settings())
    generator.generate_site()

    logger.info("✅ Static site generated successfully!")
    logger.info(f"📁 Output directory: {generator.output_dir.absolute()}")
    logger.info(f"  - Total posts: {len(posts)}")
    return generator.output_dir


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the script."""
    args = sys.argv[1:] if argv is None else argv
    posts_file = Path(args[0]) if args else DEFAULT_POSTS_FILE

    try:
        build_site(posts_file)
    except KeyboardInterrupt:
        logger.info("Site build cancelled by user")
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""RSS feed generator for blog posts."""

import logging
from datetime import UTC, datetime
from pathlib import Path
from urllib.parse import urljoin

from feedgen.feed import FeedGenerator  # type: ignore[import-untyped]

from src.models.post import Post
from src.rss.config import RSSConfig, get_default_config

logger = logging.getLogger(__name__)


class RSSGenerator:
    """Generator for creating an RSS feed from blog posts."""

    def __init__(self, config: RSSConfig | None = None) -> None:
        """Initialize RSS generator with configuration.

        Args:
            config: RSS configuration. Uses default if not provided.
        """
        self.config = config or get_default_config()
        self._feed = self._create_feed()

    def _create_feed(self) -> FeedGenerator:
        """Create a configured FeedGenerator instance."""
        fg = FeedGenerator()

        fg.title(self.config.feed.title)
        fg.description(self.config.feed.description)
        fg.link(href=self.config.feed.link, rel="alternate")
        fg.language(self.config.feed.language)

        if self.config.feed.author:
            fg.author(name=self.config.feed.author)

        fg.ttl(self.config.feed.ttl)
        fg.generator(generator="blog-og")
        fg.lastBuildDate(datetime.now(UTC))

        return fg

    @property
    def feed(self) -> FeedGenerator:
        return self._feed

    def add_post(self, post: Post) -> None:
        """Add a post to the feed.

        Args:
            post: Post to add; must have a publication date

        Raises:
            ValueError: If the post has no date
        """
        if post.date is None:
            raise ValueError(f"Post {post.slug} has no date")

        link = urljoin(self.config.feed.link, post.url.lstrip("/"))

        fe = self._feed.add_entry()
        fe.title(post.title)
        fe.description(post.description or post.title)
        fe.link(href=link)
        fe.guid(link, permalink=True)
        fe.pubDate(post.date)
        for tag in post.tags:
            fe.category(term=tag)

    def add_posts(self, posts: list[Post], sort_by_date: bool = True) -> None:
        """Add multiple posts to the feed, skipping undated ones.

        Args:
            posts: Posts to add
            sort_by_date: Whether to order entries newest first
        """
        dated = [post for post in posts if post.date is not None]
        skipped = len(posts) - len(dated)
        if skipped:
            logger.debug(f"Skipping {skipped} undated posts")

        if sort_by_date:
            # Sort oldest first because feedgen outputs in LIFO order
            # This results in newest-first in the final output
            dated = sorted(dated, key=lambda p: p.date)

        for post in dated:
            self.add_post(post)

    def generate_rss(self) -> str:
        """Generate RSS 2.0 XML string."""
        rss_bytes: bytes = self._feed.rss_str(pretty=True)
        return rss_bytes.decode("utf-8")

    def save_feed(self, output_path: Path | None = None) -> Path:
        """Save RSS feed to file.

        Args:
            output_path: Custom output path. Uses config path if not provided.

        Returns:
            Path where feed was saved
        """
        output_path = output_path or self.config.output.get_path()
        output_path.parent.mkdir(parents=True, exist_ok=True)

        self._feed.rss_file(str(output_path))
        return output_path

    def get_entry_count(self) -> int:
        """Get the number of entries in the feed."""
        return len(self._feed.entry())

"""Static site generator for the blog index and feed."""

import logging
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.config import Settings, get_settings
from src.models.post import Post
from src.rss.config import RSSConfig
from src.rss.generator import RSSGenerator
from src.site.computed import computed_data
from src.site.filters import configure_environment

logger = logging.getLogger(__name__)


class StaticSiteGenerator:
    """Generate the blog index page, feed and passthrough assets."""

    def __init__(
        self,
        posts: list[Post],
        output_dir: Path | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the generator with posts.

        Args:
            posts: Posts to list on the index page and in the feed
            output_dir: Output directory for generated site (defaults to the configured one)
            settings: Settings to use (defaults to the global settings)
        """
        self.posts = posts
        self.settings = settings or get_settings()
        paths = self.settings.paths
        self.output_dir = output_dir or paths.resolve(paths.output_dir)

        template_dir = Path(__file__).parent / "templates"
        self.env = configure_environment(
            Environment(
                loader=FileSystemLoader(template_dir),
                autoescape=select_autoescape(["html", "xml"]),
            )
        )

    def generate_site(self) -> None:
        """Generate the complete static site."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._copy_passthrough()
        self._generate_html()
        self._generate_rss()

    def _copy_passthrough(self) -> None:
        """Copy assets and the favicon verbatim into the output directory."""
        paths = self.settings.paths

        assets_dir = paths.resolve(paths.assets_dir)
        if assets_dir.is_dir():
            shutil.copytree(assets_dir, self.output_dir / "assets", dirs_exist_ok=True)

        favicon = paths.resolve(paths.favicon)
        if favicon.is_file():
            shutil.copy2(favicon, self.output_dir / favicon.name)

    def _generate_html(self) -> None:
        """Generate the main index.html file."""
        template = self.env.get_template("index.html")
        html_content = template.render(**self._get_template_context("/"))

        output_file = self.output_dir / "index.html"
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(html_content)

    def _get_template_context(self, page_url: str) -> dict[str, Any]:
        """Get the context dictionary for rendering a page.

        Args:
            page_url: Site-relative URL of the page being rendered

        Returns:
            Dictionary with all data needed for template rendering
        """
        return {
            "site": self.settings.site,
            "posts": self._get_sorted_posts(),
            "page": {"url": page_url},
            **computed_data(page_url),
        }

    def _get_sorted_posts(self) -> list[Post]:
        """Get posts sorted by date (newest first), undated posts last."""
        dated = sorted(
            (p for p in self.posts if p.date is not None), key=lambda p: p.date, reverse=True
        )
        undated = [p for p in self.posts if p.date is None]
        return dated + undated

    def _generate_rss(self) -> None:
        """Generate RSS feed with the dated posts."""
        rss_config = RSSConfig.from_site(self.settings.site, self.output_dir)
        rss_generator = RSSGenerator(config=rss_config)
        rss_generator.add_posts(self.posts)

        output_path = rss_generator.save_feed()
        logger.info(f"Wrote feed with {rss_generator.get_entry_count()} entries to {output_path}")

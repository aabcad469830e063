"""Tests for the static site generator."""

import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from jinja2 import Environment

from src.config import PathsConfig, Settings
from src.models.post import Post
from src.site.generator import StaticSiteGenerator


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Project root with assets and a favicon."""
    assets = tmp_path / "src" / "assets"
    (assets / "foo").mkdir(parents=True)
    (assets / "foo" / "og_image.png").write_bytes(b"png")
    (tmp_path / "src" / "favicon.ico").write_bytes(b"ico")
    return tmp_path


@pytest.fixture
def settings(site_root: Path) -> Settings:
    return Settings(paths=PathsConfig(root=site_root))


@pytest.fixture
def posts() -> list[Post]:
    return [
        Post(
            slug="foo",
            title="Foo Title",
            date=datetime(2024, 1, 5),
            description="About foo",
            tags=["react"],
        ),
        Post(slug="draft", title="Draft Title"),
        Post(slug="bar", title="Bar Title", date=datetime(2024, 3, 1)),
    ]


class TestStaticSiteGenerator:
    """Test cases for StaticSiteGenerator class."""

    def test_initialization(self, posts, settings, site_root):
        """Test that StaticSiteGenerator initializes correctly."""
        generator = StaticSiteGenerator(posts, settings=settings)

        assert generator.posts == posts
        assert generator.output_dir == site_root / "_site"
        assert isinstance(generator.env, Environment)
        assert "contentDate" in generator.env.filters

    def test_custom_output_dir(self, posts, settings, tmp_path):
        """Test initialization with custom output directory."""
        generator = StaticSiteGenerator(posts, output_dir=tmp_path / "out", settings=settings)
        assert generator.output_dir == tmp_path / "out"

    def test_posts_sorted_newest_first(self, posts, settings):
        """Test that dated posts come first, newest to oldest."""
        generator = StaticSiteGenerator(posts, settings=settings)

        assert [p.slug for p in generator._get_sorted_posts()] == ["bar", "foo", "draft"]

    def test_template_context(self, posts, settings):
        """Test that computed data is merged into the context."""
        generator = StaticSiteGenerator(posts, settings=settings)
        context = generator._get_template_context("/react/")

        assert context["page"] == {"url": "/react/"}
        assert context["filterTags"] == [("all", ""), ("angular", "angular")]
        assert context["currentYear"] == datetime.now().year
        assert context["site"] is settings.site

    def test_generate_site_uses_rss_generator(self, posts, settings, tmp_path):
        """Test that the feed is built from the posts."""
        generator = StaticSiteGenerator(posts, output_dir=tmp_path / "out", settings=settings)

        with patch("src.site.generator.RSSGenerator") as mock_rss_gen:
            mock_rss_instance = MagicMock()
            mock_rss_gen.return_value = mock_rss_instance
            mock_rss_instance.save_feed.return_value = tmp_path / "out" / "feed.xml"

            generator.generate_site()

            mock_rss_instance.add_posts.assert_called_once_with(posts)
            mock_rss_instance.save_feed.assert_called_once()

    def test_missing_passthrough_sources(self, posts, tmp_path):
        """Test that absent assets and favicon are skipped."""
        settings = Settings(paths=PathsConfig(root=tmp_path / "empty"))
        generator = StaticSiteGenerator(posts, output_dir=tmp_path / "out", settings=settings)

        generator.generate_site()

        assert not (tmp_path / "out" / "assets").exists()
        assert not (tmp_path / "out" / "favicon.ico").exists()
        assert (tmp_path / "out" / "index.html").exists()


class TestSiteGenerationIntegration:
    """Integration tests for complete site generation."""

    def test_complete_site_generation(self, posts, settings, tmp_path):
        """Test complete site generation with all files."""
        output_dir = tmp_path / "site"
        StaticSiteGenerator(posts, output_dir=output_dir, settings=settings).generate_site()

        assert (output_dir / "assets" / "foo" / "og_image.png").read_bytes() == b"png"
        assert (output_dir / "favicon.ico").read_bytes() == b"ico"

        html = (output_dir / "index.html").read_text(encoding="utf-8")
        assert "Foo Title" in html
        assert "January 5, 2024" in html
        assert "March 1, 2024" in html
        assert html.index("Bar Title") < html.index("Foo Title") < html.index("Draft Title")
        assert 'href="/react"' in html
        assert 'href="/angular"' in html
        assert ".highlight" in html

        feed = ET.parse(output_dir / "feed.xml").getroot()
        titles = [item.findtext("title") for item in feed.iter("item")]
        assert titles == ["Bar Title", "Foo Title"]

    def test_regeneration_is_idempotent(self, posts, settings, tmp_path):
        """Test that building twice into the same directory succeeds."""
        output_dir = tmp_path / "site"
        StaticSiteGenerator(posts, output_dir=output_dir, settings=settings).generate_site()
        StaticSiteGenerator(posts, output_dir=output_dir, settings=settings).generate_site()

        assert (output_dir / "index.html").exists()

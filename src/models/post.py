"""Data models for blog posts."""

import json
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
OG_IMAGE_FILENAME = "og_image.png"


class Post(BaseModel):
    """A blog post as seen by the site and preview image tooling."""

    slug: str = Field(description="URL-safe identifier, also the asset directory name")
    title: str = Field(description="Post title shown on the preview image")
    date: datetime | None = Field(default=None, description="Publication date")
    description: str | None = Field(default=None, description="Short summary for the feed")
    tags: list[str] = Field(default_factory=list, description="Post tags")

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Reject slugs that would escape or collide in the assets directory."""
        if not SLUG_PATTERN.match(v):
            raise ValueError(f"slug {v!r} must match {SLUG_PATTERN.pattern}")
        return v

    @field_validator("date")
    @classmethod
    def ensure_timezone(cls, v: datetime | None) -> datetime | None:
        """Treat naive dates as UTC; keep the offset of aware ones.

        The offset is kept so the displayed calendar day is the author's day.
        """
        if v is None or v.tzinfo is not None:
            return v
        return v.replace(tzinfo=UTC)

    @classmethod
    def from_pair(cls, pair: tuple[str, str] | list[str]) -> "Post":
        """Build a post from a ``(slug, title)`` pair."""
        slug, title = pair
        return cls(slug=slug, title=title)

    @property
    def url(self) -> str:
        """Site-relative URL of the post."""
        return f"/{self.slug}/"

    def og_image_path(self, assets_dir: Path) -> Path:
        """Where the Open Graph image for this post is written."""
        return assets_dir / self.slug / OG_IMAGE_FILENAME

    def __str__(self) -> str:
        """String representation of post."""
        return f"Post({self.slug}: {self.title})"


def coerce_post(value: "Post | tuple[str, str] | list[str] | dict[str, Any]") -> Post:
    """Accept a post, a ``(slug, title)`` pair or a mapping of post fields."""
    if isinstance(value, Post):
        return value
    if isinstance(value, dict):
        return Post(**value)
    return Post.from_pair(value)


def load_posts(file_path: Path) -> list[Post]:
    """Load posts from a JSON file.

    The file holds a list whose items are either post objects or
    ``[slug, title]`` pairs.

    Args:
        file_path: Path to the JSON posts file

    Returns:
        Posts in file order
    """
    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("posts", [])

    return [coerce_post(item) for item in data]

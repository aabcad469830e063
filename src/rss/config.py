"""RSS feed configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

from src.config import SiteConfig


class FeedConfig(BaseModel):
    """Configuration for RSS feed generation."""

    title: str = Field(
        default="kirjai",
        description="Feed title",
    )
    description: str = Field(
        default="Writing about web development",
        description="Feed description",
    )
    link: str = Field(
        default="https://kirjai.com/",
        description="Feed website link",
    )
    language: str = Field(
        default="en",
        description="Feed language code",
    )
    author: str | None = Field(
        default=None,
        description="Author name",
    )
    ttl: int = Field(
        default=1440,
        description="Time to live in minutes (default 24 hours)",
        gt=0,
    )

    model_config = {"validate_assignment": True}


class OutputConfig(BaseModel):
    """Configuration for RSS feed output paths."""

    base_path: Path = Field(
        default=Path("_site"),
        description="Base output directory for the feed",
    )
    filename: str = Field(
        default="feed.xml",
        description="RSS feed filename",
    )

    def get_path(self) -> Path:
        """Get the full path of the feed file."""
        return self.base_path / self.filename

    model_config = {"validate_assignment": True}


class RSSConfig(BaseModel):
    """Complete RSS configuration."""

    feed: FeedConfig = Field(
        default_factory=FeedConfig,
        description="Feed metadata configuration",
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output path configuration",
    )

    @classmethod
    def from_site(cls, site: SiteConfig, output_dir: Path) -> "RSSConfig":
        """Create RSSConfig from the site metadata."""
        return cls(
            feed=FeedConfig(
                title=site.title,
                description=site.description,
                link=site.url,
                author=site.author,
            ),
            output=OutputConfig(base_path=output_dir),
        )

    model_config = {"validate_assignment": True}


def get_default_config() -> RSSConfig:
    """Get default RSS configuration."""
    return RSSConfig()

"""Configuration management for the blog tooling."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(default="json", description="Log format (json or text)")
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(default=10_485_760, description="Max size of log file in bytes")
    backup_count: int = Field(default=5, description="Number of backup log files to keep")

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        data["level"] = os.environ.get("LOG_LEVEL", data.get("level", "INFO"))
        data["format"] = os.environ.get("LOG_FORMAT", data.get("format", "json"))
        if log_dir := os.environ.get("LOG_DIR"):
            data["log_dir"] = Path(log_dir)
        if max_bytes := os.environ.get("LOG_MAX_BYTES"):
            data["max_bytes"] = int(max_bytes)
        if backup_count := os.environ.get("LOG_BACKUP_COUNT"):
            data["backup_count"] = int(backup_count)
        super().__init__(**data)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level


class PathsConfig(BaseModel):
    """Filesystem locations used by the site and image tooling.

    Relative paths are resolved against ``root``.
    """

    root: Path = Field(default=PROJECT_ROOT, description="Project root directory")
    assets_dir: Path = Field(default=Path("src/assets"), description="Site assets directory")
    fonts_dir: Path = Field(
        default=Path("src/assets/fonts"), description="Directory holding the woff2 fonts"
    )
    output_dir: Path = Field(default=Path("_site"), description="Built site output directory")
    avatar: Path = Field(
        default=Path("src/assets/avatar.png"), description="Image shown in the preview panel"
    )
    favicon: Path = Field(default=Path("src/favicon.ico"), description="Site favicon")

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        if root := os.environ.get("BLOG_ROOT"):
            data["root"] = Path(root)
        if assets_dir := os.environ.get("BLOG_ASSETS_DIR"):
            data["assets_dir"] = Path(assets_dir)
        if fonts_dir := os.environ.get("BLOG_FONTS_DIR"):
            data["fonts_dir"] = Path(fonts_dir)
        if output_dir := os.environ.get("BLOG_OUTPUT_DIR"):
            data["output_dir"] = Path(output_dir)
        if avatar := os.environ.get("BLOG_AVATAR"):
            data["avatar"] = Path(avatar)
        super().__init__(**data)

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the project root."""
        return path if path.is_absolute() else self.root / path


class ScreenshotConfig(BaseModel):
    """Headless browser settings for Open Graph image capture."""

    width: int = Field(default=1200, description="Viewport width in pixels", gt=0)
    height: int = Field(default=630, description="Viewport height in pixels", gt=0)
    headless: bool = Field(default=True, description="Run the browser without a UI")
    wait_until: str = Field(
        default="networkidle", description="Load state to wait for after setting content"
    )
    byline: str = Field(default="By Kirils L @kirjai", description="Byline under the title")

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        if width := os.environ.get("OG_WIDTH"):
            data["width"] = int(width)
        if height := os.environ.get("OG_HEIGHT"):
            data["height"] = int(height)
        if headless := os.environ.get("OG_HEADLESS"):
            data["headless"] = headless.lower() in ("true", "1", "yes")
        if wait_until := os.environ.get("OG_WAIT_UNTIL"):
            data["wait_until"] = wait_until
        if byline := os.environ.get("OG_BYLINE"):
            data["byline"] = byline
        super().__init__(**data)


class SiteConfig(BaseModel):
    """Site metadata used by templates and the RSS feed."""

    title: str = Field(default="kirjai", description="Site title")
    url: str = Field(default="https://kirjai.com/", description="Public site URL")
    author: str = Field(default="Kirils L", description="Site author")
    description: str = Field(
        default="Writing about web development", description="Site description"
    )

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        if title := os.environ.get("SITE_TITLE"):
            data["title"] = title
        if url := os.environ.get("SITE_URL"):
            data["url"] = url
        super().__init__(**data)


class Settings(BaseModel):
    """Main application settings."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    screenshot: ScreenshotConfig = Field(default_factory=ScreenshotConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)

    def __init__(self, **data: Any) -> None:
        """Initialize settings, optionally loading from .env file."""
        if env_file := os.environ.get("ENV_FILE"):
            self._load_env_file(Path(env_file))
        super().__init__(**data)

    @staticmethod
    def _load_env_file(env_file: Path) -> None:
        """Load environment variables from .env file."""
        if not env_file.exists():
            return
        load_dotenv(env_file, override=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance."""
    return Settings()

"""Per-page data derived at render time."""

from datetime import datetime
from typing import Any

# (label, url) pairs
FILTER_TAGS: list[tuple[str, str]] = [
    ("react", "react"),
    ("angular", "angular"),
]

ALL_TAG = ("all", "")


def current_year() -> int:
    return datetime.now().year


def filter_tags(page_url: str) -> list[tuple[str, str]]:
    """Navigation tags for a page, without the tag the page already shows.

    Every page except the home page also gets a leading "all" tag.
    """
    clean_url = page_url.replace("/", "")
    tags = [tag for tag in FILTER_TAGS if tag[1] != clean_url]

    if page_url != "/":
        tags.insert(0, ALL_TAG)
    return tags


def computed_data(page_url: str) -> dict[str, Any]:
    """Computed fields merged into a page's template context."""
    return {
        "currentYear": current_year(),
        "filterTags": filter_tags(page_url),
    }

"""
Pytest configuration & shared fixtures.
"""

from collections.abc import Iterator, Mapping
from typing import Any

import pytest

from feedwriter.config import get_settings


class RecordingView:
    """Duck-typed view that remembers every collected item and a shared call log."""

    def __init__(
        self,
        name: str,
        calls: list[tuple[str, dict[str, Any]]] | None = None,
        required_fields: frozenset[str] = frozenset(),
    ) -> None:
        self.name = name
        self.calls = calls if calls is not None else []
        self.required_fields = required_fields
        self.items: list[Mapping[str, Any]] = []

    def collect(self, item: Mapping[str, Any]) -> None:
        self.items.append(item)
        self.calls.append((self.name, dict(item)))

    def render(self) -> str:
        return repr([dict(i) for i in self.items])


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Re-read settings for every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def blog_posts() -> list[dict[str, str]]:
    return [
        {"date_created": "2013-02-14", "writer": "Brennen Bearnes", "text": "Hate."},
        {"date_created": "2013-07-04", "writer": "Brennen Bearnes", "text": "Explosions."},
        {"date_created": "2013-08-31", "writer": "Brennen Bearnes", "text": "A feed thingy."},
    ]


@pytest.fixture
def entry_from_post() -> dict[str, Any]:
    return {
        "date": "date_created",
        "author": "writer",
        "content": "text",
        "title": lambda post: post.text.rstrip("."),
        "link": lambda post: f"https://example.com/posts/{post.date_created}",
    }


@pytest.fixture
def call_log() -> list[tuple[str, dict[str, Any]]]:
    return []

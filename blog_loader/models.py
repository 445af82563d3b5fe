"""Shared data models for blog_loader."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

FEATURED_CATEGORY = "featured"
WEIBO_TAG = "Weibo"


class ArticleSourceError(RuntimeError):
    """Raised when the article document is unavailable or malformed."""


def _text(value: Any) -> str:
    """Format a JSON scalar as text, with JSON spelling for booleans and numbers."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return str(value)


@dataclass(frozen=True)
class Article:
    """A single blog entry as supplied by the articles document."""

    title: str = ""
    date: str = ""
    author: str = ""
    category: str = ""
    tags: Tuple[str, ...] = ()
    content: str = ""
    excerpt: str = ""

    @property
    def is_featured(self) -> bool:
        return self.category == FEATURED_CATEGORY

    @property
    def is_weibo(self) -> bool:
        """Weibo-tagged posts are complete micro-posts without a detail view."""
        return WEIBO_TAG in self.tags

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Article":
        """Build an article from one JSON object."""
        if not isinstance(record, Mapping):
            raise ArticleSourceError("Article records must be JSON objects.")

        tags = record.get("tags")
        if tags is None:
            tags = []
        if not isinstance(tags, list):
            raise ArticleSourceError("Article 'tags' must be a JSON array.")

        return cls(
            title=_text(record.get("title")),
            date=_text(record.get("date")),
            author=_text(record.get("author")),
            category=_text(record.get("category")),
            tags=tuple(_text(tag) for tag in tags),
            content=_text(record.get("content")),
            excerpt=_text(record.get("excerpt")),
        )

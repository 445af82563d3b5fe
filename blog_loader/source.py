"""Retrieval and parsing of the articles document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple
from urllib.parse import unquote, urljoin, urlparse

import requests

from .models import Article, ArticleSourceError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "blog-articles.json"

_HTTP_SCHEMES = ("http", "https")


def resolve_source(source: str, location: Optional[str] = None) -> str:
    """Resolve ``source`` against the page location the way a browser fetch would."""
    if not location or urlparse(source).scheme:
        return source
    if not urlparse(location).scheme:
        return str(Path(location).parent / source)
    return urljoin(location, source)


def _read_local(source: str) -> str:
    parsed = urlparse(source)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArticleSourceError(f"Cannot read articles file {path}: {exc}") from exc


def fetch_document(source: str, timeout: Optional[float] = None) -> Any:
    """Fetch and decode the JSON document at ``source``."""
    logger.debug("Fetching articles document from %s", source)

    if urlparse(source).scheme in _HTTP_SCHEMES:
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise ArticleSourceError(
                f"Failed to fetch articles from {source}: {exc}"
            ) from exc
        except ValueError as exc:
            raise ArticleSourceError(
                f"Articles document at {source} is not valid JSON"
            ) from exc

    raw = _read_local(source)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ArticleSourceError(
            f"Articles document at {source} is not valid JSON"
        ) from exc


def parse_articles(payload: Any) -> Tuple[Article, ...]:
    """Extract article records from a decoded document, in document order."""
    if not isinstance(payload, dict):
        raise ArticleSourceError("Articles document must contain a JSON object.")

    records = payload.get("articles")
    if records is None:
        records = []
    if not isinstance(records, list):
        raise ArticleSourceError("'articles' must be a JSON array.")

    return tuple(Article.from_dict(record) for record in records)


def load_articles(
    source: str = DEFAULT_SOURCE,
    location: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Tuple[Article, ...]:
    """Resolve, fetch and parse the articles document."""
    resolved = resolve_source(source, location)
    articles = parse_articles(fetch_document(resolved, timeout=timeout))
    logger.debug("Parsed %d article records from %s", len(articles), resolved)
    return articles

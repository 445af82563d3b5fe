"""High-level orchestration for building a blog page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .page import BlogPage
from .renderers import build_page_html
from .source import DEFAULT_SOURCE

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Runtime options for building the page."""

    source: str = DEFAULT_SOURCE
    page_url: Optional[str] = None
    output: Optional[str] = None
    title: str = "Blog"
    container_id: str = "blogList"
    search_input_id: str = "searchInput"
    timeout: Optional[float] = None
    search: Optional[str] = None
    open_index: Optional[int] = None


@dataclass
class RunResult:
    """Returned data after building the page."""

    html: str
    article_count: int
    output_path: Optional[str] = None


def _write_output(path: str, html: str) -> str:
    location = Path(path)
    if location.parent and not location.parent.exists():
        location.parent.mkdir(parents=True, exist_ok=True)
    location.write_text(html, encoding="utf-8")
    logger.info("Wrote page to %s", location)
    return str(location)


def execute(config: RunConfig) -> RunResult:
    """Build the page, apply the requested interactions and return the HTML."""
    page = BlogPage(
        build_page_html(
            title=config.title,
            container_id=config.container_id,
            search_input_id=config.search_input_id,
        ),
        location=config.page_url,
        container_id=config.container_id,
        search_input_id=config.search_input_id,
        source=config.source,
        timeout=config.timeout,
    )

    page.on_ready()
    count = page.on_load()

    if config.search is not None:
        page.input_search(config.search)
        logger.info(
            "Search %r matched %d of %d articles",
            config.search,
            len(page.visible_cards()),
            count,
        )

    if config.open_index is not None:
        if not 0 <= config.open_index < count:
            raise ValueError(
                f"Article index {config.open_index} out of range (0..{count - 1})."
            )
        if page.articles[config.open_index].is_weibo:
            raise ValueError(
                f"Article {config.open_index} is a Weibo post and has no detail view."
            )
        page.show_article_detail(config.open_index)

    html = page.to_html()
    output_path = _write_output(config.output, html) if config.output else None
    return RunResult(html=html, article_count=count, output_path=output_path)

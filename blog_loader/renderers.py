"""Rendering helpers for article cards, the detail modal and the page shell."""

from __future__ import annotations

from .models import Article
from .templating import get_environment

MODAL_ID = "articleModal"
DEFAULT_PAGE_NAME = "blog.html"
DEFAULT_SERVE_PORT = 8000


def build_card_html(article: Article, index: int) -> str:
    """Render the list card for ``article`` at position ``index``."""
    template = get_environment().get_template("card.html.j2")
    return template.render(article=article, index=index)


def build_modal_html(article: Article) -> str:
    """Render the full-article overlay."""
    template = get_environment().get_template("modal.html.j2")
    return template.render(article=article, modal_id=MODAL_ID)


def build_error_panel_html(
    local_file: bool,
    source_name: str = "blog-articles.json",
    page_name: str = DEFAULT_PAGE_NAME,
    port: int = DEFAULT_SERVE_PORT,
) -> str:
    """Render the panel shown when the articles document cannot be loaded.

    Pages opened straight from disk get instructions for serving the site
    over HTTP instead of the generic failure message.
    """
    template = get_environment().get_template("error.html.j2")
    return template.render(
        local_file=local_file,
        source_name=source_name,
        port=port,
        serve_url=f"http://localhost:{port}/{page_name}",
    )


def build_page_html(
    title: str = "Blog",
    container_id: str = "blogList",
    search_input_id: str | None = "searchInput",
) -> str:
    """Render the page shell holding the search input and card container."""
    template = get_environment().get_template("page.html.j2")
    return template.render(
        title=title, container_id=container_id, search_input_id=search_input_id
    )

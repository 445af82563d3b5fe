"""In-memory blog page: article loading, detail modal and search filter.

The page is a BeautifulSoup document. Browser events are modelled as method
calls: ``on_load`` fetches and renders the articles, ``on_ready`` wires the
search input, ``click`` dispatches a click on an element with bubbling, and
``input_search`` feeds a new value to the search input.
"""

from __future__ import annotations

import copy
import logging
import posixpath
from typing import Optional, Sequence, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from .models import Article, ArticleSourceError
from .renderers import (
    MODAL_ID,
    build_card_html,
    build_error_panel_html,
    build_modal_html,
    build_page_html,
)
from .source import DEFAULT_SOURCE, load_articles

logger = logging.getLogger(__name__)

CARD_CLASS = "blog-card"
INDEX_ATTR = "data-article-index"
CLOSE_ACTION = "close-modal"
STOP_PROPAGATION_ATTR = "data-stop-propagation"


def _append_html(parent: Tag, html: str) -> None:
    fragment = BeautifulSoup(html, "html.parser")
    for node in list(fragment.contents):
        parent.append(node.extract())


def _set_display(tag: Tag, value: str) -> None:
    """Set the ``display`` declaration of an inline style, keeping the rest."""
    declarations = []
    for declaration in (tag.get("style") or "").split(";"):
        name, _, current = declaration.partition(":")
        if name.strip() and name.strip() != "display":
            declarations.append(f"{name.strip()}: {current.strip()}")
    declarations.append(f"display: {value}")
    tag["style"] = "; ".join(declarations)


def render_articles(container: Tag, articles: Sequence[Article]) -> None:
    """Replace the container's content with one card per article, in order."""
    cards = [build_card_html(article, index) for index, article in enumerate(articles)]
    container.clear()
    for card in cards:
        _append_html(container, card)


def filter_cards(root: Tag, term: str) -> int:
    """Show the cards whose text contains ``term`` (case-insensitive), hide the rest.

    Returns the number of cards left visible.
    """
    needle = term.lower()
    visible = 0
    for card in root.find_all(class_=CARD_CLASS):
        if needle in card.get_text().lower():
            _set_display(card, "block")
            visible += 1
        else:
            _set_display(card, "none")
    return visible


class BlogPage:
    """A rendered blog page with its loaded articles."""

    def __init__(
        self,
        document: str | BeautifulSoup | None = None,
        location: Optional[str] = None,
        container_id: str = "blogList",
        search_input_id: str = "searchInput",
        source: str = DEFAULT_SOURCE,
        timeout: Optional[float] = None,
    ) -> None:
        if document is None:
            document = build_page_html(
                container_id=container_id, search_input_id=search_input_id
            )
        if isinstance(document, BeautifulSoup):
            self.document = document
        else:
            self.document = BeautifulSoup(document, "html.parser")
        self.location = location
        self.container_id = container_id
        self.search_input_id = search_input_id
        self.source = source
        self.timeout = timeout
        self.articles: Tuple[Article, ...] = ()
        self._search_attached = False

    @property
    def is_local_file(self) -> bool:
        """True when the page is viewed from disk rather than a network origin."""
        if not self.location:
            return False
        return urlparse(self.location).scheme in ("", "file")

    @property
    def container(self) -> Tag:
        container = self.document.find(id=self.container_id)
        if container is None:
            raise LookupError(f"Article container #{self.container_id} not found.")
        return container

    @property
    def body(self) -> Tag:
        return self.document.body or self.document

    @property
    def search_input(self) -> Optional[Tag]:
        return self.document.find(id=self.search_input_id)

    @property
    def modal(self) -> Optional[Tag]:
        return self.document.find(id=MODAL_ID)

    def cards(self) -> list[Tag]:
        return self.container.find_all(class_=CARD_CLASS)

    def visible_cards(self) -> list[Tag]:
        return [
            card
            for card in self.cards()
            if "display: none" not in (card.get("style") or "")
        ]

    def load(self, source: Optional[str] = None) -> int:
        """Fetch the articles document and render it into the container.

        Failures never propagate: they are logged and the container shows an
        error panel instead. Returns the number of rendered articles.
        """
        container = self.container
        source = source or self.source
        try:
            articles = load_articles(source, self.location, timeout=self.timeout)
        except ArticleSourceError:
            logger.exception("Failed to load articles from %s", source)
            self.articles = ()
            page_name = posixpath.basename(urlparse(self.location or "").path)
            container.clear()
            _append_html(
                container,
                build_error_panel_html(
                    self.is_local_file,
                    source_name=posixpath.basename(source) or source,
                    page_name=page_name or "blog.html",
                ),
            )
            return 0

        self.articles = articles
        render_articles(container, articles)
        logger.info("Loaded %d articles", len(articles))
        return len(articles)

    def show_article_detail(self, index: int) -> Tag:
        """Open the detail overlay for the article at ``index``."""
        article = copy.deepcopy(self.articles[index])
        self.close_article_detail()
        _append_html(self.body, build_modal_html(article))
        logger.debug("Opened article detail for %r", article.title)
        return self.modal

    def close_article_detail(self) -> bool:
        modal = self.modal
        if modal is None:
            return False
        modal.decompose()
        return True

    def click(self, target: Tag) -> None:
        """Dispatch a click on ``target``, bubbling up through its ancestors."""
        node: Optional[Tag] = target
        while node is not None and node is not self.document:
            if node.get("data-action") == CLOSE_ACTION:
                self.close_article_detail()
                return
            if node.has_attr(STOP_PROPAGATION_ATTR):
                return
            if node.get("id") == MODAL_ID:
                # Only a click on the backdrop itself dismisses the overlay.
                if node is target:
                    self.close_article_detail()
                return
            index = node.get(INDEX_ATTR)
            if index is not None:
                self.show_article_detail(int(index))
                return
            node = node.parent

    def on_load(self) -> int:
        return self.load()

    def on_ready(self) -> bool:
        """Attach the search filter when the page has a search input."""
        if self.search_input is None:
            logger.debug("No #%s element; search disabled", self.search_input_id)
            return False
        self._search_attached = True
        return True

    def input_search(self, value: str) -> None:
        search_input = self.search_input
        if search_input is None:
            return
        search_input["value"] = value
        if self._search_attached:
            filter_cards(self.container, value)

    def to_html(self) -> str:
        return str(self.document)

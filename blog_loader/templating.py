"""Jinja2 environment for blog_loader templates."""

from __future__ import annotations

from importlib import resources
from typing import Iterable

from jinja2 import Environment, FileSystemLoader

from .markdown import to_markup

_ENV: Environment | None = None


def _join_tags(tags: Iterable[str] | None, separator: str = ", ") -> str:
    """Join tag labels for the detail view."""
    if not tags:
        return ""
    return separator.join(tags)


def get_environment() -> Environment:
    """Return a cached Jinja environment configured for package templates."""
    global _ENV
    if _ENV is None:
        template_dir = resources.files(__package__) / "templates"
        loader = FileSystemLoader(str(template_dir))
        # Article fields are trusted HTML and are inserted verbatim.
        _ENV = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        _ENV.filters["markdown"] = to_markup
        _ENV.filters["join_tags"] = _join_tags
    return _ENV

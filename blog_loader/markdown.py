"""Minimal line-based markdown to HTML conversion.

Each line is classified on its own: headings (``#``, ``##``, ``###``), blank
lines, and paragraphs carrying ``**bold**``, ``*italic*`` and ``code`` spans.
Nothing nests across lines and no HTML escaping is applied; article text is
trusted and angle brackets pass through unchanged.
"""

from __future__ import annotations

import re
from typing import Optional

from markupsafe import Markup

_HEADINGS = (
    ("# ", '<h1 class="text-2xl font-bold mt-6 mb-3">', "</h1>"),
    ("## ", '<h2 class="text-xl font-bold mt-5 mb-2">', "</h2>"),
    ("### ", '<h3 class="text-lg font-bold mt-4 mb-2">', "</h3>"),
)

LINE_BREAK = "<br/>"

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")
_CODE = re.compile(r"`(.+?)`")


def convert_inline(line: str) -> str:
    """Apply the bold, italic and code substitutions in that order."""
    # Bold must be fully resolved before italic sees the line.
    line = _BOLD.sub(r"<strong>\1</strong>", line)
    line = _ITALIC.sub(r"<em>\1</em>", line)
    return _CODE.sub(r'<code class="bg-gray-100 px-1 rounded">\1</code>', line)


def convert_line(line: str) -> str:
    for prefix, opening, closing in _HEADINGS:
        if line.startswith(prefix):
            return opening + line[len(prefix):] + closing
    if not line.strip():
        return LINE_BREAK
    return '<p class="mb-3">' + convert_inline(line) + "</p>"


def convert(text: Optional[str]) -> str:
    """Convert markdown-flavoured text to an HTML string."""
    if not text:
        return ""
    return "".join(convert_line(line) for line in text.split("\n"))


def to_markup(text: Optional[str]) -> Markup:
    """Return the converted HTML marked safe for template output."""
    return Markup(convert(text))

"""
HTML → Markdown converter for definition content.

Turns the span-free tables produced by ``table_normalizer`` (and any other
definition HTML) into Markdown.  Tables become pipe tables; a table is only
rendered correctly when every row has the same number of cells and no
``rowspan``/``colspan`` is left, which is what the normalizer guarantees.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from markdownify import MarkdownConverter

logger = logging.getLogger(__name__)


MARKDOWN_OPTIONS: dict[str, object] = {
    "heading_style": "ATX",
    "bullets": "-",
    "strip": ["img", "script", "style"],
}

# A "|" not already escaped by markdownify
RE_BARE_PIPE = re.compile(r"(?<!\\)\|")


def escape_pipes(text: str) -> str:
    r"""Escape ``|`` so cell text cannot open a new pipe-table column.

    >>> escape_pipes("a|b")
    'a\\|b'
    """
    return RE_BARE_PIPE.sub(r"\\|", text)


class TableMarkdownConverter(MarkdownConverter):
    """``MarkdownConverter`` that keeps pipe-table rows intact."""

    def convert_td(self, el, text, *args, **kwargs):
        return super().convert_td(el, escape_pipes(text), *args, **kwargs)

    def convert_th(self, el, text, *args, **kwargs):
        return super().convert_th(el, escape_pipes(text), *args, **kwargs)


def html_to_markdown(html: str) -> str:
    """Convert *html* to Markdown.

    On a conversion failure the error is logged and *html* is returned
    unchanged.
    """
    try:
        return TableMarkdownConverter(**MARKDOWN_OPTIONS).convert(html).strip()
    except Exception:
        logger.exception("Error converting HTML to Markdown")
        return html


def conjugation_markdown(tables_html: Iterable[str]) -> str:
    """Convert each table to Markdown and join them with a blank line."""
    return "\n\n".join(html_to_markdown(table) for table in tables_html)

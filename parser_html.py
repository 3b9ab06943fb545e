"""
HTML parser for Polish Wiktionary (pl.wiktionary.org) word pages.

Implements ``BaseParser`` on top of BeautifulSoup.  The module-level
functions work on raw HTML strings and can be used on their own; the parser
class parses the page once and runs the same extraction on the shared soup.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable

from bs4 import BeautifulSoup, Tag

from base_parser import BaseParser
from config import (
    CONJUGATION_TABLE_CLASS,
    GENDER_PATTERNS,
    MEANINGS_FIELD_CLASS,
    POLISH_SECTION_MARKER,
    Gender,
    clean_meaning,
)
from table_normalizer import TableNormalizer

logger = logging.getLogger(__name__)

PAGE_PARSER = "lxml"
FRAGMENT_PARSER = "html.parser"


# ── helpers ───────────────────────────────────────────────────────────────


def _is_inside(el: Tag, ancestor: Tag) -> bool:
    return any(parent is ancestor for parent in el.parents)


def _remove_inner_tables(table: Tag) -> str:
    """Remove nested tables from *table* and return its HTML.

    Nested tables sit in a cell, so the row wrapping the cell is removed
    with them.  A nested table without such a row inside *table* is removed
    on its own.
    """
    for nested in table.find_all("table"):
        wrapper = nested.parent.parent if nested.parent is not None else None
        if wrapper is None or wrapper is table or not _is_inside(wrapper, table):
            wrapper = nested
        wrapper.extract()
    return str(table)


def _conjugation_tables_in(soup: BeautifulSoup) -> list[str]:
    try:
        for section in soup.find_all("section"):
            if POLISH_SECTION_MARKER in str(section):
                tables = section.select(f".{CONJUGATION_TABLE_CLASS}")
                logger.debug("Found %d conjugation tables", len(tables))
                return [_remove_inner_tables(table) for table in tables]
    except Exception:
        logger.exception("Error extracting conjugation tables")
    return []


def _meanings_in(soup: BeautifulSoup) -> list[str]:
    try:
        field_title = soup.select_one(f"dl > dt > span.{MEANINGS_FIELD_CLASS}")
        if field_title is None:
            return []

        # Meanings are listed two elements after the "znaczenia:" header list
        header_dl = field_title.parent.parent
        definitions_dl = header_dl.find_next_sibling()
        if definitions_dl is not None:
            definitions_dl = definitions_dl.find_next_sibling()
        if definitions_dl is None:
            return []

        return [clean_meaning(dd.get_text()) for dd in definitions_dl.find_all("dd")]
    except Exception:
        logger.exception("Error extracting meanings")
        return []


def _parse_page(html: str) -> BeautifulSoup | None:
    try:
        return BeautifulSoup(html, PAGE_PARSER)
    except Exception:
        logger.exception("Error parsing word page")
        return None


# ── public functions ──────────────────────────────────────────────────────
#
# Extraction errors are logged and yield an empty result.


def extract_conjugation_tables(html: str) -> list[str]:
    """Return the conjugation tables of the Polish section of a word page.

    Each table is returned as HTML with nested tables removed.  Pages
    without a Polish section yield an empty list.
    """
    soup = _parse_page(html)
    return _conjugation_tables_in(soup) if soup is not None else []


def detect_gender(html: str) -> Gender | None:
    """Return the gender whose marker phrase appears first in *html*."""
    try:
        best: tuple[int, Gender] | None = None
        for pattern, gender in GENDER_PATTERNS:
            position = html.find(pattern)
            if position != -1 and (best is None or position < best[0]):
                best = (position, gender)
        return best[1] if best else None
    except Exception:
        logger.exception("Error detecting gender")
        return None


def extract_meanings(html: str) -> list[str]:
    """Return the meanings listed under "znaczenia:" on a word page."""
    soup = _parse_page(html)
    return _meanings_in(soup) if soup is not None else []


def mark_table_headers(table_html: str, is_body_row: Callable[[str], bool]) -> str:
    """Split a table into ``<thead>`` and ``<tbody>``.

    The first row whose text satisfies *is_body_row* opens the body; every
    row before it goes to the head with its cells turned into ``<th>``.
    If no row matches, or the table cannot be processed, *table_html* is
    returned unchanged.
    """
    try:
        return _split_head_and_body(table_html, is_body_row)
    except Exception:
        logger.exception("Error marking table headers")
        return table_html


def _split_head_and_body(table_html: str, is_body_row: Callable[[str], bool]) -> str:
    soup = BeautifulSoup(table_html, FRAGMENT_PARSER)
    rows = soup.find_all("tr")

    first_body = next(
        (i for i, tr in enumerate(rows) if is_body_row(tr.get_text())), None
    )
    if first_body is None:
        return table_html

    out = BeautifulSoup("", FRAGMENT_PARSER)
    table = out.new_tag("table")

    if first_body > 0:
        thead = out.new_tag("thead")
        for tr in rows[:first_body]:
            row = copy.copy(tr)
            for cell in row.find_all("td"):
                cell.name = "th"
            thead.append(row)
        table.append(thead)

    tbody = out.new_tag("tbody")
    for tr in rows[first_body:]:
        tbody.append(copy.copy(tr))
    table.append(tbody)

    return str(table)


# ── WiktionaryHtmlParser ──────────────────────────────────────────────────


class WiktionaryHtmlParser(BaseParser):
    """Parser for pl.wiktionary.org word pages."""

    def __init__(
        self,
        normalizer: TableNormalizer | None = None,
        features: str = PAGE_PARSER,
    ) -> None:
        super().__init__(normalizer)
        self.features = features
        self._html = ""
        self._soup: BeautifulSoup | None = None

    # ── BaseParser interface ──

    def _load(self, page_html: str) -> None:
        self._html = page_html
        self._soup = BeautifulSoup(page_html, self.features)

    def _extract_gender(self) -> Gender | None:
        return detect_gender(self._html)

    def _extract_conjugation_tables(self) -> list[str]:
        assert self._soup is not None
        return _conjugation_tables_in(self._soup)

    def _extract_meanings(self) -> list[str]:
        assert self._soup is not None
        return _meanings_in(self._soup)

    def _mark_table_headers(self, table_html: str) -> str:
        return mark_table_headers(table_html, lambda text: self.header_marker in text)

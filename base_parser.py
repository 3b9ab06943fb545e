"""
Abstract base parser for dictionary word pages.

Concrete subclasses (``WiktionaryHtmlParser``) implement the page-specific
extraction hooks while inheriting the common definition pipeline: tables are
normalized, header rows marked and converted to Markdown, and every failure
below the page level degrades to an emptier definition instead of raising.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable
from urllib.parse import quote

from config import Gender, HEADER_ROW_MARKER, THUMBNAIL_WIDTH, WIKTIONARY_BASE_URL
from converter_markdown import conjugation_markdown
from models import Translation, Word, WordDefinition
from table_normalizer import TableNormalizer, TableParseError

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Base class for all word-page parsers."""

    def __init__(
        self,
        normalizer: TableNormalizer | None = None,
        header_marker: str = HEADER_ROW_MARKER,
    ) -> None:
        self.normalizer = normalizer or TableNormalizer()
        self.header_marker = header_marker

    # ── public entry point ──

    def parse(
        self,
        word: Word,
        page_html: str,
        translations: Iterable[Translation] = (),
    ) -> WordDefinition:
        """Build the ``WordDefinition`` of *word* from its page HTML.

        Translations come from an external provider and are attached as
        given.  If the page cannot be processed at all, a definition holding
        only the word is returned.
        """
        try:
            self._load(page_html)
            gender = self._extract_gender()
            markdown = self._build_conjugation_markdown(
                self._extract_conjugation_tables()
            )
            meanings = self._extract_meanings()
        except Exception:
            logger.exception("Error loading definition for %s", word.text)
            return WordDefinition.empty(word)

        return WordDefinition(
            word=word,
            meanings=meanings,
            conjugation_markdown=markdown,
            gender=gender,
            translations=list(translations),
        )

    # ── abstract methods ── (to be implemented by subclasses)

    @abstractmethod
    def _load(self, page_html: str) -> None:
        """Parse the page so the extraction hooks can read it."""
        ...

    @abstractmethod
    def _extract_gender(self) -> Gender | None:
        ...

    @abstractmethod
    def _extract_conjugation_tables(self) -> list[str]:
        """Return the raw conjugation tables, nested tables already removed."""
        ...

    @abstractmethod
    def _extract_meanings(self) -> list[str]:
        ...

    @abstractmethod
    def _mark_table_headers(self, table_html: str) -> str:
        """Split a normalized table into ``<thead>`` and ``<tbody>``."""
        ...

    # ── concrete helpers ──

    def _build_conjugation_markdown(self, tables: list[str]) -> str:
        """Normalize every table, mark its headers and join them as Markdown.

        A table that cannot be parsed is left out of the result.
        """
        simplified: list[str] = []
        for index, table_html in enumerate(tables):
            try:
                table = self.normalizer.normalize_html(table_html)
            except TableParseError as e:
                logger.warning("Skipping conjugation table %d: %s", index, e)
                continue
            simplified.append(self._mark_table_headers(table))
        return conjugation_markdown(simplified)

    @staticmethod
    def dictionary_url(title: str) -> str:
        """URL of the Wiktionary page for *title*."""
        return WIKTIONARY_BASE_URL + quote(title.replace(" ", "_"))

    @staticmethod
    def create_thumbnail_url(url: str | None) -> str | None:
        """Absolute, 500px-wide version of a protocol-relative thumbnail URL."""
        if not url:
            return None
        url = url.replace("//", "https://", 1)
        return re.sub(r"\d+px", THUMBNAIL_WIDTH, url, count=1)

    @classmethod
    def make_word(cls, page_id: int | str, title: str, thumbnail: str | None = None) -> Word:
        """Build a ``Word`` from one title-search hit."""
        return Word(
            id=str(page_id),
            text=title,
            dictionary_url=cls.dictionary_url(title),
            thumbnail=cls.create_thumbnail_url(thumbnail),
        )

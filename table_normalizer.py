"""
Table normalizer for Wiktionary conjugation tables.

Wiktionary inflection tables (``table.odmiana``) lean heavily on
``rowspan`` and ``colspan`` to draw their headers.  Markdown pipe tables
cannot express spans, so every table is flattened into a dense grid first:

1. Count the rows and the columns of the first row (``calculate_dimensions``)
2. Allocate an empty ``rows x cols`` grid (``create_grid``)
3. Place every cell at its origin and mark the rest of its span as SKIP
   (``fill_grid``)
4. Print the grid back as a plain ``<table>`` with one ``<td>`` per
   position (``serialize_grid``)
"""

import re
import html
import logging
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

logger = logging.getLogger(__name__)


# Rendered in place of positions covered by a span (em quad space)
SKIP_PLACEHOLDER = "&#8193;"

# Largest spans a browser honours; bigger values are treated as these
MAX_COLSPAN = 1000
MAX_ROWSPAN = 65534

# Elements that never carry cell content
NOISE_TAGS = ("style", "script")


class TableParseError(ValueError):
    """Raised when a table fragment cannot be parsed as HTML at all."""


class CellState(str, Enum):
    """State of a single grid position."""

    EMPTY = "empty"
    TEXT = "text"
    SKIP = "skip"


@dataclass(frozen=True)
class GridCell:
    """One position of the normalized grid."""
    state: CellState = CellState.EMPTY
    text: str = ""

    @classmethod
    def with_text(cls, text: str) -> "GridCell":
        return cls(CellState.TEXT, text)

    @property
    def is_empty(self) -> bool:
        return self.state is CellState.EMPTY

    @property
    def is_skip(self) -> bool:
        return self.state is CellState.SKIP

    def to_html(self) -> str:
        """Generate the ``<td>`` for this position."""
        if self.state is CellState.SKIP:
            return f"<td>{SKIP_PLACEHOLDER}</td>"
        if self.state is CellState.EMPTY:
            return "<td></td>"
        return f"<td>{html.escape(self.text, quote=False)}</td>"


EMPTY = GridCell(CellState.EMPTY)
SKIP = GridCell(CellState.SKIP)

Grid = List[List[GridCell]]


@dataclass(frozen=True)
class TableDimensions:
    """Row and column count of a table.

    ``cols`` is taken from the first row only and assumed for all rows.
    """
    rows: int
    cols: int


# ── helpers ───────────────────────────────────────────────────────────────


def _parse_span(value, maximum: int) -> int:
    """Parse a ``colspan``/``rowspan`` attribute, falling back to 1.

    Values above *maximum* are capped to it.
    """
    if not isinstance(value, str):
        return 1
    match = re.match(r"\s*(\d+)", value)
    if not match:
        return 1
    span = int(match.group(1))
    if span < 1:
        return 1
    return min(span, maximum)


def _clean_text(text: str) -> str:
    """Trim cell text and collapse inner whitespace."""
    if not text:
        return ""
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def _cells(row: Tag) -> List[Tag]:
    return row.find_all(["td", "th"])


# ── core operations ───────────────────────────────────────────────────────


def calculate_dimensions(soup: Tag) -> TableDimensions:
    """Return the dimensions of the table contained in *soup*.

    Rows are counted anywhere in the fragment; columns are the sum of the
    ``colspan`` values of the first row's cells.
    """
    rows = soup.find_all("tr")
    cols = 0
    if rows:
        for cell in _cells(rows[0]):
            cols += _parse_span(cell.get("colspan"), MAX_COLSPAN)
    return TableDimensions(rows=len(rows), cols=cols)


def create_grid(rows: int, cols: int) -> Grid:
    """Allocate a ``rows x cols`` grid with every position empty."""
    return [[EMPTY for _ in range(cols)] for _ in range(rows)]


def fill_grid(soup: Tag, grid: Grid) -> None:
    """Fill *grid* in place with the cells of the table in *soup*.

    Rows and cells are walked in document order.  Each cell starts at the
    first empty position at or after the column cursor, so spans carried
    down from earlier rows push it to the right.  Blocks are clamped to the
    grid on both axes and never overwrite a position that is already set.
    """
    row_count = len(grid)

    for i, tr in enumerate(soup.find_all("tr")):
        if i >= row_count:
            break
        row = grid[i]
        col_count = len(row)
        col = 0

        for cell in _cells(tr):
            colspan = _parse_span(cell.get("colspan"), MAX_COLSPAN)
            rowspan = _parse_span(cell.get("rowspan"), MAX_ROWSPAN)

            # Find next available column
            while col < col_count and not row[col].is_empty:
                col += 1
            if col >= col_count:
                logger.debug("Row %d is full, dropping cell %r", i, cell.get_text()[:40])
                break

            eff_colspan = min(colspan, col_count - col)
            eff_rowspan = min(rowspan, row_count - i)
            if eff_colspan != colspan or eff_rowspan != rowspan:
                logger.debug(
                    "Clamped span %dx%d to %dx%d at (%d, %d)",
                    rowspan, colspan, eff_rowspan, eff_colspan, i, col,
                )

            row[col] = GridCell.with_text(_clean_text(cell.get_text()))
            for r in range(i, i + eff_rowspan):
                for c in range(col, col + eff_colspan):
                    if grid[r][c].is_empty:
                        grid[r][c] = SKIP

            col += eff_colspan


def serialize_grid(grid: Grid) -> str:
    """Print *grid* as a plain HTML table with one ``<td>`` per position."""
    rows_html = "".join(
        "<tr>" + "".join(cell.to_html() for cell in row) + "</tr>"
        for row in grid
    )
    return f"<table>{rows_html}</table>"


# ── normalizer ────────────────────────────────────────────────────────────


class TableNormalizer:
    """Flattens spanned HTML tables into span-free rectangular tables."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def normalize_html(self, html_content: str) -> str:
        """Normalize a single ``<table>`` fragment.

        Args:
            html_content: HTML string with one table; nested tables must
                already be removed by the caller

        Returns:
            ``<table><tr><td>..</td>..</tr>..</table>`` without any span
            attributes

        Raises:
            TableParseError: if *html_content* cannot be parsed
        """
        return serialize_grid(self.to_grid(html_content))

    def to_grid(self, html_content: str) -> Grid:
        """Return the filled grid for *html_content* without serializing it."""
        soup = self._parse(html_content)
        self._remove_noise(soup)

        dimensions = calculate_dimensions(soup)
        grid = create_grid(dimensions.rows, dimensions.cols)
        fill_grid(soup, grid)
        logger.debug("Normalized table to %dx%d grid", dimensions.rows, dimensions.cols)

        return grid

    def _parse(self, html_content: str) -> BeautifulSoup:
        if not isinstance(html_content, str):
            raise TableParseError(
                f"Expected an HTML string, got {type(html_content).__name__}"
            )
        try:
            return BeautifulSoup(html_content, self.parser)
        except ParserRejectedMarkup as e:
            raise TableParseError(f"Could not parse table HTML: {e}") from e

    @staticmethod
    def _remove_noise(soup: BeautifulSoup) -> None:
        for tag in soup.find_all(NOISE_TAGS):
            tag.decompose()


def normalize(html_content: str, parser: Optional[str] = None) -> str:
    """Convenience function to normalize one table fragment.

    Args:
        html_content: HTML string containing one table
        parser: BeautifulSoup parser name (default ``html.parser``)

    Returns:
        Span-free HTML table
    """
    normalizer = TableNormalizer(parser) if parser else TableNormalizer()
    return normalizer.normalize_html(html_content)

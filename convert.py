#!/usr/bin/env python3
"""
CLI entry point for the Wiktionary table and definition pipeline.

Commands
--------
1. **table**: flatten one spanned ``<table>`` fragment into a span-free
   HTML table (or a Markdown table with ``--markdown``).
2. **page**: build the full definition (gender, meanings, conjugation
   Markdown) from a downloaded pl.wiktionary.org word page and print it as
   JSON.

Usage
-----
    python convert.py table tables/gruby.html
    python convert.py table tables/gruby.html --markdown

    python convert.py page pages/gruby.html
    python convert.py page pages/kot.html --word kot --page-id 1234
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from converter_markdown import html_to_markdown
from parser_html import WiktionaryHtmlParser
from table_normalizer import TableNormalizer, TableParseError


def _read(path: Path) -> str:
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        sys.exit(1)
    return path.read_text(encoding="utf-8")


def convert_table(file_path: Path, *, markdown: bool = False) -> str:
    """Normalize the table in *file_path*; optionally convert to Markdown."""
    html = _read(file_path)
    try:
        table = TableNormalizer().normalize_html(html)
    except TableParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    return html_to_markdown(table) if markdown else table


def convert_page(file_path: Path, word: str = "", page_id: str = "0") -> str:
    """Build the definition of the word page in *file_path* as JSON."""
    html = _read(file_path)
    parser = WiktionaryHtmlParser()
    entry = parser.make_word(page_id, word or file_path.stem)
    definition = parser.parse(entry, html)
    return json.dumps(definition.to_dict(), ensure_ascii=False, indent=2)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        description="Flatten Wiktionary conjugation tables and extract "
                    "word definitions from pl.wiktionary.org pages."
    )
    ap.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log clamped spans and skipped tables.",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    table_ap = sub.add_parser("table", help="Normalize one <table> fragment.")
    table_ap.add_argument("file", type=str, help="HTML file holding the table.")
    table_ap.add_argument(
        "--markdown",
        action="store_true",
        help="Print a Markdown table instead of HTML.",
    )

    page_ap = sub.add_parser("page", help="Build a definition from a word page.")
    page_ap.add_argument("file", type=str, help="Downloaded word page (HTML).")
    page_ap.add_argument(
        "--word",
        type=str,
        default="",
        help="The word on the page (default: file name without extension).",
    )
    page_ap.add_argument(
        "--page-id",
        type=str,
        default="0",
        help="Wiktionary page id of the word.",
    )

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    path = Path(args.file)
    if args.command == "table":
        print(convert_table(path, markdown=args.markdown))
    else:
        print(convert_page(path, args.word, args.page_id))


if __name__ == "__main__":
    main()

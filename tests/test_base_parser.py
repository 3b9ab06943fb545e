import logging

import parser_html
from config import Gender
from models import Language, Translation, Word
from parser_html import WiktionaryHtmlParser
from table_normalizer import TableNormalizer, TableParseError


WORD = Word(id="1", text="gruby", dictionary_url="https://pl.wiktionary.org/wiki/gruby")


class FailingNormalizer(TableNormalizer):
    def normalize_html(self, html_content):
        raise TableParseError("broken table")


class BrokenMeaningsParser(WiktionaryHtmlParser):
    def _extract_meanings(self):
        raise RuntimeError("unexpected layout")


def test_parse_word_page(sample_page):
    definition = WiktionaryHtmlParser().parse(WORD, sample_page)

    assert definition.word is WORD
    assert definition.gender is None
    assert definition.meanings == [
        "otyły",
        "mający dużą grubość, średnicę",
        "wulgarny, prostacki, nieokrzesany",
    ]
    assert definition.translations == []

    markdown = definition.conjugation_markdown
    for text in ("przypadek", "liczba pojedyncza", "mianownik", "gruby", "grubi"):
        assert text in markdown
    assert "|" in markdown
    assert "---" in markdown
    assert "colspan" not in markdown
    assert "<t" not in markdown


def test_parse_noun_page(noun_page):
    definition = WiktionaryHtmlParser().parse(WORD, noun_page)

    assert definition.gender is Gender.FEMALE
    assert definition.meanings == []
    assert "kotka" in definition.conjugation_markdown
    assert "dopełniacz" in definition.conjugation_markdown


def test_parse_attaches_translations(sample_page):
    translations = [Translation(Language.from_code("en"), "fat")]
    definition = WiktionaryHtmlParser().parse(WORD, sample_page, translations)

    assert definition.translations == translations


def test_parse_page_without_polish_section():
    definition = WiktionaryHtmlParser().parse(WORD, "<html><body><p>brak</p></body></html>")

    assert definition.conjugation_markdown == ""
    assert definition.meanings == []
    assert definition.gender is None


def test_unparseable_table_is_skipped(sample_page, caplog):
    parser = WiktionaryHtmlParser(normalizer=FailingNormalizer())

    with caplog.at_level(logging.WARNING):
        definition = parser.parse(WORD, sample_page)

    assert definition.conjugation_markdown == ""
    assert len(definition.meanings) == 3
    assert "Skipping conjugation table 0" in caplog.text


def test_unexpected_failure_returns_bare_definition(noun_page, caplog):
    with caplog.at_level(logging.ERROR):
        definition = BrokenMeaningsParser().parse(WORD, noun_page)

    assert definition.word is WORD
    assert definition.gender is None
    assert definition.meanings == []
    assert definition.conjugation_markdown == ""
    assert "Error loading definition for gruby" in caplog.text

def test_failing_meanings_keep_gender_and_tables(noun_page, monkeypatch):
    def fail(text):
        raise RuntimeError("unexpected layout")

    monkeypatch.setattr(parser_html, "clean_meaning", fail)
    definition = WiktionaryHtmlParser().parse(WORD, noun_page)

    assert definition.gender is Gender.FEMALE
    assert definition.meanings == []
    assert "kotka" in definition.conjugation_markdown


def test_failing_table_extraction_keeps_meanings(sample_page, monkeypatch):
    def fail(table):
        raise RuntimeError("unexpected layout")

    monkeypatch.setattr(parser_html, "_remove_inner_tables", fail)
    definition = WiktionaryHtmlParser().parse(WORD, sample_page)

    assert definition.conjugation_markdown == ""
    assert len(definition.meanings) == 3



def test_custom_header_marker(noun_page):
    parser = WiktionaryHtmlParser()
    parser.header_marker = "dopełniacz"
    definition = parser.parse(WORD, noun_page)

    assert "mianownik" in definition.conjugation_markdown


def test_make_word():
    word = WiktionaryHtmlParser.make_word(
        1234, "kot", "//upload.wikimedia.org/wikipedia/commons/thumb/a/ab/Kot.jpg/60px-Kot.jpg"
    )

    assert word.id == "1234"
    assert word.text == "kot"
    assert word.dictionary_url == "https://pl.wiktionary.org/wiki/kot"
    assert word.thumbnail == (
        "https://upload.wikimedia.org/wikipedia/commons/thumb/a/ab/Kot.jpg/500px-Kot.jpg"
    )


def test_make_word_without_thumbnail():
    assert WiktionaryHtmlParser.make_word("7", "pies").thumbnail is None


def test_dictionary_url_with_spaces():
    assert WiktionaryHtmlParser.dictionary_url("dzień dobry") == (
        "https://pl.wiktionary.org/wiki/dzie%C5%84_dobry"
    )


def test_create_thumbnail_url():
    assert WiktionaryHtmlParser.create_thumbnail_url(None) is None
    assert WiktionaryHtmlParser.create_thumbnail_url("") is None
    assert WiktionaryHtmlParser.create_thumbnail_url("//upload.example.org/thumb/120px-Pies.png") == (
        "https://upload.example.org/thumb/500px-Pies.png"
    )

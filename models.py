"""
Data models for the Polish Wiktionary lookup tool.

Contains the dictionary records (Word, Translation, WordDefinition) and the
saved-vocabulary record (VocabEntry).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from config import Gender, KnowledgeScore, LANGUAGES


# ── Language / Translation ────────────────────────────────────────────────


@dataclass(frozen=True)
class Language:
    """A target language for translations."""

    full_name: str
    code: str

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Build a supported language from its code (``"en"``, ``"uk"``, …).

        Raises ``KeyError`` for unsupported codes.
        """
        return cls(full_name=LANGUAGES[code], code=code)

    def to_dict(self) -> dict[str, Any]:
        return {"fullName": self.full_name, "code": self.code}


@dataclass
class Translation:
    """Translation of a word into another language."""

    language: Language
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"language": self.language.to_dict(), "text": self.text}


# ── Word / WordDefinition ─────────────────────────────────────────────────


@dataclass
class Word:
    """A dictionary word as returned by a title search."""

    id: str
    text: str
    dictionary_url: str
    thumbnail: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dictionary (``thumbnail`` omitted if unset)."""
        d: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "dictionaryUrl": self.dictionary_url,
        }
        if self.thumbnail is not None:
            d["thumbnail"] = self.thumbnail
        return d


@dataclass
class WordDefinition:
    """Complete definition of a word.

    ``conjugation_markdown`` holds every conjugation table of the word as
    Markdown, separated by blank lines.
    """

    word: Word
    meanings: list[str] = field(default_factory=list)
    conjugation_markdown: str = ""
    gender: Gender | None = None
    translations: list[Translation] = field(default_factory=list)

    @classmethod
    def empty(cls, word: Word) -> WordDefinition:
        """Definition with the word only, used when a page cannot be read."""
        return cls(word=word)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "word": self.word.to_dict(),
            "meanings": list(self.meanings),
            "conjugationMarkdown": self.conjugation_markdown,
            "translations": [t.to_dict() for t in self.translations],
        }
        if self.gender is not None:
            d["gender"] = self.gender.value
        return d


# ── VocabEntry ────────────────────────────────────────────────────────────


@dataclass
class VocabEntry:
    """A word saved to the user's vocabulary list."""

    id: str
    word: str
    translations: list[Translation] = field(default_factory=list)
    score: KnowledgeScore = KnowledgeScore.UNKNOWN
    saved_at: int = 0  # milliseconds since the epoch

    def translation_for(self, code: str) -> Translation | None:
        """Return the translation into language *code*, if saved."""
        for translation in self.translations:
            if translation.language.code == code:
                return translation
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "translations": [t.to_dict() for t in self.translations],
            "score": int(self.score),
            "savedAt": self.saved_at,
        }

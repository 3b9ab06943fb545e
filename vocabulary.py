"""
In-memory vocabulary list with knowledge scores.

Entries are keyed by the Polish word: saving a word that is already on the
list replaces its translations and score but keeps its id.  Storage is left
to the caller (``VocabEntry.to_dict`` gives a JSON-ready record).
"""

from __future__ import annotations

import logging
import secrets
import string
import time
from typing import Iterable

from config import KnowledgeScore, polish_sort_key
from models import Translation, VocabEntry

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_id() -> str:
    """Timestamp followed by a random base-36 suffix."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{_now_ms()}{suffix}"


class Vocabulary:
    """The user's saved words."""

    def __init__(self, entries: Iterable[VocabEntry] = ()) -> None:
        self._entries: list[VocabEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word_saved(word)

    # ── queries ──

    def entries(self) -> list[VocabEntry]:
        """All entries in Polish alphabetical order."""
        return sorted(self._entries, key=lambda entry: polish_sort_key(entry.word))

    def get(self, entry_id: str) -> VocabEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def is_word_saved(self, word: str) -> bool:
        return any(entry.word == word for entry in self._entries)

    # ── updates ──

    def save_word(
        self,
        word: str,
        translations: Iterable[Translation],
        score: KnowledgeScore = KnowledgeScore.UNKNOWN,
    ) -> VocabEntry:
        """Add *word* or replace the existing entry for it."""
        existing = next(
            (i for i, entry in enumerate(self._entries) if entry.word == word), None
        )
        entry = VocabEntry(
            id=self._entries[existing].id if existing is not None else generate_id(),
            word=word,
            translations=list(translations),
            score=KnowledgeScore(score),
            saved_at=_now_ms(),
        )
        if existing is not None:
            self._entries[existing] = entry
        else:
            self._entries.append(entry)
        logger.debug("Saved %r with score %s", word, entry.score.name)
        return entry

    def update_score(self, entry_id: str, score: KnowledgeScore) -> bool:
        """Set the score of an entry; returns ``False`` if the id is unknown."""
        entry = self.get(entry_id)
        if entry is None:
            return False
        entry.score = KnowledgeScore(score)
        return True

    def remove_word(self, entry_id: str) -> bool:
        """Remove an entry; returns ``False`` if the id is unknown."""
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.id != entry_id]
        return len(self._entries) != before

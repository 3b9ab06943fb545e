"""
Configuration for the Polish Wiktionary lookup tool.

Contains the Gender and KnowledgeScore enums, supported translation
languages, page markers used to scrape pl.wiktionary.org, knowledge-score
display tables, and Polish-specific text utilities.
"""

import re
from enum import Enum, IntEnum


class Gender(str, Enum):
    """Grammatical gender of a Polish noun."""

    MALE = "męskorzeczowy"
    FEMALE = "żeńskorzeczowy"
    NEUTRAL = "nijaki"


class KnowledgeScore(IntEnum):
    """How well the user knows a saved word (0-4)."""

    UNKNOWN = 0
    FAMILIAR = 1
    GOOD = 2
    VERY_GOOD = 3
    PERFECT = 4


# ---------------------------------------------------------------------------
# Wiktionary page markers
# ---------------------------------------------------------------------------

WIKTIONARY_BASE_URL = "https://pl.wiktionary.org/wiki/"

# Marker present in the heading of the Polish-language section
POLISH_SECTION_MARKER = "lang-code-pl"

# CSS class of inflection / conjugation tables
CONJUGATION_TABLE_CLASS = "odmiana"

# First body row of a declension table starts with the nominative case
HEADER_ROW_MARKER = "mianownik"

# CSS class of the "znaczenia:" (meanings) field title
MEANINGS_FIELD_CLASS = "fld-znaczenia"

# Phrase → gender; the earliest phrase found on the page wins
GENDER_PATTERNS: list[tuple[str, Gender]] = [
    ("rzeczownik, rodzaj męskorzeczowy", Gender.MALE),
    ("rzeczownik, rodzaj żeński", Gender.FEMALE),
    ("rzeczownik, rodzaj nijaki", Gender.NEUTRAL),
]

# Thumbnails are requested at this width
THUMBNAIL_WIDTH = "500px"


# ---------------------------------------------------------------------------
# Translation languages
# ---------------------------------------------------------------------------

# code → full name
LANGUAGES: dict[str, str] = {
    "en": "English",
    "uk": "Ukrainian",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "pt": "Portuguese",
    "sw": "Swedish",
    "cs": "Czech",
    "it": "Italian",
    "nl": "Dutch",
    "hu": "Hungarian",
}

# ---------------------------------------------------------------------------
# Knowledge score display
# ---------------------------------------------------------------------------

_SCORE_NAMES: dict[KnowledgeScore, str] = {
    KnowledgeScore.UNKNOWN: "Unknown",
    KnowledgeScore.FAMILIAR: "Familiar",
    KnowledgeScore.GOOD: "Good",
    KnowledgeScore.VERY_GOOD: "Very Good",
    KnowledgeScore.PERFECT: "Perfect",
}

_SCORE_EMOJI: dict[KnowledgeScore, str] = {
    KnowledgeScore.UNKNOWN: "❓",
    KnowledgeScore.FAMILIAR: "🤔",
    KnowledgeScore.GOOD: "👍",
    KnowledgeScore.VERY_GOOD: "⭐",
    KnowledgeScore.PERFECT: "💯",
}

_SCORE_COLORS: dict[KnowledgeScore, str] = {
    KnowledgeScore.UNKNOWN: "#8E8E93",    # gray
    KnowledgeScore.FAMILIAR: "#FF9F0A",   # orange
    KnowledgeScore.GOOD: "#30D158",       # green
    KnowledgeScore.VERY_GOOD: "#007AFF",  # blue
    KnowledgeScore.PERFECT: "#AF52DE",    # purple
}


def _as_score(score: int) -> KnowledgeScore:
    try:
        return KnowledgeScore(score)
    except ValueError:
        return KnowledgeScore.UNKNOWN


def score_display_name(score: int) -> str:
    """Human-readable name of *score*; out-of-range values read as Unknown."""
    return _SCORE_NAMES[_as_score(score)]


def score_emoji(score: int) -> str:
    return _SCORE_EMOJI[_as_score(score)]


def score_color(score: int) -> str:
    return _SCORE_COLORS[_as_score(score)]


def score_options() -> list[dict[str, object]]:
    """All knowledge scores with their display info, lowest first."""
    return [
        {
            "score": score,
            "name": score_display_name(score),
            "emoji": score_emoji(score),
            "color": score_color(score),
        }
        for score in KnowledgeScore
    ]


# ---------------------------------------------------------------------------
# Text utilities
# ---------------------------------------------------------------------------

# "(1.1)" style references in front of a meaning
RE_MEANING_REF = re.compile(r"\(\d.\d\)")

POLISH_ALPHABET = "aąbcćdeęfghijklłmnńoóprsśtuwyzźż"
_ALPHABET_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(POLISH_ALPHABET)}


def clean_meaning(text: str) -> str:
    """Strip the explanation after ``;`` and the ``(n.n)`` reference.

    Examples
    --------
    >>> clean_meaning("(1.2) drugie znaczenie; dodatkowy opis")
    'drugie znaczenie'
    """
    t = re.sub(r";.*", "", text or "", flags=re.DOTALL)
    t = RE_MEANING_REF.sub("", t, count=1)
    return t.strip()


def polish_sort_key(word: str) -> tuple:
    """Sort key ordering words by the Polish alphabet, case-insensitively.

    Letters outside the Polish alphabet sort after it, by code point.
    """
    folded = word.casefold()
    return tuple(
        (_ALPHABET_INDEX[ch], "") if ch in _ALPHABET_INDEX
        else (len(POLISH_ALPHABET), ch)
        for ch in folded
    ), word

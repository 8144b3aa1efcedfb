"""
Text normalization and tokenization for ChatSignal v1
Unicode-normalizing, diacritic-stripping, emoji-aware tokenizers
"""

import re
import unicodedata
from typing import FrozenSet, Iterable, List, Optional

import emoji

from .lexicons import STOPWORDS

# Polish diacritics -> ASCII
DIACRITICS_MAP = str.maketrans({
    "ą": "a", "ć": "c", "ę": "e", "ł": "l", "ń": "n",
    "ó": "o", "ś": "s", "ź": "z", "ż": "z",
})

# Whitespace + punctuation separators shared by every word tokenizer
TOKEN_SPLIT_RE = re.compile(r"[\s.,!?;:()\[\]{}\"'\-/\\<>@#$%^&*+=|~`]+")

# "don't" -> "dont" so English negation survives the apostrophe split
CONTRACTION_RE = re.compile(
    r"\b(don|can|won|isn|aren|wasn|weren|hasn|haven|doesn|didn|couldn|wouldn|shouldn)'t\b"
)

NON_WORD_RE = re.compile(r"[^\w\s]|_")


def normalize_text(text: Optional[str]) -> str:
    """NFC-normalize and lowercase. None becomes an empty string."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).lower()


def strip_diacritics(text: str) -> str:
    """Map Polish diacritics (ą, ć, ę, ł, ń, ó, ś, ź, ż) to ASCII."""
    return text.translate(DIACRITICS_MAP)


def strip_emoji(text: str) -> str:
    return emoji.replace_emoji(text, replace="")


def extract_emojis(text: Optional[str]) -> List[str]:
    """Extract all emojis from text, in order of appearance."""
    if not text:
        return []
    return [e["emoji"] for e in emoji.emoji_list(text)]


def _split(text: str) -> List[str]:
    return [t for t in TOKEN_SPLIT_RE.split(text) if t]


def tokenize_words(text: Optional[str]) -> List[str]:
    """
    Stopword-aware tokenizer.

    Lowercases, NFC-normalizes, strips emoji, splits on whitespace and
    punctuation, then drops tokens shorter than 2 characters and stopwords.
    """
    cleaned = strip_emoji(normalize_text(text))
    return [t for t in _split(cleaned) if len(t) >= 2 and t not in STOPWORDS]


def tokenize_all(text: Optional[str]) -> List[str]:
    """Like tokenize_words but keeps every token, including one-letter words and stopwords."""
    cleaned = strip_emoji(normalize_text(text))
    return _split(cleaned)


def tokenize_sentiment(text: Optional[str]) -> List[str]:
    """
    Permissive tokenizer for sentiment matching.

    Keeps short function words (negation particles) and does not filter
    stopwords, since the sentiment dictionaries overlap with them.
    """
    lowered = normalize_text(text)
    lowered = CONTRACTION_RE.sub(r"\1t", lowered)
    lowered = strip_emoji(lowered)
    return [t for t in _split(lowered) if len(t) >= 2]


def tokenize_letters(text: Optional[str]) -> List[str]:
    """Replace anything but letters, digits and whitespace with a space; keep tokens of 2+ chars."""
    lowered = NON_WORD_RE.sub(" ", normalize_text(text))
    return [t for t in lowered.split() if len(t) >= 2]


def count_words(text: Optional[str]) -> int:
    """Whitespace word count; 0 for blank text."""
    if not text or not text.strip():
        return 0
    return len(text.split())


def build_dictionary(words: Iterable[str]) -> FrozenSet[str]:
    """Lowercased words plus their diacritic-stripped variants."""
    entries = set()
    for word in words:
        lower = normalize_text(word)
        entries.add(lower)
        entries.add(strip_diacritics(lower))
    return frozenset(entries)

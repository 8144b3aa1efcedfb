"""
Dictionary-based sentiment scoring for ChatSignal v1
Negation flipping, chat-emphasis dedup, QWERTY typo tolerance and Polish inflection fallback
"""

import logging
import re
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Sequence, Tuple

from . import config
from .lexicons import (
    EN_SENTENCE_RE,
    INFLECTION_SUFFIXES,
    NEGATION_ALL,
    NEGATION_PL,
    QWERTY_NEIGHBORS,
    SENTIMENT_NEGATIVE_WORDS,
    SENTIMENT_POSITIVE_WORDS,
)
from .stats import std_dev
from .text import build_dictionary, strip_diacritics, tokenize_sentiment
from .timeutils import month_key
from .utils.lru_cache import BoundedLRUCache

logger = logging.getLogger(__name__)

POSITIVE = "positive"
NEGATIVE = "negative"

# Look-ahead window for negation particles
NEGATION_WINDOW = 3

# Tokens shorter than this never get typo candidates
TYPO_MIN_LENGTH = 5

# Inflection fallback applies from this length on
INFLECTION_MIN_LENGTH = 3
INFLECTION_MIN_STEM = 2

# Volatility is only reported once enough messages were scored
VOLATILITY_MIN_MESSAGES = 20

# Cached marker for "looked up, no polarity"
_NO_MATCH = "none"

_TRIPLE_REPEAT_RE = re.compile(r"(.)\1{2,}")
_DOUBLE_REPEAT_RE = re.compile(r"(.)\1+")

Polarity = Optional[str]


def generate_typo_candidates(token: str) -> List[str]:
    """
    Edit-distance-1 candidates for typo correction.

    Adjacent transpositions, single deletions and QWERTY-adjacent
    substitutions. Empty for tokens shorter than TYPO_MIN_LENGTH.
    """
    if len(token) < TYPO_MIN_LENGTH:
        return []

    candidates = []

    # Transpositions ("kocahm" -> "kocham")
    for i in range(len(token) - 1):
        if token[i] != token[i + 1]:
            candidates.append(token[:i] + token[i + 1] + token[i] + token[i + 2:])

    # Deletions ("kochham" -> "kocham")
    for i in range(len(token)):
        candidates.append(token[:i] + token[i + 1:])

    # Keyboard-adjacent substitutions ("kochsm" -> "kocham")
    for i, char in enumerate(token):
        for neighbor in QWERTY_NEIGHBORS.get(char, ""):
            candidates.append(token[:i] + neighbor + token[i + 1:])

    return candidates


class SentimentScorer:
    """
    Scores text against positive/negative dictionaries.

    Polarity for a single token is resolved by an ordered chain of
    strategies; the first one that returns a polarity wins.
    """

    def __init__(
        self,
        positive_words: Sequence[str] = SENTIMENT_POSITIVE_WORDS,
        negative_words: Sequence[str] = SENTIMENT_NEGATIVE_WORDS,
        typo_cache: Optional[BoundedLRUCache] = None,
    ):
        self.positive: FrozenSet[str] = build_dictionary(positive_words)
        self.negative: FrozenSet[str] = build_dictionary(negative_words)
        if typo_cache is None:
            typo_cache = BoundedLRUCache(max_size=config.TYPO_CACHE_SIZE)
        self.typo_cache = typo_cache
        self.resolvers: Tuple[Callable[[str], Polarity], ...] = (
            self.resolve_exact,
            self.resolve_deduplicated,
            self.resolve_typo,
            self.resolve_inflection,
        )

    # ========================================================================
    # POLARITY RESOLVERS
    # ========================================================================

    def _lookup(self, candidate: str) -> Polarity:
        if candidate in self.positive:
            return POSITIVE
        if candidate in self.negative:
            return NEGATIVE
        return None

    def resolve_exact(self, token: str) -> Polarity:
        return self._lookup(token)

    def resolve_deduplicated(self, token: str) -> Polarity:
        """Chat emphasis: "suuuper" -> "super", then "kochamm" -> "kocham"."""
        collapsed_to_two = _TRIPLE_REPEAT_RE.sub(r"\1\1", token)
        if collapsed_to_two != token:
            polarity = self._lookup(collapsed_to_two)
            if polarity:
                return polarity

        collapsed_to_one = _DOUBLE_REPEAT_RE.sub(r"\1", token)
        if collapsed_to_one != token and collapsed_to_one != collapsed_to_two:
            return self._lookup(collapsed_to_one)
        return None

    def resolve_typo(self, token: str) -> Polarity:
        """Keyboard-aware edit distance 1. Ambiguous hits resolve to no match."""
        if len(token) < TYPO_MIN_LENGTH:
            return None

        cached = self.typo_cache.get(token)
        if cached is not None:
            return None if cached == _NO_MATCH else cached

        pos_hit = False
        neg_hit = False
        for candidate in generate_typo_candidates(token):
            if candidate in self.positive:
                pos_hit = True
            if candidate in self.negative:
                neg_hit = True
            if pos_hit and neg_hit:
                break

        result = _NO_MATCH
        if pos_hit and not neg_hit:
            result = POSITIVE
        elif neg_hit and not pos_hit:
            result = NEGATIVE

        self.typo_cache.set(token, result)
        return None if result == _NO_MATCH else result

    def resolve_inflection(self, token: str) -> Polarity:
        """
        Polish inflection fallback.

        Strips the first matching inflectional suffix and re-attaches base
        endings ("cudownego" -> "cudowny"), testing each candidate as-is and
        diacritic-stripped. Only the first suffix group with a long enough
        stem is tried.
        """
        if len(token) < INFLECTION_MIN_LENGTH:
            return None

        for suffix, endings in INFLECTION_SUFFIXES:
            if not token.endswith(suffix):
                continue
            stem = token[:-len(suffix)]
            if len(stem) < INFLECTION_MIN_STEM:
                continue

            for ending in endings:
                candidate = stem + ending
                polarity = self._lookup(candidate)
                if polarity:
                    return polarity
                stripped = strip_diacritics(candidate)
                if stripped != candidate:
                    polarity = self._lookup(stripped)
                    if polarity:
                        return polarity
            break

        return None

    def resolve_polarity(self, token: str) -> Polarity:
        for resolver in self.resolvers:
            polarity = resolver(token)
            if polarity:
                return polarity
        return None

    # ========================================================================
    # SCORING
    # ========================================================================

    def score(self, text: Optional[str]) -> Dict[str, Any]:
        """
        Score a single text.

        Returns:
            {"positive": int, "negative": int, "total": int, "score": float in [-1, 1]}
        """
        tokens = tokenize_sentiment(text)
        if not tokens:
            return {"positive": 0, "negative": 0, "total": 0, "score": 0.0}

        negations = NEGATION_ALL if EN_SENTENCE_RE.search(text) else NEGATION_PL
        polarities = [self.resolve_polarity(t) for t in tokens]

        # First pass: every negation particle flips the first polar token ahead of it
        flipped = set()
        consumed = set()
        for i, token in enumerate(tokens):
            if token not in negations:
                continue
            for j in range(i + 1, min(i + 1 + NEGATION_WINDOW, len(tokens))):
                if polarities[j]:
                    flipped.add(j)
                    consumed.add(i)
                    break

        # Second pass: count each token once
        positive = 0
        negative = 0
        for i, polarity in enumerate(polarities):
            if i in consumed or polarity is None:
                continue
            if i in flipped:
                polarity = NEGATIVE if polarity == POSITIVE else POSITIVE
            if polarity == POSITIVE:
                positive += 1
            else:
                negative += 1

        total = positive + negative
        score = (positive - negative) / total if total > 0 else 0.0
        return {"positive": positive, "negative": negative, "total": total, "score": score}


_default_scorer: Optional[SentimentScorer] = None


def get_scorer() -> SentimentScorer:
    """Process-wide scorer; dictionaries are built once on first use."""
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = SentimentScorer()
        logger.debug(
            f"Sentiment dictionaries ready: {len(_default_scorer.positive)} positive, "
            f"{len(_default_scorer.negative)} negative entries"
        )
    return _default_scorer


def compute_sentiment_score(text: Optional[str]) -> Dict[str, Any]:
    """Score text with the shared scorer. See SentimentScorer.score."""
    return get_scorer().score(text)


# ============================================================================
# AGGREGATION
# ============================================================================

def _is_scorable(msg: Dict[str, Any]) -> bool:
    return bool(msg.get("content")) and msg.get("type", "text") == "text"


def _neutral_person_stats() -> Dict[str, float]:
    return {
        "avg_sentiment": 0.0,
        "positive_ratio": 0.0,
        "negative_ratio": 0.0,
        "neutral_ratio": 1.0,
        "emotional_volatility": 0.0,
    }


def compute_person_sentiment(messages: List[Dict[str, Any]]) -> Dict[str, float]:
    """
    Sentiment statistics for one person's messages.

    Only text messages with content are scored. Volatility is the population
    standard deviation of per-message scores and stays 0 below
    VOLATILITY_MIN_MESSAGES scored messages.
    """
    scores = [compute_sentiment_score(m["content"])["score"] for m in messages if _is_scorable(m)]
    if not scores:
        return _neutral_person_stats()

    count = len(scores)
    positive = sum(1 for s in scores if s > 0)
    negative = sum(1 for s in scores if s < 0)
    avg = sum(scores) / count

    return {
        "avg_sentiment": avg,
        "positive_ratio": positive / count,
        "negative_ratio": negative / count,
        "neutral_ratio": (count - positive - negative) / count,
        "emotional_volatility": std_dev(scores) if count >= VOLATILITY_MIN_MESSAGES else 0.0,
    }


def compute_sentiment_trend(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
    months: Optional[List[str]] = None,
) -> List[Dict[str, Any]]:
    """
    Per-month, per-person average sentiment score.

    Senders missing from participant_names are tracked as well. Months
    default to every month that has a message.
    """
    if months is None:
        months = sorted({month_key(m["timestamp"]) for m in messages})

    buckets: Dict[str, Dict[str, List[float]]] = {
        month: {name: [0.0, 0] for name in participant_names} for month in months
    }

    for msg in messages:
        if not _is_scorable(msg):
            continue
        per_person = buckets.get(month_key(msg["timestamp"]))
        if per_person is None:
            continue
        entry = per_person.setdefault(msg["sender"], [0.0, 0])
        entry[0] += compute_sentiment_score(msg["content"])["score"]
        entry[1] += 1

    return [
        {
            "month": month,
            "per_person": {
                name: (total / count if count > 0 else 0.0)
                for name, (total, count) in buckets[month].items()
            },
        }
        for month in months
    ]

"""
Tests for dictionary-based sentiment scoring
"""

import pytest
from chatsignal.sentiment import (
    SentimentScorer,
    compute_person_sentiment,
    compute_sentiment_score,
    compute_sentiment_trend,
    generate_typo_candidates,
)
from chatsignal.utils.lru_cache import BoundedLRUCache

from conftest import BASE_TS, DAY, make_message


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def sample_texts():
    """Mixed Polish/English chat lines."""
    return [
        "",
        "kocham cię",
        "nie kocham cię",
        "to jest okropnie beznadziejne",
        "suuuper dzień!!!",
        "I don't love this",
        "ok",
        "kocahm",
        "nie nie nie",
        "😀😀😀",
    ]


# ============================================================================
# SCORE BOUNDS
# ============================================================================

def test_score_bounds(sample_texts):
    """Score is always in [-1, 1] and 0 when nothing matched."""
    for text in sample_texts:
        result = compute_sentiment_score(text)
        assert -1.0 <= result["score"] <= 1.0
        assert result["total"] == result["positive"] + result["negative"]
        if result["total"] == 0:
            assert result["score"] == 0.0


def test_empty_text():
    """Empty and None text score neutral."""
    assert compute_sentiment_score("") == {"positive": 0, "negative": 0, "total": 0, "score": 0.0}
    assert compute_sentiment_score(None)["total"] == 0


# ============================================================================
# NEGATION
# ============================================================================

def test_polish_negation_flips_polarity():
    """'nie kocham' scores below 'kocham'."""
    plain = compute_sentiment_score("kocham cie")
    negated = compute_sentiment_score("nie kocham cie")
    assert plain["score"] == 1.0
    assert negated["score"] == -1.0
    assert negated["score"] <= plain["score"]


def test_negation_counted_once():
    """The negation particle and the flipped token count as one hit."""
    result = compute_sentiment_score("nie kocham cie")
    assert result["total"] == 1
    assert result["negative"] == 1


def test_english_negation_needs_english_marker():
    """English particles only negate when the message reads as English."""
    assert compute_sentiment_score("I don't love this")["score"] == -1.0
    assert compute_sentiment_score("dont love you")["score"] == 1.0


def test_negation_window():
    """Polar tokens more than 3 tokens after the particle are not flipped."""
    result = compute_sentiment_score("nie wiem czy dzisiaj jutro kocham")
    assert result["positive"] == 1


def test_unused_negation_particle_scores_as_word():
    """A particle with nothing to flip is scored as a negative word."""
    result = compute_sentiment_score("nie wiem czy dzisiaj jutro kocham")
    assert result == {"positive": 1, "negative": 1, "total": 2, "score": 0.0}


# ============================================================================
# RESOLVERS
# ============================================================================

def test_typo_tolerance():
    """A transposition of 'kocham' still scores positive."""
    assert compute_sentiment_score("kocahm")["positive"] > 0


def test_short_tokens_skip_typo_correction():
    """Tokens under 5 characters never get typo candidates."""
    assert compute_sentiment_score("zyl")["total"] == 0
    assert generate_typo_candidates("zyl") == []


def test_typo_candidates_include_edit_types():
    """Transpositions, deletions and keyboard substitutions are generated."""
    candidates = generate_typo_candidates("kocahm")
    assert "kocham" in candidates          # transposition
    assert "ocahm" in candidates           # deletion
    assert "locahm" in candidates          # k -> l is keyboard-adjacent


def test_ambiguous_typo_is_no_match():
    """Typo candidates hitting both polarities resolve to no match."""
    scorer = SentimentScorer(positive_words=["abcdef"], negative_words=["abcdeg"])
    assert scorer.score("abcdefg")["total"] == 0

    positive_only = SentimentScorer(positive_words=["abcdef"], negative_words=[])
    assert positive_only.score("abcdefg")["positive"] == 1


def test_deduplication():
    """Chat emphasis collapses to the dictionary word."""
    assert compute_sentiment_score("suuuper")["positive"] == 1


def test_inflection_fallback():
    """Inflected adjectives resolve through their base form."""
    assert compute_sentiment_score("cudownego")["positive"] == 1


def test_diacritic_free_input():
    """ASCII-typed Polish matches diacritic dictionary entries."""
    assert compute_sentiment_score("nienawidze")["negative"] == 1


@pytest.mark.parametrize("word, polarity", [
    ("zmęczony", "negative"),
    ("zazdrość", "negative"),
    ("zmeczony", "negative"),
    ("ulga", "positive"),
    ("hej", "positive"),
])
def test_extended_vocabulary(word, polarity):
    """Everyday emotion words outside the core lists still score."""
    result = compute_sentiment_score(word)
    assert result[polarity] == 1
    assert result["total"] == 1


def test_custom_dictionaries_replace_defaults():
    """A scorer built with its own lists ignores the bundled vocabulary."""
    scorer = SentimentScorer(positive_words=["kocham"], negative_words=[])
    assert scorer.score("zmęczony")["total"] == 0
    assert scorer.score("kocham")["positive"] == 1


def test_typo_cache_is_used():
    """Typo lookups are memoized in the scorer's cache."""
    cache = BoundedLRUCache(max_size=10)
    scorer = SentimentScorer(typo_cache=cache)
    scorer.score("kocahm")
    scorer.score("kocahm")

    stats = cache.stats()
    assert stats["size"] == 1
    assert stats["hits"] == 1
    assert scorer.typo_cache is cache


def test_resolver_order():
    """Resolvers run exact, dedup, typo, inflection."""
    scorer = SentimentScorer()
    names = [r.__name__ for r in scorer.resolvers]
    assert names == ["resolve_exact", "resolve_deduplicated", "resolve_typo", "resolve_inflection"]


# ============================================================================
# AGGREGATION
# ============================================================================

def test_person_sentiment_volatility():
    """Volatility is reported from 20 scored messages on."""
    messages = [
        make_message("A", "super" if i % 2 == 0 else "okropnie", BASE_TS + i * 1000)
        for i in range(20)
    ]
    stats = compute_person_sentiment(messages)
    assert stats["avg_sentiment"] == pytest.approx(0.0)
    assert stats["positive_ratio"] == pytest.approx(0.5)
    assert stats["negative_ratio"] == pytest.approx(0.5)
    assert stats["emotional_volatility"] == pytest.approx(1.0)

    fewer = compute_person_sentiment(messages[:19])
    assert fewer["emotional_volatility"] == 0.0


def test_person_sentiment_no_text():
    """Only media messages gives neutral stats."""
    messages = [make_message("A", "", BASE_TS, msg_type="media")]
    stats = compute_person_sentiment(messages)
    assert stats["neutral_ratio"] == 1.0
    assert stats["avg_sentiment"] == 0.0


def test_sentiment_trend_by_month():
    """Monthly averages per participant, 0 for silent months."""
    messages = [
        make_message("A", "super", BASE_TS),
        make_message("B", "okropnie", BASE_TS + 40 * DAY),
    ]
    trend = compute_sentiment_trend(messages, ["A", "B"])
    assert trend == [
        {"month": "2024-01", "per_person": {"A": 1.0, "B": 0.0}},
        {"month": "2024-02", "per_person": {"A": 0.0, "B": -1.0}},
    ]


def test_scoring_is_deterministic(sample_texts):
    """Same input, same output."""
    first = [compute_sentiment_score(t) for t in sample_texts]
    second = [compute_sentiment_score(t) for t in sample_texts]
    assert first == second


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Tests for emotional granularity
"""

import pytest
from chatsignal.granularity import compute_emotional_granularity, compute_granularity_score

from conftest import BASE_TS, MINUTE, make_message


def _repeat(sender, content, count, offset=0):
    return [make_message(sender, content, BASE_TS + (offset + i) * MINUTE) for i in range(count)]


@pytest.mark.parametrize("distinct,emotion_words,total_words,expected", [
    (12, 30, 100, 100),
    (6, 5, 100, 50),
    (0, 0, 100, 0),
    (12, 10, 49, 0),
])
def test_granularity_score(distinct, emotion_words, total_words, expected):
    """70 points for diversity, 30 for coverage, nothing below 50 words."""
    assert compute_granularity_score(distinct, emotion_words, total_words) == expected


def test_mixed_categories_penalized():
    """Messages mixing categories lower the v2 score."""
    messages = _repeat("A", "super dzień bardzo smutno", 50)
    messages += _repeat("B", "super dzień bardzo fajnie", 50, offset=50)
    result = compute_emotional_granularity(messages, ["A", "B"])

    a = result["per_person"]["A"]
    assert a["distinct_categories"] == 2
    assert a["emotional_word_count"] == 100
    assert a["category_counts"] == {"Radość": 50, "Smutek": 50}
    assert a["granularity_score"] == 42
    assert a["category_cooccurrence_index"] == 1.0
    assert a["granularity_score_v2"] == 29
    assert a["dominant_category"] == "Radość"

    b = result["per_person"]["B"]
    assert b["distinct_categories"] == 1
    assert b["granularity_score"] == 36
    assert b["category_cooccurrence_index"] == 0.0
    assert b["granularity_score_v2"] == 36

    assert result["higher_granularity"] == "B"


def test_requires_enough_words():
    """Fewer than two people with 200+ words gives None."""
    messages = _repeat("A", "super dzień bardzo smutno", 50) + _repeat("B", "super", 50, offset=50)
    assert compute_emotional_granularity(messages, ["A", "B"]) is None
    assert compute_emotional_granularity(messages, ["A"]) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

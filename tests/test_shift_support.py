"""
Tests for shift vs support response classification
"""

import pytest
from chatsignal.shift_support import (
    classify_response,
    compute_shift_support_ratio,
    first_token,
    word_overlap,
)

from conftest import BASE_TS, HOUR, MINUTE, alternating_messages


def test_first_token_strips_punctuation():
    assert first_token("Serio? gratulacje") == "serio"


def test_word_overlap_ignores_short_words():
    assert word_overlap("kupiłam nowe buty wczoraj", "nowe buty wow") == 2
    assert word_overlap("to był ok", "to był ok") == 0


@pytest.mark.parametrize("prev,curr,expected", [
    ("byłam dziś u lekarza", "Co powiedział?", "support"),
    ("jak minął dzień", "ja dzisiaj byłem na siłowni", "shift"),
    ("dostałam awans", "serio? gratulacje", "support"),
    ("kupiłam nowe buty wczoraj", "nowe buty wow", "support"),
    ("dostałam awans", "tak, zasłużyłaś", "support"),
    ("dostałam awans", "to dla ciebie świetna wiadomość", "support"),
    ("dostałam awans", "fajnie", "ambiguous"),
])
def test_classify_response(prev, curr, expected):
    """Rules run in order, first match wins."""
    assert classify_response(prev, curr) == expected


def test_cni_per_person():
    """A always talks about themselves, B always asks."""
    messages = alternating_messages(24, BASE_TS, MINUTE, contents=("ja mam swoje sprawy", "co u ciebie"))
    result = compute_shift_support_ratio(messages, ["A", "B"])

    a = result["per_person"]["A"]
    assert a["shift_count"] == 11
    assert a["support_count"] == 0
    assert a["shift_ratio"] == 1.0
    assert a["cni"] == 100

    b = result["per_person"]["B"]
    assert b["support_count"] == 12
    assert b["cni"] == 0

    assert result["higher_cni"] == "A"
    assert result["cni_gap"] == 100


def test_slow_replies_not_counted():
    """Replies more than 6 hours later are not responses."""
    messages = alternating_messages(24, BASE_TS, 7 * HOUR, contents=("ja mam swoje sprawy", "co u ciebie"))
    assert compute_shift_support_ratio(messages, ["A", "B"]) is None


def test_needs_two_people():
    messages = alternating_messages(24, BASE_TS, MINUTE)
    assert compute_shift_support_ratio(messages, ["A"]) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Tests for intimacy progression
"""

import pytest
from chatsignal.intimacy import (
    compute_informality,
    compute_intimacy_progression,
    count_emotional_words,
    intimacy_label,
)

from conftest import BASE_TS, DAY, HOUR, MINUTE, make_message

# First day of Jan, Feb and Mar 2024
MONTH_STARTS = [BASE_TS, BASE_TS + 31 * DAY, BASE_TS + 60 * DAY]


def _month(start, content, hour, count=40):
    return [
        make_message("A" if i % 2 == 0 else "B", content, start + hour * HOUR + i * MINUTE)
        for i in range(count)
    ]


@pytest.fixture
def flat_conversation():
    """Three identical months of 'ok' at noon."""
    messages = []
    for start in MONTH_STARTS:
        messages += _month(start, "ok", 12)
    return messages


# ============================================================================
# FACTORS
# ============================================================================

def test_count_emotional_words():
    """Trailing punctuation is ignored; unknown words do not count."""
    assert count_emotional_words("Kocham cię, tęsknię!") == 2
    assert count_emotional_words("idę do sklepu") == 0
    assert count_emotional_words(None) == 0


def test_informality_weights():
    """Exclamation marks weigh 1, emoji weigh 2, questions nothing."""
    assert compute_informality("hej!!") == 2
    assert compute_informality("hej 😀") == 2
    assert compute_informality("serio?") == 0
    assert compute_informality("") == 0


@pytest.mark.parametrize("slope,label", [
    (3.0, "Rosnąca bliskość"),
    (1.0, "Stopniowe zbliżanie"),
    (0.0, "Stabilna relacja"),
    (-1.0, "Powolne oddalanie"),
    (-3.0, "Malejąca bliskość"),
])
def test_intimacy_label(slope, label):
    """Slope bands map to Polish labels."""
    assert intimacy_label(slope) == label


# ============================================================================
# PROGRESSION
# ============================================================================

def test_flat_conversation(flat_conversation):
    """Identical months score the same and the trend is stable."""
    result = compute_intimacy_progression(flat_conversation, ["A", "B"])

    assert [p["month"] for p in result["trend"]] == ["2024-01", "2024-02", "2024-03"]
    assert [p["score"] for p in result["trend"]] == [25, 25, 25]
    assert result["trend"][0]["components"] == {
        "message_length_factor": 100,
        "emotional_words_factor": 0,
        "informality_factor": 0,
        "late_night_factor": 0,
    }
    assert result["overall_slope"] == pytest.approx(0.0)
    assert result["label"] == "Stabilna relacja"


def test_growing_closeness():
    """Long, emotional, late-night messages in the last month raise the trend."""
    messages = _month(MONTH_STARTS[0], "ok", 12) + _month(MONTH_STARTS[1], "ok", 12)
    messages += _month(MONTH_STARTS[2], "kocham cię tęsknię bardzo!!! ❤️", 23)

    result = compute_intimacy_progression(messages, ["A", "B"])
    scores = [p["score"] for p in result["trend"]]
    assert scores[2] == 100
    assert scores[0] == scores[1] < scores[2]
    assert result["overall_slope"] > 2
    assert result["label"] == "Rosnąca bliskość"


def test_system_messages_skipped(flat_conversation):
    """System notices do not move the score."""
    noisy = list(flat_conversation)
    noisy += [
        make_message("A", "kocham!!! ❤️❤️", MONTH_STARTS[0] + 23 * HOUR + i * MINUTE, msg_type="system")
        for i in range(10)
    ]
    assert compute_intimacy_progression(noisy, ["A", "B"]) == \
        compute_intimacy_progression(flat_conversation, ["A", "B"])


def test_single_month_is_default():
    """Fewer than two months gives an empty stable trend."""
    result = compute_intimacy_progression(_month(BASE_TS, "ok", 12), ["A", "B"])
    assert result == {"trend": [], "overall_slope": 0.0, "label": "Stabilna relacja"}
    assert compute_intimacy_progression([], ["A", "B"])["trend"] == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

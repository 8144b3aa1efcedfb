"""
Tests for conversational repair detection
"""

import pytest
from chatsignal.lexicons import OTHER_REPAIR_MARKERS, SELF_REPAIR_MARKERS
from chatsignal.repair_patterns import (
    compute_repair_patterns,
    contains_marker,
    detect_repair,
    repair_label,
)

from conftest import BASE_TS, MINUTE, make_message

NEUTRAL = "dobra widzimy się jutro"
SELF_REPAIR = "tzn. chodziło mi o jutro"
OTHER_REPAIR = "co?"


def _chat(a_repairs=5, b_repairs=5, a_text=SELF_REPAIR, b_text=OTHER_REPAIR, per_person=50):
    """A and B alternate; the first N messages of each carry a repair."""
    messages = []
    for i in range(per_person):
        a = a_text if i < a_repairs else NEUTRAL
        b = b_text if i < b_repairs else NEUTRAL
        messages.append(make_message("A", a, BASE_TS + 2 * i * MINUTE, index=2 * i))
        messages.append(make_message("B", b, BASE_TS + (2 * i + 1) * MINUTE, index=2 * i + 1))
    return messages


# ============================================================================
# MARKERS
# ============================================================================

@pytest.mark.parametrize("content", [
    "tzn. chodziło mi o jutro",
    "W sensie że jutro",
    "jutro, to znaczy w piątek",
    "I mean tomorrow",
    "*miałam",
    "spotkajmy się w *piątek",
])
def test_self_repair(content):
    assert detect_repair(content)["self"]


@pytest.mark.parametrize("content", [
    "co?",
    "Nie rozumiem o co chodzi",
    "what do you mean",
    "hmm?",
])
def test_other_repair(content):
    assert detect_repair(content)["other"]


def test_plain_messages_are_not_repairs():
    assert detect_repair(NEUTRAL) == {"self": False, "other": False}
    # Multiplication, not a correction
    assert not detect_repair("2*3 to sześć")["self"]


def test_marker_must_start_a_word():
    assert contains_marker("no to znaczy", SELF_REPAIR_MARKERS)
    assert not contains_marker("pomidory", OTHER_REPAIR_MARKERS)


@pytest.mark.parametrize("self_rate, other_rate, label", [
    (10.0, 0.0, "Komunikuje się precyzyjnie"),
    (0.0, 10.0, "Często niejasny/a"),
    (6.0, 4.0, "Dba o precyzję wypowiedzi"),
    (3.0, 4.0, "Partnerzy często proszą o wyjaśnienia"),
    (1.0, 1.0, "Typowy wzorzec napraw"),
])
def test_labels(self_rate, other_rate, label):
    assert repair_label(self_rate, other_rate) == label


# ============================================================================
# ANALYSIS
# ============================================================================

def test_repair_rates():
    """A clarifies their own words, B asks for clarification."""
    result = compute_repair_patterns(_chat(), ["A", "B"])

    a = result["per_person"]["A"]
    assert a["self_repair_count"] == 5
    assert a["other_repair_initiation_count"] == 0
    assert a["self_repair_rate"] == 10.0
    assert a["repair_initiation_ratio"] == 1.0
    assert a["label"] == "Komunikuje się precyzyjnie"

    b = result["per_person"]["B"]
    assert b["other_repair_rate"] == 10.0
    assert b["repair_initiation_ratio"] == 0.0
    assert b["label"] == "Często niejasny/a"

    # 10 repairs in 100 messages, scaled by 500
    assert result["mutual_repair_index"] == 50
    assert result["dominant_self_repairer"] == "A"
    assert result["interpretation"].startswith("A naprawia swoje wypowiedzi 100.0× częściej niż B")


def test_similar_self_repair():
    result = compute_repair_patterns(_chat(b_text=SELF_REPAIR), ["A", "B"])
    assert result["interpretation"] == (
        "Oboje podobnie często wyjaśniają swoje wypowiedzi (10.0 vs 10.0 napraw/100 wiad.)."
    )
    assert result["dominant_self_repairer"] == "A"


def test_mutual_index_is_capped():
    result = compute_repair_patterns(_chat(a_repairs=50, b_repairs=50), ["A", "B"])
    assert result["mutual_repair_index"] == 100


# ============================================================================
# GUARDS
# ============================================================================

def test_too_few_messages():
    assert compute_repair_patterns(_chat()[:99], ["A", "B"]) is None
    assert compute_repair_patterns(_chat(), ["A"]) is None


def test_too_few_repairs():
    assert compute_repair_patterns(_chat(a_repairs=2, b_repairs=2), ["A", "B"]) is None


def test_needs_two_active_people():
    """A third participant with under 10 messages is left out; one active person gives None."""
    messages = _chat()
    messages += [make_message("C", OTHER_REPAIR, BASE_TS + (200 + i) * MINUTE) for i in range(5)]
    result = compute_repair_patterns(messages, ["A", "B", "C"])
    assert set(result["per_person"]) == {"A", "B"}
    assert compute_repair_patterns(messages, ["A", "C"]) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

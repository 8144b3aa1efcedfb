"""
Tests for pursuit-withdrawal cycle detection
"""

import pytest
from chatsignal.pursuit_withdrawal import (
    contains_demand_marker,
    detect_pursuit_withdrawal,
    is_routine_gap,
)

from conftest import BASE_TS, DAY, HOUR, MINUTE, make_message

BURST_GAP = 5 * MINUTE


def _filler(count=40):
    """Hourly alternating messages from 2024-01-01 12:00, no runs."""
    start = BASE_TS + 12 * HOUR
    return [
        make_message("A" if i % 2 == 0 else "B", "ok", start + i * HOUR, index=i)
        for i in range(count)
    ]


def _cycle(day, silence, sender="A", replier="B", count=4, demand=True, hour=14, gap=BURST_GAP):
    """count messages from sender at the given day/hour, then replier after silence ms."""
    start = BASE_TS + day * DAY + hour * HOUR
    burst = [
        make_message(sender, "halo?" if demand and i == count - 2 else "ok", start + i * gap)
        for i in range(count)
    ]
    reply = make_message(replier, "jestem", start + (count - 1) * gap + silence)
    return burst + [reply]


def _chat(*cycles, filler=40):
    return _filler(filler) + [m for cycle in cycles for m in cycle]


# ============================================================================
# DEMAND MARKERS
# ============================================================================

@pytest.mark.parametrize("content", [
    "halo?",
    "Odpisz mi wreszcie",
    "czemu nie odpisujesz",
    "are you there",
    "??",
    " ??? ",
])
def test_demand_markers(content):
    assert contains_demand_marker(content)


@pytest.mark.parametrize("content", [
    "what?? no way",
    "dzisiaj było super",
    "",
    None,
])
def test_not_demand_markers(content):
    """Question marks inside a sentence and ordinary chat do not count."""
    assert not contains_demand_marker(content)


def test_routine_gaps():
    """Overnight starts and 12h+ gaps are routine."""
    assert is_routine_gap(BASE_TS + 22 * HOUR, 5 * HOUR)
    assert is_routine_gap(BASE_TS + 8 * HOUR, 5 * HOUR)
    assert is_routine_gap(BASE_TS + 12 * HOUR, 13 * HOUR)
    assert not is_routine_gap(BASE_TS + 12 * HOUR, 5 * HOUR)


# ============================================================================
# GUARDS
# ============================================================================

def test_guards():
    """Fewer than 2 people, 50 messages or 2 cycles gives None."""
    assert detect_pursuit_withdrawal(_filler(60), ["A"]) is None
    assert detect_pursuit_withdrawal(_filler(49), ["A", "B"]) is None
    assert detect_pursuit_withdrawal(_filler(50), ["A", "B"]) is None


def test_single_cycle_is_not_a_pattern():
    messages = _chat(_cycle(2, 5 * HOUR), filler=50)
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


# ============================================================================
# CYCLES
# ============================================================================

def test_cycles_detected():
    """Four messages with a demand marker, then 5h of silence, twice."""
    messages = _chat(_cycle(2, 5 * HOUR), _cycle(3, 5 * HOUR))
    result = detect_pursuit_withdrawal(messages, ["A", "B"])

    assert result["pursuer"] == "A"
    assert result["withdrawer"] == "B"
    assert result["cycle_count"] == 2
    assert result["avg_cycle_duration_ms"] == 5 * HOUR
    assert result["escalation_trend"] == 0.0

    cycle = result["cycles"][0]
    assert cycle == {
        "pursuer": "A",
        "pursuit_timestamp": BASE_TS + 2 * DAY + 14 * HOUR,
        "withdrawal_duration_ms": 5 * HOUR,
        "pursuit_message_count": 4,
        "resolved": True,
    }


def test_short_run_without_demand_marker():
    """Four plain messages look like excited chatting."""
    messages = _chat(_cycle(2, 5 * HOUR, demand=False), _cycle(3, 5 * HOUR, demand=False))
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


def test_long_run_needs_no_marker():
    """Six unanswered messages are a pursuit whatever they say."""
    messages = _chat(
        _cycle(2, 5 * HOUR, count=6, demand=False),
        _cycle(3, 5 * HOUR, count=6, demand=False),
    )
    result = detect_pursuit_withdrawal(messages, ["A", "B"])
    assert result["cycle_count"] == 2
    assert result["cycles"][0]["pursuit_message_count"] == 6


def test_three_messages_not_a_pursuit():
    messages = _chat(_cycle(2, 5 * HOUR, count=3), _cycle(3, 5 * HOUR, count=3), filler=50)
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


def test_withdrawal_threshold():
    """Just under 4h is not a withdrawal, exactly 4h is."""
    short = 4 * HOUR - 1000
    assert detect_pursuit_withdrawal(_chat(_cycle(2, short), _cycle(3, short)), ["A", "B"]) is None

    result = detect_pursuit_withdrawal(_chat(_cycle(2, 4 * HOUR), _cycle(3, 4 * HOUR)), ["A", "B"])
    assert result["cycle_count"] == 2


def test_overnight_silence_suppressed():
    """A run ending at 22:15 followed by sleep is not a withdrawal."""
    messages = _chat(_cycle(2, 5 * HOUR, hour=22), _cycle(3, 5 * HOUR, hour=22))
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


def test_day_long_silence_suppressed():
    messages = _chat(_cycle(2, 13 * HOUR), _cycle(4, 13 * HOUR))
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


def test_rapid_messages_merge_into_one():
    """Messages a minute apart count as one logical message."""
    messages = _chat(_cycle(2, 5 * HOUR, gap=MINUTE), _cycle(3, 5 * HOUR, gap=MINUTE))
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


def test_run_broken_by_half_hour_pause():
    """30 minutes between messages starts a new run."""
    messages = _chat(_cycle(2, 5 * HOUR, gap=30 * MINUTE), _cycle(3, 5 * HOUR, gap=30 * MINUTE))
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) is None


# ============================================================================
# ROLES AND TRENDS
# ============================================================================

def test_unresolved_when_pursuer_writes_again():
    messages = _chat(_cycle(2, 5 * HOUR), _cycle(3, 5 * HOUR, replier="A"))
    result = detect_pursuit_withdrawal(messages, ["A", "B"])
    assert [c["resolved"] for c in result["cycles"]] == [True, False]


def test_mutual_roles():
    """One cycle each way is a mutual pattern."""
    messages = _chat(_cycle(2, 5 * HOUR), _cycle(3, 5 * HOUR, sender="B", replier="A"))
    result = detect_pursuit_withdrawal(messages, ["A", "B"])
    assert result["pursuer"] == "mutual"
    assert result["withdrawer"] == "mutual"


def test_escalating_silences():
    """Second-half silences twice as long give a trend of +1."""
    messages = _chat(_cycle(2, 5 * HOUR), _cycle(3, 10 * HOUR))
    result = detect_pursuit_withdrawal(messages, ["A", "B"])
    assert result["escalation_trend"] == 1.0
    assert result["avg_cycle_duration_ms"] == int(7.5 * HOUR)


def test_deterministic():
    messages = _chat(_cycle(2, 5 * HOUR), _cycle(3, 10 * HOUR))
    assert detect_pursuit_withdrawal(messages, ["A", "B"]) == detect_pursuit_withdrawal(messages, ["A", "B"])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

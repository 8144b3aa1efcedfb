"""
Tests for turn and session segmentation
"""

import pytest
from chatsignal.turns import (
    DEFAULT_SESSION_GAP_MS,
    MAX_SESSION_GAP_MS,
    MIN_SESSION_GAP_MS,
    build_sessions,
    build_turns,
    compute_adaptive_session_gap,
)

from conftest import BASE_TS, MINUTE, alternating_messages, make_message


# ============================================================================
# TURNS
# ============================================================================

def test_messages_within_burst_merge():
    """Same-sender messages 90s apart form one turn."""
    messages = [
        make_message("A", "hej", BASE_TS),
        make_message("A", "jesteś?", BASE_TS + 90 * 1000),
    ]
    turns = build_turns(messages)
    assert len(turns) == 1
    assert turns[0]["message_count"] == 2
    assert turns[0]["total_chars"] == len("hej") + len("jesteś?")
    assert turns[0]["end_timestamp"] == BASE_TS + 90 * 1000


def test_messages_beyond_burst_split():
    """Same-sender messages 3 minutes apart are separate turns."""
    messages = [
        make_message("A", "hej", BASE_TS),
        make_message("A", "jesteś?", BASE_TS + 3 * MINUTE),
    ]
    assert len(build_turns(messages)) == 2


def test_burst_measured_from_last_message():
    """The burst window slides with each merged message."""
    messages = [make_message("A", "x", BASE_TS + i * 100 * 1000) for i in range(4)]
    turns = build_turns(messages)
    assert len(turns) == 1
    assert turns[0]["message_count"] == 4


def test_sender_change_starts_turn():
    """A different sender always starts a new turn."""
    messages = alternating_messages(4, BASE_TS, 10 * 1000)
    turns = build_turns(messages)
    assert [t["sender"] for t in turns] == ["A", "B", "A", "B"]
    assert turns[0]["month_key"] == "2024-01"


def test_empty_turns():
    """No messages, no turns."""
    assert build_turns([]) == []


# ============================================================================
# ADAPTIVE SESSION GAP
# ============================================================================

def test_adaptive_gap_default_with_few_gaps():
    """Fewer than 20 sub-hour gaps falls back to 30 minutes."""
    messages = alternating_messages(15, BASE_TS, 5 * MINUTE)
    assert compute_adaptive_session_gap(messages) == DEFAULT_SESSION_GAP_MS


def test_adaptive_gap_lower_clamp():
    """Very fast conversations clamp to 15 minutes."""
    messages = alternating_messages(40, BASE_TS, 1000)
    assert compute_adaptive_session_gap(messages) == MIN_SESSION_GAP_MS


def test_adaptive_gap_doubles_p75():
    """With enough gaps the threshold is twice the 75th percentile."""
    messages = alternating_messages(40, BASE_TS, 55 * MINUTE)
    assert compute_adaptive_session_gap(messages) == 110 * MINUTE


def test_adaptive_gap_ignores_long_gaps():
    """Gaps of an hour or more do not count toward the rhythm."""
    messages = alternating_messages(40, BASE_TS, 2 * 60 * MINUTE)
    assert compute_adaptive_session_gap(messages) == DEFAULT_SESSION_GAP_MS


@pytest.mark.parametrize("step", [1000, 30 * 1000, 5 * MINUTE, 20 * MINUTE, 59 * MINUTE])
def test_adaptive_gap_bounds(step):
    """The threshold always stays within [15 min, 2 h]."""
    messages = alternating_messages(50, BASE_TS, step)
    gap = compute_adaptive_session_gap(messages)
    assert MIN_SESSION_GAP_MS <= gap <= MAX_SESSION_GAP_MS


# ============================================================================
# SESSIONS
# ============================================================================

def test_sessions_split_on_gap():
    """A gap above the threshold starts a new session with its own initiator."""
    messages = [
        make_message("A", "hej", BASE_TS),
        make_message("B", "hej", BASE_TS + 5 * MINUTE),
        make_message("B", "jestem", BASE_TS + 120 * MINUTE),
        make_message("A", "super", BASE_TS + 125 * MINUTE),
    ]
    sessions = build_sessions(build_turns(messages), 30 * MINUTE)
    assert [s["initiator"] for s in sessions] == ["A", "B"]
    assert [s["turn_count"] for s in sessions] == [2, 2]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

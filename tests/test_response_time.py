"""
Tests for response-time analytics
"""

import pytest
from chatsignal.response_time import (
    classify_response_time,
    compute_ghosting_index,
    compute_initiative_ratio,
    compute_ra_trend,
    compute_response_time_analysis,
    detect_anomalies,
    is_overnight_response,
    measure_turn_responses,
    response_asymmetry,
)

from conftest import BASE_TS, DAY, HOUR, MINUTE, alternating_messages, make_message


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def steady_conversation():
    """60 alternating messages, 5 minutes apart, starting 10:00."""
    return alternating_messages(60, BASE_TS + 10 * HOUR, 5 * MINUTE)


def _turn(sender, start, end=None):
    return {
        "sender": sender,
        "start_timestamp": start,
        "end_timestamp": start if end is None else end,
        "message_count": 1,
        "total_chars": 10,
        "month_key": "2024-01",
    }


def _window(rti=1.0, gi=0.0, ir=0.5):
    return {
        "window_start": 0,
        "window_end": 30 * DAY,
        "per_person": {"A": {"rti": rti, "median_rt": 60000 * rti, "sample_size": 5}},
        "ra": 1.0,
        "gi": {"A": gi},
        "ir": {"A": ir},
    }


# ============================================================================
# CLASSIFICATION
# ============================================================================

@pytest.mark.parametrize("rt_ms,expected", [
    (10 * 1000, "instant"),
    (60 * 1000, "quick"),
    (10 * MINUTE, "normal"),
    (30 * MINUTE, "delayed"),
    (2 * HOUR, "slow"),
    (5 * HOUR, "ghosting"),
])
def test_classify_response_time(rt_ms, expected):
    """Category thresholds are exclusive upper bounds."""
    assert classify_response_time(rt_ms, overnight=False) == expected


def test_classify_overnight():
    """Overnight replies get their own category regardless of latency."""
    assert classify_response_time(9 * HOUR, overnight=True) == "overnight"


def test_overnight_detection():
    """Late-evening question answered next morning counts as overnight."""
    prev = _turn("A", BASE_TS + 23 * HOUR)
    curr = _turn("B", BASE_TS + DAY + 8 * HOUR)
    assert is_overnight_response(prev, curr)

    afternoon = _turn("A", BASE_TS + 15 * HOUR)
    assert not is_overnight_response(afternoon, curr)


def test_overnight_response_survives_session_gap():
    """Overnight replies are kept even when longer than the session gap."""
    turns = [_turn("A", BASE_TS + 23 * HOUR), _turn("B", BASE_TS + DAY + 8 * HOUR)]
    responses = measure_turn_responses(turns, 30 * MINUTE)
    assert len(responses) == 1
    assert responses[0]["is_overnight"]
    assert responses[0]["category"] == "overnight"


def test_cross_session_response_skipped():
    """Daytime replies beyond the session gap are dropped."""
    turns = [_turn("A", BASE_TS + 10 * HOUR), _turn("B", BASE_TS + 13 * HOUR)]
    assert measure_turn_responses(turns, 30 * MINUTE) == []


def test_same_sender_and_non_positive_skipped():
    """Only sender changes with positive latency are responses."""
    turns = [
        _turn("A", BASE_TS),
        _turn("A", BASE_TS + 5 * MINUTE),
        _turn("B", BASE_TS + 5 * MINUTE),
    ]
    assert measure_turn_responses(turns, 30 * MINUTE) == []


# ============================================================================
# INDICES
# ============================================================================

def test_response_asymmetry():
    """Slower median over faster median, neutral when degenerate."""
    assert response_asymmetry([100.0, 300.0]) == 3.0
    assert response_asymmetry([0.0, 300.0]) == 1.0
    assert response_asymmetry([100.0]) == 1.0


def test_ra_trend():
    """Second-half vs first-half comparison with a 0.3 dead zone."""
    def series(values):
        return [{"month": f"2024-{i + 1:02d}", "ra": v} for i, v in enumerate(values)]

    assert compute_ra_trend(series([1.0, 1.0, 2.0, 2.0])) == "diverging"
    assert compute_ra_trend(series([2.0, 2.0, 1.0, 1.0])) == "converging"
    assert compute_ra_trend(series([1.0, 1.1, 1.2, 1.1])) == "stable"
    assert compute_ra_trend(series([1.0, 5.0, 9.0])) == "stable"


def test_ghosting_index():
    """Unanswered turns directed at a person, within 24h."""
    turns = [
        _turn("A", BASE_TS),
        _turn("B", BASE_TS + HOUR),              # answers A within 24h
        _turn("A", BASE_TS + 2 * HOUR),
        _turn("B", BASE_TS + 2 * HOUR + 2 * DAY),  # answers A too late
    ]
    assert compute_ghosting_index(turns, "B") == pytest.approx(0.5)
    # B's first turn is answered, the last one is not
    assert compute_ghosting_index(turns, "A") == pytest.approx(0.5)


def test_ghosting_index_third_party_reply():
    """In group chats a third party answering first leaves the turn unanswered."""
    turns = [_turn("A", BASE_TS), _turn("C", BASE_TS + MINUTE), _turn("B", BASE_TS + 2 * MINUTE)]
    # A's turn is cut off by C, C's turn is answered by B
    assert compute_ghosting_index(turns, "B") == pytest.approx(0.5)


def test_initiative_ratio():
    """Share of sessions started by each person."""
    turns = [
        _turn("A", BASE_TS),
        _turn("B", BASE_TS + MINUTE),
        _turn("B", BASE_TS + 5 * HOUR),
        _turn("A", BASE_TS + 5 * HOUR + MINUTE),
        _turn("A", BASE_TS + 10 * HOUR),
    ]
    assert compute_initiative_ratio(turns, 30 * MINUTE, "A") == pytest.approx(2 / 3)
    assert compute_initiative_ratio(turns, 30 * MINUTE, "B") == pytest.approx(1 / 3)
    assert compute_initiative_ratio([], 30 * MINUTE, "A") == 0.0


# ============================================================================
# FULL ANALYSIS
# ============================================================================

def test_too_few_messages():
    """Under 30 messages there is no analysis."""
    messages = alternating_messages(29, BASE_TS + 10 * HOUR, 5 * MINUTE)
    assert compute_response_time_analysis(messages, ["A", "B"]) is None


def test_single_participant():
    """A monologue has no responses."""
    messages = [make_message("A", "hej", BASE_TS + i * 5 * MINUTE) for i in range(40)]
    assert compute_response_time_analysis(messages, ["A"]) is None


def test_baseline_requires_five_samples():
    """People with fewer than 5 responses drop out; under 2 baselines gives None."""
    messages = alternating_messages(6, BASE_TS + 10 * HOUR, 5 * MINUTE, senders=("B", "A"))
    messages += alternating_messages(
        34, BASE_TS + 11 * HOUR, 5 * MINUTE, senders=("B", "C"),
    )
    assert compute_response_time_analysis(messages, ["A", "B"]) is None

    result = compute_response_time_analysis(messages, ["A", "B", "C"])
    assert result is not None
    assert "A" not in result["per_person"]
    assert set(result["per_person"]) == {"B", "C"}


def test_steady_conversation(steady_conversation):
    """Regular 5-minute replies produce consistent indices."""
    result = compute_response_time_analysis(steady_conversation, ["A", "B"])
    assert result is not None

    assert result["adaptive_session_gap_ms"] == 15 * MINUTE
    assert len(result["turns"]) == 60
    assert len(result["responses"]) == 59
    assert result["rti"] == {"A": 1.0, "B": 1.0}
    assert result["response_asymmetry"] == pytest.approx(1.0)
    assert result["response_asymmetry_trend"] == "stable"

    baseline = result["per_person"]["A"]
    assert baseline["median"] == 5 * MINUTE
    assert baseline["iqr"] == 0
    assert baseline["category_distribution"]["normal"] == pytest.approx(1.0)
    assert sum(baseline["category_distribution"].values()) == pytest.approx(1.0)
    assert len(baseline["per_hour_median"]) == 24
    assert len(baseline["per_dow_median"]) == 7

    assert result["initiative_ratio"] == {"A": 1.0, "B": 0.0}
    for name in ("A", "B"):
        assert 0.0 <= result["ghosting_index"][name] <= 1.0
        assert result["ewrt"][name] > 0

    # Under 30 days of data: no windows, no anomalies
    assert result["sliding_windows"] == []
    assert result["anomalies"] == []


def test_sliding_windows(daily_conversation):
    """Ten weeks of daily chats produce 30-day windows with bounded indices."""
    result = compute_response_time_analysis(daily_conversation, ["A", "B"])
    assert result is not None

    windows = result["sliding_windows"]
    assert len(windows) >= 3
    for window in windows:
        assert window["window_end"] - window["window_start"] == 30 * DAY
        assert window["ra"] >= 1.0
        for name in ("A", "B"):
            assert 0.0 <= window["gi"][name] <= 1.0
            assert 0.0 <= window["ir"][name] <= 1.0
    starts = [w["window_start"] for w in windows]
    assert all(b - a >= 7 * DAY for a, b in zip(starts, starts[1:]))

    assert {m["month"] for m in result["monthly_ra"]} <= {"2024-01", "2024-02", "2024-03"}
    assert all(entry["rti"] == pytest.approx(1.0) for entry in result["monthly_rti"]["A"])


def test_analysis_is_deterministic(daily_conversation):
    """Same input, same output."""
    first = compute_response_time_analysis(daily_conversation, ["A", "B"])
    second = compute_response_time_analysis(daily_conversation, ["A", "B"])
    assert first == second


def test_unsorted_input(steady_conversation):
    """Out-of-order input is sorted before analysis."""
    shuffled = list(reversed(steady_conversation))
    assert compute_response_time_analysis(shuffled, ["A", "B"]) == \
        compute_response_time_analysis(steady_conversation, ["A", "B"])


# ============================================================================
# ANOMALIES
# ============================================================================

def test_anomalies_need_three_windows():
    """Fewer than 3 windows never produce anomalies."""
    assert detect_anomalies([_window(rti=4.0), _window(rti=4.0)], ["A"]) == []


def test_sudden_slowdown():
    """RTI above 2.5 flags a slowdown with linear severity."""
    anomalies = detect_anomalies([_window(1.0), _window(3.0), _window(1.0)], ["A"])
    assert len(anomalies) == 1
    anomaly = anomalies[0]
    assert anomaly["type"] == "sudden_slowdown"
    assert anomaly["window_index"] == 1
    assert anomaly["severity"] == pytest.approx(0.2)
    assert anomaly["description"] == "A: RTI=3.0 (2.5x wolniej niż baseline)"


def test_gradual_withdrawal():
    """Every step of a 3+ window RTI rise is reported."""
    windows = [_window(1.0), _window(1.5), _window(2.0), _window(2.2)]
    anomalies = detect_anomalies(windows, ["A"])
    assert [a["type"] for a in anomalies] == ["gradual_withdrawal", "gradual_withdrawal"]
    assert [a["window_index"] for a in anomalies] == [2, 3]
    assert anomalies[0]["severity"] == pytest.approx(0.5)
    assert anomalies[1]["description"] == "A: RTI rośnie nieprzerwanie od 4 okien (1.0→2.2)"


def test_ghosting_spike():
    """A jump of more than 20pp in ghosting index is flagged."""
    windows = [_window(gi=0.1), _window(gi=0.5), _window(gi=0.5)]
    anomalies = detect_anomalies(windows, ["A"])
    assert len(anomalies) == 1
    assert anomalies[0]["type"] == "ghosting_spike"
    assert anomalies[0]["window_index"] == 1
    assert anomalies[0]["severity"] == pytest.approx(0.8)
    assert anomalies[0]["description"] == "A: GI skoczyło o 40pp (10%→50%)"


def test_initiative_collapse():
    """Initiative under 15% for 3+ windows, reported at each step."""
    windows = [_window(ir=0.1) for _ in range(4)]
    anomalies = detect_anomalies(windows, ["A"])
    assert [a["type"] for a in anomalies] == ["initiative_collapse"] * 2
    assert [a["window_index"] for a in anomalies] == [2, 3]
    assert anomalies[0]["description"] == "A: IR < 15% przez 3 kolejnych okien"


def test_rules_co_fire():
    """Independent rules report separately for the same window."""
    windows = [_window(1.0, gi=0.0), _window(2.0, gi=0.0), _window(3.0, gi=0.5)]
    types = sorted(a["type"] for a in detect_anomalies(windows, ["A"]) if a["window_index"] == 2)
    assert types == ["ghosting_spike", "gradual_withdrawal", "sudden_slowdown"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Tests for conflict / escalation detection
"""

import pytest
from chatsignal.conflicts import (
    detect_conflicts,
    format_silence_duration,
    has_accusatory_bigram,
)

from conftest import BASE_TS, HOUR, MINUTE, alternating_messages, make_message

CALM_A = "dzisiaj był naprawdę długi dzień w pracy i jestem zmęczona"
CALM_B = "rozumiem ale ja też miałem ciężki dzień pełen spotkań i telefonów"
ACCUSING_A = "ty zawsze robisz to samo i nigdy mnie nie słuchasz"


# ============================================================================
# FIXTURES
# ============================================================================

def _filler(start_index, count, start_ts):
    return [
        make_message("A" if (start_index + i) % 2 == 0 else "B", "no dobra",
                     start_ts + i * MINUTE, index=start_index + i)
        for i in range(count)
    ]


def _escalation_chat(spike_a=CALM_A, spike_b=CALM_B):
    """20 short messages, two long replies in a row, then short again."""
    start = BASE_TS + 10 * HOUR
    messages = _filler(0, 20, start)
    messages.append(make_message("A", spike_a, start + 20 * MINUTE, index=20))
    messages.append(make_message("B", spike_b, start + 21 * MINUTE, index=21))
    messages += _filler(22, 4, start + 22 * MINUTE)
    return messages


@pytest.fixture
def silence_chat():
    """12 rapid messages, 50 hours of silence, then 10 short replies."""
    start = BASE_TS + 10 * HOUR
    before = alternating_messages(12, start, 2 * MINUTE, contents=("no jasne dobrze",))
    resume = start + 22 * MINUTE + 50 * HOUR
    after = [
        make_message("A" if i % 2 == 0 else "B", "ok", resume + i * MINUTE, index=12 + i)
        for i in range(10)
    ]
    return before + after


# ============================================================================
# HELPERS
# ============================================================================

def test_format_silence_duration():
    """Hours, days with hours, then plain days."""
    assert format_silence_duration(30) == "30h"
    assert format_silence_duration(50) == "2 dni (50h)"
    assert format_silence_duration(200) == "8 dni"


def test_accusatory_bigrams():
    """Adjacent accusatory phrases are found case-insensitively."""
    assert has_accusatory_bigram("Ty ZAWSZE tak robisz")
    assert has_accusatory_bigram("you never listen")
    assert not has_accusatory_bigram("zawsze lubię ciebie")
    assert not has_accusatory_bigram(None)


# ============================================================================
# GUARDS
# ============================================================================

def test_too_few_messages():
    """Fewer than 20 messages gives the empty result."""
    messages = alternating_messages(19, BASE_TS, MINUTE)
    assert detect_conflicts(messages, ["A", "B"]) == {
        "events": [],
        "total_conflicts": 0,
        "most_conflict_prone": None,
    }


def test_calm_conversation():
    """Even-length chatter has no conflicts."""
    messages = alternating_messages(40, BASE_TS, MINUTE)
    result = detect_conflicts(messages, ["A", "B"])
    assert result["events"] == []
    assert result["most_conflict_prone"] is None


# ============================================================================
# ESCALATION
# ============================================================================

def test_escalation_detected():
    """Two senders spiking within 15 minutes is an escalation."""
    result = detect_conflicts(_escalation_chat(), ["A", "B"])

    assert result["total_conflicts"] == 1
    event = result["events"][0]
    assert event["type"] == "escalation"
    assert event["severity"] == 2
    assert event["participants"] == ["A", "B"]
    assert event["message_range"] == [20, 21]
    assert event["timestamp"] == BASE_TS + 10 * HOUR + 20 * MINUTE
    assert event["date"] == "2024-01-01"
    assert event["description"] == "Gorąca wymiana między A i B — wiadomości 5.5x dłuższe niż zwykle"
    assert result["most_conflict_prone"] == "A"


def test_accusatory_escalation_is_severe():
    """An accusatory bigram raises severity to 3."""
    result = detect_conflicts(_escalation_chat(spike_a=ACCUSING_A), ["A", "B"])
    assert result["events"][0]["severity"] == 3


def test_accusation_outside_spikes_ignored():
    """A short accusatory reply between the two spikes does not raise severity."""
    start = BASE_TS + 10 * HOUR
    messages = _filler(0, 20, start)
    messages.append(make_message("A", CALM_A, start + 20 * MINUTE, index=20))
    messages.append(make_message("B", "ty zawsze", start + 21 * MINUTE, index=21))
    messages.append(make_message("A", "no dobra", start + 22 * MINUTE, index=22))
    messages.append(make_message("B", CALM_B, start + 23 * MINUTE, index=23))
    messages += _filler(24, 4, start + 24 * MINUTE)

    result = detect_conflicts(messages, ["A", "B"])
    assert result["total_conflicts"] == 1
    event = result["events"][0]
    assert event["message_range"] == [20, 23]
    assert event["severity"] == 2


def test_single_sender_spike_not_confirmed():
    """One long message without a reply spike is not an escalation."""
    messages = _escalation_chat(spike_b="no dobra")
    assert detect_conflicts(messages, ["A", "B"])["total_conflicts"] == 0


def test_repeated_escalation_suppressed():
    """A flare-up within 4 hours of the previous one is not reported again."""
    messages = _escalation_chat()[:22]
    start = BASE_TS + 10 * HOUR
    messages += _filler(22, 8, start + 22 * MINUTE)
    messages.append(make_message("A", CALM_A, start + 30 * MINUTE, index=30))
    messages.append(make_message("B", CALM_B, start + 31 * MINUTE, index=31))
    messages += _filler(32, 4, start + 32 * MINUTE)

    result = detect_conflicts(messages, ["A", "B"])
    assert result["total_conflicts"] == 1


def test_escalations_after_cooldown():
    """A second flare-up more than 4 hours later is reported."""
    messages = _escalation_chat()[:22]
    later = BASE_TS + 16 * HOUR
    messages += _filler(22, 8, later)
    messages.append(make_message("A", CALM_A, later + 8 * MINUTE, index=30))
    messages.append(make_message("B", CALM_B, later + 9 * MINUTE, index=31))

    result = detect_conflicts(messages, ["A", "B"])
    escalations = [e for e in result["events"] if e["type"] == "escalation"]
    assert len(escalations) == 2


# ============================================================================
# COLD SILENCE & RESOLUTION
# ============================================================================

def test_cold_silence_and_resolution(silence_chat):
    """Intense exchange, 50h silence, calmer restart."""
    result = detect_conflicts(silence_chat, ["A", "B"])
    types = [e["type"] for e in result["events"]]
    assert types == ["cold_silence", "resolution"]

    silence, resolution = result["events"]
    assert silence["severity"] == 2
    assert silence["message_range"] == [7, 12]
    assert silence["participants"] == ["B", "A"]
    assert silence["description"] == "Zimna cisza — 2 dni (50h) bez wiadomości po 12 msg/h"

    assert resolution["severity"] == 1
    assert resolution["message_range"] == [12, 16]
    assert resolution["description"] == "A przerywa ciszę po 2 dni (50h) — spokojniejszy ton"

    # Resolutions are not conflicts
    assert result["total_conflicts"] == 1


def test_silence_severity_bands(silence_chat):
    """Severity 1 under 48h, 3 from 72h."""
    def with_gap(hours):
        shift = (hours - 50) * HOUR
        return silence_chat[:12] + [dict(m, timestamp=m["timestamp"] + shift) for m in silence_chat[12:]]

    assert detect_conflicts(with_gap(30), ["A", "B"])["events"][0]["severity"] == 1
    assert detect_conflicts(with_gap(80), ["A", "B"])["events"][0]["severity"] == 3


def test_silence_needs_intensity():
    """A long gap after slow messaging is not a cold silence."""
    slow = alternating_messages(12, BASE_TS, 30 * MINUTE)
    after = alternating_messages(10, BASE_TS + 100 * HOUR, MINUTE)
    result = detect_conflicts(slow + after, ["A", "B"])
    assert result["total_conflicts"] == 0


def test_silence_needs_back_and_forth():
    """A monologue followed by silence is not a cold silence."""
    monologue = [make_message("A", "halo", BASE_TS + i * MINUTE) for i in range(12)]
    after = alternating_messages(10, BASE_TS + 100 * HOUR, MINUTE)
    assert detect_conflicts(monologue + after, ["A", "B"])["total_conflicts"] == 0


# ============================================================================
# PROPERTIES
# ============================================================================

def test_total_counts_escalations_and_silences(silence_chat):
    """total_conflicts == escalations + cold silences for every sample."""
    samples = [silence_chat, _escalation_chat(), _escalation_chat(spike_a=ACCUSING_A)]
    for messages in samples:
        result = detect_conflicts(messages, ["A", "B"])
        counted = [e for e in result["events"] if e["type"] in ("escalation", "cold_silence")]
        assert result["total_conflicts"] == len(counted)
        timestamps = [e["timestamp"] for e in result["events"]]
        assert timestamps == sorted(timestamps)


def test_deterministic(silence_chat):
    """Same input, same output."""
    assert detect_conflicts(silence_chat, ["A", "B"]) == detect_conflicts(silence_chat, ["A", "B"])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

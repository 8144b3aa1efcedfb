"""
Conflict detection for ChatSignal v1

SIGNALS:
1. Escalation: sudden message-length spikes confirmed by a second sender
2. Cold silence: a day-long gap right after an intense back-and-forth
3. Resolution: calmer (shorter) messages when the conversation resumes

Thresholds are conservative: a missed conflict is preferred to a false
positive on normal conversation patterns.
"""

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .lexicons import ACCUSATORY_BIGRAMS
from .messages import sort_messages
from .stats import mean, round_half_up
from .text import count_words, tokenize_all
from .timeutils import HOUR_MS, MINUTE_MS, day_key

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURABLE CONSTANTS
# ============================================================================

MIN_MESSAGES = 20

# Escalation
ROLLING_WINDOW_SIZE = 10
MIN_WINDOW_ENTRIES = 5
COLD_START_MESSAGES = 7
ESCALATION_MULTIPLIER = 2
ESCALATION_CONFIRM_WINDOW_MS = 15 * MINUTE_MS
MIN_ESCALATION_GAP_MS = 4 * HOUR_MS

# Cold silence
COLD_SILENCE_MS = 24 * HOUR_MS
INTENSITY_LOOKBACK_MS = HOUR_MS
INTENSE_MSG_PER_HOUR = 8
PRE_SILENCE_MSG_COUNT = 5
MIN_SILENCE_GAP_MS = 12 * HOUR_MS

# Resolution
RESOLUTION_MSG_COUNT = 5

# Weighting for most_conflict_prone
EVENT_WEIGHTS = {"escalation": 2, "cold_silence": 1, "resolution": 1}

ESCALATION_TEMPLATES = (
    "Gorąca wymiana między {names} — wiadomości {mult}x dłuższe niż zwykle",
    "Napięta rozmowa {names} — nagły skok długości wiadomości ({mult}x)",
    "Eskalacja emocji: {names} piszą znacznie dłuższe wiadomości",
    "Intensywna wymiana zdań — {names} ({mult}x średniej)",
    "Wzajemne długie odpowiedzi — {names} wchodzą w gorącą dyskusję",
)

SILENCE_TEMPLATES = (
    "Zimna cisza — {dur} bez wiadomości po {count} msg/h",
    "Nagłe milczenie na {dur} po gorącej wymianie",
    "Z {count} msg/h do zera — {dur} ciszy",
    "Radio silence: {dur} po intensywnej rozmowie",
)

RESOLUTION_TEMPLATES = (
    "{who} przerywa ciszę po {dur} — spokojniejszy ton",
    "Wznowienie po {dur} — {who} pisze pierwszy/a",
    "Powrót do rozmowy po {dur} ciszy, krótsze wiadomości",
)


# ============================================================================
# HELPERS
# ============================================================================

def format_silence_duration(hours: int) -> str:
    """'9 dni' from a week on, '2 dni (50h)' from two days on, else '30h'."""
    if hours >= 168:
        return f"{round_half_up(hours / 24)} dni"
    if hours >= 48:
        return f"{round_half_up(hours / 24)} dni ({hours}h)"
    return f"{hours}h"


def has_accusatory_bigram(text: Optional[str]) -> bool:
    """True when two adjacent tokens form an accusatory phrase ("ty zawsze", "you never")."""
    tokens = tokenize_all(text)
    return any(pair in ACCUSATORY_BIGRAMS for pair in zip(tokens, tokens[1:]))


def _participants_in_range(messages: List[Dict[str, Any]], start: int, end: int) -> List[str]:
    """Distinct senders of messages[start..end] (inclusive), in order of appearance."""
    seen: Dict[str, None] = {}
    for msg in messages[start:end + 1]:
        seen.setdefault(msg["sender"], None)
    return list(seen)


def _count_messages_before(messages: List[Dict[str, Any]], end_index: int, window_ms: int) -> int:
    """Messages within window_ms up to and including messages[end_index]."""
    window_start = messages[end_index]["timestamp"] - window_ms
    count = 0
    for i in range(end_index, -1, -1):
        if messages[i]["timestamp"] < window_start:
            break
        count += 1
    return count


def _is_back_and_forth(messages: List[Dict[str, Any]], end_index: int, count: int) -> bool:
    start = max(0, end_index - count + 1)
    return len({m["sender"] for m in messages[start:end_index + 1]}) >= 2


def _average_words(messages: List[Dict[str, Any]]) -> float:
    return mean([w for w in (count_words(m["content"]) for m in messages) if w > 0])


# ============================================================================
# ESCALATION
# ============================================================================

def detect_escalations(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Escalation events from message-length spikes.

    A spike is a message more than twice as long as its sender's rolling
    average (last 10 messages, at least 5 of them), sent right after a
    message from someone else. Two or more live spikes (15 minutes) from
    different senders confirm an escalation.
    """
    events = []
    windows: Dict[str, Deque[int]] = {}
    spikes: List[Dict[str, Any]] = []
    last_escalation_ts: Optional[int] = None
    template_index = 0

    conversation_avg = _average_words(messages)

    for i, msg in enumerate(messages):
        words = count_words(msg["content"])
        if words == 0:
            continue

        window = windows.setdefault(msg["sender"], deque(maxlen=ROLLING_WINDOW_SIZE))
        if i < COLD_START_MESSAGES:
            baseline = conversation_avg
        else:
            baseline = mean(list(window))

        is_spike = (
            len(window) >= MIN_WINDOW_ENTRIES
            and baseline > 0
            and words > ESCALATION_MULTIPLIER * baseline
        )
        sender_changed = i > 0 and messages[i - 1]["sender"] != msg["sender"]
        if is_spike and sender_changed:
            spikes.append({"index": i, "timestamp": msg["timestamp"], "sender": msg["sender"]})

        window.append(words)

        while spikes and msg["timestamp"] - spikes[0]["timestamp"] > ESCALATION_CONFIRM_WINDOW_MS:
            spikes.pop(0)

        if len(spikes) < 2:
            continue
        spike_senders = list(dict.fromkeys(s["sender"] for s in spikes))
        if len(spike_senders) < 2:
            continue

        first = spikes[0]
        if last_escalation_ts is not None and first["timestamp"] - last_escalation_ts < MIN_ESCALATION_GAP_MS:
            spikes.clear()
            continue

        accusatory = any(has_accusatory_bigram(messages[s["index"]]["content"]) for s in spikes)
        multiplier = f"{words / baseline:.1f}" if baseline > 0 else "2"
        template = ESCALATION_TEMPLATES[template_index % len(ESCALATION_TEMPLATES)]
        template_index += 1

        events.append({
            "type": "escalation",
            "timestamp": first["timestamp"],
            "date": day_key(first["timestamp"]),
            "severity": 3 if len(spikes) >= 3 or accusatory else 2,
            "participants": spike_senders,
            "description": template.format(names=" i ".join(spike_senders), mult=multiplier),
            "message_range": [first["index"], i],
        })

        last_escalation_ts = first["timestamp"]
        spikes.clear()

    return events


# ============================================================================
# COLD SILENCE & RESOLUTION
# ============================================================================

def detect_cold_silences(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Gaps of 24h+ right after 8+ messages/hour of back-and-forth."""
    events = []
    last_silence_ts: Optional[int] = None
    template_index = 0

    for i in range(1, len(messages)):
        prev = messages[i - 1]
        gap = messages[i]["timestamp"] - prev["timestamp"]
        if gap < COLD_SILENCE_MS:
            continue
        if last_silence_ts is not None and prev["timestamp"] - last_silence_ts < MIN_SILENCE_GAP_MS:
            continue

        intensity = _count_messages_before(messages, i - 1, INTENSITY_LOOKBACK_MS)
        if intensity < INTENSE_MSG_PER_HOUR:
            continue
        if not _is_back_and_forth(messages, i - 1, PRE_SILENCE_MSG_COUNT):
            continue

        range_start = max(0, i - PRE_SILENCE_MSG_COUNT)
        hours = round_half_up(gap / HOUR_MS)
        template = SILENCE_TEMPLATES[template_index % len(SILENCE_TEMPLATES)]
        template_index += 1

        if hours >= 72:
            severity = 3
        elif hours >= 48:
            severity = 2
        else:
            severity = 1

        events.append({
            "type": "cold_silence",
            "timestamp": prev["timestamp"],
            "date": day_key(prev["timestamp"]),
            "severity": severity,
            "participants": _participants_in_range(messages, range_start, i - 1),
            "description": template.format(dur=format_silence_duration(hours), count=intensity),
            "message_range": [range_start, i],
        })
        last_silence_ts = prev["timestamp"]

    return events


def detect_resolutions(
    messages: List[Dict[str, Any]],
    cold_silences: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """Silences followed by shorter messages than the ones that preceded them."""
    events = []
    template_index = 0

    for silence in cold_silences:
        pre_start, resume = silence["message_range"]
        if resume + RESOLUTION_MSG_COUNT > len(messages):
            continue

        pre_avg = _average_words(messages[pre_start:resume])
        post_avg = _average_words(messages[resume:resume + RESOLUTION_MSG_COUNT])
        if pre_avg <= 0 or post_avg >= pre_avg:
            continue

        gap = messages[resume]["timestamp"] - messages[resume - 1]["timestamp"]
        range_end = min(resume + RESOLUTION_MSG_COUNT - 1, len(messages) - 1)
        template = RESOLUTION_TEMPLATES[template_index % len(RESOLUTION_TEMPLATES)]
        template_index += 1

        events.append({
            "type": "resolution",
            "timestamp": messages[resume]["timestamp"],
            "date": day_key(messages[resume]["timestamp"]),
            "severity": 1,
            "participants": _participants_in_range(messages, resume, range_end),
            "description": template.format(
                dur=format_silence_duration(round_half_up(gap / HOUR_MS)),
                who=messages[resume]["sender"],
            ),
            "message_range": [resume, range_end],
        })

    return events


def find_most_conflict_prone(
    events: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[str]:
    """Participant with the highest weighted event count; escalations weigh 2."""
    if not events or not participant_names:
        return None

    counts = {name: 0 for name in participant_names}
    for event in events:
        weight = EVENT_WEIGHTS.get(event["type"], 1)
        for person in event["participants"]:
            counts[person] = counts.get(person, 0) + weight

    best = None
    best_count = 0
    for name, count in counts.items():
        if count > best_count:
            best, best_count = name, count
    return best


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def detect_conflicts(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Dict[str, Any]:
    """
    Detect conflict events in a conversation.

    Returns:
        {"events": [...], "total_conflicts": int, "most_conflict_prone": str or None}
        total_conflicts counts escalations and cold silences only.
    """
    if len(messages) < MIN_MESSAGES:
        return {"events": [], "total_conflicts": 0, "most_conflict_prone": None}

    messages = sort_messages(messages)
    escalations = detect_escalations(messages)
    cold_silences = detect_cold_silences(messages)
    resolutions = detect_resolutions(messages, cold_silences)

    events = sorted(escalations + cold_silences + resolutions, key=lambda e: e["timestamp"])
    logger.info(
        f"Conflicts: {len(escalations)} escalations, {len(cold_silences)} cold silences, "
        f"{len(resolutions)} resolutions"
    )

    return {
        "events": events,
        "total_conflicts": len(escalations) + len(cold_silences),
        "most_conflict_prone": find_most_conflict_prone(events, participant_names),
    }

"""
Pursuit-withdrawal detection for ChatSignal v1

A cycle is a run of unanswered messages from one person (pursuit)
followed by a long silence before the next message (withdrawal).

Timing alone mistakes four excited messages about a fun topic for four
"are you there?" messages, so short runs also need a demand marker:
- 6+ logical messages: always a pursuit
- 4-5 logical messages: only with a demand marker ("halo", "odpisz", "??")

Messages sent within 2 minutes of each other count as one logical
message (Enter used as a comma).
"""

import logging
from typing import Any, Dict, List, Optional

from .lexicons import DEMAND_MARKERS, DEMAND_PUNCTUATION
from .messages import sort_messages
from .stats import round_half_up
from .timeutils import HOUR_MS, MINUTE_MS, local_hour

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURABLE CONSTANTS
# ============================================================================

MIN_MESSAGES = 50
MIN_CYCLES = 2

# Pursuit run: same sender, less than 30 minutes between messages
PURSUIT_WINDOW_MS = 30 * MINUTE_MS
ENTER_AS_COMMA_MS = 2 * MINUTE_MS
MIN_CONSECUTIVE = 4
ALWAYS_FLAG_THRESHOLD = 6

# Withdrawal: 4h+ of silence (2h gaps are lunch, meetings, commute)
WITHDRAWAL_THRESHOLD_MS = 4 * HOUR_MS

# Silences starting 21:00-09:00 are sleep; anything over 12h could be a day off
OVERNIGHT_START_HOUR = 21
OVERNIGHT_END_HOUR = 9
MAX_WITHDRAWAL_MS = 12 * HOUR_MS

# Pursuer/withdrawer roles are "mutual" when the split differs by less than this share of cycles
ROLE_BALANCE_THRESHOLD = 0.2
MUTUAL = "mutual"


def contains_demand_marker(content: Optional[str]) -> bool:
    """
    True when a message asks for a reply.

    Text markers match as substrings ("hej, odpisz mi"); question-mark
    markers only when they are the whole message.
    """
    if not content:
        return False
    lower = content.lower().strip()
    if not lower:
        return False
    if lower in DEMAND_PUNCTUATION:
        return True
    return any(marker in lower for marker in DEMAND_MARKERS)


def is_routine_gap(start_ts: int, gap_ms: int) -> bool:
    """Overnight silences and gaps long enough to be a day off are not withdrawals."""
    if gap_ms > MAX_WITHDRAWAL_MS:
        return True
    hour = local_hour(start_ts)
    return hour >= OVERNIGHT_START_HOUR or hour < OVERNIGHT_END_HOUR


def find_pursuit_cycles(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Pursuit runs followed by a withdrawal silence, in chronological order."""
    cycles = []
    n = len(messages)
    i = 0
    while i < n:
        start = i
        sender = messages[i]["sender"]
        logical_count = 1
        last_logical_ts = messages[i]["timestamp"]
        i += 1

        while (
            i < n
            and messages[i]["sender"] == sender
            and messages[i]["timestamp"] - messages[i - 1]["timestamp"] < PURSUIT_WINDOW_MS
        ):
            if messages[i]["timestamp"] - last_logical_ts > ENTER_AS_COMMA_MS:
                logical_count += 1
                last_logical_ts = messages[i]["timestamp"]
            i += 1

        if logical_count < MIN_CONSECUTIVE or i >= n:
            continue

        last_ts = messages[i - 1]["timestamp"]
        silence = messages[i]["timestamp"] - last_ts
        if silence < WITHDRAWAL_THRESHOLD_MS or is_routine_gap(last_ts, silence):
            continue

        if logical_count < ALWAYS_FLAG_THRESHOLD and not any(
            contains_demand_marker(m["content"]) for m in messages[start:i]
        ):
            continue

        cycles.append({
            "pursuer": sender,
            "pursuit_timestamp": messages[start]["timestamp"],
            "withdrawal_duration_ms": silence,
            "pursuit_message_count": logical_count,
            # The other person replied, rather than the pursuer writing again
            "resolved": messages[i]["sender"] != sender,
        })

    return cycles


def _assign_roles(cycles: List[Dict[str, Any]], participant_names: List[str]):
    counts = {name: 0 for name in participant_names}
    for cycle in cycles:
        counts[cycle["pursuer"]] = counts.get(cycle["pursuer"], 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    top_count = ranked[0][1]
    bottom_count = ranked[-1][1] if len(ranked) > 1 else 0
    if (top_count - bottom_count) / len(cycles) < ROLE_BALANCE_THRESHOLD:
        return MUTUAL, MUTUAL

    withdrawer = ranked[-1][0] if len(ranked) > 1 else participant_names[1]
    return ranked[0][0], withdrawer


def _escalation_trend(durations: List[int]) -> float:
    """Second-half vs first-half average withdrawal; positive means silences are getting longer."""
    mid = len(durations) // 2
    first_avg = sum(durations[:mid]) / max(mid, 1)
    second_avg = sum(durations[mid:]) / max(len(durations) - mid, 1)
    if first_avg <= 0:
        return 0.0
    return second_avg / first_avg - 1


def detect_pursuit_withdrawal(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Detect pursuit-withdrawal cycles.

    Returns:
        {"pursuer": str, "withdrawer": str, "cycle_count": int,
         "avg_cycle_duration_ms": int, "escalation_trend": float, "cycles": [...]}
        or None with fewer than 2 participants, fewer than 50 messages
        or fewer than 2 cycles.
    """
    if len(participant_names) < 2 or len(messages) < MIN_MESSAGES:
        return None

    cycles = find_pursuit_cycles(sort_messages(messages))
    if len(cycles) < MIN_CYCLES:
        logger.debug(f"Pursuit-withdrawal skipped: {len(cycles)} cycles")
        return None

    pursuer, withdrawer = _assign_roles(cycles, participant_names)
    durations = [c["withdrawal_duration_ms"] for c in cycles]
    logger.info(f"Pursuit-withdrawal: {len(cycles)} cycles, pursuer={pursuer}")

    return {
        "pursuer": pursuer,
        "withdrawer": withdrawer,
        "cycle_count": len(cycles),
        "avg_cycle_duration_ms": round_half_up(sum(durations) / len(durations)),
        "escalation_trend": round_half_up(_escalation_trend(durations), 2),
        "cycles": cycles,
    }

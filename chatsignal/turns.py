"""
Turn and session segmentation for ChatSignal v1
Groups raw messages into sender bursts (turns) and turns into sessions
"""

import logging
from typing import Any, Dict, List

from .stats import percentile
from .timeutils import HOUR_MS, MINUTE_MS, month_key

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURABLE CONSTANTS
# ============================================================================

# Same-sender messages closer than this belong to one turn
BURST_THRESHOLD_MS = 2 * MINUTE_MS

# Adaptive session gap bounds
DEFAULT_SESSION_GAP_MS = 30 * MINUTE_MS
MIN_SESSION_GAP_MS = 15 * MINUTE_MS
MAX_SESSION_GAP_MS = 2 * HOUR_MS

# Only sub-hour gaps describe the conversational rhythm
RHYTHM_GAP_CEILING_MS = HOUR_MS
MIN_RHYTHM_GAPS = 20


def _new_turn(msg: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "sender": msg["sender"],
        "start_timestamp": msg["timestamp"],
        "end_timestamp": msg["timestamp"],
        "message_count": 1,
        "total_chars": len(msg.get("content") or ""),
        "month_key": month_key(msg["timestamp"]),
    }


def build_turns(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Merge consecutive same-sender messages into turns.

    A message continues the current turn when it has the same sender and
    arrives less than BURST_THRESHOLD_MS after the turn's last message.
    """
    if not messages:
        return []

    turns = []
    current = _new_turn(messages[0])

    for msg in messages[1:]:
        gap = msg["timestamp"] - current["end_timestamp"]
        if msg["sender"] == current["sender"] and gap < BURST_THRESHOLD_MS:
            current["end_timestamp"] = msg["timestamp"]
            current["message_count"] += 1
            current["total_chars"] += len(msg.get("content") or "")
        else:
            turns.append(current)
            current = _new_turn(msg)

    turns.append(current)
    logger.debug(f"Built {len(turns)} turns from {len(messages)} messages")
    return turns


def compute_adaptive_session_gap(messages: List[Dict[str, Any]]) -> float:
    """
    Conversation-specific session boundary in ms.

    Takes positive inter-message gaps under one hour; with fewer than
    MIN_RHYTHM_GAPS of them returns DEFAULT_SESSION_GAP_MS, otherwise
    2 x p75 clamped to [MIN_SESSION_GAP_MS, MAX_SESSION_GAP_MS].
    """
    gaps = []
    for prev, curr in zip(messages, messages[1:]):
        gap = curr["timestamp"] - prev["timestamp"]
        if 0 < gap < RHYTHM_GAP_CEILING_MS:
            gaps.append(gap)

    if len(gaps) < MIN_RHYTHM_GAPS:
        return DEFAULT_SESSION_GAP_MS

    adaptive = percentile(gaps, 75) * 2
    return max(MIN_SESSION_GAP_MS, min(MAX_SESSION_GAP_MS, adaptive))


def build_sessions(turns: List[Dict[str, Any]], session_gap_ms: float) -> List[Dict[str, Any]]:
    """
    Group turns into sessions.

    A new session starts whenever the gap between one turn's end and the
    next turn's start exceeds session_gap_ms. The first turn's sender is
    the session initiator.
    """
    sessions: List[Dict[str, Any]] = []
    for i, turn in enumerate(turns):
        if i == 0 or turn["start_timestamp"] - turns[i - 1]["end_timestamp"] > session_gap_ms:
            sessions.append({
                "initiator": turn["sender"],
                "start_timestamp": turn["start_timestamp"],
                "end_timestamp": turn["end_timestamp"],
                "turn_count": 1,
            })
        else:
            session = sessions[-1]
            session["end_timestamp"] = turn["end_timestamp"]
            session["turn_count"] += 1
    return sessions

"""
Communication gap detection for ChatSignal v1
Silences of a week or longer, classified by duration and annotated with monthly volume
"""

import logging
from typing import Any, Dict, List

from . import config
from .messages import sort_messages
from .stats import round_half_up
from .timeutils import DAY_MS, month_key

logger = logging.getLogger(__name__)

MIN_GAP_DAYS = 7

# Inclusive lower bounds, checked from the longest class down
GAP_CLASSES = (
    (30, "extended_separation"),
    (14, "potential_breakup"),
    (7, "cooling_off"),
)


def classify_gap(duration_days: float) -> str:
    for lower_bound, label in GAP_CLASSES:
        if duration_days >= lower_bound:
            return label
    return "cooling_off"


def detect_communication_gaps(
    messages: List[Dict[str, Any]],
    monthly_volume: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Find silences of at least MIN_GAP_DAYS between consecutive messages.

    Args:
        messages: message dicts
        monthly_volume: [{"month": "YYYY-MM", "total": int, ...}]

    Returns:
        Gap dicts sorted by duration (longest first), capped at MAX_GAPS_REPORTED
    """
    if len(messages) < 2:
        return []

    volume_by_month = {entry["month"]: entry["total"] for entry in monthly_volume}
    messages = sort_messages(messages)

    gaps = []
    for prev, curr in zip(messages, messages[1:]):
        duration_days = (curr["timestamp"] - prev["timestamp"]) / DAY_MS
        if duration_days < MIN_GAP_DAYS:
            continue

        gaps.append({
            "start_timestamp": prev["timestamp"],
            "end_timestamp": curr["timestamp"],
            "duration_days": round_half_up(duration_days, 1),
            "last_sender": prev["sender"],
            "next_sender": curr["sender"],
            "classification": classify_gap(duration_days),
            "volume_before": volume_by_month.get(month_key(prev["timestamp"]), 0),
            "volume_after": volume_by_month.get(month_key(curr["timestamp"]), 0),
        })

    # Stable sort keeps chronological order among equal durations
    gaps.sort(key=lambda g: g["end_timestamp"] - g["start_timestamp"], reverse=True)
    logger.debug(f"Found {len(gaps)} communication gaps")
    return gaps[:config.MAX_GAPS_REPORTED]

"""
Activity burst detection for ChatSignal v1
Days with more than three times the recent daily message volume
"""

import logging
from typing import Any, Dict, List

import pandas as pd

from .messages import messages_to_frame

logger = logging.getLogger(__name__)

MIN_ACTIVE_DAYS = 8
ROLLING_DAYS = 7
BURST_MULTIPLIER = 3
MAX_MERGE_DISTANCE_DAYS = 1


def compute_daily_counts(messages: List[Dict[str, Any]]) -> pd.Series:
    """Messages per active calendar day (days without messages are omitted), sorted by day."""
    df = messages_to_frame(messages)
    if df.empty:
        return pd.Series(dtype="int64")
    return df.groupby("day").size().sort_index()


def detect_bursts(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Detect bursts of unusually high activity.

    The baseline for each active day is the mean of the 7 preceding active
    days; the first 7 days use the overall daily mean. Burst days no more
    than one calendar day apart are merged.

    Returns:
        [{"start_date", "end_date", "message_count", "avg_daily"}]
    """
    daily = compute_daily_counts(messages)
    if len(daily) < MIN_ACTIVE_DAYS:
        return []

    overall_avg = daily.mean()
    baseline = daily.shift(1).rolling(ROLLING_DAYS).mean()
    baseline.iloc[:ROLLING_DAYS] = overall_avg

    is_burst = (daily > BURST_MULTIPLIER * baseline) & (baseline > 0)
    burst_days = daily[is_burst]
    if burst_days.empty:
        return []

    bursts: List[Dict[str, Any]] = []
    current = None
    for day, count in burst_days.items():
        date = pd.Timestamp(day)
        if current is not None and (date - current["end"]).days <= MAX_MERGE_DISTANCE_DAYS:
            current["end"] = date
            current["end_date"] = day
            current["message_count"] += int(count)
            current["days"] += 1
            continue

        if current is not None:
            bursts.append(current)
        current = {
            "start_date": day,
            "end_date": day,
            "end": date,
            "message_count": int(count),
            "days": 1,
        }
    bursts.append(current)

    logger.debug(f"Detected {len(bursts)} bursts over {len(daily)} active days")
    return [
        {
            "start_date": b["start_date"],
            "end_date": b["end_date"],
            "message_count": b["message_count"],
            "avg_daily": b["message_count"] / b["days"],
        }
        for b in bursts
    ]

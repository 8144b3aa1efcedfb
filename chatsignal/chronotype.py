"""
Chronotype compatibility for ChatSignal v1

Behavioral chronotype (early bird / intermediate / night owl) from the
24h distribution of each person's messages, using the circular weighted
midpoint as a digital analog of the midpoint of sleep. Weekday vs weekend
midpoints give the social jet lag.
"""

import logging
import math
from typing import Any, Dict, List, Optional

import numpy as np

from .stats import round_half_up
from .timeutils import is_weekend, local_hour

logger = logging.getLogger(__name__)

MIN_MESSAGES_PER_PERSON = 20
MIN_MESSAGES_PER_SPLIT = 10

# Midpoint with no messages
NEUTRAL_MIDPOINT = 12.0

COMPATIBLE_SCORE = 60

# (max delta hours, match score); anything wider scores 5
DELTA_SCORES = ((1, 95), (2, 80), (3, 60), (4, 40), (6, 20))
MIN_MATCH_SCORE = 5

# (max lag hours exclusive, level)
JET_LAG_LEVELS = ((1, "none"), (2, "mild"), (4, "moderate"))

_HOUR_ANGLES = np.arange(24) / 24 * 2 * math.pi


def circular_midpoint(hourly: List[int]) -> float:
    """Circular weighted mean hour of a 24-bucket distribution, 1 decimal."""
    counts = np.asarray(hourly, dtype=float)
    total = counts.sum()
    if total == 0:
        return NEUTRAL_MIDPOINT

    sin_mean = float(np.sum(np.sin(_HOUR_ANGLES) * counts)) / total
    cos_mean = float(np.sum(np.cos(_HOUR_ANGLES) * counts)) / total
    mean_angle = math.atan2(sin_mean, cos_mean)
    return round_half_up((mean_angle / (2 * math.pi) * 24 + 24) % 24, 1)


def circular_delta(a: float, b: float) -> float:
    raw = abs(a - b)
    return min(raw, 24 - raw)


def peak_hour(hourly: List[int]) -> int:
    """Busiest hour; 12 when there are no messages. Ties go to the earliest hour."""
    best = 0
    peak = 12
    for hour, count in enumerate(hourly):
        if count > best:
            best, peak = count, hour
    return peak


def categorize(midpoint: float) -> Dict[str, str]:
    if midpoint < 10:
        return {"category": "early_bird", "label": "Ranny ptaszek", "emoji": "🌅"}
    if midpoint >= 20:
        return {"category": "night_owl", "label": "Nocna sowa", "emoji": "🦉"}
    return {"category": "intermediate", "label": "Typ pośredni", "emoji": "☀️"}


def score_from_delta(delta: float) -> int:
    for max_delta, score in DELTA_SCORES:
        if delta <= max_delta:
            return score
    return MIN_MATCH_SCORE


def social_jet_lag_level(lag_hours: float) -> str:
    for max_lag, level in JET_LAG_LEVELS:
        if lag_hours < max_lag:
            return level
    return "severe"


def interpret(score: int, delta: float) -> str:
    d = f"{delta:.1f}"
    if score >= 90:
        return f"Doskonała zgodność (delta {d}h) — podobne rytmy aktywności ułatwiają wspólny rytm relacji."
    if score >= 75:
        return f"Dobra zgodność (delta {d}h) — rytmy nakładają się, łatwo znaleźć wspólny czas."
    if score >= 55:
        return f"Umiarkowana zgodność (delta {d}h) — pewne różnice, ale do zaakceptowania."
    if score >= 35:
        return f"Niska zgodność (delta {d}h) — wyraźnie różne rytmy mogą tworzyć napięcia."
    return f"Bardzo niska zgodność (delta {d}h) — krańcowo różne chronotypy; jeden aktywny gdy drugi odpoczywa."


def _person_chronotype(name: str, overall: List[int], weekday: List[int], weekend: List[int]) -> Dict[str, Any]:
    midpoint = circular_midpoint(overall)
    weekday_mid = circular_midpoint(weekday) if sum(weekday) >= MIN_MESSAGES_PER_SPLIT else midpoint
    weekend_mid = circular_midpoint(weekend) if sum(weekend) >= MIN_MESSAGES_PER_SPLIT else midpoint
    lag = circular_delta(weekday_mid, weekend_mid)

    person = {
        "name": name,
        "peak_hour": peak_hour(overall),
        "midpoint": midpoint,
        "weekday_midpoint": round_half_up(weekday_mid, 1),
        "weekend_midpoint": round_half_up(weekend_mid, 1),
        "social_jet_lag_hours": round_half_up(lag, 1),
        "social_jet_lag_level": social_jet_lag_level(lag),
        "hourly_distribution": overall,
    }
    person.update(categorize(midpoint))
    return person


def compute_chronotype_compatibility(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Chronotype match for a two-person conversation.

    Returns None unless there are exactly two participants with at least
    MIN_MESSAGES_PER_PERSON messages each.
    """
    if len(participant_names) != 2 or participant_names[0] == participant_names[1]:
        return None

    distributions = {
        name: {"overall": [0] * 24, "weekday": [0] * 24, "weekend": [0] * 24}
        for name in participant_names
    }
    for msg in messages:
        dist = distributions.get(msg["sender"])
        if dist is None:
            continue
        hour = local_hour(msg["timestamp"])
        dist["overall"][hour] += 1
        dist["weekend" if is_weekend(msg["timestamp"]) else "weekday"][hour] += 1

    if any(sum(d["overall"]) < MIN_MESSAGES_PER_PERSON for d in distributions.values()):
        logger.debug("Chronotype skipped: not enough messages per person")
        return None

    persons = [
        _person_chronotype(name, d["overall"], d["weekday"], d["weekend"])
        for name, d in distributions.items()
    ]
    delta = circular_delta(persons[0]["midpoint"], persons[1]["midpoint"])
    score = score_from_delta(delta)
    lags = [
        circular_delta(p["weekday_midpoint"], p["weekend_midpoint"]) for p in persons
    ]

    return {
        "persons": persons,
        "delta_hours": round_half_up(delta, 1),
        "match_score": score,
        "interpretation": interpret(score, delta),
        "is_compatible": score >= COMPATIBLE_SCORE,
        "avg_social_jet_lag": round_half_up(sum(lags) / 2, 1),
    }

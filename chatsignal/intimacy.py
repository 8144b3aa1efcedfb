"""
Intimacy progression for ChatSignal v1

Monthly composite closeness score from four quantitative factors:
- message length: longer messages = more emotional investment
- emotional words: density of personal/emotional vocabulary
- informality: exclamation marks and emoji
- late night: share of messages sent between 22:00 and 04:00

A linear trend over the monthly scores gives the overall direction.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .lexicons import EMOTIONAL_WORDS
from .stats import linear_regression_slope, round_half_up
from .text import count_words, extract_emojis, normalize_text
from .timeutils import is_late_night, month_key

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURABLE CONSTANTS
# ============================================================================

FACTOR_WEIGHTS = {
    "message_length_factor": 0.25,
    "emotional_words_factor": 0.30,
    "informality_factor": 0.25,
    "late_night_factor": 0.20,
}

# Normalization floor for the per-factor maximum
MIN_FACTOR_MAX = 0.001

EXCLAMATION_WEIGHT = 1
EMOJI_WEIGHT = 2

# (slope lower bound, label), checked top-down; anything lower is the last label
TREND_LABELS = (
    (2.0, "Rosnąca bliskość"),
    (0.5, "Stopniowe zbliżanie"),
    (-0.5, "Stabilna relacja"),
    (-2.0, "Powolne oddalanie"),
)
DECLINING_LABEL = "Malejąca bliskość"
DEFAULT_LABEL = "Stabilna relacja"

_TRAILING_PUNCT_RE = re.compile(r"[.,!?;:'\"()]+$")


def count_emotional_words(text: Optional[str]) -> int:
    count = 0
    for word in normalize_text(text).split():
        clean = _TRAILING_PUNCT_RE.sub("", word)
        if len(clean) > 1 and clean in EMOTIONAL_WORDS:
            count += 1
    return count


def compute_informality(text: Optional[str]) -> int:
    """Exclamation marks count 1, emoji count 2. Questions are not penalized."""
    if not text:
        return 0
    return text.count("!") * EXCLAMATION_WEIGHT + len(extract_emojis(text)) * EMOJI_WEIGHT


def normalize_factor(value: float, max_value: float) -> int:
    if max_value <= 0:
        return 0
    return min(100, round_half_up(value / max_value * 100))


def intimacy_label(slope: float) -> str:
    for lower_bound, label in TREND_LABELS:
        if slope > lower_bound:
            return label
    return DECLINING_LABEL


def compute_intimacy_progression(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Dict[str, Any]:
    """
    Compute monthly intimacy scores and the overall closeness trend.

    Returns:
        {"trend": [{"month", "score", "components"}], "overall_slope": float, "label": str}
        With fewer than two months of data the trend is empty and the
        label is "Stabilna relacja".
    """
    default = {"trend": [], "overall_slope": 0.0, "label": DEFAULT_LABEL}
    if not messages or not participant_names:
        return default

    buckets: Dict[str, Dict[str, float]] = {}
    for msg in messages:
        if msg.get("type") == "system":
            continue
        bucket = buckets.setdefault(month_key(msg["timestamp"]), {
            "words": 0, "messages": 0, "emotional": 0, "informality": 0, "late_night": 0,
        })
        content = msg.get("content") or ""
        bucket["words"] += count_words(content)
        bucket["messages"] += 1
        bucket["emotional"] += count_emotional_words(content)
        bucket["informality"] += compute_informality(content)
        if is_late_night(msg["timestamp"]):
            bucket["late_night"] += 1

    if len(buckets) < 2:
        return default

    months = sorted(buckets)
    raw: Dict[str, List[float]] = {name: [] for name in FACTOR_WEIGHTS}
    for month in months:
        b = buckets[month]
        count = b["messages"]
        raw["message_length_factor"].append(b["words"] / count if count else 0.0)
        raw["emotional_words_factor"].append(b["emotional"] / b["words"] if b["words"] else 0.0)
        raw["informality_factor"].append(b["informality"] / count if count else 0.0)
        raw["late_night_factor"].append(b["late_night"] / count if count else 0.0)

    maxima = {name: max(max(values), MIN_FACTOR_MAX) for name, values in raw.items()}

    trend = []
    for i, month in enumerate(months):
        components = {name: normalize_factor(raw[name][i], maxima[name]) for name in FACTOR_WEIGHTS}
        score = round_half_up(sum(components[name] * weight for name, weight in FACTOR_WEIGHTS.items()))
        trend.append({"month": month, "score": score, "components": components})

    slope = linear_regression_slope([point["score"] for point in trend])
    logger.debug(f"Intimacy over {len(months)} months: slope={slope:.2f}")

    return {"trend": trend, "overall_slope": slope, "label": intimacy_label(slope)}

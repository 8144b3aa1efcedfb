"""
Language Style Matching for ChatSignal v1

Function-word similarity between the first two participants
(Ireland & Pennebaker, 2010). Closer to 1.0 means the two write in a more
similar style, which predicts engagement and relationship stability.

Nine function-word categories (simplified LIWC), Polish + English.
"""

import logging
from typing import Any, Dict, List, Optional

from .lexicons import LSM_CATEGORIES
from .stats import round_half_up
from .text import tokenize_all

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURABLE CONSTANTS
# ============================================================================

MIN_TOKENS_PER_PERSON = 50

# Categories neither person uses would score a perfect 1.0; they are skipped
MIN_CATEGORY_RATE = 0.001
LSM_EPSILON = 0.0001

INTERPRETATION_BANDS = (
    (0.85, "Wysoka synchronizacja językowa — silna spójność komunikacyjna"),
    (0.70, "Umiarkowana synchronizacja — dobra kompatybilność stylu"),
    (0.55, "Niska synchronizacja — wyraźne różnice w stylu komunikacji"),
)
LOWEST_INTERPRETATION = "Bardzo niska synchronizacja — odmienne style komunikacji"


def category_rates(tokens: List[str]) -> Dict[str, float]:
    """Share of tokens falling into each function-word category."""
    total = len(tokens)
    if total == 0:
        return {category: 0.0 for category in LSM_CATEGORIES}
    return {
        category: sum(1 for t in tokens if t in words) / total
        for category, words in LSM_CATEGORIES.items()
    }


def category_similarity(rate_a: float, rate_b: float) -> float:
    """1 - |a - b| / (a + b + eps); 1.0 is an identical rate."""
    return 1 - abs(rate_a - rate_b) / (rate_a + rate_b + LSM_EPSILON)


def interpret_lsm(overall: float) -> str:
    for threshold, label in INTERPRETATION_BANDS:
        if overall >= threshold:
            return label
    return LOWEST_INTERPRETATION


def compute_lsm(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Dyadic LSM between participant_names[0] and participant_names[1].

    Returns:
        {"overall": float (2 dp), "per_category": {category: float},
         "rates": {name: {category: float}}, "interpretation": str}
        or None when either person has fewer than MIN_TOKENS_PER_PERSON tokens
        or no category is used at all.
    """
    if len(participant_names) < 2:
        return None

    name_a, name_b = participant_names[0], participant_names[1]
    tokens: Dict[str, List[str]] = {name_a: [], name_b: []}
    for msg in messages:
        person_tokens = tokens.get(msg["sender"])
        if person_tokens is None or not msg.get("content"):
            continue
        person_tokens.extend(tokenize_all(msg["content"]))

    if len(tokens[name_a]) < MIN_TOKENS_PER_PERSON or len(tokens[name_b]) < MIN_TOKENS_PER_PERSON:
        logger.debug("LSM skipped: not enough tokens per person")
        return None

    rates_a = category_rates(tokens[name_a])
    rates_b = category_rates(tokens[name_b])

    per_category = {}
    for category in LSM_CATEGORIES:
        a, b = rates_a[category], rates_b[category]
        if a < MIN_CATEGORY_RATE and b < MIN_CATEGORY_RATE:
            continue
        per_category[category] = category_similarity(a, b)

    if not per_category:
        return None

    overall = sum(per_category.values()) / len(per_category)
    return {
        "overall": round_half_up(overall, 2),
        "per_category": per_category,
        "rates": {name_a: rates_a, name_b: rates_b},
        "interpretation": interpret_lsm(overall),
    }

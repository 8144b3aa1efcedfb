"""
Emotional granularity for ChatSignal v1

Diversity of emotion categories a person uses. Many distinct categories
correlates with better emotional regulation; a binary good/bad
vocabulary correlates with depression and anxiety.
"""

import logging
from typing import Any, Dict, List, Optional

from .lexicons import EMOTION_CATEGORY_LABELS, EMOTION_LEXICON, WORD_TO_EMOTION_CATEGORIES
from .stats import round_half_up
from .text import tokenize_letters

logger = logging.getLogger(__name__)

CATEGORY_COUNT = len(EMOTION_LEXICON)

# Score weights: 70 points for category diversity, 30 for emotional word coverage
DIVERSITY_POINTS = 70
COVERAGE_POINTS = 30
# 10% emotional word density reaches full coverage
COVERAGE_MULTIPLIER = 300

MIN_WORDS_FOR_SCORE = 50
MIN_WORDS_PER_PERSON = 200

# Maximum V2 reduction when every emotional message mixes categories
COOCCURRENCE_PENALTY = 0.3


def compute_granularity_score(distinct_categories: int, emotion_words: int, total_words: int) -> int:
    """70% diversity + 30% coverage, 0 below MIN_WORDS_FOR_SCORE words."""
    if total_words < MIN_WORDS_FOR_SCORE:
        return 0
    diversity = distinct_categories / CATEGORY_COUNT * DIVERSITY_POINTS
    coverage = min(COVERAGE_POINTS, emotion_words / total_words * COVERAGE_MULTIPLIER)
    return round_half_up(min(100, diversity + coverage))


def compute_emotional_granularity(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Per-person emotional granularity.

    Returns:
        {"per_person": {...}, "higher_granularity": name} or None when fewer
        than two participants reach MIN_WORDS_PER_PERSON words
    """
    if len(participant_names) < 2:
        return None

    stats = {
        name: {
            "category_counts": {},
            "emotion_words": 0,
            "total_words": 0,
            "messages_with_emotion": 0,
            "messages_with_multiple": 0,
        }
        for name in participant_names
    }

    for msg in messages:
        s = stats.get(msg["sender"])
        if s is None or not msg.get("content"):
            continue
        tokens = tokenize_letters(msg["content"])
        s["total_words"] += len(tokens)

        message_categories = set()
        for token in tokens:
            categories = WORD_TO_EMOTION_CATEGORIES.get(token)
            if not categories:
                continue
            s["emotion_words"] += 1
            for category in categories:
                s["category_counts"][category] = s["category_counts"].get(category, 0) + 1
                message_categories.add(category)

        if message_categories:
            s["messages_with_emotion"] += 1
        if len(message_categories) >= 2:
            s["messages_with_multiple"] += 1

    per_person = {}
    for name in participant_names:
        s = stats[name]
        if s["total_words"] < MIN_WORDS_PER_PERSON:
            continue

        counts = s["category_counts"]
        score = compute_granularity_score(len(counts), s["emotion_words"], s["total_words"])

        # Share of emotional messages mixing 2+ categories
        cooccurrence = 0.0
        if s["messages_with_emotion"] > 0:
            cooccurrence = round_half_up(s["messages_with_multiple"] / s["messages_with_emotion"], 2)
        clamped = min(1.0, max(0.0, cooccurrence))
        score_v2 = max(0, round_half_up(score * (1 - clamped * COOCCURRENCE_PENALTY)))

        dominant = "joy"
        best = 0
        for category, count in counts.items():
            if count > best:
                dominant, best = category, count

        per_person[name] = {
            "distinct_categories": len(counts),
            "emotional_word_count": s["emotion_words"],
            "category_counts": {
                EMOTION_CATEGORY_LABELS.get(category, category): count
                for category, count in counts.items()
            },
            "granularity_score": score,
            "dominant_category": EMOTION_CATEGORY_LABELS.get(dominant, dominant),
            "category_cooccurrence_index": cooccurrence,
            "granularity_score_v2": score_v2,
        }

    if len(per_person) < 2:
        logger.debug("Emotional granularity skipped: fewer than 2 people with enough words")
        return None

    ranked = sorted(
        (name for name in participant_names if name in per_person),
        key=lambda name: per_person[name]["granularity_score_v2"],
        reverse=True,
    )
    return {"per_person": per_person, "higher_granularity": ranked[0]}

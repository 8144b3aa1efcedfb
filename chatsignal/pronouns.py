"""
Pronoun analysis for ChatSignal v1

I / We / You usage rates per person. A high "we" share signals
relationship orientation, a high "I" share signals self-focus.

Polish is pro-drop: subject pronouns are usually carried by the verb, so
explicit "ja"/"my" is marked usage and Polish rates run lower than
English norms. Full declension sets are used to avoid undercounting.
"""

import logging
from typing import Any, Dict, List, Optional

from .lexicons import I_WORDS, WE_WORDS, YOU_WORDS
from .stats import round_half_up
from .text import tokenize_all

logger = logging.getLogger(__name__)

# Minimum words per person for stable rates
MIN_WORDS_PER_PERSON = 200

NEUTRAL_ORIENTATION = 50


def count_pronouns(tokens: List[str]) -> Dict[str, int]:
    """I, WE and YOU counts. Sets are checked in that order; a token counts once."""
    counts = {"i": 0, "we": 0, "you": 0}
    for token in tokens:
        if token in I_WORDS:
            counts["i"] += 1
        elif token in WE_WORDS:
            counts["we"] += 1
        elif token in YOU_WORDS:
            counts["you"] += 1
    return counts


def compute_pronoun_analysis(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Per-person pronoun rates (per 1000 words) and overall relationship orientation.

    Returns None with fewer than two participants having at least
    MIN_WORDS_PER_PERSON words.
    """
    if len(participant_names) < 2:
        return None

    stats = {name: {"i": 0, "we": 0, "you": 0, "words": 0} for name in participant_names}
    for msg in messages:
        entry = stats.get(msg["sender"])
        if entry is None or not msg.get("content"):
            continue
        tokens = tokenize_all(msg["content"])
        entry["words"] += len(tokens)
        for key, value in count_pronouns(tokens).items():
            entry[key] += value

    per_person = {}
    total_i = 0
    total_we = 0
    for name in participant_names:
        s = stats[name]
        if s["words"] < MIN_WORDS_PER_PERSON:
            continue

        i_rate = s["i"] / s["words"] * 1000
        we_rate = s["we"] / s["words"] * 1000
        you_rate = s["you"] / s["words"] * 1000
        per_person[name] = {
            "i_count": s["i"],
            "we_count": s["we"],
            "you_count": s["you"],
            "i_rate": round_half_up(i_rate, 1),
            "we_rate": round_half_up(we_rate, 1),
            "you_rate": round_half_up(you_rate, 1),
            "i_we_ratio": round_half_up(i_rate / (i_rate + we_rate + 0.001), 2),
        }
        total_i += s["i"]
        total_we += s["we"]

    if len(per_person) < 2:
        logger.debug("Pronoun analysis skipped: fewer than 2 people with enough words")
        return None

    total = total_i + total_we
    orientation = round_half_up(total_we / total * 100) if total > 0 else NEUTRAL_ORIENTATION
    return {"per_person": per_person, "relationship_orientation": orientation}

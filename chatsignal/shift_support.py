"""
Shift vs support responses for ChatSignal v1

Conversational Narcissism Index (CNI): how often a person answers by
redirecting attention to themselves (shift) instead of continuing the
partner's topic (support). Lexical heuristics approximate the
discourse-level distinction.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .lexicons import ACKNOWLEDGMENT_TOKENS, PARTNER_REFERENCE, QUESTION_STARTS, SELF_START
from .messages import sort_messages
from .stats import round_half_up
from .timeutils import HOUR_MS

logger = logging.getLogger(__name__)

MAX_RESPONSE_GAP_MS = 6 * HOUR_MS
MIN_RESPONSES_PER_PERSON = 10

# Overlap counts only content words longer than this
OVERLAP_MIN_WORD_LENGTH = 3
SUPPORT_OVERLAP = 2
HEAD_TOKENS = 4

SHIFT = "shift"
SUPPORT = "support"
AMBIGUOUS = "ambiguous"

_FIRST_TOKEN_SPLIT_RE = re.compile(r"[\s.,!?;:]+")


def first_token(text: str) -> str:
    return _FIRST_TOKEN_SPLIT_RE.split(text.lower().strip())[0]


def word_overlap(prev_text: str, curr_text: str) -> int:
    """Words of curr_text (longer than 3 chars) that also occur in prev_text."""
    prev_words = {w for w in prev_text.lower().split() if len(w) > OVERLAP_MIN_WORD_LENGTH}
    return sum(
        1 for w in curr_text.lower().split()
        if len(w) > OVERLAP_MIN_WORD_LENGTH and w in prev_words
    )


def classify_response(prev_text: str, curr_text: str) -> str:
    """
    Classify a reply as 'shift', 'support' or 'ambiguous'.

    Rules are applied in order, first match wins: question opener, question
    not opened with self-reference, topic overlap, acknowledgment opener,
    partner reference near the start, then self-referential opener.
    """
    first = first_token(curr_text)
    head = curr_text.lower().split()[:HEAD_TOKENS]
    overlap = word_overlap(prev_text, curr_text)
    starts_with_self = first in SELF_START
    references_partner = any(t in PARTNER_REFERENCE for t in head)

    if first in QUESTION_STARTS:
        return SUPPORT
    # "Ja miałam takie coś, a ty?" is a shift with a tag question
    if "?" in curr_text and not starts_with_self:
        return SUPPORT
    if overlap >= SUPPORT_OVERLAP:
        return SUPPORT
    if first in ACKNOWLEDGMENT_TOKENS:
        return SUPPORT
    if references_partner:
        return SUPPORT
    if starts_with_self and overlap == 0:
        return SHIFT
    return AMBIGUOUS


def compute_shift_support_ratio(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Per-person shift ratio and CNI.

    Only adjacent message pairs with a sender change, content on both sides
    and at most 6h between them count as responses. People need at least
    MIN_RESPONSES_PER_PERSON responses; None when fewer than two qualify.
    """
    if len(participant_names) < 2:
        return None

    messages = sort_messages(messages)
    counts = {name: {SHIFT: 0, SUPPORT: 0, "total": 0} for name in participant_names}
    for prev, curr in zip(messages, messages[1:]):
        if prev["sender"] == curr["sender"]:
            continue
        if not prev.get("content") or not curr.get("content"):
            continue
        if curr["timestamp"] - prev["timestamp"] > MAX_RESPONSE_GAP_MS:
            continue
        c = counts.get(curr["sender"])
        if c is None:
            continue

        c["total"] += 1
        label = classify_response(prev["content"], curr["content"])
        if label != AMBIGUOUS:
            c[label] += 1

    per_person = {}
    for name in participant_names:
        c = counts[name]
        if c["total"] < MIN_RESPONSES_PER_PERSON:
            continue
        classified = c[SHIFT] + c[SUPPORT]
        shift_ratio = c[SHIFT] / classified if classified > 0 else 0.5
        per_person[name] = {
            "shift_count": c[SHIFT],
            "support_count": c[SUPPORT],
            "shift_ratio": round_half_up(shift_ratio, 2),
            "cni": round_half_up(shift_ratio * 100),
        }

    if len(per_person) < 2:
        logger.debug("Shift/support skipped: fewer than 2 people with enough responses")
        return None

    ranked = sorted(
        (name for name in participant_names if name in per_person),
        key=lambda name: per_person[name]["cni"],
        reverse=True,
    )
    return {
        "per_person": per_person,
        "higher_cni": ranked[0],
        "cni_gap": per_person[ranked[0]]["cni"] - per_person[ranked[1]]["cni"],
    }

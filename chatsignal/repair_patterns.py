"""
Conversational repair patterns for ChatSignal v1

Repair is how people fix misunderstandings (Schegloff, Jefferson & Sacks, 1977):
- Self-repair: the speaker clarifies their own words ("tzn.", "w sensie", "*poprawka")
- Other-repair initiation: the listener signals confusion ("co?", "nie rozumiem")

Frequent self-repair marks a careful communicator; being asked to clarify
often suggests unclear messages or a listener who expects precision.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from .lexicons import OTHER_REPAIR_MARKERS, SELF_REPAIR_MARKERS
from .stats import round_half_up

logger = logging.getLogger(__name__)

MIN_MESSAGES = 100
MIN_TOTAL_REPAIRS = 5
MIN_MESSAGES_PER_PERSON = 10

# repairs / messages * 500: a 0.2% repair rate maps to 100
MUTUAL_INDEX_SCALE = 500

# "*miałam" correcting a typo or word in the previous message
ASTERISK_REPAIR_RE = re.compile(r"(?:^|\s)\*[a-zA-ZąćęłńóśżźĄĆĘŁŃÓŚŻŹ]")


def contains_marker(content: str, markers: Sequence[str]) -> bool:
    """A marker opens the message or starts a word inside it."""
    lower = content.lower().strip()
    return any(
        lower.startswith(marker) or f" {marker}" in lower or f"\n{marker}" in lower
        for marker in markers
    )


def detect_repair(content: str) -> Dict[str, bool]:
    """{"self": bool, "other": bool}; one message can be both."""
    return {
        "self": bool(ASTERISK_REPAIR_RE.search(content)) or contains_marker(content, SELF_REPAIR_MARKERS),
        "other": contains_marker(content, OTHER_REPAIR_MARKERS),
    }


def repair_label(self_rate: float, other_rate: float) -> str:
    if self_rate >= 8 and other_rate < 3:
        return "Komunikuje się precyzyjnie"
    if self_rate < 2 and other_rate >= 5:
        return "Często niejasny/a"
    if self_rate >= 5:
        return "Dba o precyzję wypowiedzi"
    if other_rate >= 4:
        return "Partnerzy często proszą o wyjaśnienia"
    return "Typowy wzorzec napraw"


def _per_hundred(count: int, total: int) -> float:
    return round_half_up(count / total * 1000) / 10


def _interpret(name_a: str, rate_a: float, name_b: str, rate_b: float) -> str:
    if abs(rate_a - rate_b) < 1:
        return (
            f"Oboje podobnie często wyjaśniają swoje wypowiedzi "
            f"({rate_a:.1f} vs {rate_b:.1f} napraw/100 wiad.)."
        )
    if rate_a > rate_b:
        more, less, more_rate, less_rate = name_a, name_b, rate_a, rate_b
    else:
        more, less, more_rate, less_rate = name_b, name_a, rate_b, rate_a
    return (
        f"{more} naprawia swoje wypowiedzi {more_rate / (less_rate + 0.1):.1f}× częściej niż {less} "
        f"— świadczy o dbałości o klarowność komunikacji."
    )


def compute_repair_patterns(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Self-repair and other-repair rates per 100 messages.

    Returns None with fewer than 100 messages, fewer than 5 repairs in
    total, or fewer than two people with 10+ text messages.
    """
    if len(participant_names) < 2 or len(messages) < MIN_MESSAGES:
        return None

    counts = {name: {"self": 0, "other": 0, "total": 0} for name in participant_names}
    for msg in messages:
        c = counts.get(msg["sender"])
        if c is None or not msg.get("content"):
            continue
        c["total"] += 1
        found = detect_repair(msg["content"])
        c["self"] += found["self"]
        c["other"] += found["other"]

    total_repairs = sum(c["self"] + c["other"] for c in counts.values())
    if total_repairs < MIN_TOTAL_REPAIRS:
        logger.debug(f"Repair patterns skipped: {total_repairs} repairs")
        return None

    per_person = {}
    for name, c in counts.items():
        if c["total"] < MIN_MESSAGES_PER_PERSON:
            continue
        self_rate = _per_hundred(c["self"], c["total"])
        other_rate = _per_hundred(c["other"], c["total"])
        per_person[name] = {
            "self_repair_count": c["self"],
            "other_repair_initiation_count": c["other"],
            "self_repair_rate": self_rate,
            "other_repair_rate": other_rate,
            "repair_initiation_ratio": round_half_up(c["self"] / (c["self"] + c["other"] + 0.001), 2),
            "label": repair_label(self_rate, other_rate),
        }

    valid = list(per_person)
    if len(valid) < 2:
        return None

    total_messages = sum(counts[name]["total"] for name in valid)
    mutual_index = round_half_up(min(100, total_repairs / total_messages * MUTUAL_INDEX_SCALE))
    dominant = sorted(valid, key=lambda name: per_person[name]["self_repair_count"], reverse=True)[0]

    a, b = valid[0], valid[1]
    return {
        "per_person": per_person,
        "mutual_repair_index": mutual_index,
        "dominant_self_repairer": dominant,
        "interpretation": _interpret(a, per_person[a]["self_repair_rate"], b, per_person[b]["self_repair_rate"]),
    }

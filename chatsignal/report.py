"""
Signal report assembly for ChatSignal v1
Runs every analysis on one message stream and combines the results into a single report
"""

import logging
from typing import Any, Dict, List, Optional

from . import config
from .bid_response import compute_bid_response_ratio
from .bursts import detect_bursts
from .chronotype import compute_chronotype_compatibility
from .conflicts import detect_conflicts
from .gaps import detect_communication_gaps
from .granularity import compute_emotional_granularity
from .intimacy import compute_intimacy_progression
from .lsm import compute_lsm
from .messages import compute_monthly_volume, normalize_messages, participants_by_appearance
from .pronouns import compute_pronoun_analysis
from .pursuit_withdrawal import detect_pursuit_withdrawal
from .repair_patterns import compute_repair_patterns
from .response_time import compute_response_time_analysis
from .sentiment import compute_person_sentiment, compute_sentiment_trend
from .shift_support import compute_shift_support_ratio
from .timeutils import to_local
from .utils.timing import Timer

logger = logging.getLogger(__name__)


def summarize_response_time(analysis: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Replace the raw turn and response lists with their counts."""
    if analysis is None:
        return None
    summary = {k: v for k, v in analysis.items() if k not in ("turns", "responses")}
    summary["turn_count"] = len(analysis["turns"])
    summary["response_count"] = len(analysis["responses"])
    return summary


def build_metadata(messages: List[Dict[str, Any]], participant_names: List[str]) -> Dict[str, Any]:
    metadata = {
        "message_count": len(messages),
        "participants": participant_names,
        "timezone": config.ANALYSIS_TZ,
        "date_range": None,
    }
    if messages:
        metadata["date_range"] = {
            "start": to_local(messages[0]["timestamp"]).isoformat(),
            "end": to_local(messages[-1]["timestamp"]).isoformat(),
        }
    return metadata


def build_signal_report(
    messages: List[Dict[str, Any]],
    participant_names: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Run the full behavioral signal battery.

    Args:
        messages: message records (normalized here, so camelCase keys are accepted)
        participant_names: canonical names; defaults to senders in order of appearance

    Returns:
        JSON-serializable report. Analyses without enough data are None.
    """
    messages = normalize_messages(messages)
    if participant_names is None:
        participant_names = participants_by_appearance(messages)

    logger.info(f"Building signal report: {len(messages)} messages, {len(participant_names)} participants")

    report: Dict[str, Any] = {"metadata": build_metadata(messages, participant_names)}
    timings: Dict[str, float] = {}

    def run(key: str, func, *args):
        with Timer() as t:
            report[key] = func(*args)
        timings[key] = round(t.elapsed_ms, 2)
        logger.debug(f"{key} computed in {t.elapsed_ms:.1f}ms")

    run("monthly_volume", compute_monthly_volume, messages)
    run("sentiment", _sentiment_section, messages, participant_names)
    run("response_time", lambda m, p: summarize_response_time(compute_response_time_analysis(m, p)),
        messages, participant_names)
    run("conflicts", detect_conflicts, messages, participant_names)
    run("gaps", detect_communication_gaps, messages, report["monthly_volume"])
    run("bursts", detect_bursts, messages)
    run("intimacy", compute_intimacy_progression, messages, participant_names)
    run("pronouns", compute_pronoun_analysis, messages, participant_names)
    run("emotional_granularity", compute_emotional_granularity, messages, participant_names)
    run("chronotype", compute_chronotype_compatibility, messages, participant_names)
    run("shift_support", compute_shift_support_ratio, messages, participant_names)
    run("lsm", compute_lsm, messages, participant_names)
    run("pursuit_withdrawal", detect_pursuit_withdrawal, messages, participant_names)
    run("bid_response", compute_bid_response_ratio, messages, participant_names)
    run("repair_patterns", compute_repair_patterns, messages, participant_names)

    report["metadata"]["timings_ms"] = timings
    logger.info(f"Signal report ready in {sum(timings.values()):.1f}ms")
    return report


def _sentiment_section(messages: List[Dict[str, Any]], participant_names: List[str]) -> Dict[str, Any]:
    per_person = {
        name: compute_person_sentiment([m for m in messages if m["sender"] == name])
        for name in participant_names
    }
    return {
        "per_person": per_person,
        "trend": compute_sentiment_trend(messages, participant_names),
    }

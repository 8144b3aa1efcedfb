"""
Response-time analytics for ChatSignal v1

Turn-based response latency between participants: per-person baselines,
composite indices, monthly trends, sliding-window recomputation and
anomaly detection.

INDICES:
1. RTI (Response Time Index): period median / baseline median (1.0 = usual pace)
2. RA (Response Asymmetry): slower median / faster median (>= 1)
3. GI (Ghosting Index): share of turns directed at a person left unanswered for 24h
4. IR (Initiative Ratio): share of sessions a person started
5. EWRT (Effort-Weighted Response Time): rt / ln(1 + reply chars)

Overnight replies (sleep) are excluded from baselines and trends.
"""

import logging
import math
from typing import Any, Callable, Dict, Iterator, List, Optional

from .messages import sort_messages
from .stats import mean, median, percentile, safe_divide
from .timeutils import DAY_MS, HOUR_MS, MINUTE_MS, SECOND_MS, day_of_week, local_hour
from .turns import build_sessions, build_turns, compute_adaptive_session_gap

logger = logging.getLogger(__name__)

# ============================================================================
# CONFIGURABLE CONSTANTS
# ============================================================================

# Guards
MIN_MESSAGES = 30
MIN_TURNS = 5
MIN_RESPONSES = 10
MIN_BASELINE_SAMPLES = 5
MIN_BASELINE_PEOPLE = 2

# Category upper bounds (exclusive), checked in order
CATEGORY_THRESHOLDS = (
    ("instant", 30 * SECOND_MS),
    ("quick", 2 * MINUTE_MS),
    ("normal", 15 * MINUTE_MS),
    ("delayed", HOUR_MS),
    ("slow", 4 * HOUR_MS),
)
CATEGORIES = ("instant", "quick", "normal", "delayed", "slow", "overnight", "ghosting")

# Overnight: previous turn ends late, next starts in the morning, gap of a night's sleep
OVERNIGHT_EVENING_FROM_HOUR = 21
OVERNIGHT_EVENING_UNTIL_HOUR = 3
OVERNIGHT_MORNING_HOURS = (6, 12)
OVERNIGHT_GAP_HOURS = (4, 14)

GHOSTING_WINDOW_MS = 24 * HOUR_MS

# Monthly series guards
MONTHLY_RTI_MIN_SAMPLES = 3
MONTHLY_RA_MIN_SAMPLES = 2

# RA trend
RA_TREND_MIN_POINTS = 4
RA_TREND_DELTA = 0.3

# Sliding windows
SLIDING_WINDOW_MS = 30 * DAY_MS
SLIDING_STEP_MS = 7 * DAY_MS
WINDOW_MIN_RESPONSES = 5
WINDOW_MIN_PERSON_SAMPLES = 3

# Anomaly rules
MIN_WINDOWS_FOR_ANOMALIES = 3
SLOWDOWN_RTI = 2.5
WITHDRAWAL_MIN_RUN = 3
GHOSTING_SPIKE_DELTA = 0.20
INITIATIVE_COLLAPSE_IR = 0.15
INITIATIVE_COLLAPSE_RUN = 3


# ============================================================================
# TURN RESPONSES
# ============================================================================

def is_overnight_response(prev_turn: Dict[str, Any], curr_turn: Dict[str, Any]) -> bool:
    """Previous turn ends 21:00-03:00, next starts 06:00-12:00, gap 4-14h."""
    prev_hour = local_hour(prev_turn["end_timestamp"])
    curr_hour = local_hour(curr_turn["start_timestamp"])
    gap_hours = (curr_turn["start_timestamp"] - prev_turn["end_timestamp"]) / HOUR_MS

    prev_late = prev_hour >= OVERNIGHT_EVENING_FROM_HOUR or prev_hour < OVERNIGHT_EVENING_UNTIL_HOUR
    morning_start, morning_end = OVERNIGHT_MORNING_HOURS
    curr_morning = morning_start <= curr_hour < morning_end
    min_gap, max_gap = OVERNIGHT_GAP_HOURS
    return prev_late and curr_morning and min_gap <= gap_hours <= max_gap


def classify_response_time(rt_ms: float, overnight: bool) -> str:
    if overnight:
        return "overnight"
    for category, upper in CATEGORY_THRESHOLDS:
        if rt_ms < upper:
            return category
    return "ghosting"


def measure_turn_responses(turns: List[Dict[str, Any]], session_gap_ms: float) -> List[Dict[str, Any]]:
    """
    Reply latency for every adjacent turn pair with a sender change.

    Non-positive latencies are skipped, as are non-overnight latencies
    longer than the session gap (the reply belongs to a new session).
    """
    responses = []
    for prev, curr in zip(turns, turns[1:]):
        if prev["sender"] == curr["sender"]:
            continue

        rt = curr["start_timestamp"] - prev["end_timestamp"]
        if rt <= 0:
            continue

        overnight = is_overnight_response(prev, curr)
        if rt > session_gap_ms and not overnight:
            continue

        responses.append({
            "responder": curr["sender"],
            "initiator": prev["sender"],
            "response_time_ms": rt,
            "category": classify_response_time(rt, overnight),
            "is_overnight": overnight,
            "month_key": curr["month_key"],
            "ewrt": rt / math.log(1 + max(1, curr["total_chars"])),
            "responder_turn": curr,
            "initiator_turn": prev,
        })
    return responses


# ============================================================================
# BASELINES
# ============================================================================

def compute_person_baseline(responses: List[Dict[str, Any]], person: str) -> Optional[Dict[str, Any]]:
    """
    Statistical summary of a person's non-overnight response times.

    Returns None with fewer than MIN_BASELINE_SAMPLES samples. Hour and
    weekday buckets are keyed by when the message being answered was sent;
    empty buckets fall back to the overall median. The category
    distribution includes overnight replies.
    """
    own = [r for r in responses if r["responder"] == person and not r["is_overnight"]]
    if len(own) < MIN_BASELINE_SAMPLES:
        return None

    rts = [r["response_time_ms"] for r in own]
    med = median(rts)
    p25 = percentile(rts, 25)
    p75 = percentile(rts, 75)

    hour_buckets: List[List[float]] = [[] for _ in range(24)]
    dow_buckets: List[List[float]] = [[] for _ in range(7)]
    for r in own:
        asked_at = r["initiator_turn"]["end_timestamp"]
        hour_buckets[local_hour(asked_at)].append(r["response_time_ms"])
        dow_buckets[day_of_week(asked_at)].append(r["response_time_ms"])

    distribution = {category: 0.0 for category in CATEGORIES}
    all_own = [r for r in responses if r["responder"] == person]
    for r in all_own:
        distribution[r["category"]] += 1
    for category in distribution:
        distribution[category] /= len(all_own)

    return {
        "median": med,
        "p25": p25,
        "p75": p75,
        "iqr": p75 - p25,
        "mean": mean(rts),
        "sample_size": len(own),
        "per_hour_median": [median(b) if b else med for b in hour_buckets],
        "per_dow_median": [median(b) if b else med for b in dow_buckets],
        "category_distribution": distribution,
    }


def response_asymmetry(medians: List[float]) -> float:
    """max / min of the medians; 1 when there are fewer than two or the minimum is 0."""
    if len(medians) < 2:
        return 1.0
    return safe_divide(max(medians), min(medians), default=1.0)


# ============================================================================
# MONTHLY TRENDS
# ============================================================================

def compute_monthly_rti(
    responses: List[Dict[str, Any]],
    baseline: Dict[str, Any],
    person: str,
) -> List[Dict[str, Any]]:
    """Monthly median / baseline median, skipping months with too few samples."""
    if baseline["median"] == 0:
        return []

    by_month: Dict[str, List[float]] = {}
    for r in responses:
        if r["responder"] != person or r["is_overnight"]:
            continue
        by_month.setdefault(r["month_key"], []).append(r["response_time_ms"])

    return [
        {"month": month, "rti": median(rts) / baseline["median"]}
        for month, rts in sorted(by_month.items())
        if len(rts) >= MONTHLY_RTI_MIN_SAMPLES
    ]


def compute_monthly_ra(responses: List[Dict[str, Any]], participants: List[str]) -> List[Dict[str, Any]]:
    if len(participants) < 2:
        return []

    months = sorted({r["month_key"] for r in responses})
    series = []
    for month in months:
        medians = []
        for name in participants:
            rts = [
                r["response_time_ms"] for r in responses
                if r["month_key"] == month and not r["is_overnight"] and r["responder"] == name
            ]
            if len(rts) >= MONTHLY_RA_MIN_SAMPLES:
                medians.append(median(rts))
        if len(medians) >= 2:
            series.append({"month": month, "ra": response_asymmetry(medians)})
    return series


def compute_ra_trend(monthly_ra: List[Dict[str, Any]]) -> str:
    """Second-half vs first-half average RA: 'diverging', 'converging' or 'stable'."""
    if len(monthly_ra) < RA_TREND_MIN_POINTS:
        return "stable"

    half = len(monthly_ra) // 2
    first = mean([e["ra"] for e in monthly_ra[:half]])
    second = mean([e["ra"] for e in monthly_ra[half:]])
    delta = second - first
    if delta > RA_TREND_DELTA:
        return "diverging"
    if delta < -RA_TREND_DELTA:
        return "converging"
    return "stable"


# ============================================================================
# GHOSTING & INITIATIVE
# ============================================================================

def compute_ghosting_index(turns: List[Dict[str, Any]], person: str) -> float:
    """
    Fraction of turns by others that the person did not answer within 24h.

    The scan stops at the person's next turn, or earlier when somebody
    other than the original sender speaks first (group chats undercount).
    """
    directed = 0
    unanswered = 0

    for i, turn in enumerate(turns):
        if turn["sender"] == person:
            continue
        directed += 1

        answered = False
        for later in turns[i + 1:]:
            if later["sender"] == person:
                answered = later["start_timestamp"] - turn["end_timestamp"] <= GHOSTING_WINDOW_MS
                break
            if later["sender"] != turn["sender"]:
                break

        if not answered:
            unanswered += 1

    return safe_divide(unanswered, directed)


def compute_initiative_ratio(turns: List[Dict[str, Any]], session_gap_ms: float, person: str) -> float:
    """Fraction of sessions whose first turn is by the person."""
    sessions = build_sessions(turns, session_gap_ms)
    started = sum(1 for s in sessions if s["initiator"] == person)
    return safe_divide(started, len(sessions))


def compute_ewrt(responses: List[Dict[str, Any]], person: str) -> float:
    values = [r["ewrt"] for r in responses if r["responder"] == person and not r["is_overnight"]]
    return median(values) if values else 0.0


# ============================================================================
# SLIDING WINDOWS
# ============================================================================

def iter_sliding_windows(
    responses: List[Dict[str, Any]],
    turns: List[Dict[str, Any]],
    session_gap_ms: float,
    baselines: Dict[str, Dict[str, Any]],
    participants: List[str],
) -> Iterator[Dict[str, Any]]:
    """
    Lazily yield 30-day window snapshots stepped by 7 days.

    Windows are anchored on reply timestamps and cover [start, end).
    Nothing is yielded when the replies span less than one window; windows
    with fewer than WINDOW_MIN_RESPONSES replies are skipped.
    """
    if not responses:
        return

    reply_times = [r["responder_turn"]["start_timestamp"] for r in responses]
    min_ts = min(reply_times)
    max_ts = max(reply_times)
    if max_ts - min_ts < SLIDING_WINDOW_MS:
        return

    start = min_ts
    while start + SLIDING_WINDOW_MS <= max_ts + SLIDING_STEP_MS:
        end = start + SLIDING_WINDOW_MS
        window_responses = [
            r for r in responses
            if start <= r["responder_turn"]["start_timestamp"] < end
        ]

        if len(window_responses) >= WINDOW_MIN_RESPONSES:
            per_person = {}
            for name in participants:
                rts = [
                    r["response_time_ms"] for r in window_responses
                    if r["responder"] == name and not r["is_overnight"]
                ]
                if len(rts) >= WINDOW_MIN_PERSON_SAMPLES and name in baselines:
                    med = median(rts)
                    per_person[name] = {
                        "rti": safe_divide(med, baselines[name]["median"], default=1.0),
                        "median_rt": med,
                        "sample_size": len(rts),
                    }

            window_turns = [t for t in turns if start <= t["start_timestamp"] < end]
            yield {
                "window_start": start,
                "window_end": end,
                "per_person": per_person,
                "ra": response_asymmetry([p["median_rt"] for p in per_person.values()]),
                "gi": {name: compute_ghosting_index(window_turns, name) for name in participants},
                "ir": {
                    name: compute_initiative_ratio(window_turns, session_gap_ms, name)
                    for name in participants
                },
            }

        start += SLIDING_STEP_MS


# ============================================================================
# ANOMALY RULES
# ============================================================================

def _rti_series(windows: List[Dict[str, Any]], person: str) -> List[tuple]:
    return [
        (i, w["per_person"][person]["rti"])
        for i, w in enumerate(windows)
        if person in w["per_person"]
    ]


def detect_sudden_slowdown(windows: List[Dict[str, Any]], person: str) -> List[Dict[str, Any]]:
    """Any window where the person answers more than 2.5x slower than usual."""
    anomalies = []
    for idx, rti in _rti_series(windows, person):
        if rti > SLOWDOWN_RTI:
            anomalies.append({
                "type": "sudden_slowdown",
                "person": person,
                "window_index": idx,
                "severity": min(1.0, (rti - SLOWDOWN_RTI) / SLOWDOWN_RTI),
                "description": f"{person}: RTI={rti:.1f} (2.5x wolniej niż baseline)",
            })
    return anomalies


def detect_gradual_withdrawal(windows: List[Dict[str, Any]], person: str) -> List[Dict[str, Any]]:
    """RTI strictly rising over 3+ consecutive windows; reported at every step of the run."""
    series = _rti_series(windows, person)
    anomalies = []
    run = 1
    for k in range(1, len(series)):
        if series[k][1] > series[k - 1][1]:
            run += 1
            if run >= WITHDRAWAL_MIN_RUN:
                start_rti = series[k - run + 1][1]
                end_rti = series[k][1]
                anomalies.append({
                    "type": "gradual_withdrawal",
                    "person": person,
                    "window_index": series[k][0],
                    "severity": min(1.0, (end_rti - start_rti) / 2),
                    "description": (
                        f"{person}: RTI rośnie nieprzerwanie od {run} okien "
                        f"({start_rti:.1f}→{end_rti:.1f})"
                    ),
                })
        else:
            run = 1
    return anomalies


def detect_ghosting_spike(windows: List[Dict[str, Any]], person: str) -> List[Dict[str, Any]]:
    """Ghosting Index up by more than 20 percentage points between adjacent windows."""
    anomalies = []
    for i in range(1, len(windows)):
        prev_gi = windows[i - 1]["gi"].get(person)
        curr_gi = windows[i]["gi"].get(person)
        if prev_gi is None or curr_gi is None:
            continue
        delta = curr_gi - prev_gi
        if delta > GHOSTING_SPIKE_DELTA:
            anomalies.append({
                "type": "ghosting_spike",
                "person": person,
                "window_index": i,
                "severity": min(1.0, delta / 0.5),
                "description": (
                    f"{person}: GI skoczyło o {delta * 100:.0f}pp "
                    f"({prev_gi * 100:.0f}%→{curr_gi * 100:.0f}%)"
                ),
            })
    return anomalies


def detect_initiative_collapse(windows: List[Dict[str, Any]], person: str) -> List[Dict[str, Any]]:
    """Initiative Ratio below 0.15 for 3+ consecutive windows; reported at every step of the streak."""
    anomalies = []
    streak = 0
    for i, window in enumerate(windows):
        ir = window["ir"].get(person)
        if ir is not None and ir < INITIATIVE_COLLAPSE_IR:
            streak += 1
            if streak >= INITIATIVE_COLLAPSE_RUN:
                anomalies.append({
                    "type": "initiative_collapse",
                    "person": person,
                    "window_index": i,
                    "severity": min(1.0, (INITIATIVE_COLLAPSE_IR - ir) / INITIATIVE_COLLAPSE_IR),
                    "description": f"{person}: IR < 15% przez {streak} kolejnych okien",
                })
        else:
            streak = 0
    return anomalies


ANOMALY_RULES: List[Callable[[List[Dict[str, Any]], str], List[Dict[str, Any]]]] = [
    detect_sudden_slowdown,
    detect_gradual_withdrawal,
    detect_ghosting_spike,
    detect_initiative_collapse,
]


def detect_anomalies(windows: List[Dict[str, Any]], participants: List[str]) -> List[Dict[str, Any]]:
    """Run every anomaly rule independently per person; rules may co-fire."""
    if len(windows) < MIN_WINDOWS_FOR_ANOMALIES:
        return []

    anomalies = []
    for person in participants:
        for rule in ANOMALY_RULES:
            anomalies.extend(rule(windows, person))
    return anomalies


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def compute_response_time_analysis(
    messages: List[Dict[str, Any]],
    participant_names: List[str],
) -> Optional[Dict[str, Any]]:
    """
    Full response-time analysis.

    Returns None when there is not enough data: fewer than 30 messages,
    5 turns, 10 measured responses, or fewer than 2 participants with a
    baseline.
    """
    if len(messages) < MIN_MESSAGES:
        logger.debug(f"Response-time analysis skipped: {len(messages)} messages")
        return None

    messages = sort_messages(messages)
    session_gap_ms = compute_adaptive_session_gap(messages)

    turns = build_turns(messages)
    if len(turns) < MIN_TURNS:
        logger.debug(f"Response-time analysis skipped: {len(turns)} turns")
        return None

    responses = measure_turn_responses(turns, session_gap_ms)
    if len(responses) < MIN_RESPONSES:
        logger.debug(f"Response-time analysis skipped: {len(responses)} responses")
        return None

    per_person = {}
    for name in participant_names:
        baseline = compute_person_baseline(responses, name)
        if baseline:
            per_person[name] = baseline

    names = list(per_person)
    if len(names) < MIN_BASELINE_PEOPLE:
        logger.debug(f"Response-time analysis skipped: {len(names)} baselines")
        return None

    monthly_ra = compute_monthly_ra(responses, names)
    windows = list(iter_sliding_windows(responses, turns, session_gap_ms, per_person, names))
    anomalies = detect_anomalies(windows, names)

    logger.info(
        f"Response-time analysis: {len(turns)} turns, {len(responses)} responses, "
        f"{len(windows)} windows, {len(anomalies)} anomalies"
    )

    return {
        "adaptive_session_gap_ms": session_gap_ms,
        "turns": turns,
        "responses": responses,
        "per_person": per_person,
        # Global RTI is the baseline itself
        "rti": {name: 1.0 for name in names},
        "response_asymmetry": response_asymmetry([per_person[n]["median"] for n in names]),
        "response_asymmetry_trend": compute_ra_trend(monthly_ra),
        "ghosting_index": {name: compute_ghosting_index(turns, name) for name in names},
        "initiative_ratio": {
            name: compute_initiative_ratio(turns, session_gap_ms, name) for name in names
        },
        "ewrt": {name: compute_ewrt(responses, name) for name in names},
        "monthly_rti": {
            name: compute_monthly_rti(responses, per_person[name], name) for name in names
        },
        "monthly_ra": monthly_ra,
        "sliding_windows": windows,
        "anomalies": anomalies,
    }

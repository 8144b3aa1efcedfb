"""
Message stream handling for ChatSignal v1
Normalizes externally parsed message records, loads them from JSON, builds DataFrames
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from . import config

logger = logging.getLogger(__name__)

MESSAGE_TYPES = ("text", "media", "sticker", "link", "call", "system", "unsent")

# camelCase keys accepted from JavaScript-side exports
KEY_ALIASES = {
    "timestampMs": "timestamp",
    "timestamp_ms": "timestamp",
    "hasMedia": "has_media",
    "hasLink": "has_link",
    "isUnsent": "is_unsent",
    "text": "content",
}


def normalize_message(record: Dict[str, Any], position: int = 0) -> Dict[str, Any]:
    """
    Normalize a single message record.

    Raises:
        ValueError: when sender or timestamp is missing or malformed
    """
    data = {KEY_ALIASES.get(k, k): v for k, v in record.items()}

    sender = data.get("sender")
    if sender is None or str(sender).strip() == "":
        raise ValueError(f"Message #{position} has no sender")

    ts = data.get("timestamp")
    if ts is None:
        raise ValueError(f"Message #{position} has no timestamp")
    try:
        ts = int(ts)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Message #{position} has a non-numeric timestamp: {ts!r}") from e

    msg_type = data.get("type") or "text"
    if msg_type not in MESSAGE_TYPES:
        logger.warning(f"Message #{position} has unknown type '{msg_type}', keeping as-is")

    content = data.get("content")
    return {
        "index": int(data.get("index", position)),
        "sender": str(sender),
        "content": content if isinstance(content, str) else "",
        "timestamp": ts,
        "type": msg_type,
        "has_media": bool(data.get("has_media", False)),
        "has_link": bool(data.get("has_link", False)),
        "is_unsent": bool(data.get("is_unsent", False)),
    }


def normalize_messages(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Normalize records and return them sorted (stable) by timestamp."""
    messages = [normalize_message(r, i) for i, r in enumerate(records)]
    return sort_messages(messages)


def sort_messages(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Chronological copy of the message list; ties keep their input order."""
    return sorted(messages, key=lambda m: m["timestamp"])


def participants_by_appearance(messages: List[Dict[str, Any]]) -> List[str]:
    """Distinct senders in order of first appearance."""
    seen: Dict[str, None] = {}
    for msg in messages:
        seen.setdefault(msg["sender"], None)
    return list(seen)


def load_messages(
    file_path: Union[str, Path],
) -> Tuple[List[Dict[str, Any]], Optional[List[str]]]:
    """
    Load messages from a JSON file.

    Accepts either a list of message records or an object with a
    "messages" list and an optional "participants" list.

    Returns:
        (normalized messages, participants or None)
    """
    with open(file_path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    participants = None
    if isinstance(payload, dict):
        participants = payload.get("participants") or payload.get("participantNames")
        records = payload.get("messages")
    else:
        records = payload

    if not isinstance(records, list):
        raise ValueError(f"{file_path} does not contain a list of messages")

    messages = normalize_messages(records)
    logger.info(f"Loaded {len(messages)} messages from {file_path}")
    return messages, participants


def messages_to_frame(messages: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    DataFrame view of the message stream.

    Adds a timezone-aware "datetime" column in the analysis timezone plus
    "day" and "month" bucket keys.
    """
    columns = ["index", "sender", "content", "timestamp", "type",
               "has_media", "has_link", "is_unsent"]
    df = pd.DataFrame(messages, columns=columns)
    if df.empty:
        df["datetime"] = pd.Series(dtype="datetime64[ns, UTC]")
        df["day"] = pd.Series(dtype=str)
        df["month"] = pd.Series(dtype=str)
        return df

    df["datetime"] = (
        pd.to_datetime(df["timestamp"], unit="ms", utc=True)
        .dt.tz_convert(config.get_timezone())
    )
    df["day"] = df["datetime"].dt.strftime("%Y-%m-%d")
    df["month"] = df["datetime"].dt.strftime("%Y-%m")
    return df


def compute_monthly_volume(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Message counts per calendar month.

    Returns:
        [{"month": "YYYY-MM", "total": int, "per_person": {sender: int}}], chronological
    """
    df = messages_to_frame(messages)
    if df.empty:
        return []

    counts = df.groupby(["month", "sender"]).size()
    volume = []
    for month, per_sender in counts.groupby(level=0):
        per_person = {sender: int(n) for (_, sender), n in per_sender.items()}
        volume.append({
            "month": month,
            "total": int(per_sender.sum()),
            "per_person": per_person,
        })
    return volume

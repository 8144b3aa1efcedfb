"""
Shared fixtures for ChatSignal tests
"""

import pytest

from chatsignal import config

# 2024-01-01 00:00:00 UTC (a Monday)
BASE_TS = 1704067200000

MINUTE = 60 * 1000
HOUR = 60 * MINUTE
DAY = 24 * HOUR


def make_message(sender, content, timestamp, index=0, msg_type="text"):
    """Build a normalized message dict."""
    return {
        "index": index,
        "sender": sender,
        "content": content,
        "timestamp": timestamp,
        "type": msg_type,
        "has_media": False,
        "has_link": False,
        "is_unsent": False,
    }


def alternating_messages(count, start, step, contents=("hej co tam", "dobrze a u ciebie"),
                         senders=("A", "B")):
    """count messages alternating between senders, step ms apart."""
    return [
        make_message(senders[i % len(senders)], contents[i % len(contents)], start + i * step, index=i)
        for i in range(count)
    ]


@pytest.fixture(autouse=True)
def utc_timezone(monkeypatch):
    """Pin every bucket computation to UTC."""
    monkeypatch.setattr(config, "ANALYSIS_TZ", "UTC")


@pytest.fixture
def make_msg():
    return make_message


@pytest.fixture
def daily_conversation():
    """70 days, 10 alternating messages at noon each day, 5 minutes apart."""
    messages = []
    for day in range(70):
        day_start = BASE_TS + day * DAY + 12 * HOUR
        for i in range(10):
            messages.append(make_message(
                "A" if i % 2 == 0 else "B",
                "dzisiaj było super" if i % 2 == 0 else "u mnie też dobrze",
                day_start + i * 5 * MINUTE,
                index=len(messages),
            ))
    return messages

"""
ChatSignal v1 - Behavioral Signal Engine

Deterministic relationship signals from bilingual (Polish/English) chat
logs: sentiment, response-time dynamics, conflicts, silences, bursts,
intimacy, pronouns, emotional granularity, chronotypes, shift/support
responses, language style matching, pursuit-withdrawal cycles, bids for
connection and conversational repair. Everything is computed locally
from message text and timestamps.
"""

__version__ = "1.0.0"
__author__ = "ChatSignal Team"

from . import config
from . import text
from . import sentiment
from . import turns
from . import response_time
from . import conflicts
from . import gaps
from . import bursts
from . import intimacy
from . import pronouns
from . import granularity
from . import chronotype
from . import shift_support
from . import lsm
from . import pursuit_withdrawal
from . import bid_response
from . import repair_patterns
from . import report

__all__ = [
    "config",
    "text",
    "sentiment",
    "turns",
    "response_time",
    "conflicts",
    "gaps",
    "bursts",
    "intimacy",
    "pronouns",
    "granularity",
    "chronotype",
    "shift_support",
    "lsm",
    "pursuit_withdrawal",
    "bid_response",
    "repair_patterns",
    "report",
]

"""
Configuration module for ChatSignal v1
Loads environment variables and provides default settings
"""

import os
from datetime import timezone, tzinfo
from typing import Dict, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Timezone used for hour / weekday / day / month bucketing
ANALYSIS_TZ = os.getenv("CHATSIGNAL_TZ", "UTC")

# Typo-correction memo cache (entries)
TYPO_CACHE_SIZE = int(os.getenv("TYPO_CACHE_SIZE", "2000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Report output
REPORT_INDENT = int(os.getenv("REPORT_INDENT", "2"))
MAX_GAPS_REPORTED = int(os.getenv("MAX_GAPS_REPORTED", "15"))

_tz_cache: Dict[str, tzinfo] = {}


def get_timezone() -> tzinfo:
    """Resolve ANALYSIS_TZ into a tzinfo (UTC never needs tzdata)."""
    name = ANALYSIS_TZ
    if name in _tz_cache:
        return _tz_cache[name]
    if name.upper() in ("UTC", "Z", "GMT"):
        tz = timezone.utc
    else:
        tz = ZoneInfo(name)
    _tz_cache[name] = tz
    return tz


def get_config_summary() -> Dict[str, Any]:
    """Return a summary of current configuration."""
    return {
        "time": {
            "timezone": ANALYSIS_TZ,
        },
        "sentiment": {
            "typo_cache_size": TYPO_CACHE_SIZE,
        },
        "logging": {
            "level": LOG_LEVEL,
        },
        "report": {
            "indent": REPORT_INDENT,
            "max_gaps": MAX_GAPS_REPORTED,
        },
    }


def validate_config() -> tuple[bool, str]:
    """Validate configuration. Returns (is_valid, message)."""
    try:
        get_timezone()
    except (ZoneInfoNotFoundError, ValueError) as e:
        return False, f"CHATSIGNAL_TZ '{ANALYSIS_TZ}' is not a known timezone: {e}"

    if TYPO_CACHE_SIZE <= 0:
        return False, f"TYPO_CACHE_SIZE must be positive, got {TYPO_CACHE_SIZE}"

    if MAX_GAPS_REPORTED <= 0:
        return False, f"MAX_GAPS_REPORTED must be positive, got {MAX_GAPS_REPORTED}"

    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return False, f"LOG_LEVEL '{LOG_LEVEL}' is not a logging level"

    return True, "Configuration valid"


if __name__ == "__main__":
    # Print config summary for debugging
    import json
    print("ChatSignal v1 Configuration:")
    print(json.dumps(get_config_summary(), indent=2))
    print()
    valid, msg = validate_config()
    print(f"Validation: {msg}")

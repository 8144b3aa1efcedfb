"""
Tests for configuration loading and validation
"""

from datetime import timezone

import pytest
from chatsignal import config


def test_default_config_valid():
    """Defaults pass validation."""
    valid, msg = config.validate_config()
    assert valid, msg


def test_utc_timezone():
    assert config.get_timezone() is timezone.utc


def test_unknown_timezone_invalid(monkeypatch):
    monkeypatch.setattr(config, "ANALYSIS_TZ", "Mars/Olympus_Mons")
    valid, msg = config.validate_config()
    assert not valid
    assert "Mars/Olympus_Mons" in msg


@pytest.mark.parametrize("name,value", [
    ("TYPO_CACHE_SIZE", 0),
    ("MAX_GAPS_REPORTED", -1),
    ("LOG_LEVEL", "LOUD"),
])
def test_invalid_settings(monkeypatch, name, value):
    monkeypatch.setattr(config, name, value)
    valid, _ = config.validate_config()
    assert not valid


def test_config_summary():
    summary = config.get_config_summary()
    assert summary["time"]["timezone"] == "UTC"
    assert set(summary) == {"time", "sentiment", "logging", "report"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

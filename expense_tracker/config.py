"""Configuration management for the expense tracker.

This module centralizes all configuration values including display
defaults and environment variable overrides.
"""

from __future__ import annotations

import logging
import os

# Display
CURRENCY_SYMBOL = os.getenv("EXPENSE_TRACKER_CURRENCY", "₹")
PAGE_TITLE = "Expense Tracker"
PAGE_ICON = "💰"

# Average-per-day divisor.  A fixed month length, not a calendar computation.
DEFAULT_AVERAGE_DAYS = 30


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


AVERAGE_DAYS = _int_from_env("EXPENSE_TRACKER_AVERAGE_DAYS", DEFAULT_AVERAGE_DAYS)

# Logging
LOG_LEVEL = os.getenv("EXPENSE_TRACKER_LOG_LEVEL", "WARNING")


def get_log_level() -> int:
    """Resolve ``LOG_LEVEL`` to a :mod:`logging` level constant.

    Unknown names fall back to ``logging.WARNING``.
    """
    level = logging.getLevelName(LOG_LEVEL.strip().upper())
    return level if isinstance(level, int) else logging.WARNING

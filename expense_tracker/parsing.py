"""Parsing of form drafts into numbers.

Two policies exist and are intentionally different:

* the overall budget and transaction amounts are *rejected* unless they
  parse to a positive, finite number (the caller leaves state unchanged);
* a category budget that fails to parse is *accepted as zero*.

None of these helpers raise on bad input.
"""

from __future__ import annotations

import math
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """Convert a draft value to a finite float.

    Args:
        value: Text from an input widget, or an already numeric value

    Returns:
        The parsed float, or ``None`` if the value is blank, not numeric,
        NaN or infinite

    Example:
        >>> parse_number(" 12.5 ")
        12.5
        >>> parse_number("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_positive(value: Any) -> Optional[float]:
    """Parse a value that must be strictly positive; ``None`` otherwise."""
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def parse_budget(value: Any) -> Optional[float]:
    """Parse an overall budget draft.  Zero or less is rejected."""
    return parse_positive(value)


def parse_amount(value: Any) -> Optional[float]:
    """Parse a transaction amount draft.  Zero or less is rejected."""
    return parse_positive(value)


def parse_category_budget(value: Any) -> float:
    """Parse a category budget draft, substituting ``0.0`` for bad input.

    Negative numbers are also stored as zero so a category budget is never
    below zero.
    """
    number = parse_number(value)
    if number is None or number < 0:
        return 0.0
    return number

"""Formatting utilities for currency, percentage and text display."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

from . import config
from .models import Transaction


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    return 'Infinity' if value > 0 else '-Infinity'


def format_number(amount: Union[float, int]) -> str:
    """Render a number the short way: no separators and no padding zeros.

    Integral values drop the decimal part; anything else uses the shortest
    digits that round-trip.  Magnitudes from 1e-6 up to 1e21 are written
    out positionally, the rest in exponent form without padded exponents.

    Example:
        >>> format_number(250.0)
        '250'
        >>> format_number(250.5)
        '250.5'
        >>> format_number(1e-7)
        '1e-7'
    """
    value = float(amount)
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), 'f')
    mantissa, exponent = text.split('e')
    return f"{mantissa}e{int(exponent):+d}"


def format_currency(amount: Union[float, int], symbol: Optional[str] = None) -> str:
    """Format an amount with the currency glyph prefix.

    Args:
        amount: The amount to format; negative values keep their sign
        symbol: Currency glyph (defaults to ``config.CURRENCY_SYMBOL``)

    Returns:
        Formatted currency string (e.g., "₹1234.5" or "₹-250")
    """
    glyph = config.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{glyph}{format_number(amount)}"


def to_fixed(value: Union[float, int], places: int) -> str:
    """Fixed-point string with ties rounded away from zero.

    Non-finite values come back as ``Infinity``/``NaN`` text.  The decimal
    precision grows with the magnitude so large values never overflow it.

    Example:
        >>> to_fixed(12.25, 1)
        '12.3'
    """
    number = float(value)
    if not math.isfinite(number):
        return _non_finite_text(number)
    exact = Decimal(number)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_percentage(value: Union[float, int], places: int = 1) -> str:
    """Percentage text without the ``%`` sign.

    The overall budget uses one decimal place, category budgets none.
    """
    return to_fixed(value, places)


def escape_currency_for_markdown(text: str) -> str:
    """Escape dollar signs so Streamlit markdown does not start LaTeX math."""
    return text.replace("$", "\\$")


def format_transaction_meta(transaction: Transaction) -> str:
    """Second line of a history row, e.g. ``"Food • 2026-10-19"``."""
    return f"{transaction.category} • {transaction.date.isoformat()}"

"""Monetary helpers.

Balances are :class:`~decimal.Decimal` values held at exactly two
decimal places, so that encoding and decoding a record never drifts.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT: Decimal = Decimal("0.01")
ZERO: Decimal = Decimal("0.00")

# Leading decimal number, the way a C ``%lf`` conversion reads it.
_LEADING_DECIMAL = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def to_money(value: Decimal | int | str) -> Decimal:
    """Quantize *value* to cents, rounding half up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def parse_money_lenient(text: str) -> Decimal:
    """Parse the leading number in *text*; anything unreadable is ``0.00``."""
    match = _LEADING_DECIMAL.match(text)
    if match is None:
        return ZERO
    try:
        return to_money(match.group(1))
    except InvalidOperation:
        return ZERO


def parse_money_strict(text: str) -> Decimal | None:
    """Parse *text* as a complete finite decimal, or return ``None``."""
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = Decimal(stripped)
        if not value.is_finite():
            return None
        return to_money(value)
    except InvalidOperation:
        return None


def format_money(value: Decimal) -> str:
    """Render *value* with exactly two decimals (``"12.50"``)."""
    return f"{value:.2f}"

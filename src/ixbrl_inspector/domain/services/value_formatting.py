# src/ixbrl_inspector/domain/services/value_formatting.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Display formatting for numeric fact values.

Purpose:
    Turn raw numeric fact values into grouped display numbers with the
    number of fractional digits implied by the fact's decimals.

Layer:
    domain/services

Notes:
    - Unparseable numbers are returned unchanged; nothing here raises.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

__all__ = ["format_number"]


def format_number(value: str | None, decimals: int | str | None) -> str:
    """Format a numeric fact value with thousands separators.

    Args:
        value: Raw numeric value (e.g., "1234567.891").
        decimals: XBRL decimals. Integers fix the number of fractional digits
            (rounding half up); negative decimals round to a whole number.
            Unspecified and infinite decimals keep the digits as reported.

    Returns:
        Formatted number, or ``value`` unchanged if it is not numeric.
    """
    if value is None:
        return ""
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return value
    if not number.is_finite():
        return value

    if isinstance(decimals, int) and not isinstance(decimals, bool):
        places = max(decimals, 0)
        try:
            rounded = number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return f"{number:,f}"
        return f"{rounded:,.{places}f}"
    return f"{number:,f}"

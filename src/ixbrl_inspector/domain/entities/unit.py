# src/ixbrl_inspector/domain/entities/unit.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Unit descriptors.

Purpose:
    Decode the unit aspect of a numeric fact. Raw unit values are a measure
    QName (``"iso4217:USD"``, ``"xbrli:shares"``) or a compound of measures
    (``"iso4217:USD/xbrli:shares"``, ``"utr:m*utr:m"``).

Layer:
    domain/entities
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ixbrl_inspector.domain.entities.qname import QName
from ixbrl_inspector.domain.enums.aspects import ISO4217_NAMESPACE

if TYPE_CHECKING:
    from ixbrl_inspector.domain.interfaces.report import Report

__all__ = ["Unit", "CURRENCY_SYMBOLS"]

CURRENCY_SYMBOLS: Final[dict[str, str]] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "CHF": "CHF",
    "CAD": "CA$",
    "AUD": "A$",
}


def _split_measures(text: str) -> tuple[str, ...]:
    return tuple(m.strip() for m in text.split("*") if m.strip())


class Unit:
    """Unit of a numeric fact.

    Attributes:
        raw:
            Undecoded unit value as stored on the fact.
        numerators:
            Measure names in the numerator, in written order.
        denominators:
            Measure names in the denominator, in written order.
    """

    def __init__(self, report: Report, raw: str) -> None:
        """Decode a raw unit value.

        Args:
            report: Report used to resolve measure prefixes.
            raw: Raw unit aspect value.
        """
        self._report = report
        self.raw = raw
        num, _, den = raw.partition("/")
        self.numerators = _split_measures(num)
        self.denominators = _split_measures(den)

    def is_single_measure(self) -> bool:
        """Return True if the unit is one measure with no denominator."""
        return len(self.numerators) == 1 and not self.denominators

    def measure_qname(self) -> QName | None:
        """Return the QName of a single-measure unit, else None."""
        if not self.is_single_measure():
            return None
        return self._report.qname(self.numerators[0])

    def is_monetary(self) -> bool:
        """Return True for a single ISO 4217 currency measure."""
        qname = self.measure_qname()
        return qname is not None and qname.namespace == ISO4217_NAMESPACE

    def currency_code(self) -> str | None:
        """Return the ISO 4217 code of a monetary unit, else None."""
        if not self.is_monetary():
            return None
        qname = self.measure_qname()
        return qname.localname if qname is not None else None

    def value_label(self) -> str:
        """Return the display label: a currency symbol or the measure local names."""
        code = self.currency_code()
        if code is not None:
            return CURRENCY_SYMBOLS.get(code, code)
        label = "*".join(self._report.qname(m).localname for m in self.numerators)
        if self.denominators:
            label += "/" + "*".join(self._report.qname(m).localname for m in self.denominators)
        return label

    def __repr__(self) -> str:
        return f"Unit({self.raw!r})"

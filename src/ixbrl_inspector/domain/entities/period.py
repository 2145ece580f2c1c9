# src/ixbrl_inspector/domain/entities/period.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Reporting periods.

Purpose:
    Decode the period aspect of a fact (``"2023-01-01/2024-01-01"`` for a
    duration, ``"2024-01-01"`` for an instant), render it for humans, and
    decide whether two periods cover an equivalent span of time.

Layer:
    domain/entities

Notes:
    - XBRL end dates and instants written without a time denote midnight at
      the *start* of that day, so "2024-01-01" is displayed as "31 Dec 2023".
    - Duration equivalence compares elapsed spans only, never anchor dates:
      two durations are equivalent when their lengths differ by at most
      ``tolerance * max(span_a, span_b)`` days. The default tolerance of 10%
      absorbs month lengths, leap days and 52/53-week years while keeping
      months, quarters, half years and years apart.
    - A raw value that cannot be decoded yields an invalid Period rather than
      an error. Invalid periods are equivalent only to periods with the same
      raw string, which keeps the relation reflexive and symmetric.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Final

__all__ = ["Period", "DEFAULT_SPAN_TOLERANCE"]

DEFAULT_SPAN_TOLERANCE: Final[float] = 0.1

_SECONDS_PER_DAY: Final[float] = 86400.0


def _parse_point(text: str) -> tuple[datetime, bool]:
    """Parse one ISO date or date-time.

    Returns:
        Tuple of (naive datetime, whether the text carried only a date).

    Raises:
        ValueError: If ``text`` is not an ISO-8601 date or date-time.
    """
    text = text.strip()
    value = datetime.fromisoformat(text)
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value, "T" not in text and " " not in text


def _human(value: datetime, *, date_only: bool) -> str:
    """Render a point in time, moving date-only end points back one day."""
    if date_only:
        value -= timedelta(days=1)
        return f"{value.day} {value:%b %Y}"
    if (value.hour, value.minute, value.second) == (0, 0, 0):
        return f"{value.day} {value:%b %Y}"
    return f"{value.day} {value:%b %Y %H:%M:%S}"


class Period:
    """Instant or duration period decoded from a raw aspect value.

    Attributes:
        raw:
            The undecoded period string as stored on the fact.
        start:
            Start of a duration (naive UTC datetime); None for instants and
            invalid periods.
        end:
            End of a duration, or the instant itself; None when invalid.
    """

    __slots__ = ("raw", "start", "end", "_end_date_only")

    def __init__(self, raw: str | None) -> None:
        """Decode a raw period value.

        Args:
            raw: ``"<start>/<end>"`` or ``"<instant>"``. None or unparseable
                values produce an invalid period.
        """
        self.raw = raw
        self.start: datetime | None = None
        self.end: datetime | None = None
        self._end_date_only = False

        if not isinstance(raw, str) or not raw.strip():
            return
        start_text, sep, end_text = raw.partition("/")
        try:
            if sep:
                start, _ = _parse_point(start_text)
                end, end_date_only = _parse_point(end_text)
                if end < start:
                    return
                self.start = start
            else:
                end, end_date_only = _parse_point(start_text)
        except ValueError:
            self.start = None
            return
        self.end, self._end_date_only = end, end_date_only

    # ------------------------------------------------------------------ #
    # Shape                                                              #
    # ------------------------------------------------------------------ #

    def is_valid(self) -> bool:
        """Return True if the raw value decoded to an instant or duration."""
        return self.end is not None

    def is_instant(self) -> bool:
        """Return True for a valid instant period."""
        return self.end is not None and self.start is None

    def is_duration(self) -> bool:
        """Return True for a valid duration period."""
        return self.start is not None

    def from_date(self) -> datetime | None:
        """Return the start of a duration, or None for instants."""
        return self.start

    def to_date(self) -> datetime | None:
        """Return the end of a duration, or the instant."""
        return self.end

    def span_days(self) -> float | None:
        """Return the elapsed span in days (0 for instants, None if invalid)."""
        if self.end is None:
            return None
        if self.start is None:
            return 0.0
        return (self.end - self.start).total_seconds() / _SECONDS_PER_DAY

    # ------------------------------------------------------------------ #
    # Comparison                                                         #
    # ------------------------------------------------------------------ #

    def is_equivalent_duration(
        self,
        other: Period,
        *,
        tolerance: float = DEFAULT_SPAN_TOLERANCE,
    ) -> bool:
        """Return True if both periods cover an equivalent span of time.

        Args:
            other: Period to compare against.
            tolerance: Allowed relative difference between the two spans.

        Returns:
            True for two instants, False for an instant against a duration,
            and for two durations True when their spans are within
            ``tolerance`` of the longer one.
        """
        if not self.is_valid() or not other.is_valid():
            return self.raw == other.raw
        if self.is_instant() or other.is_instant():
            return self.is_instant() and other.is_instant()

        span_a = self.span_days() or 0.0
        span_b = other.span_days() or 0.0
        return abs(span_a - span_b) <= tolerance * max(span_a, span_b)

    # ------------------------------------------------------------------ #
    # Rendering                                                          #
    # ------------------------------------------------------------------ #

    def to_string(self) -> str:
        """Render the period for display ("1 Jan 2023 to 31 Dec 2023")."""
        if self.end is None:
            return self.raw or ""
        end = _human(self.end, date_only=self._end_date_only)
        if self.start is None:
            return end
        # Start dates are inclusive and never shifted.
        start = _human(self.start, date_only=False)
        return f"{start} to {end}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Period({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

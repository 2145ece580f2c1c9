# tests/unit/domain/entities/test_period.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Tests for Period decoding, rendering and duration equivalence."""

from __future__ import annotations

from datetime import datetime

import pytest

from ixbrl_inspector.domain.entities.period import Period


def test_duration_decoding() -> None:
    p = Period("2023-01-01/2024-01-01")

    assert p.is_valid()
    assert p.is_duration()
    assert not p.is_instant()
    assert p.from_date() == datetime(2023, 1, 1)
    assert p.to_date() == datetime(2024, 1, 1)
    assert p.span_days() == 365.0


def test_instant_decoding() -> None:
    p = Period("2024-01-01")

    assert p.is_valid()
    assert p.is_instant()
    assert p.from_date() is None
    assert p.span_days() == 0.0


@pytest.mark.parametrize("raw", [None, "", "not-a-date", "2024-13-01", "2024-01-01/garbage"])
def test_undecodable_values_are_invalid(raw: str | None) -> None:
    p = Period(raw)

    assert not p.is_valid()
    assert not p.is_instant()
    assert not p.is_duration()
    assert p.span_days() is None


def test_end_before_start_is_invalid() -> None:
    assert not Period("2024-01-01/2023-01-01").is_valid()


def test_date_only_end_points_display_as_previous_day() -> None:
    assert Period("2023-01-01/2024-01-01").to_string() == "1 Jan 2023 to 31 Dec 2023"
    assert Period("2024-01-01").to_string() == "31 Dec 2023"
    assert str(Period("2024-03-01")) == "29 Feb 2024"


def test_date_times_are_displayed_as_written() -> None:
    assert Period("2024-01-01T00:00:00").to_string() == "1 Jan 2024"
    assert Period("2024-01-01T12:30:00").to_string() == "1 Jan 2024 12:30:00"


def test_invalid_period_renders_raw_text() -> None:
    assert Period("garbage").to_string() == "garbage"
    assert Period(None).to_string() == ""


def test_timezone_aware_values_normalize_to_utc() -> None:
    p = Period("2024-01-01T02:00:00+02:00")

    assert p.to_date() == datetime(2024, 1, 1, 0, 0)


def test_instants_are_equivalent_to_each_other_only() -> None:
    instant = Period("2024-01-01")
    other_instant = Period("2022-06-30")
    duration = Period("2023-01-01/2024-01-01")

    assert instant.is_equivalent_duration(other_instant)
    assert not instant.is_equivalent_duration(duration)
    assert not duration.is_equivalent_duration(instant)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        # Years, including a leap year.
        ("2023-01-01/2024-01-01", "2024-01-01/2025-01-01", True),
        # Quarters of different lengths.
        ("2024-01-01/2024-04-01", "2024-04-01/2024-07-01", True),
        ("2024-01-01/2024-04-01", "2023-10-01/2024-01-01", True),
        # Quarter vs half year vs year.
        ("2024-01-01/2024-04-01", "2024-01-01/2024-07-01", False),
        ("2024-01-01/2024-07-01", "2024-01-01/2025-01-01", False),
        # 52/53-week fiscal years.
        ("2022-12-31/2023-12-30", "2023-12-30/2025-01-04", True),
        # Month vs quarter.
        ("2024-02-01/2024-03-01", "2024-01-01/2024-04-01", False),
    ],
)
def test_duration_equivalence(a: str, b: str, expected: bool) -> None:
    assert Period(a).is_equivalent_duration(Period(b)) is expected
    assert Period(b).is_equivalent_duration(Period(a)) is expected


def test_tolerance_is_configurable() -> None:
    month = Period("2024-02-01/2024-03-01")
    five_weeks = Period("2024-02-01/2024-03-07")

    assert not month.is_equivalent_duration(five_weeks, tolerance=0.1)
    assert month.is_equivalent_duration(five_weeks, tolerance=0.2)


def test_invalid_periods_are_equivalent_only_by_raw_text() -> None:
    assert Period("garbage").is_equivalent_duration(Period("garbage"))
    assert not Period("garbage").is_equivalent_duration(Period("other"))
    assert not Period("garbage").is_equivalent_duration(Period("2024-01-01"))
    assert not Period("2024-01-01").is_equivalent_duration(Period("garbage"))


def test_equality_uses_raw_text() -> None:
    assert Period("2024-01-01") == Period("2024-01-01")
    assert Period("2024-01-01") != Period("2024-01-01T00:00:00")
    assert len({Period("2024-01-01"), Period("2024-01-01")}) == 1

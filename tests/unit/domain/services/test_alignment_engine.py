# tests/unit/domain/services/test_alignment_engine.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Tests for the fact alignment engine."""

from __future__ import annotations

from typing import Any

from ixbrl_inspector.adapters.report.viewer_data_report import ViewerDataReport
from ixbrl_inspector.domain.services.alignment_engine import (
    FactAlignmentIndex,
    aspect_maps_aligned,
)
from ixbrl_inspector.domain.value_objects.coverage import Coverage

BASE: dict[str, Any] = {"c": "us-gaap:Revenues", "p": "2020", "u": "iso4217:USD"}


def _with(**changes: Any) -> dict[str, Any]:
    return {**BASE, **changes}


def test_reflexive_under_empty_and_missing_coverage() -> None:
    assert aspect_maps_aligned(BASE, dict(BASE), {})
    assert aspect_maps_aligned(BASE, dict(BASE), None)
    assert aspect_maps_aligned(BASE, dict(BASE), Coverage())


def test_cardinality_mismatch_rejects_before_coverage() -> None:
    wider = _with(**{"ex:Axis": "ex:Member"})

    assert not aspect_maps_aligned(BASE, wider, {"ex:Axis": None})
    assert not aspect_maps_aligned(wider, BASE, {"ex:Axis": None, "u": None})


def test_wildcard_ignores_both_values() -> None:
    eur = _with(u="iso4217:EUR")

    assert aspect_maps_aligned(BASE, eur, {"u": None})
    assert aspect_maps_aligned(_with(u="anything"), eur, {"u": None})


def test_membership_constraint_checks_only_the_query_fact() -> None:
    eur = _with(u="iso4217:EUR")
    allowed = {"u": ["iso4217:USD", "iso4217:GBP"]}

    assert aspect_maps_aligned(BASE, eur, allowed)
    assert not aspect_maps_aligned(eur, BASE, allowed)


def test_scalar_constraint_checks_only_the_query_fact() -> None:
    eur = _with(u="iso4217:EUR")

    assert aspect_maps_aligned(BASE, eur, {"u": "iso4217:USD"})
    assert not aspect_maps_aligned(eur, BASE, {"u": "iso4217:USD"})


def test_uncovered_aspects_must_match_exactly() -> None:
    assert not aspect_maps_aligned(BASE, _with(p="2021"), {"u": None})
    assert not aspect_maps_aligned(BASE, _with(c="us-gaap:Assets"), {})


def test_asymmetric_dimension_sets_do_not_align() -> None:
    a = _with(**{"ex:AxisA": "ex:M"})
    b = _with(**{"ex:AxisB": "ex:M"})

    assert not aspect_maps_aligned(a, b, {})
    assert not aspect_maps_aligned(b, a, {})


def test_missing_key_never_equals_a_nil_value() -> None:
    a = _with(**{"ex:TypedAxis": None})
    b = _with(**{"ex:OtherAxis": None})

    assert not aspect_maps_aligned(a, b, {})


def test_index_excludes_self_and_keeps_order(report: ViewerDataReport) -> None:
    index = FactAlignmentIndex(report.facts())
    usd = report.get_fact("f-usd")

    assert len(index) == len(report)
    assert [f.id for f in index.find_aligned(usd, {"u": None})] == ["f-eur", "f-usd-dup"]
    assert [f.id for f in index.find_aligned(usd, {"p": None})] == [
        "f-usd-dup",
        "f-usd-prior",
        "f-usd-q4",
        "f-nil",
    ]


def test_index_candidates_share_aspect_count(report: ViewerDataReport) -> None:
    index = FactAlignmentIndex(report.facts())
    seg = report.get_fact("f-seg-a")

    assert {f.id for f in index.candidates(seg)} == {"f-seg-a", "f-seg-b", "f-typed"}


def test_covered_keys_are_not_looked_up_on_the_other_fact() -> None:
    a = _with(**{"ex:AxisA": "ex:M"})
    b = _with(**{"ex:AxisB": "ex:N"})

    assert aspect_maps_aligned(a, b, {"ex:AxisA": None})
    assert not aspect_maps_aligned(b, a, {"ex:AxisA": None})

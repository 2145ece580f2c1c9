# src/ixbrl_inspector/application/use_cases/facts/find_aligned_facts.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Use case: Find facts aligned with a query fact.

Purpose:
    Given a fact id and a coverage mapping, return the other facts of the
    report that are aligned with it. With ``same_duration_only`` the result
    keeps only facts whose period spans an equivalent length of time, which
    together with a period wildcard (``{"p": None}``) yields the same series
    reported for other periods.

Layer:
    application
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ixbrl_inspector.application.schemas.dto.fact import AlignedFactsDTO, FactSummaryDTO
from ixbrl_inspector.application.use_cases.facts.describe_fact import resolve_fact
from ixbrl_inspector.domain.entities.fact import Fact
from ixbrl_inspector.domain.entities.period import DEFAULT_SPAN_TOLERANCE
from ixbrl_inspector.domain.interfaces.report import Report
from ixbrl_inspector.domain.value_objects.coverage import Coverage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FindAlignedFactsRequest:
    """Request parameters for an alignment query.

    Attributes:
        fact_id:
            Identifier of the query fact.
        coverage:
            Coverage mapping: aspect key to ``None`` (wildcard), a scalar, or
            a collection of admitted values.
        same_duration_only:
            Keep only facts whose period is duration-equivalent to the query
            fact's period.
    """

    fact_id: str
    coverage: Mapping[str, Any] = field(default_factory=dict)
    same_duration_only: bool = False


def to_summary_dto(fact: Fact) -> FactSummaryDTO:
    """Project a Fact onto a :class:`FactSummaryDTO`."""
    return FactSummaryDTO(
        id=fact.id,
        concept=fact.concept_name(),
        period=fact.period_string(),
        readable_value=fact.readable_value(),
        dimensions=fact.dimensions(),
    )


class FindAlignedFactsUseCase:
    """Find the facts aligned with a query fact.

    Args:
        report:
            Report to search.
        span_tolerance:
            Relative tolerance for duration equivalence.

    Raises:
        UnknownFactError:
            If the query id does not name a fact.
    """

    def __init__(self, report: Report, *, span_tolerance: float = DEFAULT_SPAN_TOLERANCE) -> None:
        """Initialize the use case.

        Args:
            report: Report to search.
            span_tolerance: Relative tolerance for duration equivalence.
        """
        self._report = report
        self._span_tolerance = span_tolerance

    def execute(self, req: FindAlignedFactsRequest) -> AlignedFactsDTO:
        """Execute the alignment query.

        Args:
            req: Query fact, coverage and duration filter.

        Returns:
            The aligned facts, in report order.
        """
        coverage = Coverage.from_mapping(req.coverage)
        logger.info(
            "facts.find_aligned.start",
            extra={
                "extra": {
                    "fact_id": req.fact_id,
                    "covered": sorted(coverage),
                    "same_duration_only": req.same_duration_only,
                }
            },
        )

        fact = resolve_fact(self._report, req.fact_id)
        aligned = self._report.get_aligned_facts(fact, coverage.to_mapping())
        if req.same_duration_only:
            aligned = [
                other
                for other in aligned
                if fact.is_equivalent_duration(other, tolerance=self._span_tolerance)
            ]

        logger.info(
            "facts.find_aligned.success",
            extra={"extra": {"fact_id": fact.id, "aligned": len(aligned)}},
        )
        return AlignedFactsDTO(
            fact_id=fact.id,
            coverage=coverage.to_mapping(),
            same_duration_only=req.same_duration_only,
            items=[to_summary_dto(other) for other in aligned],
        )

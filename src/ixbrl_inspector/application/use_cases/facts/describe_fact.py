# src/ixbrl_inspector/application/use_cases/facts/describe_fact.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Use case: Describe a single fact.

Purpose:
    Look a fact up by id and project everything the fact model knows about
    it (display value, accuracy, period, dimensions, footnotes, concept
    neighbours, duplicates) into a :class:`FactDetailDTO`.

Layer:
    application

Notes:
    - Read-only; the report is provided by the caller.
    - Surface-only application concerns here (logging, DTO mapping,
      validation). All semantics live on the Fact entity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ixbrl_inspector.application.schemas.dto.fact import FactDetailDTO
from ixbrl_inspector.domain.entities.fact import Fact
from ixbrl_inspector.domain.exceptions.report import UnknownFactError
from ixbrl_inspector.domain.interfaces.report import Report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DescribeFactRequest:
    """Request parameters for fact description.

    Attributes:
        fact_id:
            Identifier of the fact within the report.
    """

    fact_id: str


def resolve_fact(report: Report, fact_id: str) -> Fact:
    """Return the Fact with ``fact_id`` from ``report``.

    Raises:
        UnknownFactError: If the id is empty or names no fact.
    """
    fact_id = fact_id.strip()
    if not fact_id:
        raise UnknownFactError("Fact id must not be empty.")
    item = report.get_item_by_id(fact_id)
    if not isinstance(item, Fact):
        raise UnknownFactError(
            f"Unknown fact id: {fact_id}",
            details={"fact_id": fact_id, "is_footnote": item is not None},
        )
    return item


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def to_detail_dto(fact: Fact) -> FactDetailDTO:
    """Project a Fact onto a :class:`FactDetailDTO`."""
    unit = fact.unit()
    entity = fact.aspect("e")
    return FactDetailDTO(
        id=fact.id,
        concept=fact.concept_name(),
        label=fact.get_label_or_name("std"),
        value=fact.value(),
        readable_value=fact.readable_value(),
        readable_accuracy=fact.readable_accuracy(),
        decimals=fact.decimals(),
        period=fact.period_string(),
        period_from=_iso(fact.period_from()),
        period_to=_iso(fact.period_to()),
        unit=unit.value() if unit is not None else None,
        entity=entity.value() if entity is not None else None,
        is_numeric=fact.is_numeric(),
        is_monetary=fact.is_monetary_value(),
        is_nil=fact.is_nil(),
        is_invalid=fact.is_invalid_ix_value(),
        is_hidden=fact.is_hidden(),
        is_html_hidden=fact.is_html_hidden(),
        escaped=fact.escaped(),
        dimensions=fact.dimensions(),
        footnote_ids=fact.footnote_ids(),
        linked_fact_ids=[f.id for f in fact.linked_facts],
        wider_concepts=fact.wider_concepts(),
        narrower_concepts=fact.narrower_concepts(),
        duplicate_ids=[f.id for f in fact.duplicates()],
    )


class DescribeFactUseCase:
    """Describe a fact of a report.

    Args:
        report:
            Report to read from.

    Raises:
        UnknownFactError:
            If the requested id does not name a fact.
    """

    def __init__(self, report: Report) -> None:
        """Initialize the use case.

        Args:
            report: Report to read from.
        """
        self._report = report

    def execute(self, req: DescribeFactRequest) -> FactDetailDTO:
        """Execute the description.

        Args:
            req: Identifies the fact.

        Returns:
            The fact's :class:`FactDetailDTO`.
        """
        logger.info("facts.describe.start", extra={"extra": {"fact_id": req.fact_id}})
        fact = resolve_fact(self._report, req.fact_id)
        dto = to_detail_dto(fact)
        logger.info(
            "facts.describe.success",
            extra={
                "extra": {
                    "fact_id": fact.id,
                    "concept": dto.concept,
                    "duplicates": len(dto.duplicate_ids),
                }
            },
        )
        return dto

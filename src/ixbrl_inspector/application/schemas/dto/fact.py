# src/ixbrl_inspector/application/schemas/dto/fact.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application DTOs for fact inspection.

Synopsis:
    Strict (Pydantic v2) DTOs returned by the fact use cases and rendered by
    the CLI as JSON.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from ixbrl_inspector.application.schemas.dto.base import BaseDTO


class FactDetailDTO(BaseDTO):
    """Full description of a single fact.

    Attributes:
        id: Fact identifier.
        concept: Prefixed concept name.
        label: Standard label, falling back to the concept name.
        value: Raw value exactly as reported (None when nil).
        readable_value: Value rendered for display.
        readable_accuracy: Accuracy rendered for display.
        decimals: Decimals as an int, "INF", or None when unspecified.
        period: Period rendered for display.
        period_from: ISO start of a duration period.
        period_to: ISO end of the period, or the instant.
        unit: Raw unit value for numeric facts.
        entity: Entity identifier.
        dimensions: Dimension QName to member (or typed value).
        footnote_ids: Footnote references, in stored order.
        linked_fact_ids: Ids of facts that reference this fact.
        wider_concepts: Wider concepts across all link roles.
        narrower_concepts: Narrower concepts across all link roles.
        duplicate_ids: Ids of facts aligned under the empty coverage.
    """

    # Raw values are reported verbatim, surrounding whitespace included.
    model_config = ConfigDict(str_strip_whitespace=False)

    id: str
    concept: str
    label: str
    value: str | None = None
    readable_value: str
    readable_accuracy: str
    decimals: int | str | None = None
    period: str
    period_from: str | None = None
    period_to: str | None = None
    unit: str | None = None
    entity: str | None = None
    is_numeric: bool = False
    is_monetary: bool = False
    is_nil: bool = False
    is_invalid: bool = False
    is_hidden: bool = False
    is_html_hidden: bool = False
    escaped: bool = False
    dimensions: dict[str, Any] = Field(default_factory=dict)
    footnote_ids: list[str] = Field(default_factory=list)
    linked_fact_ids: list[str] = Field(default_factory=list)
    wider_concepts: list[str] = Field(default_factory=list)
    narrower_concepts: list[str] = Field(default_factory=list)
    duplicate_ids: list[str] = Field(default_factory=list)


class FactSummaryDTO(BaseDTO):
    """Compact projection of a fact used in result lists."""

    id: str
    concept: str
    period: str
    readable_value: str
    dimensions: dict[str, Any] = Field(default_factory=dict)


class AlignedFactsDTO(BaseDTO):
    """Facts aligned with a query fact.

    Attributes:
        fact_id: Query fact identifier.
        coverage: Coverage applied, as a plain mapping.
        same_duration_only: Whether results were restricted to facts whose
            period is duration-equivalent to the query fact's.
        items: Aligned facts in report order.
    """

    fact_id: str
    coverage: dict[str, Any] = Field(default_factory=dict)
    same_duration_only: bool = False
    items: list[FactSummaryDTO] = Field(default_factory=list)

# src/ixbrl_inspector/domain/entities/fact.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Disclosed facts.

Purpose:
    Expose one fact of a report: its identity, raw and display values,
    resolved aspects, accuracy, footnotes, concept hierarchy neighbours, and
    the alignment test used for duplicate detection.

Layer:
    domain/entities

Notes:
    - A Fact is a view over the report's immutable fact record. The only
      state it owns is the append-only ``linked_facts`` list.
    - Nothing here raises on malformed records: invalid values surface via
      :meth:`Fact.is_invalid_ix_value` and a fixed display string, missing
      aspects resolve to None, and label misses fall back to names.
    - ``decimals`` has three states: an int, None (unspecified, recorded as
      JSON null), and INF when the record carries no decimals at all.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Literal, TypeAlias

from ixbrl_inspector.domain.entities.aspect import Aspect
from ixbrl_inspector.domain.entities.concept import Concept
from ixbrl_inspector.domain.entities.period import DEFAULT_SPAN_TOLERANCE, Period
from ixbrl_inspector.domain.entities.qname import QName
from ixbrl_inspector.domain.entities.unit import Unit
from ixbrl_inspector.domain.enums.aspects import (
    INVALID_IX_VALUE,
    NAMESPACE_SEPARATOR,
    STANDARD_LABEL_ROLE,
    WIDER_NARROWER_ARCROLE,
    AspectKey,
)
from ixbrl_inspector.domain.services.alignment_engine import aspect_maps_aligned
from ixbrl_inspector.domain.services.value_formatting import format_number
from ixbrl_inspector.domain.value_objects.coverage import Coverage

if TYPE_CHECKING:
    from ixbrl_inspector.domain.entities.footnote import Footnote
    from ixbrl_inspector.domain.interfaces.message_catalog import MessageCatalog
    from ixbrl_inspector.domain.interfaces.report import Report

__all__ = ["Fact", "INF", "Decimals"]

INF: Final = "INF"

Decimals: TypeAlias = "int | None | Literal['INF']"

INVALID_VALUE_TEXT: Final[str] = "Invalid value"
NIL_TEXT: Final[str] = "nil"
_NO_NAME: Final[str] = "noName"


class Fact:
    """Single disclosed data point of a report.

    Attributes:
        id:
            Stable identifier, unique within the report.
        ix_node:
            Presentation flags of the fact's element in the document.
        linked_facts:
            Facts that are the source of relationships to this fact, in
            arrival order. Append-only.
    """

    def __init__(self, report: Report, fact_id: str, *, messages: MessageCatalog) -> None:
        """Initialize a fact view.

        Args:
            report: Report owning the fact record. Not owned by the fact.
            fact_id: Identifier of the fact within the report.
            messages: Catalog used for accuracy names and markers.
        """
        self._record: Mapping[str, Any] = report.get_fact_record(fact_id)
        self._aspects: Mapping[str, Any] = self._record.get("a") or {}
        self._report = report
        self._messages = messages
        self.ix_node = report.get_ix_node_for_item_id(fact_id)
        self.id = fact_id
        self.linked_facts: list[Fact] = []

    def report(self) -> Report:
        """Return the owning report."""
        return self._report

    # ------------------------------------------------------------------ #
    # Concept                                                            #
    # ------------------------------------------------------------------ #

    def concept_name(self) -> str:
        """Return the prefixed concept name."""
        return str(self._aspects.get(AspectKey.CONCEPT.value, ""))

    def concept(self) -> Concept:
        """Return the concept descriptor."""
        return self._report.get_concept(self.concept_name())

    def concept_qname(self) -> QName:
        """Return the concept's qualified name."""
        return self._report.qname(self.concept_name())

    def get_label(self, role_prefix: str = STANDARD_LABEL_ROLE, with_prefix: bool = False) -> str | None:
        """Return the concept label for a role, if there is one."""
        return self._report.get_label(self.concept_name(), role_prefix, with_prefix)

    def get_label_or_name(
        self,
        role_prefix: str = STANDARD_LABEL_ROLE,
        with_prefix: bool = False,
    ) -> str:
        """Return the concept label for a role, falling back to the concept name."""
        return self._report.get_label_or_name(self.concept_name(), role_prefix, with_prefix)

    def is_text_block(self) -> bool:
        """Return True if the concept is a text block."""
        return self.concept().is_text_block

    def is_enumeration(self) -> bool:
        """Return True if the concept is an enumeration."""
        return self.concept().is_enumeration

    # ------------------------------------------------------------------ #
    # Period                                                             #
    # ------------------------------------------------------------------ #

    def period(self) -> Period:
        """Return the fact's period."""
        return Period(self._aspects.get(AspectKey.PERIOD.value))

    def period_string(self) -> str:
        """Return the period rendered for display."""
        return self.period().to_string()

    def period_from(self) -> datetime | None:
        """Return the period start (None for instants)."""
        return self.period().from_date()

    def period_to(self) -> datetime | None:
        """Return the period end or instant."""
        return self.period().to_date()

    def is_equivalent_duration(
        self,
        other: Fact,
        *,
        tolerance: float = DEFAULT_SPAN_TOLERANCE,
    ) -> bool:
        """Return True if both facts' periods cover an equivalent span."""
        return self.period().is_equivalent_duration(other.period(), tolerance=tolerance)

    # ------------------------------------------------------------------ #
    # Values                                                             #
    # ------------------------------------------------------------------ #

    def value(self) -> str | None:
        """Return the raw value (None when nil or absent)."""
        return self._record.get("v")

    def decimals(self) -> Decimals:
        """Return decimals: an int, None when unspecified, INF when absent."""
        if "d" not in self._record:
            return INF
        return self._record["d"]

    def is_nil(self) -> bool:
        """Return True if the raw value is explicitly nil."""
        return "v" in self._record and self._record["v"] is None

    def is_invalid_ix_value(self) -> bool:
        """Return True if the fact carries the invalid-value error tag."""
        return self._record.get("err") == INVALID_IX_VALUE

    def is_numeric(self) -> bool:
        """Return True if the fact has a unit aspect."""
        return AspectKey.UNIT.value in self._aspects

    def unit(self) -> Aspect | None:
        """Return the unit aspect of a numeric fact."""
        if not self.is_numeric():
            return None
        return self.aspect(AspectKey.UNIT.value)

    def is_monetary_value(self) -> bool:
        """Return True if the fact is numeric with an ISO 4217 currency unit."""
        unit = self.unit()
        if unit is None or unit.value() is None:
            return False
        return Unit(self._report, unit.value()).is_monetary()

    def readable_value(self) -> str:
        """Return the value rendered for display.

        Branches are evaluated in order: invalid value, numeric (with nil and
        unit placement), nil, escaped markup, enumeration, plain value.
        """
        v = self.value()
        if self.is_invalid_ix_value():
            return INVALID_VALUE_TEXT

        if self.is_numeric():
            if self.is_nil():
                return NIL_TEXT
            formatted = format_number(v, self.decimals())
            unit = self.unit()
            unit_label = unit.value_label() if unit is not None else ""
            if not unit_label:
                return formatted
            if self.is_monetary_value():
                return f"{unit_label} {formatted}"
            return f"{formatted} {unit_label}"

        if self.is_nil():
            return NIL_TEXT

        if v is None:
            return ""

        if self.escaped():
            return self._report.flatten_markup(v)

        if self.is_enumeration():
            labels = [
                self._report.get_label_or_name(qn, STANDARD_LABEL_ROLE) for qn in v.split()
            ]
            return ", ".join(labels)

        return v

    def readable_accuracy(self) -> str:
        """Return the fact's accuracy rendered for display.

        Returns:
            A "not applicable" marker for non-numeric or nil facts, an
            "infinite" or "unspecified" marker for INF / None decimals, and
            otherwise the decimals followed by an accuracy name when one is
            known (``"-3 (thousands)"``, ``"2 (cents)"``).
        """
        if not self.is_numeric() or self.is_nil():
            return self._messages.resolve("common.notApplicable")

        d = self.decimals()
        if d == INF:
            return self._messages.resolve("common.accuracyInfinite")
        if d is None:
            return self._messages.resolve("common.unspecified")

        name = self._messages.resolve(f"currencies:accuracy{d}", fallback=_NO_NAME)
        if self.is_monetary_value() and d == 2:
            currency = self._report.qname(self.unit().value()).localname  # type: ignore[union-attr]
            name = self._messages.resolve(f"currencies:cents{currency}", fallback=name)

        if name == _NO_NAME:
            return str(d)
        return f"{d} ({name})"

    # ------------------------------------------------------------------ #
    # Aspects                                                            #
    # ------------------------------------------------------------------ #

    def raw_aspects(self) -> Mapping[str, Any]:
        """Return a read-only view of the raw aspect map."""
        return MappingProxyType(dict(self._aspects))

    def aspects(self) -> list[Aspect]:
        """Return every aspect of the fact, in aspect-map order."""
        return [Aspect(k, v, self._report) for k, v in self._aspects.items()]

    def aspect(self, key: str) -> Aspect | None:
        """Return the aspect for ``key``, or None if the fact lacks it."""
        if key not in self._aspects:
            return None
        return Aspect(key, self._aspects[key], self._report)

    def dimensions(self) -> dict[str, Any]:
        """Return the dimension entries of the aspect map."""
        return {k: v for k, v in self._aspects.items() if NAMESPACE_SEPARATOR in k}

    def identifier(self) -> QName:
        """Return the entity identifier as a qualified name."""
        return self._report.qname(str(self._aspects.get(AspectKey.ENTITY.value, "")))

    # ------------------------------------------------------------------ #
    # Alignment                                                          #
    # ------------------------------------------------------------------ #

    def is_aligned(self, other: Fact, covered_aspects: Mapping[str, Any] | Coverage | None) -> bool:
        """Return True if ``other`` reports the same fact up to the covered aspects.

        Args:
            other: Fact to compare against.
            covered_aspects: Coverage mapping (``None`` wildcard, scalar, or
                collection of admitted values per aspect key).
        """
        return aspect_maps_aligned(self._aspects, other._aspects, covered_aspects)

    def duplicates(self) -> list[Fact]:
        """Return the facts aligned with this one under the report's default coverage."""
        return self._report.get_aligned_facts(self)

    # ------------------------------------------------------------------ #
    # Relationships                                                      #
    # ------------------------------------------------------------------ #

    def wider_concepts(self) -> list[str]:
        """Return wider concepts across every extended link role."""
        concepts: list[str] = []
        parents_by_elr = self._report.get_parent_relationships(
            self.concept_name(), WIDER_NARROWER_ARCROLE
        )
        for rels in parents_by_elr.values():
            concepts.extend(rel.src for rel in rels)
        return concepts

    def narrower_concepts(self) -> list[str]:
        """Return narrower concepts across every extended link role."""
        concepts: list[str] = []
        children_by_elr = self._report.get_child_relationships(
            self.concept_name(), WIDER_NARROWER_ARCROLE
        )
        for rels in children_by_elr.values():
            concepts.extend(rel.t for rel in rels)
        return concepts

    def footnote_ids(self) -> list[str]:
        """Return the stored footnote reference ids."""
        return list(self._record.get("fn") or ())

    def footnotes(self) -> list[Fact | Footnote | None]:
        """Return the items referenced by the fact's footnote ids, in order."""
        return [self._report.get_item_by_id(fn) for fn in self.footnote_ids()]

    # Facts that are the source of relationships to this fact.
    def add_linked_fact(self, fact: Fact) -> None:
        """Record an in-bound relationship source."""
        self.linked_facts.append(fact)

    # ------------------------------------------------------------------ #
    # Presentation                                                       #
    # ------------------------------------------------------------------ #

    def escaped(self) -> bool:
        """Return True if the fact's markup was escaped."""
        return self.ix_node.escaped

    def is_hidden(self) -> bool:
        """Return True if the fact is in the hidden section."""
        return self.ix_node.is_hidden

    def is_html_hidden(self) -> bool:
        """Return True if the fact is hidden by HTML styling."""
        return self.ix_node.html_hidden

    def __repr__(self) -> str:
        return f"Fact(id={self.id!r}, concept={self.concept_name()!r})"

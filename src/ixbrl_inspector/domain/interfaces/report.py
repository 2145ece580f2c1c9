# src/ixbrl_inspector/domain/interfaces/report.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Report interface.

Purpose:
    Define the read-only handle through which facts resolve everything that
    is not stored on the fact itself: concept and unit metadata, labels,
    presentation flags, concept relationships, the duplicate index, footnote
    items and markup flattening. Implementations live in the adapters layer.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from ixbrl_inspector.domain.entities.concept import Concept
from ixbrl_inspector.domain.entities.ix_node import IXNode
from ixbrl_inspector.domain.entities.qname import QName
from ixbrl_inspector.domain.value_objects.relationship import ConceptRelationship

if TYPE_CHECKING:
    from ixbrl_inspector.domain.entities.fact import Fact
    from ixbrl_inspector.domain.entities.footnote import Footnote


class Report(Protocol):
    """Protocol for the report a Fact is constructed against."""

    def get_fact_record(self, fact_id: str) -> Mapping[str, Any]:
        """Return the raw fact record (``a``, ``v``, ``d``, ``err``, ``fn`` keys)."""

    def get_ix_node_for_item_id(self, item_id: str) -> IXNode:
        """Return presentation flags for an item's element in the document."""

    def get_concept(self, name: str) -> Concept:
        """Return the concept descriptor for a prefixed concept name."""

    def qname(self, name: str) -> QName:
        """Resolve a prefixed name against the report's prefix table."""

    def get_label(
        self,
        concept: str,
        role_prefix: str,
        with_prefix: bool = False,
    ) -> str | None:
        """Return a concept label for the given role, or None if there is none."""

    def get_label_or_name(
        self,
        concept: str,
        role_prefix: str,
        with_prefix: bool = False,
    ) -> str:
        """Return a concept label for the given role, falling back to its name."""

    def get_parent_relationships(
        self,
        concept: str,
        arcrole: str,
    ) -> Mapping[str, Sequence[ConceptRelationship]]:
        """Return, per extended link role, the edges whose target is ``concept``."""

    def get_child_relationships(
        self,
        concept: str,
        arcrole: str,
    ) -> Mapping[str, Sequence[ConceptRelationship]]:
        """Return, per extended link role, the edges whose source is ``concept``."""

    def get_aligned_facts(
        self,
        fact: Fact,
        covered_aspects: Mapping[str, Any] | None = None,
    ) -> list[Fact]:
        """Return the other facts aligned with ``fact`` under a coverage."""

    def get_item_by_id(self, item_id: str) -> Fact | Footnote | None:
        """Return the fact or footnote with the given id, if any."""

    def flatten_markup(self, markup: str) -> str:
        """Return escaped fact markup as a single line of plain text."""

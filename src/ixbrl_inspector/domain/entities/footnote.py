# src/ixbrl_inspector/domain/entities/footnote.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Footnote items referenced by facts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ixbrl_inspector.domain.entities.fact import Fact
    from ixbrl_inspector.domain.interfaces.report import Report

__all__ = ["Footnote"]


class Footnote:
    """Footnote item that one or more facts link to.

    Attributes:
        id:
            Item identifier, unique within the report.
        title:
            Display title for the footnote.
        linked_facts:
            Facts that reference this footnote, in the order they were linked.
    """

    def __init__(self, report: Report, footnote_id: str, title: str) -> None:
        """Initialize a footnote item.

        Args:
            report: Report the footnote belongs to.
            footnote_id: Item identifier.
            title: Display title.
        """
        self._report = report
        self.id = footnote_id
        self.title = title
        self.linked_facts: list[Fact] = []

    def report(self) -> Report:
        """Return the owning report."""
        return self._report

    def add_linked_fact(self, fact: Fact) -> None:
        """Record a fact that references this footnote."""
        self.linked_facts.append(fact)

    def is_hidden(self) -> bool:
        """Return True if the footnote's element is in the hidden section."""
        return self._report.get_ix_node_for_item_id(self.id).is_hidden

    def __repr__(self) -> str:
        return f"Footnote(id={self.id!r})"

# src/ixbrl_inspector/adapters/report/viewer_data_report.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""In-memory report over viewer data (adapter).

Purpose:
    Implement the domain ``Report`` protocol over the JSON payload that an
    inline XBRL viewer document embeds:

        {
          "prefixes": {"us-gaap": "http://fasb.org/us-gaap/2023", ...},
          "concepts": {"us-gaap:Revenues": {"labels": {"std": {"en": "..."}}}},
          "facts":    {"f1": {"a": {...}, "v": "1000", "d": -3, "fn": [...]}},
          "rels":     {"w-n": {"<elr>": {"<src>": [{"t": "<target>"}]}}},
          "languages": {"en": "English"}
        }

Layer:
    adapters/report

Notes:
    - Every Fact is built on construction. A post-pass then resolves footnote
      references: an id naming a fact links to that fact, any other id
      becomes a Footnote item (created once). Each target records the
      referencing fact via ``add_linked_fact``.
    - Parent relationship lookups use an inverse index built lazily per
      arcrole on first use.
    - Fact ordering everywhere follows the payload's ``facts`` ordering.
    - Escaped fact markup is flattened with lxml (see ``markup_text``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from ixbrl_inspector.adapters.locale.message_catalog import StaticMessageCatalog
from ixbrl_inspector.adapters.report.markup_text import flatten_html
from ixbrl_inspector.domain.entities.concept import Concept
from ixbrl_inspector.domain.entities.fact import Fact
from ixbrl_inspector.domain.entities.footnote import Footnote
from ixbrl_inspector.domain.entities.ix_node import DEFAULT_IX_NODE, IXNode
from ixbrl_inspector.domain.entities.qname import QName
from ixbrl_inspector.domain.exceptions.report import UnknownFactError, ViewerDataError
from ixbrl_inspector.domain.interfaces.message_catalog import MessageCatalog
from ixbrl_inspector.domain.services.alignment_engine import FactAlignmentIndex
from ixbrl_inspector.domain.value_objects.relationship import ConceptRelationship

__all__ = ["ViewerDataReport"]

logger = logging.getLogger(__name__)

_FALLBACK_LANGUAGE = "en"

RelationshipsByElr = dict[str, list[ConceptRelationship]]


class ViewerDataReport:
    """Report backed by a decoded viewer-data payload.

    Args:
        data: Decoded viewer JSON.
        ix_nodes: Presentation flags per item id, typically derived from the
            HTML document. Items without an entry get default flags.
        messages: Message catalog handed to every Fact. Defaults to the
            built-in English catalog.
        language: Preferred label language. Falls back to English, then to
            any available language.

    Raises:
        ViewerDataError: If the payload has no usable ``facts`` map or a fact
            record is not an object.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        *,
        ix_nodes: Mapping[str, IXNode] | None = None,
        messages: MessageCatalog | None = None,
        language: str | None = None,
    ) -> None:
        facts = data.get("facts") if isinstance(data, Mapping) else None
        if not isinstance(facts, Mapping):
            raise ViewerDataError(
                "Viewer data has no 'facts' map.",
                details={"keys": sorted(data) if isinstance(data, Mapping) else []},
            )
        bad = [fid for fid, rec in facts.items() if not isinstance(rec, Mapping)]
        if bad:
            raise ViewerDataError(
                "Viewer data contains malformed fact records.",
                details={"fact_ids": bad[:10], "count": len(bad)},
            )

        self._data = data
        self._fact_records: Mapping[str, Mapping[str, Any]] = facts
        self._prefixes: Mapping[str, str] = data.get("prefixes") or {}
        self._concepts: Mapping[str, Mapping[str, Any]] = data.get("concepts") or {}
        self._rels: Mapping[str, Mapping[str, Mapping[str, Sequence[Mapping[str, Any]]]]] = (
            data.get("rels") or {}
        )
        self._ix_nodes: Mapping[str, IXNode] = ix_nodes or {}
        self._messages: MessageCatalog = messages or StaticMessageCatalog()
        self.language = language

        self._concept_cache: dict[str, Concept] = {}
        self._inverse_rels: dict[str, dict[str, RelationshipsByElr]] = {}
        self._alignment_index: FactAlignmentIndex | None = None

        self._facts: dict[str, Fact] = {
            fid: Fact(self, fid, messages=self._messages) for fid in self._fact_records
        }
        self._footnotes: dict[str, Footnote] = {}
        self._link_footnotes()

        logger.info(
            "report.viewer_data.loaded",
            extra={
                "extra": {
                    "facts": len(self._facts),
                    "footnotes": len(self._footnotes),
                    "concepts": len(self._concepts),
                    "arcroles": sorted(self._rels),
                }
            },
        )

    def _link_footnotes(self) -> None:
        for fact in self._facts.values():
            for item_id in fact.footnote_ids():
                target: Fact | Footnote | None = self._facts.get(item_id)
                if target is None:
                    target = self._footnotes.get(item_id)
                if target is None:
                    title = self._messages.resolve(
                        "factDetails.footnoteTitle",
                        params={"id": item_id},
                        fallback=f"Footnote {item_id}",
                    )
                    target = Footnote(self, item_id, title)
                    self._footnotes[item_id] = target
                target.add_linked_fact(fact)

    # ------------------------------------------------------------------ #
    # Items                                                              #
    # ------------------------------------------------------------------ #

    def facts(self) -> list[Fact]:
        """Return every fact in payload order."""
        return list(self._facts.values())

    def footnotes(self) -> list[Footnote]:
        """Return every footnote item in first-reference order."""
        return list(self._footnotes.values())

    def get_fact(self, fact_id: str) -> Fact:
        """Return the fact with the given id.

        Raises:
            UnknownFactError: If the report has no such fact.
        """
        try:
            return self._facts[fact_id]
        except KeyError:
            raise UnknownFactError(
                f"Unknown fact id: {fact_id}", details={"fact_id": fact_id}
            ) from None

    def get_item_by_id(self, item_id: str) -> Fact | Footnote | None:
        return self._facts.get(item_id) or self._footnotes.get(item_id)

    def get_fact_record(self, fact_id: str) -> Mapping[str, Any]:
        try:
            return self._fact_records[fact_id]
        except KeyError:
            raise UnknownFactError(
                f"Unknown fact id: {fact_id}", details={"fact_id": fact_id}
            ) from None

    def get_ix_node_for_item_id(self, item_id: str) -> IXNode:
        return self._ix_nodes.get(item_id, DEFAULT_IX_NODE)

    def flatten_markup(self, markup: str) -> str:
        return flatten_html(markup)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self._facts.values())

    def __len__(self) -> int:
        return len(self._facts)

    # ------------------------------------------------------------------ #
    # Concepts and labels                                                #
    # ------------------------------------------------------------------ #

    def get_concept(self, name: str) -> Concept:
        concept = self._concept_cache.get(name)
        if concept is None:
            concept = Concept.from_data(name, self._concepts.get(name))
            self._concept_cache[name] = concept
        return concept

    def qname(self, name: str) -> QName:
        return QName.parse(name, self._prefixes)

    def get_label(self, concept: str, role_prefix: str, with_prefix: bool = False) -> str | None:
        """Return a concept label, preferring the report language, then English."""
        by_lang = self.get_concept(concept).labels.get(role_prefix)
        if not by_lang:
            return None
        label = None
        for lang in (self.language, _FALLBACK_LANGUAGE):
            if lang and lang in by_lang:
                label = by_lang[lang]
                break
        if label is None:
            label = next(iter(by_lang.values()))
        if with_prefix:
            prefix = self.qname(concept).prefix
            if prefix:
                return f"({prefix}) {label}"
        return label

    def get_label_or_name(self, concept: str, role_prefix: str, with_prefix: bool = False) -> str:
        label = self.get_label(concept, role_prefix, with_prefix)
        return label if label is not None else concept

    # ------------------------------------------------------------------ #
    # Relationships                                                      #
    # ------------------------------------------------------------------ #

    def get_child_relationships(self, concept: str, arcrole: str) -> RelationshipsByElr:
        children: RelationshipsByElr = {}
        for elr, by_src in (self._rels.get(arcrole) or {}).items():
            rels = by_src.get(concept)
            if rels:
                children[elr] = [
                    ConceptRelationship(src=concept, t=r["t"], weight=r.get("w")) for r in rels
                ]
        return children

    def get_parent_relationships(self, concept: str, arcrole: str) -> RelationshipsByElr:
        inverse = self._inverse_rels.get(arcrole)
        if inverse is None:
            inverse = self._build_inverse(arcrole)
            self._inverse_rels[arcrole] = inverse
        return {elr: list(rels) for elr, rels in inverse.get(concept, {}).items()}

    def _build_inverse(self, arcrole: str) -> dict[str, RelationshipsByElr]:
        inverse: dict[str, RelationshipsByElr] = {}
        for elr, by_src in (self._rels.get(arcrole) or {}).items():
            for src, rels in by_src.items():
                for r in rels:
                    rel = ConceptRelationship(src=src, t=r["t"], weight=r.get("w"))
                    inverse.setdefault(rel.t, {}).setdefault(elr, []).append(rel)
        return inverse

    # ------------------------------------------------------------------ #
    # Alignment                                                          #
    # ------------------------------------------------------------------ #

    def get_aligned_facts(
        self,
        fact: Fact,
        covered_aspects: Mapping[str, Any] | None = None,
    ) -> list[Fact]:
        if self._alignment_index is None:
            self._alignment_index = FactAlignmentIndex(self._facts.values())
        return self._alignment_index.find_aligned(fact, covered_aspects)

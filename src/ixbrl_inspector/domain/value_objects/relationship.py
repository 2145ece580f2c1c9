# src/ixbrl_inspector/domain/value_objects/relationship.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Concept relationship edges.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ConceptRelationship"]


@dataclass(frozen=True, slots=True)
class ConceptRelationship:
    """Directed edge between two concepts within one extended link role.

    Attributes:
        src: Source (parent / wider) concept name, e.g. ``"us-gaap:Assets"``.
        t: Target (child / narrower) concept name.
        weight: Optional arc weight, when the network carries one.
    """

    src: str
    t: str
    weight: float | None = None

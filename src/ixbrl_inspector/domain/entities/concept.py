# src/ixbrl_inspector/domain/entities/concept.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Taxonomy concept descriptors.

Purpose:
    Hold the per-concept metadata that the viewer data carries for each
    concept used in a report: labels by role and language, and the flags the
    fact model needs (text block, enumeration, dimension type).

Layer:
    domain/entities
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ixbrl_inspector.domain.enums.aspects import DimensionType

__all__ = ["Concept"]


@dataclass(frozen=True)
class Concept:
    """Concept metadata as seen by the fact model.

    Attributes:
        name:
            Prefixed concept name (e.g., "us-gaap:Revenues").
        labels:
            Mapping of label role prefix (e.g., "std", "doc") to a mapping of
            language code to label text.
        is_text_block:
            Whether the concept is a text block item type.
        is_enumeration:
            Whether the concept's values are enumeration member QNames.
        dimension_type:
            Explicit or typed, when the concept is a dimension; otherwise None.
    """

    name: str
    labels: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    is_text_block: bool = False
    is_enumeration: bool = False
    dimension_type: DimensionType | None = None

    def __post_init__(self) -> None:
        """Copy label tables so the concept does not alias caller data."""
        object.__setattr__(
            self,
            "labels",
            {role: dict(by_lang) for role, by_lang in self.labels.items()},
        )

    @classmethod
    def from_data(cls, name: str, data: Mapping[str, Any] | None) -> Concept:
        """Build a Concept from a viewer-data ``concepts`` entry.

        Args:
            name: Prefixed concept name.
            data: Raw concept entry (``labels``, ``t``, ``e``, ``d`` keys), or
                None for concepts the report does not describe.

        Returns:
            Concept descriptor; unknown or malformed entries produce a bare
            concept with no labels and all flags off.
        """
        if not data:
            return cls(name=name)
        dim = data.get("d")
        dimension_type = DimensionType(dim) if dim in {d.value for d in DimensionType} else None
        labels = data.get("labels")
        return cls(
            name=name,
            labels=labels if isinstance(labels, Mapping) else {},
            is_text_block=bool(data.get("t")),
            is_enumeration=bool(data.get("e")),
            dimension_type=dimension_type,
        )

    def is_dimension(self) -> bool:
        """Return True if the concept is a dimension."""
        return self.dimension_type is not None

    def is_typed_dimension(self) -> bool:
        """Return True if the concept is a typed dimension."""
        return self.dimension_type is DimensionType.TYPED

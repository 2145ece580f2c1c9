# src/ixbrl_inspector/domain/services/alignment_engine.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fact alignment engine (domain kernel).

Purpose:
    Decide whether two facts are "aligned": reports of the same underlying
    fact that differ only in the aspects a caller deliberately covers. Also
    provide a small index that answers "which facts are aligned with this
    one" across a whole report.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No I/O.
        * Reads raw (undecoded) aspect maps only.
    - The algorithm, given aspect maps ``f`` and ``of`` and a coverage:
        1. Different aspect counts never align.
        2. For every key of ``f``:
             covered by Wildcard  -> accepted, ``of`` is not consulted;
             covered by OneOf     -> ``f``'s value must be a member;
             covered by Equals    -> ``f``'s value must equal it;
             not covered          -> ``f``'s value must equal ``of``'s.
        3. The first failing key rejects.
    - A key missing from ``of`` compares as absent, which never equals a
      present value (None included).
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ixbrl_inspector.domain.value_objects.coverage import Coverage

if TYPE_CHECKING:
    from ixbrl_inspector.domain.entities.fact import Fact

__all__ = ["aspect_maps_aligned", "FactAlignmentIndex"]

_ABSENT = object()


def aspect_maps_aligned(
    f_aspects: Mapping[str, Any],
    of_aspects: Mapping[str, Any],
    coverage: Coverage | Mapping[str, Any] | None = None,
) -> bool:
    """Return True if two raw aspect maps are aligned under a coverage.

    Args:
        f_aspects: Aspect map of the fact being tested.
        of_aspects: Aspect map of the fact it is compared against.
        coverage: Compiled coverage, a plain coverage mapping, or None for
            "nothing covered".

    Returns:
        True if the maps are aligned.
    """
    if len(f_aspects) != len(of_aspects):
        return False

    compiled = Coverage.from_mapping(coverage)
    for key, value in f_aspects.items():
        constraint = compiled.get(key)
        if constraint is not None:
            if not constraint.admits(value):
                return False
        elif value != of_aspects.get(key, _ABSENT):
            return False
    return True


class FactAlignmentIndex:
    """Index of facts bucketed by aspect count.

    Only facts with the same number of aspects can ever align, so each query
    scans a single bucket.

    Args:
        facts: Facts to index, in report order.
    """

    def __init__(self, facts: Iterable[Fact]) -> None:
        """Build the index.

        Args:
            facts: Facts to index. Iteration order is preserved in results.
        """
        self._buckets: dict[int, list[Fact]] = defaultdict(list)
        for fact in facts:
            self._buckets[len(fact.raw_aspects())].append(fact)

    def candidates(self, fact: Fact) -> list[Fact]:
        """Return the indexed facts that pass the cardinality check for ``fact``."""
        return list(self._buckets.get(len(fact.raw_aspects()), ()))

    def find_aligned(
        self,
        fact: Fact,
        coverage: Coverage | Mapping[str, Any] | None = None,
    ) -> list[Fact]:
        """Return the other facts aligned with ``fact``.

        Args:
            fact: Query fact. Facts with the same id are excluded.
            coverage: Coverage applied to the query fact's aspects.

        Returns:
            Aligned facts in index order.
        """
        compiled = Coverage.from_mapping(coverage)
        f_aspects = fact.raw_aspects()
        return [
            other
            for other in self._buckets.get(len(f_aspects), ())
            if other.id != fact.id and aspect_maps_aligned(f_aspects, other.raw_aspects(), compiled)
        ]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

# src/ixbrl_inspector/domain/value_objects/coverage.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Coverage specifications for fact alignment.

Purpose:
    Represent the caller's description of which aspects may vary (and how)
    when two facts are tested for alignment.

    Callers hand in a plain mapping from aspect key to one of:

        * ``None``                        accept any value (wildcard).
        * a scalar                        the fact's value must equal it.
        * a list / tuple / set of values  the fact's value must be a member.

    The mapping is compiled once per query into tagged constraints so the
    comparison loop never inspects runtime types.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

__all__ = [
    "Wildcard",
    "Equals",
    "OneOf",
    "AspectConstraint",
    "WILDCARD",
    "Coverage",
    "EMPTY_COVERAGE",
    "compile_constraint",
]


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Constraint that admits every value, including a missing one."""

    def admits(self, value: Any) -> bool:
        """Return True unconditionally."""
        return True


@dataclass(frozen=True, slots=True)
class Equals:
    """Constraint that admits exactly one raw value.

    Attributes:
        value: The only admitted raw aspect value.
    """

    value: Any

    def admits(self, value: Any) -> bool:
        """Return True if ``value`` equals the constrained value."""
        return bool(value == self.value)


@dataclass(frozen=True, slots=True)
class OneOf:
    """Constraint that admits any member of a fixed collection.

    Attributes:
        values: Admitted raw aspect values. Stored as a tuple so that
            unhashable raw values are still supported.
    """

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        """Normalize ``values`` to a tuple."""
        object.__setattr__(self, "values", tuple(self.values))

    def admits(self, value: Any) -> bool:
        """Return True if ``value`` is one of the admitted values."""
        return value in self.values


AspectConstraint: TypeAlias = Wildcard | Equals | OneOf

WILDCARD = Wildcard()

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def compile_constraint(spec: Any) -> AspectConstraint:
    """Compile one coverage entry into a tagged constraint.

    Args:
        spec: ``None``, a collection of admitted values, a scalar, or an
            already compiled constraint.

    Returns:
        The equivalent :data:`AspectConstraint`.
    """
    if spec is None:
        return WILDCARD
    if isinstance(spec, (Wildcard, Equals, OneOf)):
        return spec
    if isinstance(spec, _COLLECTION_TYPES):
        return OneOf(tuple(spec))
    return Equals(spec)


@dataclass(frozen=True, slots=True)
class Coverage:
    """Compiled coverage specification.

    Attributes:
        constraints: Mapping from aspect key to its compiled constraint. Keys
            absent from the mapping are not covered and must match exactly.
    """

    constraints: Mapping[str, AspectConstraint] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the constraint mapping into a private dict copy."""
        object.__setattr__(self, "constraints", dict(self.constraints))

    @classmethod
    def from_mapping(cls, covered_aspects: Mapping[str, Any] | Coverage | None) -> Coverage:
        """Build a Coverage from a caller-supplied mapping.

        Args:
            covered_aspects: Plain coverage mapping, an existing Coverage, or
                ``None`` for "nothing covered".

        Returns:
            Compiled Coverage.
        """
        if covered_aspects is None:
            return EMPTY_COVERAGE
        if isinstance(covered_aspects, Coverage):
            return covered_aspects
        return cls({key: compile_constraint(spec) for key, spec in covered_aspects.items()})

    def get(self, key: str) -> AspectConstraint | None:
        """Return the constraint for ``key``, or None if the key is not covered."""
        return self.constraints.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.constraints

    def __iter__(self) -> Iterator[str]:
        return iter(self.constraints)

    def __len__(self) -> int:
        return len(self.constraints)

    def to_mapping(self) -> dict[str, Any]:
        """Return the plain-mapping form (``None`` / scalar / list) of this coverage."""
        plain: dict[str, Any] = {}
        for key, constraint in self.constraints.items():
            if isinstance(constraint, Wildcard):
                plain[key] = None
            elif isinstance(constraint, OneOf):
                plain[key] = list(constraint.values)
            else:
                plain[key] = constraint.value
        return plain


EMPTY_COVERAGE = Coverage()

# src/ixbrl_inspector/domain/entities/aspect.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fact aspects.

Purpose:
    Wrap one entry of a fact's aspect map and resolve its raw value into the
    matching domain value: a concept or entity QName, a Period, a Unit, or a
    dimension member.

Layer:
    domain/entities

Notes:
    - Resolution is pure: it reads the report's tables and never caches.
    - Dimension keys are any keys containing a namespace separator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from ixbrl_inspector.domain.entities.period import Period
from ixbrl_inspector.domain.entities.qname import QName
from ixbrl_inspector.domain.entities.unit import Unit
from ixbrl_inspector.domain.enums.aspects import (
    NAMESPACE_SEPARATOR,
    STANDARD_LABEL_ROLE,
    AspectKey,
)

if TYPE_CHECKING:
    from ixbrl_inspector.domain.interfaces.report import Report

__all__ = ["Aspect"]

_ASPECT_NAMES: Final[dict[str, str]] = {
    AspectKey.CONCEPT.value: "Concept",
    AspectKey.PERIOD.value: "Period",
    AspectKey.UNIT.value: "Unit",
    AspectKey.ENTITY.value: "Entity",
    AspectKey.LANGUAGE.value: "Language",
}


class Aspect:
    """Single qualifier of a fact.

    Attributes:
        key:
            Aspect map key (``"c"``, ``"p"``, ``"u"``, ``"e"``, ``"l"`` or a
            dimension QName).
        raw_value:
            Undecoded value as stored on the fact. May be None for a nil
            typed dimension or an empty unit.
    """

    def __init__(self, key: str, raw_value: Any, report: Report) -> None:
        """Initialize an aspect.

        Args:
            key: Aspect map key.
            raw_value: Raw value from the fact's aspect map.
            report: Report used for resolution.
        """
        self.key = key
        self.raw_value = raw_value
        self._report = report

    def name(self) -> str:
        """Return the aspect key."""
        return self.key

    def value(self) -> Any:
        """Return the raw value."""
        return self.raw_value

    def is_dimension(self) -> bool:
        """Return True if the aspect is a taxonomy-defined dimension."""
        return NAMESPACE_SEPARATOR in self.key

    def is_typed_dimension(self) -> bool:
        """Return True if the aspect is a typed dimension."""
        return self.is_dimension() and self._report.get_concept(self.key).is_typed_dimension()

    def is_nil(self) -> bool:
        """Return True if the raw value is None."""
        return self.raw_value is None

    def resolve(self) -> QName | Period | Unit | str | None:
        """Resolve the raw value into its domain value.

        Returns:
            A QName for concept, entity and explicit-dimension aspects, a
            Period for the period aspect, a Unit for the unit aspect, and the
            raw value for typed dimensions and the language aspect. None when
            the raw value is None.
        """
        raw = self.raw_value
        if raw is None:
            return None
        if self.key == AspectKey.PERIOD.value:
            return Period(raw)
        if self.key == AspectKey.UNIT.value:
            return Unit(self._report, raw)
        if self.key in (AspectKey.CONCEPT.value, AspectKey.ENTITY.value):
            return self._report.qname(raw)
        if self.is_dimension() and not self.is_typed_dimension():
            return self._report.qname(raw)
        return raw

    def label(self) -> str:
        """Return a display name for the aspect itself."""
        if self.is_dimension():
            return self._report.get_label_or_name(self.key, STANDARD_LABEL_ROLE)
        return _ASPECT_NAMES.get(self.key, self.key)

    def value_label(self, role_prefix: str = STANDARD_LABEL_ROLE) -> str:
        """Return a display label for the aspect's value.

        Args:
            role_prefix: Label role used for concept and member labels.

        Returns:
            Display text; typed dimensions with a nil value render as "nil".
        """
        raw = self.raw_value
        if self.key == AspectKey.CONCEPT.value:
            return self._report.get_label_or_name(raw, role_prefix)
        if self.is_dimension():
            if self.is_typed_dimension():
                return "nil" if raw is None else str(raw)
            if raw is None:
                return ""
            return self._report.get_label_or_name(raw, role_prefix)
        if raw is None:
            return ""
        if self.key == AspectKey.UNIT.value:
            return Unit(self._report, raw).value_label()
        if self.key == AspectKey.PERIOD.value:
            return Period(raw).to_string()
        if self.key == AspectKey.ENTITY.value:
            return self._report.qname(raw).localname
        return str(raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aspect):
            return NotImplemented
        return self.key == other.key and self.raw_value == other.raw_value

    def __hash__(self) -> int:
        return hash((self.key, repr(self.raw_value)))

    def __repr__(self) -> str:
        return f"Aspect({self.key!r}, {self.raw_value!r})"

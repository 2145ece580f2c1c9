# src/ixbrl_inspector/domain/entities/qname.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Qualified names.

Purpose:
    Resolve prefixed names (``"us-gaap:Revenues"``) used throughout viewer
    data into prefix / namespace / local-name triples.

Layer:
    domain/entities
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ixbrl_inspector.domain.enums.aspects import NAMESPACE_SEPARATOR

__all__ = ["QName"]


@dataclass(frozen=True, slots=True)
class QName:
    """Qualified name resolved against a report's prefix table.

    Attributes:
        prefix:
            Namespace prefix as written in the source name, or None when the
            name is unprefixed.
        localname:
            Local part of the name.
        namespace:
            Namespace URI bound to the prefix, or None when the prefix is not
            declared in the report.
    """

    prefix: str | None
    localname: str
    namespace: str | None

    def __post_init__(self) -> None:
        """Hook for QName invariants.

        Unresolvable prefixes are legal here: a QName with ``namespace=None``
        simply never matches a namespace comparison.
        """
        return

    @classmethod
    def parse(cls, name: str, prefixes: Mapping[str, str]) -> QName:
        """Split a prefixed name and resolve its namespace.

        Args:
            name: Prefixed (``"iso4217:USD"``) or bare (``"shares"``) name.
            prefixes: Mapping from prefix to namespace URI.

        Returns:
            The resolved QName.
        """
        prefix, sep, local = name.partition(NAMESPACE_SEPARATOR)
        if not sep:
            return cls(prefix=None, localname=name, namespace=prefixes.get(""))
        return cls(prefix=prefix, localname=local, namespace=prefixes.get(prefix))

    def __str__(self) -> str:
        if self.prefix is None:
            return self.localname
        return f"{self.prefix}{NAMESPACE_SEPARATOR}{self.localname}"

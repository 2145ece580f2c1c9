# src/ixbrl_inspector/domain/enums/aspects.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Aspect keys and fixed XBRL identifiers.

Purpose:
    Define the reserved aspect keys used in viewer-data aspect maps, and the
    handful of fixed identifiers (namespaces, arcroles, error tags) the fact
    model compares against.

Layer:
    domain/enums

Notes:
    - Any aspect key containing NAMESPACE_SEPARATOR is a dimension; the
      reserved keys below never contain it.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class AspectKey(str, Enum):
    """Reserved, non-dimensional aspect keys."""

    CONCEPT = "c"
    PERIOD = "p"
    UNIT = "u"
    ENTITY = "e"
    LANGUAGE = "l"


class DimensionType(str, Enum):
    """Dimension flavour as recorded on a dimension concept."""

    EXPLICIT = "e"
    TYPED = "t"


RESERVED_ASPECT_KEYS: Final[frozenset[str]] = frozenset(k.value for k in AspectKey)

NAMESPACE_SEPARATOR: Final[str] = ":"

ISO4217_NAMESPACE: Final[str] = "http://www.xbrl.org/2003/iso4217"

WIDER_NARROWER_ARCROLE: Final[str] = "w-n"

INVALID_IX_VALUE: Final[str] = "INVALID_IX_VALUE"

STANDARD_LABEL_ROLE: Final[str] = "std"

__all__ = [
    "AspectKey",
    "DimensionType",
    "RESERVED_ASPECT_KEYS",
    "NAMESPACE_SEPARATOR",
    "ISO4217_NAMESPACE",
    "WIDER_NARROWER_ARCROLE",
    "INVALID_IX_VALUE",
    "STANDARD_LABEL_ROLE",
]

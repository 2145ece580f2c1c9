# src/ixbrl_inspector/adapters/locale/message_catalog.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Static message catalog (adapter).

Purpose:
    Implement the domain ``MessageCatalog`` protocol over in-process message
    tables, using i18next key conventions:

        "common.notApplicable"       -> default namespace ("translation")
        "currencies:accuracy-3"      -> "currencies" namespace
        "Footnote {{id}}"            -> ``{{name}}`` interpolation

Layer:
    adapters/locale

Notes:
    - A missing key resolves to ``fallback`` when given, otherwise to the key
      itself; resolution never raises.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Final

from ixbrl_inspector.adapters.locale.messages_en import MESSAGES_EN

__all__ = ["StaticMessageCatalog", "SUPPORTED_LOCALES", "DEFAULT_NAMESPACE"]

DEFAULT_NAMESPACE: Final[str] = "translation"
SUPPORTED_LOCALES: Final[dict[str, Mapping[str, Mapping[str, Any]]]] = {"en": MESSAGES_EN}

_PLACEHOLDER = re.compile(r"\{\{\s*([\w.]+)\s*\}\}")


class StaticMessageCatalog:
    """Message catalog backed by nested in-memory tables.

    Args:
        locale: Locale code. Must be one of :data:`SUPPORTED_LOCALES`.
        tables: Optional explicit tables (namespace -> nested messages), used
            instead of the built-in locale tables.

    Raises:
        ValueError: If ``locale`` is not supported and no tables are given.
    """

    def __init__(
        self,
        locale: str = "en",
        *,
        tables: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        if tables is None:
            if locale not in SUPPORTED_LOCALES:
                raise ValueError(f"Unsupported message locale: {locale!r}")
            tables = SUPPORTED_LOCALES[locale]
        self.locale = locale
        self._tables = tables

    def _lookup(self, key: str) -> str | None:
        namespace, sep, path = key.partition(":")
        if not sep:
            namespace, path = DEFAULT_NAMESPACE, key

        node: Any = self._tables.get(namespace)
        # Flat keys first: currency keys may themselves contain dots.
        if isinstance(node, Mapping) and isinstance(node.get(path), str):
            return node[path]
        for part in path.split("."):
            if not isinstance(node, Mapping):
                return None
            node = node.get(part)
        return node if isinstance(node, str) else None

    def resolve(
        self,
        key: str,
        *,
        params: Mapping[str, Any] | None = None,
        fallback: str | None = None,
    ) -> str:
        """Resolve a message key.

        Args:
            key: i18next-style key, optionally namespaced with ``"ns:"``.
            params: Values for ``{{name}}`` placeholders.
            fallback: Returned when the key is missing.

        Returns:
            The interpolated message, ``fallback``, or ``key``.
        """
        message = self._lookup(key)
        if message is None:
            return fallback if fallback is not None else key
        if not params:
            return message
        return _PLACEHOLDER.sub(
            lambda m: str(params[m.group(1)]) if m.group(1) in params else m.group(0),
            message,
        )

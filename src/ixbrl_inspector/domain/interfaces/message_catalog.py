# src/ixbrl_inspector/domain/interfaces/message_catalog.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Message catalog interface.

Purpose:
    Abstract locale-string lookup so that the fact model can produce
    human-readable accuracy names without depending on a translation backend.

Layer:
    domain/interfaces

Notes:
    - Keys follow the i18next convention: ``"namespace:path.to.key"`` with the
      default namespace used when no ``:`` is present
      (``"common.notApplicable"``, ``"currencies:accuracy-3"``).
    - A miss is not an error: implementations return ``fallback`` when given,
      otherwise the key itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class MessageCatalog(Protocol):
    """Protocol for resolving message identifiers to display strings."""

    def resolve(
        self,
        key: str,
        *,
        params: Mapping[str, Any] | None = None,
        fallback: str | None = None,
    ) -> str:
        """Resolve a message key.

        Args:
            key: Message identifier, optionally namespace-qualified.
            params: Interpolation parameters for the message.
            fallback: Value returned when the key is not present.

        Returns:
            The resolved message, ``fallback``, or ``key``.
        """

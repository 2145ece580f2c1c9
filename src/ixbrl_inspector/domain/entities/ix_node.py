# src/ixbrl_inspector/domain/entities/ix_node.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Presentation flags for an Inline XBRL element."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IXNode", "DEFAULT_IX_NODE"]


@dataclass(frozen=True, slots=True)
class IXNode:
    """How a fact's element appears in the rendered document.

    Attributes:
        is_hidden:
            Element sits in the ``ix:hidden`` section.
        html_hidden:
            Element is in the body but hidden by HTML styling.
        escaped:
            Element content is escaped markup (``escape="true"``).
    """

    is_hidden: bool = False
    html_hidden: bool = False
    escaped: bool = False

    def __post_init__(self) -> None:
        """Hook for invariants; all flag combinations are valid."""
        return


DEFAULT_IX_NODE = IXNode()

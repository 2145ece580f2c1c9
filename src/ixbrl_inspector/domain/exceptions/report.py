# src/ixbrl_inspector/domain/exceptions/report.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Report and viewer-data exceptions.

Purpose:
    Error types for failures that happen around the fact model rather than
    inside it: loading viewer data, building a report from it, and looking up
    items that the report does not contain.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from ixbrl_inspector.domain.exceptions.base import DomainError


class ViewerDataError(DomainError):
    """Raised when a viewer-data payload is structurally unusable."""

    code = "VIEWER_DATA_INVALID"


class ViewerDataNotFound(DomainError):
    """Raised when a viewer document carries no embedded viewer data."""

    code = "VIEWER_DATA_NOT_FOUND"


class UnknownFactError(DomainError):
    """Raised when a caller asks for a fact id the report does not contain."""

    code = "UNKNOWN_FACT"
